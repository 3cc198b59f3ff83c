import math
import threading
from typing import Optional, Sequence, Tuple

RESET_BUTTON_INDEX = 8


def is_reset_pressed(buttons: Sequence[int], index: int = RESET_BUTTON_INDEX) -> bool:
    # Arrays too short to hold the button count as "not pressed".
    if index < 0 or index >= len(buttons):
        return False
    return buttons[index] == 1


class DistanceAccumulator:
    """Travelled path length from consecutive planar positions.

    Each new sample adds the straight-line chord to the previous reference
    position. The first sample after construction or ``reset`` only anchors
    the reference.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._total = 0.0
        self._last: Optional[Tuple[float, float]] = None

    @property
    def total(self) -> float:
        with self._lock:
            return self._total

    @property
    def initialized(self) -> bool:
        with self._lock:
            return self._last is not None

    @property
    def last_position(self) -> Optional[Tuple[float, float]]:
        with self._lock:
            return self._last

    def get_total(self) -> float:
        return self.total

    def add_sample(self, x: float, y: float) -> float:
        x = float(x)
        y = float(y)
        with self._lock:
            if self._last is None:
                self._last = (x, y)
                return 0.0
            last_x, last_y = self._last
            increment = math.hypot(x - last_x, y - last_y)
            self._total += increment
            self._last = (x, y)
            return increment

    def reset(self) -> None:
        with self._lock:
            self._total = 0.0
            self._last = None
