import math
import threading
from dataclasses import dataclass, field
from typing import Sequence, Tuple

import numpy as np

Color = Tuple[float, float, float, float]


def _to_color(value: Sequence[float], name: str) -> Color:
    values = [float(v) for v in value]
    if len(values) != 4:
        raise ValueError(f"{name} must have 4 components (r, g, b, a), got {len(values)}")
    return values[0], values[1], values[2], values[3]


@dataclass
class OverlayStyle:
    width: int = 400
    height: int = 100
    text_size: float = 12.0
    line_width: int = 2
    font: str = "Arial"
    fg_color: Color = (1.0, 1.0, 1.0, 1.0)
    bg_color: Color = (0.0, 0.0, 0.0, 0.5)

    def __post_init__(self) -> None:
        self.width = int(self.width)
        self.height = int(self.height)
        self.text_size = float(self.text_size)
        self.line_width = int(self.line_width)
        self.font = str(self.font)
        self.fg_color = _to_color(self.fg_color, "fg_color")
        self.bg_color = _to_color(self.bg_color, "bg_color")


@dataclass
class TelemetrySnapshot:
    speed: np.float32 = np.float32(0.0)
    battery: np.float32 = np.float32(0.0)
    distance: np.float32 = np.float32(0.0)
    state: np.float32 = np.float32(0.0)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def update_speed(self, value: float) -> None:
        with self._lock:
            self.speed = np.float32(value)

    def update_battery(self, value: float) -> None:
        with self._lock:
            self.battery = np.float32(value)

    def update_distance(self, value: float) -> None:
        with self._lock:
            self.distance = np.float32(value)

    def update_state(self, value: float) -> None:
        with self._lock:
            self.state = np.float32(value)

    def copy(self) -> "TelemetrySnapshot":
        with self._lock:
            return TelemetrySnapshot(
                speed=self.speed,
                battery=self.battery,
                distance=self.distance,
                state=self.state,
            )


def _truncate(value: float) -> str:
    value = float(value)
    if not math.isfinite(value):
        return str(value)
    return str(int(value))


def format_info_text(snapshot: TelemetrySnapshot) -> str:
    # Labels and spacing are parsed downstream, keep them exact.
    return (
        f"speed:    {float(snapshot.speed):.2f}"
        f"   battery:  {_truncate(snapshot.battery)}"
        f"   distance: {float(snapshot.distance):.2f}"
        f"   state:    {_truncate(snapshot.state)}"
    )
