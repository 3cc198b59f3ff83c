import time

import rclpy
from rclpy.node import Node
from nav_msgs.msg import Odometry
from sensor_msgs.msg import Joy
from std_msgs.msg import Float32

from whill_info_display.odometry import RESET_BUTTON_INDEX, DistanceAccumulator, is_reset_pressed


class DistanceCalculatorNode(Node):
    def __init__(self, **kwargs) -> None:
        super().__init__("distance_calculator", **kwargs)
        self.declare_parameter("odom_topic", "/whill/odom")
        self.declare_parameter("joy_topic", "/joy")
        self.declare_parameter("distance_topic", "/distance")
        self.declare_parameter("reset_button", RESET_BUTTON_INDEX)
        self.declare_parameter("publish_hz", 10.0)

        publish_hz = float(self.get_parameter("publish_hz").value)
        if publish_hz <= 0.0:
            raise ValueError(f"publish_hz must be positive, got {publish_hz}")

        self._reset_button = int(self.get_parameter("reset_button").value)
        self._accumulator = DistanceAccumulator()
        self._last_warning_at = 0.0

        self.create_subscription(
            Odometry, self.get_parameter("odom_topic").value, self._on_odom, 10
        )
        self.create_subscription(
            Joy, self.get_parameter("joy_topic").value, self._on_joy, 10
        )
        self._publisher = self.create_publisher(
            Float32, self.get_parameter("distance_topic").value, 10
        )

        self._timer = self.create_timer(1.0 / publish_hz, self._publish_distance)
        self.get_logger().info("Distance calculator ready.")

    def get_total_distance(self) -> float:
        return self._accumulator.total

    def _on_odom(self, msg: Odometry) -> None:
        position = msg.pose.pose.position
        self._accumulator.add_sample(position.x, position.y)

    def _on_joy(self, msg: Joy) -> None:
        buttons = list(msg.buttons)
        if len(buttons) <= self._reset_button:
            self._warn_throttled(
                f"Joy message has {len(buttons)} buttons, reset button {self._reset_button} ignored."
            )
        if is_reset_pressed(buttons, self._reset_button):
            self._accumulator.reset()
            self.get_logger().info("Distance reset to 0")

    def _publish_distance(self) -> None:
        msg = Float32()
        msg.data = float(self._accumulator.total)
        self._publisher.publish(msg)

    def _warn_throttled(self, message: str) -> None:
        now = time.time()
        if now - self._last_warning_at < 10.0:
            return
        self._last_warning_at = now
        self.get_logger().warning(message)


def main() -> None:
    rclpy.init()
    node = DistanceCalculatorNode()
    try:
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    finally:
        node.destroy_node()
        rclpy.shutdown()


if __name__ == "__main__":
    main()
