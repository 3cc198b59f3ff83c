import rclpy
from rclpy.node import Node
from geometry_msgs.msg import Twist
from std_msgs.msg import Float32
from rviz_2d_overlay_msgs.msg import OverlayText

from whill_info_display.overlay import OverlayStyle, TelemetrySnapshot, format_info_text


class WhillInfoPublisherNode(Node):
    def __init__(self, **kwargs) -> None:
        super().__init__("whill_info_publisher", **kwargs)
        self.declare_parameter("cmd_vel_topic", "/whill/controller/cmd_vel")
        self.declare_parameter("battery_topic", "/for_rviz")
        self.declare_parameter("distance_topic", "/distance")
        self.declare_parameter("state_topic", "/state")
        self.declare_parameter("info_topic", "/whill_info")
        self.declare_parameter("publish_hz", 10.0)
        self.declare_parameter("width", 400)
        self.declare_parameter("height", 100)
        self.declare_parameter("text_size", 12.0)
        self.declare_parameter("line_width", 2)
        self.declare_parameter("font", "Arial")
        self.declare_parameter("fg_color", [1.0, 1.0, 1.0, 1.0])
        self.declare_parameter("bg_color", [0.0, 0.0, 0.0, 0.5])

        publish_hz = float(self.get_parameter("publish_hz").value)
        if publish_hz <= 0.0:
            raise ValueError(f"publish_hz must be positive, got {publish_hz}")

        self._style = OverlayStyle(
            width=self.get_parameter("width").value,
            height=self.get_parameter("height").value,
            text_size=self.get_parameter("text_size").value,
            line_width=self.get_parameter("line_width").value,
            font=self.get_parameter("font").value,
            fg_color=list(self.get_parameter("fg_color").value),
            bg_color=list(self.get_parameter("bg_color").value),
        )
        self._snapshot = TelemetrySnapshot()

        self.create_subscription(
            Twist, self.get_parameter("cmd_vel_topic").value, self._on_cmd_vel, 10
        )
        self.create_subscription(
            Float32, self.get_parameter("battery_topic").value, self._on_battery, 10
        )
        self.create_subscription(
            Float32, self.get_parameter("distance_topic").value, self._on_distance, 10
        )
        self.create_subscription(
            Float32, self.get_parameter("state_topic").value, self._on_state, 10
        )
        self._publisher = self.create_publisher(
            OverlayText, self.get_parameter("info_topic").value, 10
        )

        self._timer = self.create_timer(1.0 / publish_hz, self._publish_info)
        self.get_logger().info("WHILL info publisher ready.")

    @property
    def snapshot(self) -> TelemetrySnapshot:
        return self._snapshot.copy()

    def _on_cmd_vel(self, msg: Twist) -> None:
        self._snapshot.update_speed(msg.linear.x)

    def _on_battery(self, msg: Float32) -> None:
        self._snapshot.update_battery(msg.data)

    def _on_distance(self, msg: Float32) -> None:
        self._snapshot.update_distance(msg.data)

    def _on_state(self, msg: Float32) -> None:
        self._snapshot.update_state(msg.data)

    def build_overlay(self) -> OverlayText:
        msg = OverlayText()
        msg.text = format_info_text(self._snapshot.copy())
        msg.width = self._style.width
        msg.height = self._style.height
        msg.text_size = self._style.text_size
        msg.line_width = self._style.line_width
        msg.font = self._style.font
        msg.fg_color.r, msg.fg_color.g, msg.fg_color.b, msg.fg_color.a = self._style.fg_color
        msg.bg_color.r, msg.bg_color.g, msg.bg_color.b, msg.bg_color.a = self._style.bg_color
        msg.action = OverlayText.ADD
        return msg

    def _publish_info(self) -> None:
        self._publisher.publish(self.build_overlay())


def main() -> None:
    rclpy.init()
    node = WhillInfoPublisherNode()
    try:
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    finally:
        node.destroy_node()
        rclpy.shutdown()


if __name__ == "__main__":
    main()
