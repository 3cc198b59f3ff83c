import pytest

rclpy = pytest.importorskip("rclpy")
pytest.importorskip("nav_msgs.msg")
pytest.importorskip("sensor_msgs.msg")
pytest.importorskip("rviz_2d_overlay_msgs.msg")

from geometry_msgs.msg import Twist  # noqa: E402
from nav_msgs.msg import Odometry  # noqa: E402
from rclpy.parameter import Parameter  # noqa: E402
from rviz_2d_overlay_msgs.msg import OverlayText  # noqa: E402
from sensor_msgs.msg import Joy  # noqa: E402
from std_msgs.msg import Float32  # noqa: E402

from whill_info_display.distance_calculator_node import DistanceCalculatorNode  # noqa: E402
from whill_info_display.whill_info_publisher_node import WhillInfoPublisherNode  # noqa: E402


@pytest.fixture(scope="module", autouse=True)
def ros_context():
    rclpy.init()
    yield
    rclpy.shutdown()


@pytest.fixture
def distance_node():
    node = DistanceCalculatorNode()
    yield node
    node.destroy_node()


@pytest.fixture
def info_node():
    node = WhillInfoPublisherNode()
    yield node
    node.destroy_node()


def _odom(x, y):
    msg = Odometry()
    msg.pose.pose.position.x = float(x)
    msg.pose.pose.position.y = float(y)
    return msg


def _joy(buttons):
    msg = Joy()
    msg.buttons = list(buttons)
    return msg


def _float(value):
    msg = Float32()
    msg.data = float(value)
    return msg


class _RecordingPublisher:
    def __init__(self):
        self.messages = []

    def publish(self, msg):
        self.messages.append(msg)


def test_distance_node_accumulates_odometry(distance_node):
    for x, y in [(0, 0), (3, 4), (3, 4)]:
        distance_node._on_odom(_odom(x, y))
    assert distance_node.get_total_distance() == pytest.approx(5.0)


def test_distance_node_resets_on_button_eight(distance_node):
    distance_node._on_odom(_odom(0, 0))
    distance_node._on_odom(_odom(1, 0))
    buttons = [0] * 11
    buttons[8] = 1
    distance_node._on_joy(_joy(buttons))
    assert distance_node.get_total_distance() == 0.0

    distance_node._on_odom(_odom(5, 5))
    assert distance_node.get_total_distance() == 0.0
    distance_node._on_odom(_odom(5, 6))
    assert distance_node.get_total_distance() == pytest.approx(1.0)


def test_distance_node_ignores_short_joy(distance_node):
    distance_node._on_odom(_odom(0, 0))
    distance_node._on_odom(_odom(0, 2))
    distance_node._on_joy(_joy([1, 1, 1]))
    assert distance_node.get_total_distance() == pytest.approx(2.0)


def test_distance_node_rejects_non_positive_rate():
    with pytest.raises(ValueError):
        DistanceCalculatorNode(parameter_overrides=[Parameter("publish_hz", value=0.0)])


def test_distance_node_custom_reset_button():
    node = DistanceCalculatorNode(parameter_overrides=[Parameter("reset_button", value=0)])
    try:
        node._on_odom(_odom(0, 0))
        node._on_odom(_odom(0, 1))
        node._on_joy(_joy([1]))
        assert node.get_total_distance() == 0.0
    finally:
        node.destroy_node()


def test_info_node_renders_overlay(info_node):
    twist = Twist()
    twist.linear.x = 3.456
    info_node._on_cmd_vel(twist)
    info_node._on_battery(_float(72.9))
    info_node._on_distance(_float(12.345))
    info_node._on_state(_float(1.0))

    msg = info_node.build_overlay()
    assert msg.text == "speed:    3.46   battery:  72   distance: 12.35   state:    1"
    assert (msg.width, msg.height) == (400, 100)
    assert msg.text_size == pytest.approx(12.0)
    assert msg.line_width == 2
    assert msg.font == "Arial"
    assert (msg.fg_color.r, msg.fg_color.g, msg.fg_color.b, msg.fg_color.a) == (1.0, 1.0, 1.0, 1.0)
    assert (msg.bg_color.r, msg.bg_color.g, msg.bg_color.b) == (0.0, 0.0, 0.0)
    assert msg.bg_color.a == pytest.approx(0.5)
    assert msg.action == OverlayText.ADD


def test_info_node_overlay_is_repeatable(info_node):
    info_node._on_distance(_float(4.0))
    first = info_node.build_overlay().text
    second = info_node.build_overlay().text
    assert first == second


def test_info_node_uses_parameter_overrides():
    node = WhillInfoPublisherNode(parameter_overrides=[
        Parameter("font", value="DejaVu Sans"),
        Parameter("width", value=640),
    ])
    try:
        msg = node.build_overlay()
        assert msg.font == "DejaVu Sans"
        assert msg.width == 640
        assert msg.height == 100
    finally:
        node.destroy_node()


def test_info_node_rejects_short_color():
    with pytest.raises(ValueError):
        WhillInfoPublisherNode(parameter_overrides=[
            Parameter("fg_color", value=[1.0, 1.0, 1.0]),
        ])


def test_timers_run_at_ten_hz(distance_node, info_node):
    assert distance_node._timer.timer_period_ns == 100_000_000
    assert info_node._timer.timer_period_ns == 100_000_000


def test_distance_heartbeat_republishes_unchanged_total(distance_node):
    recorder = _RecordingPublisher()
    distance_node._publisher = recorder
    distance_node._on_odom(_odom(0, 0))
    distance_node._on_odom(_odom(3, 4))

    distance_node._publish_distance()
    distance_node._publish_distance()

    assert len(recorder.messages) == 2
    assert all(isinstance(msg, Float32) for msg in recorder.messages)
    assert [msg.data for msg in recorder.messages] == [distance_node.get_total_distance()] * 2
    assert recorder.messages[0].data == pytest.approx(5.0)


def test_info_heartbeat_republishes_overlay(info_node):
    recorder = _RecordingPublisher()
    info_node._publisher = recorder
    info_node._on_battery(_float(72.9))
    info_node._on_distance(_float(12.345))

    info_node._publish_info()
    info_node._publish_info()

    assert len(recorder.messages) == 2
    first, second = recorder.messages
    assert isinstance(first, OverlayText)
    assert first.text == second.text
    assert first.text == "speed:    0.00   battery:  72   distance: 12.35   state:    0"
    assert first.action == OverlayText.ADD
    assert (first.width, first.height) == (400, 100)
