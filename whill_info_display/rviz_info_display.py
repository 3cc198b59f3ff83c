import rclpy
from rclpy.executors import MultiThreadedExecutor

from whill_info_display.distance_calculator_node import DistanceCalculatorNode
from whill_info_display.whill_info_publisher_node import WhillInfoPublisherNode


def main() -> None:
    rclpy.init()
    distance_node = DistanceCalculatorNode()
    info_node = WhillInfoPublisherNode()

    executor = MultiThreadedExecutor()
    executor.add_node(distance_node)
    executor.add_node(info_node)
    try:
        executor.spin()
    except KeyboardInterrupt:
        pass
    finally:
        executor.shutdown()
        info_node.destroy_node()
        distance_node.destroy_node()
        rclpy.shutdown()


if __name__ == "__main__":
    main()
