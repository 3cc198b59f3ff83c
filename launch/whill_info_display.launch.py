from launch import LaunchDescription
from launch.substitutions import PathJoinSubstitution
from launch_ros.actions import Node
from launch_ros.substitutions import FindPackageShare


def generate_launch_description():
    info_params = PathJoinSubstitution(
        [FindPackageShare("whill_info_display"), "config", "whill_info.yaml"]
    )
    return LaunchDescription([
        Node(
            package="whill_info_display",
            executable="rviz_info_display",
            output="screen",
            parameters=[info_params],
        ),
    ])
