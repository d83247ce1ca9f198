#!/usr/bin/env python3

import os
from ament_index_python.packages import get_package_share_directory
from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument, Shutdown
from launch.substitutions import LaunchConfiguration
from launch_ros.actions import Node
from launch_ros.parameter_descriptions import ParameterValue


def generate_launch_description():
    pkg_dir = get_package_share_directory('my_2d_robot')
    config_file = os.path.join(pkg_dir, 'config', 'params.yaml')

    data_point_count = LaunchConfiguration('data_point_count')

    return LaunchDescription([
        DeclareLaunchArgument(
            'data_point_count',
            default_value='100',
            description='Number of joint states to record before shutting down'
        ),
        Node(
            package='my_2d_robot',
            executable='my_2d_robo_state_publisher',
            name='my_2d_robo_state_publisher',
            output='screen',
            parameters=[config_file]
        ),
        # The logger exits once it has recorded enough data points,
        # which takes the publisher down with it
        Node(
            package='my_2d_robot',
            executable='joint_states_subscriber',
            name='joint_states_subscriber',
            output='screen',
            parameters=[
                config_file,
                {'data_point_count': ParameterValue(data_point_count, value_type=int)}
            ],
            on_exit=Shutdown()
        ),
    ])
