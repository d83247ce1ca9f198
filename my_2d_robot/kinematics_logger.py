#!/usr/bin/env python3
import sys
from typing import Optional

import rclpy
from rclpy.executors import SingleThreadedExecutor
from rclpy.node import Node
from rcl_interfaces.msg import ParameterDescriptor
from sensor_msgs.msg import JointState

from .errors import ConfigurationError, StorageUnavailableError
from .kinematics import PARAMETER_FIELDS, KinematicsConfig
from .recorder import KinematicsRecorder
from .shutdown import ShutdownRequest
from .storage import ensure_output_dir, output_path

PACKAGE_NAME = 'my_2d_robot'
QUEUE_SIZE = 1000
JOINT_STATES_TOPIC = 'joint_states'
SPIN_TIMEOUT = 0.1  # seconds

PARAMETER_DESCRIPTIONS = {
    'data_point_count': 'Number of joint states to record before shutting down',
    'link_1': 'Length of the first link',
    'link_2': 'Length of the second link',
    'Theta1_offset': 'Calibration offset of joint1 (degrees)',
    'Theta2_offset': 'Calibration offset of joint2 (degrees)',
}


def resolve_storage_root(package_name: str) -> str:
    """Package share directory, the default home of Output_yaml"""
    from ament_index_python.packages import PackageNotFoundError, get_package_share_directory
    try:
        return get_package_share_directory(package_name)
    except PackageNotFoundError as e:
        raise ConfigurationError(
            f'Package {package_name!r} not found, set output_root or package_name: {e}') from e


class KinematicsLoggerNode(Node):
    """Computes the end effector position for every joint state and logs it to YAML"""

    def __init__(self, shutdown: Optional[ShutdownRequest] = None):
        super().__init__('joint_states_subscriber')

        # Kinematics parameters have no defaults, they must come from the launch config
        for name in PARAMETER_FIELDS:
            self.declare_parameter(
                name,
                None,
                ParameterDescriptor(
                    description=PARAMETER_DESCRIPTIONS[name],
                    dynamic_typing=True))
        self.declare_parameter(
            'output_root',
            '',
            ParameterDescriptor(description='Directory holding Output_yaml, empty for the package share directory'))
        self.declare_parameter(
            'package_name',
            PACKAGE_NAME,
            ParameterDescriptor(description='Package whose share directory stores the output'))
        self.declare_parameter(
            'queue_size',
            QUEUE_SIZE,
            ParameterDescriptor(description='Subscription history depth'))

        config = KinematicsConfig.from_parameters(
            {name: self.get_parameter(name).value for name in PARAMETER_FIELDS})

        root = self.get_parameter('output_root').value
        if not root:
            root = resolve_storage_root(self.get_parameter('package_name').value)
        path = output_path(root)
        try:
            ensure_output_dir(path)
        except StorageUnavailableError as e:
            # Not fatal, each write reports its own failure
            self.get_logger().error(str(e))

        self.shutdown = shutdown or ShutdownRequest(logger=self.get_logger())
        self.recorder = KinematicsRecorder(
            config, path, shutdown=self.shutdown, logger=self.get_logger())

        self.joint_state_sub = self.create_subscription(
            JointState,
            JOINT_STATES_TOPIC,
            self._joint_state_callback,
            int(self.get_parameter('queue_size').value))

        self.get_logger().info(
            f'Recording {config.sample_target} data points to {path}')

    def _joint_state_callback(self, msg: JointState) -> None:
        if self.shutdown.is_requested:
            return
        self.recorder.on_joint_state(msg)


def spin_until_shutdown(executor, shutdown: ShutdownRequest) -> None:
    """Spin the executor one unit of work at a time until shutdown is requested"""
    while rclpy.ok() and not shutdown.is_requested:
        executor.spin_once(timeout_sec=SPIN_TIMEOUT)


def main(args=None):
    rclpy.init(args=args)
    node = None

    try:
        shutdown = ShutdownRequest()
        node = KinematicsLoggerNode(shutdown=shutdown)
        executor = SingleThreadedExecutor()
        executor.add_node(node)
        spin_until_shutdown(executor, shutdown)
    except KeyboardInterrupt:
        pass
    except ConfigurationError as e:
        print(f'Configuration error: {str(e)}', file=sys.stderr)
    except Exception as e:
        print(f'Error: {str(e)}', file=sys.stderr)
    finally:
        try:
            if node is not None:
                node.destroy_node()
        except Exception as e:
            print(f'Error during shutdown: {str(e)}', file=sys.stderr)
        finally:
            rclpy.try_shutdown()


if __name__ == '__main__':
    main()
