# Test the ROS 2 nodes; skipped when rclpy is not available

import pytest
import yaml

rclpy = pytest.importorskip('rclpy')
pytest.importorskip('sensor_msgs')

from sensor_msgs.msg import JointState  # noqa: E402

from my_2d_robot.errors import ConfigurationError  # noqa: E402
from my_2d_robot.kinematics_logger import KinematicsLoggerNode  # noqa: E402
from my_2d_robot.shutdown import ShutdownRequest  # noqa: E402
from my_2d_robot.state_publisher import JointStatePublisherNode  # noqa: E402


@pytest.fixture
def ros_init():
    def _init(*params):
        args = ['--ros-args']
        for param in params:
            args += ['-p', param]
        rclpy.init(args=args)

    yield _init
    rclpy.try_shutdown()


def joint_state(theta1, theta2):
    msg = JointState()
    msg.name = ['joint1', 'joint2']
    msg.position = [theta1, theta2]
    return msg


def test_logger_node_records_until_target(ros_init, tmp_path):
    ros_init('data_point_count:=2', 'link_1:=1.0', 'link_2:=1.0',
             'Theta1_offset:=0.0', 'Theta2_offset:=0.0',
             f'output_root:={tmp_path}')
    shutdown = ShutdownRequest()
    node = KinematicsLoggerNode(shutdown=shutdown)
    try:
        node._joint_state_callback(joint_state(0.0, 0.0))
        node._joint_state_callback(joint_state(1.0, 0.5))
        assert shutdown.is_requested
        node._joint_state_callback(joint_state(2.0, 2.0))

        assert node.recorder.received_count == 2
        with open(node.recorder.output_path) as f:
            documents = yaml.safe_load(f)
        assert len(documents) == 2
        assert documents[0]['end effector position'] == [2.0, 0.0]
    finally:
        node.destroy_node()


def test_logger_node_requires_kinematics_parameters(ros_init, tmp_path):
    ros_init('link_1:=1.0', f'output_root:={tmp_path}')
    with pytest.raises(ConfigurationError):
        KinematicsLoggerNode()


def test_publisher_node_stops_on_shutdown(ros_init):
    ros_init('seed:=5')
    shutdown = ShutdownRequest()
    node = JointStatePublisherNode(shutdown=shutdown)
    try:
        node.tick()
        assert not node.timer.is_canceled()
        shutdown.request('test')
        node.tick()
        assert node.timer.is_canceled()
    finally:
        node.destroy_node()


def test_unknown_package_is_a_configuration_error(ros_init):
    pytest.importorskip('ament_index_python')
    ros_init('data_point_count:=2', 'link_1:=1.0', 'link_2:=1.0',
             'Theta1_offset:=0.0', 'Theta2_offset:=0.0',
             'package_name:=no_such_package_for_my_2d_robot')
    with pytest.raises(ConfigurationError, match='no_such_package_for_my_2d_robot'):
        KinematicsLoggerNode()
