#!/usr/bin/env python3
import sys
from typing import Optional

import rclpy
from rclpy.node import Node
from rcl_interfaces.msg import ParameterDescriptor
from sensor_msgs.msg import JointState

from .generator import JointAngleGenerator
from .shutdown import ShutdownRequest

PUBLISH_RATE = 30.0  # Hz
QUEUE_SIZE = 1000
JOINT_STATES_TOPIC = 'joint_states'


class JointStatePublisherNode(Node):
    """Publishes random two-joint states on joint_states at a fixed rate"""

    def __init__(self, shutdown: Optional[ShutdownRequest] = None):
        super().__init__('my_2d_robo_state_publisher')

        self.declare_parameter(
            'publish_rate',
            PUBLISH_RATE,
            ParameterDescriptor(description='Joint state publishing rate (Hz)'))
        self.declare_parameter(
            'queue_size',
            QUEUE_SIZE,
            ParameterDescriptor(description='Publisher history depth'))
        self.declare_parameter(
            'seed',
            -1,
            ParameterDescriptor(description='Random seed, negative to seed from the current time'))

        seed = int(self.get_parameter('seed').value)
        self.generator = JointAngleGenerator(
            seed=seed if seed >= 0 else None, logger=self.get_logger())
        self.shutdown = shutdown or ShutdownRequest(logger=self.get_logger())

        self.joint_state_pub = self.create_publisher(
            JointState,
            JOINT_STATES_TOPIC,
            int(self.get_parameter('queue_size').value))

        publish_rate = float(self.get_parameter('publish_rate').value)
        if publish_rate <= 0:
            raise ValueError(f'publish_rate must be positive, got {publish_rate}')
        self.timer = self.create_timer(1.0 / publish_rate, self.tick)

        self.get_logger().info(
            f'Joint state publisher started at {publish_rate} Hz (seed {self.generator.seed})')

    def tick(self) -> None:
        """Publish one sample to all subscribers"""
        if self.shutdown.is_requested:
            if not self.timer.is_canceled():
                self.timer.cancel()
                self.get_logger().info('Shutdown requested, joint state publisher stopped')
            return

        sample = self.generator.tick()
        msg = sample.to_joint_state(JointState())
        msg.header.stamp = self.get_clock().now().to_msg()
        self.joint_state_pub.publish(msg)


def main(args=None):
    rclpy.init(args=args)
    node = None

    try:
        node = JointStatePublisherNode()
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
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
