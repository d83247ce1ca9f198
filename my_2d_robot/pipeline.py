#!/usr/bin/env python3
import sys

import rclpy
from rclpy.executors import SingleThreadedExecutor

from .errors import ConfigurationError
from .kinematics_logger import KinematicsLoggerNode, spin_until_shutdown
from .shutdown import ShutdownRequest
from .state_publisher import JointStatePublisherNode


def main(args=None):
    """Run publisher and logger in one process so both stop on the same request"""
    rclpy.init(args=args)
    nodes = []

    try:
        shutdown = ShutdownRequest()
        nodes.append(KinematicsLoggerNode(shutdown=shutdown))
        nodes.append(JointStatePublisherNode(shutdown=shutdown))

        executor = SingleThreadedExecutor()
        for node in nodes:
            executor.add_node(node)
        spin_until_shutdown(executor, shutdown)
    except KeyboardInterrupt:
        pass
    except ConfigurationError as e:
        print(f'Configuration error: {str(e)}', file=sys.stderr)
    except Exception as e:
        print(f'Error: {str(e)}', file=sys.stderr)
    finally:
        for node in nodes:
            try:
                node.destroy_node()
            except Exception as e:
                print(f'Error during shutdown: {str(e)}', file=sys.stderr)
        rclpy.try_shutdown()


if __name__ == '__main__':
    main()
