import threading
from dataclasses import dataclass
from logging import Logger, getLogger
from typing import List, Optional, Tuple

from .errors import MalformedSampleError, StorageUnavailableError
from .kinematics import KinematicsConfig, forward_kinematics
from .samples import JointSample
from .shutdown import ShutdownRequest
from .storage import serialize, write_log


@dataclass(frozen=True)
class LogRecord:
    """Joint angles as received and the end effector position computed from them"""

    joint_angles: Tuple[float, float]
    end_effector_position: Tuple[float, float]


class KinematicsRecorder:
    """Turns joint samples into end effector positions and keeps the YAML log on disk.

    Every processed sample rewrites the whole file so it is always complete
    and parseable on its own. That makes each write O(n) in the number of
    records already held.
    """

    def __init__(self,
                 config: KinematicsConfig,
                 output_path: str,
                 shutdown: Optional[ShutdownRequest] = None,
                 logger: Optional[Logger] = None):
        self.config = config.validate()
        self.output_path = output_path
        self.logger = logger or getLogger(__name__)
        self.shutdown = shutdown or ShutdownRequest(logger=self.logger)
        self.records: List[LogRecord] = []
        self.received_count = 0
        self.write_failures = 0
        self._lock = threading.Lock()

    @property
    def target_reached(self) -> bool:
        return self.received_count >= self.config.sample_target

    def on_joint_state(self, msg) -> bool:
        """Subscription callback for sensor_msgs/JointState messages"""
        try:
            sample = JointSample.from_joint_state(msg)
        except (MalformedSampleError, AttributeError, TypeError, ValueError) as e:
            self.logger.error(f'Rejected malformed joint state: {str(e)}')
            return False
        return self.on_sample(sample)

    def on_sample(self, sample: JointSample) -> bool:
        """Process one sample. Returns False if it was ignored"""
        with self._lock:
            if self.target_reached:
                self.logger.warning(
                    f'Ignoring sample, {self.config.sample_target} data points already recorded')
                return False

            theta1, theta2 = sample.positions
            self.logger.info(f'I heard: [{theta1:f}]')
            position = forward_kinematics(theta1, theta2, self.config)
            self.records.append(LogRecord(
                joint_angles=(theta1, theta2),
                end_effector_position=position))

            try:
                write_log(self.output_path, serialize(self.records))
            except StorageUnavailableError as e:
                self.write_failures += 1
                self.logger.error(f'Failed to save data point {len(self.records)}: {str(e)}')

            self.received_count += 1

            if self.received_count == self.config.sample_target:
                self.logger.info(
                    f'Recorded {self.received_count} data points to {self.output_path}')
                self.shutdown.request('data point count reached')
            return True

    def dump(self) -> str:
        """Serialized form of the accumulated log"""
        with self._lock:
            return serialize(self.records)
