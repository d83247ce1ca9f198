import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from .errors import MalformedSampleError

# Fixed joint identifiers, index aligned with positions
JOINT_NAMES = ('joint1', 'joint2')
JOINT_COUNT = len(JOINT_NAMES)


def _stamp_to_seconds(stamp) -> float:
    """Convert a builtin_interfaces/Time-like stamp to float seconds"""
    return float(stamp.sec) + float(stamp.nanosec) / 1e9


@dataclass(frozen=True)
class JointSample:
    """One timestamped pair of joint angle readings (radians)"""

    timestamp: float
    positions: Tuple[float, float]
    joint_names: Tuple[str, str] = JOINT_NAMES

    def __post_init__(self):
        if len(self.positions) != JOINT_COUNT:
            raise MalformedSampleError(
                f'Expected {JOINT_COUNT} positions, got {len(self.positions)}')
        if len(self.joint_names) != JOINT_COUNT:
            raise MalformedSampleError(
                f'Expected {JOINT_COUNT} joint names, got {len(self.joint_names)}')
        if tuple(self.joint_names) != JOINT_NAMES:
            raise MalformedSampleError(
                f'Expected joint names {list(JOINT_NAMES)}, got {list(self.joint_names)}')
        positions = tuple(float(p) for p in self.positions)
        if not all(math.isfinite(p) for p in positions):
            raise MalformedSampleError(f'Joint positions must be finite, got {list(positions)}')
        # Normalize to tuples so samples stay hashable and immutable
        object.__setattr__(self, 'positions', positions)
        object.__setattr__(self, 'joint_names', JOINT_NAMES)

    @classmethod
    def from_joint_state(cls, msg) -> 'JointSample':
        """Build a sample from a sensor_msgs/JointState message.

        Raises MalformedSampleError unless name is joint1, joint2 and position
        holds two finite values.
        """
        names: Sequence[str] = list(msg.name)
        positions: Sequence[float] = list(msg.position)
        try:
            timestamp = _stamp_to_seconds(msg.header.stamp)
        except AttributeError:
            timestamp = 0.0
        return cls(timestamp=timestamp, positions=positions, joint_names=names)

    def to_joint_state(self, msg):
        """Fill name and position of a JointState message; stamp is left to the caller"""
        msg.name = list(self.joint_names)
        msg.position = list(self.positions)
        return msg
