from dataclasses import dataclass
from math import cos, radians, sin
from typing import Any, Mapping, Tuple

from .errors import ConfigurationError

# External parameter names -> KinematicsConfig fields
PARAMETER_FIELDS = {
    'data_point_count': 'sample_target',
    'link_1': 'link_1',
    'link_2': 'link_2',
    'Theta1_offset': 'theta1_offset',
    'Theta2_offset': 'theta2_offset',
}


@dataclass(frozen=True)
class KinematicsConfig:
    """Calibration of the arm, fixed for the process lifetime.

    Link lengths share whatever unit the output positions are read in.
    Offsets are in degrees.
    """

    link_1: float
    link_2: float
    theta1_offset: float = 0.0
    theta2_offset: float = 0.0
    sample_target: int = 1

    def validate(self) -> 'KinematicsConfig':
        """Check link lengths and sample target, raise ConfigurationError otherwise"""
        if not self.link_1 > 0 or not self.link_2 > 0:
            raise ConfigurationError(
                f'Link lengths must be positive, got link_1={self.link_1}, link_2={self.link_2}')
        if isinstance(self.sample_target, bool) or not isinstance(self.sample_target, int):
            raise ConfigurationError(
                f'data_point_count must be an integer, got {self.sample_target!r}')
        if self.sample_target < 1:
            raise ConfigurationError(
                f'data_point_count must be at least 1, got {self.sample_target}')
        return self

    @classmethod
    def from_parameters(cls, params: Mapping[str, Any]) -> 'KinematicsConfig':
        """Build a validated config from the externally supplied parameter set"""
        missing = [name for name in PARAMETER_FIELDS if params.get(name) is None]
        if missing:
            raise ConfigurationError(f'Missing required parameters: {", ".join(missing)}')

        try:
            values = {
                'link_1': float(params['link_1']),
                'link_2': float(params['link_2']),
                'theta1_offset': float(params['Theta1_offset']),
                'theta2_offset': float(params['Theta2_offset']),
                'sample_target': params['data_point_count'],
            }
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f'Invalid kinematics parameter: {e}') from e

        return cls(**values).validate()

    def effective_angles(self, theta1: float, theta2: float) -> Tuple[float, float]:
        """Apply the calibration offsets to raw joint angles (radians)"""
        return theta1 - radians(self.theta1_offset), theta2 - radians(self.theta2_offset)


def forward_kinematics(theta1: float, theta2: float, config: KinematicsConfig) -> Tuple[float, float]:
    """End effector position of the planar two-link arm.

    Joint angles are radians; offsets are converted from degrees exactly once.
    """
    t1, t2 = config.effective_angles(theta1, theta2)
    x = config.link_1 * cos(t1) + config.link_2 * cos(t1 + t2)
    y = config.link_1 * sin(t1) + config.link_2 * sin(t1 + t2)
    return x, y
