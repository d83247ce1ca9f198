# Test forward kinematics and configuration loading

from math import pi

import pytest

from my_2d_robot.errors import ConfigurationError
from my_2d_robot.kinematics import KinematicsConfig, forward_kinematics

UNIT_ARM = KinematicsConfig(link_1=1.0, link_2=1.0, sample_target=1)


def test_straight_arm_along_x():
    """Both joints at zero put the end effector at l1 + l2 on the x axis."""
    x, y = forward_kinematics(0.0, 0.0, UNIT_ARM)
    assert x == pytest.approx(2.0)
    assert y == pytest.approx(0.0)


@pytest.mark.parametrize('theta1, theta2, expected', [
    (pi / 2, 0.0, (0.0, 2.0)),
    (0.0, pi / 2, (1.0, 1.0)),
    (pi / 2, pi / 2, (-1.0, 1.0)),
    (pi, 0.0, (-2.0, 0.0)),
])
def test_joint_angles_are_radians(theta1, theta2, expected):
    x, y = forward_kinematics(theta1, theta2, UNIT_ARM)
    assert (x, y) == pytest.approx(expected, abs=1e-12)


def test_link_lengths_scale_each_segment():
    config = KinematicsConfig(link_1=2.0, link_2=0.5, sample_target=1)
    x, y = forward_kinematics(0.0, pi / 2, config)
    assert (x, y) == pytest.approx((2.0, 0.5))


def test_offsets_are_degrees_and_subtracted():
    """A 90 degree offset cancels a pi/2 reading."""
    config = KinematicsConfig(link_1=1.0, link_2=1.0,
                              theta1_offset=90.0, theta2_offset=-90.0, sample_target=1)
    assert config.effective_angles(pi / 2, 0.0) == pytest.approx((0.0, pi / 2))
    x, y = forward_kinematics(pi / 2, 0.0, config)
    assert (x, y) == pytest.approx((1.0, 1.0))


def test_small_perturbation_gives_small_displacement():
    config = KinematicsConfig(link_1=1.0, link_2=0.8, sample_target=1)
    eps = 1e-6
    for theta1 in (0.0, 0.5, 1.57, 3.14):
        for theta2 in (0.0, 1.0, 3.14):
            x0, y0 = forward_kinematics(theta1, theta2, config)
            x1, y1 = forward_kinematics(theta1 + eps, theta2 - eps, config)
            # Lipschitz bound: |d(x,y)| <= (l1 + 2 l2) * eps
            assert abs(x1 - x0) + abs(y1 - y0) <= 2 * (1.0 + 2 * 0.8) * eps


@pytest.mark.parametrize('kwargs', [
    dict(link_1=0.0, link_2=1.0, sample_target=1),
    dict(link_1=1.0, link_2=-0.5, sample_target=1),
    dict(link_1=1.0, link_2=1.0, sample_target=0),
    dict(link_1=1.0, link_2=1.0, sample_target=2.5),
    dict(link_1=1.0, link_2=1.0, sample_target=True),
])
def test_invalid_config_is_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        KinematicsConfig(**kwargs).validate()


def test_from_parameters_maps_external_names():
    config = KinematicsConfig.from_parameters({
        'data_point_count': 5,
        'link_1': 1,
        'link_2': 0.5,
        'Theta1_offset': 10,
        'Theta2_offset': -20.0,
    })
    assert config == KinematicsConfig(link_1=1.0, link_2=0.5, theta1_offset=10.0,
                                      theta2_offset=-20.0, sample_target=5)


def test_from_parameters_reports_missing_values():
    with pytest.raises(ConfigurationError) as excinfo:
        KinematicsConfig.from_parameters({
            'data_point_count': 5,
            'link_1': 1.0,
            'link_2': None,
        })
    message = str(excinfo.value)
    assert 'link_2' in message
    assert 'Theta1_offset' in message
    assert 'Theta2_offset' in message
    assert 'link_1' not in message


def test_from_parameters_rejects_non_numeric_values():
    with pytest.raises(ConfigurationError):
        KinematicsConfig.from_parameters({
            'data_point_count': 5,
            'link_1': 'long',
            'link_2': 1.0,
            'Theta1_offset': 0.0,
            'Theta2_offset': 0.0,
        })
