import os
from glob import glob
from setuptools import setup

package_name = 'my_2d_robot'

setup(
    name=package_name,
    version='0.1.0',
    packages=[package_name],
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        (os.path.join('share', package_name), ['package.xml']),
        (os.path.join('share', package_name, 'launch'), glob('launch/*.launch.py')),
        (os.path.join('share', package_name, 'config'), glob('config/*.yaml')),
    ],
    install_requires=['setuptools', 'PyYAML'],
    zip_safe=True,
    maintainer='my_2d_robot developers',
    maintainer_email='my-2d-robot@users.noreply.github.com',
    description='Simulated 2-link planar arm: joint state publisher and forward kinematics logger',
    license='Apache-2.0',
    tests_require=['pytest'],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'my_2d_robo_state_publisher = my_2d_robot.state_publisher:main',
            'joint_states_subscriber = my_2d_robot.kinematics_logger:main',
            'my_2d_robot = my_2d_robot.pipeline:main',
        ],
    },
)
