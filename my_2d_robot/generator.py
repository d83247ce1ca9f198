import random
import time
from logging import Logger, getLogger
from typing import Optional, Tuple

from .samples import JOINT_COUNT, JOINT_NAMES, JointSample

# Angles are drawn as integers in [0, ANGLE_STEPS) and scaled down,
# an approximation of [0, pi) radians
ANGLE_STEPS = 315
ANGLE_SCALE = 100.0
MAX_ANGLE = (ANGLE_STEPS - 1) / ANGLE_SCALE  # 3.14 rad


class JointAngleGenerator:
    """Synthetic joint angle source for the two-link arm.

    There is no model of robot dynamics: every tick draws two independent
    uniform angles. The only state is the random source, seeded once.
    """

    def __init__(self, seed: Optional[int] = None, logger: Optional[Logger] = None):
        self.logger = logger or getLogger(__name__)
        if seed is None:
            # Non-reproducible on purpose, this is a synthetic signal
            seed = time.time_ns()
        self.seed = seed
        self._random = random.Random(seed)

    def next_positions(self) -> Tuple[float, float]:
        """Draw one angle per joint, each in [0.00, 3.14]"""
        return tuple(
            self._random.randrange(ANGLE_STEPS) / ANGLE_SCALE
            for _ in range(JOINT_COUNT))

    def tick(self, now: Optional[float] = None) -> JointSample:
        """Produce the next timestamped sample"""
        positions = self.next_positions()
        stamp = time.time() if now is None else now
        self.logger.debug(f'Generated joint angles {positions[0]:.2f}, {positions[1]:.2f}')
        return JointSample(timestamp=stamp, positions=positions, joint_names=JOINT_NAMES)
