from dataclasses import dataclass
from typing import List, Tuple

from hexapod.motion.inverse_kinematics import Vector3

from ._leg_name import LegName


@dataclass(frozen=True)
class LegConfig:
    """Where a leg is mounted and which servos drive it.

    ``origin`` is the offset from the center of the top of the body to the
    coxa pivot, ``heading`` the direction the leg points in its home pose.
    Servo ids are ``base_id + 1`` to ``base_id + 4``, body to foot.
    """

    name: LegName
    base_id: int
    origin: Vector3
    heading: float

    def servo_ids(self) -> Tuple[int, int, int, int]:
        return self.base_id + 1, self.base_id + 2, self.base_id + 3, self.base_id + 4


DEFAULT_LEGS: List[LegConfig] = [
    LegConfig(LegName.FRONT_LEFT, 10, Vector3(-51.1769, -19, 98), -120),
    LegConfig(LegName.FRONT_RIGHT, 20, Vector3(51.1769, -19, 98), -60),
    LegConfig(LegName.MID_RIGHT, 30, Vector3(66, -19, 0), 0),
    LegConfig(LegName.BACK_RIGHT, 40, Vector3(51.1769, -19, -98), 60),
    LegConfig(LegName.BACK_LEFT, 50, Vector3(-51.1769, -19, -98), 120),
    LegConfig(LegName.MID_LEFT, 60, Vector3(-66, -19, 0), 180),
]
