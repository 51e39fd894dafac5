"""
One leg of the hexapod: its mounting geometry, its four servos and whether it
has been brought up yet.
"""

from typing import Tuple

import numpy as np

from hexapod import labels
from hexapod.configuration import LegConfig
from hexapod.constants import FEMUR_SERVO_DIRECTION, SERVO_ANGLE_LIMIT
from hexapod.exceptions import JointLimitError, LegNotReadyError, LegTransportError
from hexapod.hardware.actuator_bus import ActuatorBus, ActuatorBusError, Servo
from hexapod.motion.inverse_kinematics import (
    EulerAngle,
    JointAngles,
    LegGeometry,
    Vector3,
    inverse,
    make_matrix44,
    multiply_matrices,
)
from hexapod.motion.inverse_kinematics import leg_solver


class Leg:
    """A leg mounted at ``origin`` (body frame) and pointing along ``heading``.

    The servo handles refer to the bus owned by the hexapod; the leg never
    opens or closes it.

    Attributes:
        initialized: False until the gait's startup phase brings the leg up.
            Moves are refused until then.
        last_angles: The last joint solution sent to the servos.
    """

    def __init__(self, bus: ActuatorBus, config: LegConfig, geometry: LegGeometry = LegGeometry()):
        self.name = config.name.value
        self.origin = config.origin
        self.heading = config.heading
        self.geometry = geometry

        coxa_id, femur_id, tibia_id, tarsus_id = config.servo_ids()
        self.coxa = Servo(bus, coxa_id)
        self.femur = Servo(bus, femur_id)
        self.tibia = Servo(bus, tibia_id)
        self.tarsus = Servo(bus, tarsus_id)

        self.initialized = False
        self.last_angles: JointAngles | None = None

    def matrix(self) -> np.ndarray:
        """Transform from this leg's frame into the body frame."""
        return make_matrix44(self.origin, EulerAngle.heading(self.heading))

    def servos(self) -> Tuple[Servo, Servo, Servo, Servo]:
        return self.coxa, self.femur, self.tibia, self.tarsus

    def set_led(self, state: bool) -> None:
        for servo in self.servos():
            servo.set_led(state)

    def project(self, world_point: Vector3, body_world: np.ndarray) -> Vector3:
        """Express ``world_point`` in this leg's frame, given the body-to-world transform."""
        return world_point.multiply_by_matrix44(inverse(multiply_matrices(body_world, self.matrix())))

    def set_goal(self, world_point: Vector3, body_world: np.ndarray) -> JointAngles:
        """Solve for ``world_point`` and send the joint angles.

        ``body_world`` maps the body frame into the world frame.

        Raises:
            LegNotReadyError: the leg has not been initialized.
            UnreachableTargetError: no joint solution exists, or one joint
                would have to turn past its servo travel.
            LegTransportError: the bus rejected one of the writes.
        """
        if not self.initialized:
            raise LegNotReadyError(self.name, labels.LEG_NOT_READY.format(self.name))

        target = self.project(world_point, body_world)
        angles = leg_solver.solve(target, self.geometry, self.name)

        commands = [
            ('coxa', self.coxa, angles.coxa),
            ('femur', self.femur, FEMUR_SERVO_DIRECTION * angles.femur),
            ('tibia', self.tibia, angles.tibia),
            ('tarsus', self.tarsus, angles.tarsus),
        ]

        # The whole pose is checked before the first write is queued
        for joint, _, angle in commands:
            if abs(angle) > SERVO_ANGLE_LIMIT:
                raise JointLimitError(
                    self.name,
                    target,
                    joint,
                    angle,
                    labels.LEG_JOINT_LIMIT.format(self.name, joint, angle, SERVO_ANGLE_LIMIT),
                )

        try:
            for _, servo, angle in commands:
                servo.move_to(angle)
        except ActuatorBusError as e:
            raise LegTransportError(self.name, labels.LEG_TRANSPORT_ERROR.format(self.name, e)) from e

        self.last_angles = angles
        return angles

    def __repr__(self) -> str:
        return f'Leg({self.name})'
