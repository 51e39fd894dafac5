"""
The hexapod body: pose in the world, the six legs, and the control loop that
turns gamepad input into batched servo moves every tick.
"""

from math import cos, radians, sin
import threading
import time
from typing import Callable, List, Protocol, Sequence

import numpy as np

from hexapod import constants, labels
from hexapod.configuration import DEFAULT_LEGS, GaitParameters, LegConfig
from hexapod.exceptions import ConfigurationError, LegTransportError, LowVoltageError, UnreachableTargetError
from hexapod.hardware.actuator_bus import ActuatorBus, ActuatorBusError, Servo
from hexapod.logger import Logger
from hexapod.motion.inverse_kinematics import EulerAngle, Vector3, ZERO_VECTOR, inverse, make_matrix44
from hexapod.runtime.controller_event import ControllerEvent
from hexapod.runtime.motion_controller.leg import Leg
from hexapod.runtime.motion_controller.safety_monitor import SafetyMonitor
from hexapod.runtime.motion_controller.state import GaitStateMachine, GaitStateName

log = Logger().setup_logger('Hexapod')


class EventSource(Protocol):
    def poll(self) -> ControllerEvent: ...


class Hexapod:
    """Owns the actuator bus and all controller state for one robot.

    Attributes:
        position: World coordinates of the center of the body.
        rotation: World heading of the body in degrees.
        halt: Set from any thread to request a sit down and stop.
        exit_code: 1 once the operator asks for an error exit, else 0.
    """

    def __init__(
        self,
        bus: ActuatorBus,
        parameters: GaitParameters | None = None,
        leg_configs: Sequence[LegConfig] = DEFAULT_LEGS,
    ):
        if len(leg_configs) != constants.LEG_COUNT:
            raise ConfigurationError(labels.CONFIG_INVALID_LEG_COUNT.format(constants.LEG_COUNT, len(leg_configs)))

        self.bus = bus
        self.parameters = parameters or GaitParameters()
        self.legs: List[Leg] = [Leg(bus, config) for config in leg_configs]

        self.position = ZERO_VECTOR
        self.rotation = 0.0
        self.step_radius = self.parameters.step_radius

        self.halt = threading.Event()
        self.exit_code = 0
        self.ticks = 0

        self.safety_monitor = SafetyMonitor.from_parameters(self.legs[0].coxa, self.parameters)
        self.gait = GaitStateMachine(self, self.parameters)

    # ------------------------------------------------------------------
    # Frames
    # ------------------------------------------------------------------

    def world(self) -> np.ndarray:
        """Transform from the body frame into the world frame."""
        return make_matrix44(self.position, EulerAngle.heading(self.rotation))

    def local(self) -> np.ndarray:
        """Transform from the world frame into the body frame."""
        return inverse(self.world())

    def home_foot_position(self, leg: Leg) -> Vector3:
        """World position the given leg's foot returns to after a step."""
        r = radians(self.rotation + leg.heading)
        x = cos(r) * self.step_radius
        z = -sin(r) * self.step_radius
        return self.position.add(Vector3(x, self.parameters.foot_home_height, z))

    def servos(self) -> List[Servo]:
        return [servo for leg in self.legs for servo in leg.servos()]

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def run_batched(self, f: Callable[[], None]) -> None:
        """Queue every write ``f`` makes and release them with a single commit."""
        self.bus.begin_batch()
        try:
            f()
        finally:
            self.bus.end_batch()
        self.bus.commit()

    def sync_legs(self, f: Callable[[Leg], None]) -> None:
        def apply_to_all_legs():
            for leg in self.legs:
                f(leg)

        self.run_batched(apply_to_all_legs)

    def move_feet(self, feet: Sequence[Vector3]) -> None:
        """Send every initialized leg to its foot target in one batch.

        A leg that cannot reach its target, or whose writes fail, keeps its
        previous pose and the other legs still move.
        """
        body_world = self.world()

        def set_goals():
            for leg, foot in zip(self.legs, feet):
                if not leg.initialized:
                    continue
                try:
                    leg.set_goal(foot, body_world)
                except UnreachableTargetError as e:
                    log.warning(str(e))
                except LegTransportError as e:
                    log.error(str(e))

        self.run_batched(set_goals)

    # ------------------------------------------------------------------
    # Power
    # ------------------------------------------------------------------

    def set_status_return_level(self, level: int) -> None:
        for servo in self.servos():
            servo.set_status_return_level(level)

    def relax(self) -> None:
        """Turn torque and LEDs off on every servo, trying all of them even if some fail."""
        for servo in self.servos():
            try:
                servo.set_torque_enabled(False)
                servo.set_led(False)
            except ActuatorBusError as e:
                log.error(labels.LEG_RELAX_ERROR.format(servo.servo_id, e))
        log.info(labels.HEXAPOD_RELAXED)

    def halt_servos(self) -> None:
        """Restore full status reporting and de-energize every servo."""
        for servo in self.servos():
            try:
                servo.set_status_return_level(constants.STATUS_RETURN_ALL)
            except ActuatorBusError as e:
                log.error(labels.LEG_RELAX_ERROR.format(servo.servo_id, e))
        self.relax()

    def shutdown(self, sleep: Callable[[float], None] = time.sleep) -> None:
        """Fold every leg into the parked pose, wait for it to settle, then relax."""
        log.info(labels.HEXAPOD_SHUTDOWN)

        for servo in self.servos():
            servo.set_torque_enabled(True)
            servo.set_moving_speed(constants.PARK_MOVING_SPEED)

        def park(leg: Leg) -> None:
            leg.coxa.move_to(constants.PARK_COXA)
            leg.femur.move_to(constants.PARK_FEMUR)
            leg.tibia.move_to(constants.PARK_TIBIA)
            leg.tarsus.move_to(constants.PARK_TARSUS)

        self.sync_legs(park)

        # TODO: poll the servos' moving flag instead of waiting a fixed time
        sleep(constants.PARK_SETTLE_TIME)
        self.relax()

    # ------------------------------------------------------------------
    # Control loop
    # ------------------------------------------------------------------

    def request_halt(self) -> None:
        log.info(labels.HEXAPOD_HALT_REQUESTED)
        self.halt.set()

    def _update_pose(self, event: ControllerEvent) -> None:
        parameters = self.parameters

        if event.right_stick_x != 0:
            self.rotation += (event.right_stick_x / constants.STICK_RANGE) * parameters.rotation_speed

        move_x = (event.left_stick_x / constants.STICK_RANGE) * parameters.body_step
        move_z = (-event.left_stick_y / constants.STICK_RANGE) * parameters.body_step
        move_y = 0.0
        if event.dpad_up:
            move_y += parameters.body_raise_step
        if event.dpad_down:
            move_y -= parameters.body_raise_step

        move = Vector3(move_x, move_y, move_z)

        # Moves are relative to the way the body is currently facing
        if not move.is_zero():
            self.position = move.multiply_by_matrix44(self.world())

    def tick(self, event: ControllerEvent) -> bool:
        """Run one control tick.

        Returns:
            False once the robot has halted and the loop should stop.

        Raises:
            ActuatorBusError: the voltage could not be read, or a servo
                failed outside of a leg move.
        """
        self.ticks += 1
        self.gait.advance()

        self._update_pose(event)
        self.gait.dont_move = event.square

        try:
            self.safety_monitor.tick()
        except LowVoltageError as e:
            log.error(str(e))
            self.gait.set_state(GaitStateName.HALT)

        if event.start or self.halt.is_set():
            if event.select and self.exit_code == 0:
                log.info(labels.HEXAPOD_EXIT_REQUESTED)
                self.exit_code = 1
            self.gait.request_sit_down()

        if not self.gait.update(self, event):
            return False

        self.move_feet(self.gait.feet)
        return True

    def main_loop(
        self,
        events: EventSource,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> int:
        """Run ticks until the robot halts and return the exit code.

        A late tick is not made up for; the next one simply starts late.
        """
        period = self.parameters.tick_period

        try:
            self.set_status_return_level(constants.STATUS_RETURN_READ_ONLY)

            while True:
                started = clock()

                if not self.tick(events.poll()):
                    break

                remaining = period - (clock() - started)
                if remaining > 0:
                    sleep(remaining)
                else:
                    log.debug(labels.HEXAPOD_OVERRUN.format((period - remaining) * 1000, period * 1000))

        except ActuatorBusError as e:
            log.error(labels.HEXAPOD_BUS_FAILURE.format(e))
            self.relax()
            raise

        log.info(labels.HEXAPOD_LOOP_STOPPED.format(self.ticks))
        return self.exit_code
