from hexapod import labels
from hexapod.runtime.controller_event import ControllerEvent
from hexapod.runtime.motion_controller.state._base_state import BaseGaitState, GaitStateName


class InitState(BaseGaitState):
    """Bring the legs up one at a time to spare the power supply.

    Leg ``k`` of the init order is activated once ``k`` init intervals have
    passed since entering the state. One more interval after the last leg,
    the robot starts standing up.
    """

    def update(self, gait, hexapod, event: ControllerEvent) -> GaitStateName | None:
        parameters = gait.parameters
        elapsed_intervals = (gait.state_counter - 1) // parameters.init_interval_ticks

        if elapsed_intervals < gait.init_counter:
            return None

        if gait.init_counter < len(hexapod.legs):
            leg = hexapod.legs[parameters.init_order[gait.init_counter]]

            for servo in leg.servos():
                servo.set_torque_enabled(True)
                servo.set_moving_speed(parameters.init_moving_speed)

            leg.initialized = True
            gait.init_counter += 1
            self._log.debug(labels.STATE_LEG_ACTIVATED.format(leg.name, gait.init_counter, len(hexapod.legs)))
            return None

        return GaitStateName.STAND_UP
