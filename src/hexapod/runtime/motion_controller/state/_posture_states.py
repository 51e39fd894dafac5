from hexapod.runtime.controller_event import ControllerEvent
from hexapod.runtime.motion_controller.state._base_state import BaseGaitState, GaitStateName


class StandUpState(BaseGaitState):
    """Push the feet down until the body is lifted to standing height."""

    def update(self, gait, hexapod, event: ControllerEvent) -> GaitStateName | None:
        foot_down = gait.parameters.foot_down
        step = gait.parameters.foot_step
        gait.feet = [foot.with_y(min(foot.y, max(foot.y - step, foot_down))) for foot in gait.feet]

        if all(foot.y <= foot_down for foot in gait.feet):
            return GaitStateName.STAND
        return None


class SitDownState(BaseGaitState):
    """Raise the feet until the body rests on the ground, then halt."""

    def update(self, gait, hexapod, event: ControllerEvent) -> GaitStateName | None:
        foot_up = gait.step_up_height(event)
        step = gait.parameters.foot_step
        gait.feet = [foot.with_y(max(foot.y, min(foot.y + step, foot_up))) for foot in gait.feet]

        if all(foot.y >= foot_up for foot in gait.feet):
            return GaitStateName.HALT
        return None


class HaltState(BaseGaitState):
    terminal = True

    def update(self, gait, hexapod, event: ControllerEvent) -> GaitStateName | None:
        hexapod.halt_servos()
        return None
