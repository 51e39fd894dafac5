"""
Standing and the three stepping phases.

One leg group steps at a time. Each phase fixes its targets on its first
tick and then holds them for the configured number of ticks.
"""

from hexapod import labels
from hexapod.runtime.controller_event import ControllerEvent
from hexapod.runtime.motion_controller.state._base_state import BaseGaitState, GaitStateName


class StandState(BaseGaitState):

    def update(self, gait, hexapod, event: ControllerEvent) -> GaitStateName | None:
        if gait.dont_move:
            return None

        for index, leg in enumerate(hexapod.legs):
            home = hexapod.home_foot_position(leg).with_y(gait.feet[index].y)
            if gait.feet[index].distance(home) > gait.parameters.min_step_distance:
                return GaitStateName.STEP_UP

        return None


class StepUpState(BaseGaitState):

    def update(self, gait, hexapod, event: ControllerEvent) -> GaitStateName | None:
        group = gait.current_leg_set()

        if gait.state_counter == 1:
            self._log.debug(
                labels.STATE_LEG_GROUP.format(gait.leg_set_index + 1, len(gait.leg_sets), [hexapod.legs[i].name for i in group])
            )
            height = gait.step_up_height(event)
            for index in group:
                gait.feet[index] = gait.feet[index].with_y(height)

        if gait.state_counter >= gait.parameters.step_up_ticks:
            for index in group:
                gait.next_feet[index] = hexapod.home_foot_position(hexapod.legs[index])
            return GaitStateName.STEP_OVER

        return None


class StepOverState(BaseGaitState):

    def update(self, gait, hexapod, event: ControllerEvent) -> GaitStateName | None:
        group = gait.current_leg_set()

        if gait.state_counter == 1:
            for index in group:
                target = gait.next_feet[index]
                if target is not None:
                    gait.feet[index] = target.with_y(gait.feet[index].y)

        if gait.state_counter >= gait.parameters.step_over_ticks:
            return GaitStateName.STEP_DOWN

        return None


class StepDownState(BaseGaitState):

    def update(self, gait, hexapod, event: ControllerEvent) -> GaitStateName | None:
        group = gait.current_leg_set()

        if gait.state_counter == 1:
            for index in group:
                gait.feet[index] = gait.feet[index].with_y(gait.parameters.foot_down)

        if gait.state_counter >= gait.parameters.step_down_ticks:
            for index in group:
                gait.next_feet[index] = None

            gait.leg_set_index += 1
            if gait.leg_set_index >= len(gait.leg_sets):
                gait.leg_set_index = 0
                return GaitStateName.STAND
            return GaitStateName.STEP_UP

        return None
