from typing import TYPE_CHECKING, List, Optional

from hexapod import labels
from hexapod.configuration import GaitParameters
from hexapod.exceptions import ConfigurationError
from hexapod.logger import Logger
from hexapod.motion.inverse_kinematics import Vector3
from hexapod.runtime.controller_event import ControllerEvent
from hexapod.runtime.motion_controller.state._base_state import BaseGaitState, GaitStateName
from hexapod.runtime.motion_controller.state._init_state import InitState
from hexapod.runtime.motion_controller.state._posture_states import HaltState, SitDownState, StandUpState
from hexapod.runtime.motion_controller.state._step_states import (
    StandState,
    StepDownState,
    StepOverState,
    StepUpState,
)

if TYPE_CHECKING:
    from hexapod.runtime.motion_controller.hexapod import Hexapod

log = Logger().setup_logger('Gait')


class GaitStateMachine:
    """Gait phase, foot targets and tick counting for one hexapod.

    Foot targets are kept in world coordinates so planted feet stay where
    they are when the body moves.
    """

    def __init__(self, hexapod: 'Hexapod', parameters: GaitParameters):
        self._states: dict[GaitStateName, BaseGaitState] = {
            GaitStateName.INIT: InitState(),
            GaitStateName.STAND_UP: StandUpState(),
            GaitStateName.STAND: StandState(),
            GaitStateName.STEP_UP: StepUpState(),
            GaitStateName.STEP_OVER: StepOverState(),
            GaitStateName.STEP_DOWN: StepDownState(),
            GaitStateName.SIT_DOWN: SitDownState(),
            GaitStateName.HALT: HaltState(),
        }

        self.parameters = parameters
        self.leg_sets: List[List[int]] = parameters.leg_sets()

        self.feet: List[Vector3] = [hexapod.home_foot_position(leg) for leg in hexapod.legs]
        self.next_feet: List[Optional[Vector3]] = [None] * len(hexapod.legs)

        self.leg_set_index = 0
        self.init_counter = 0
        self.state_counter = 0
        self.dont_move = False

        self._current_state = GaitStateName.INIT
        self.set_state(GaitStateName.INIT)

    @property
    def current_state(self) -> GaitStateName:
        return self._current_state

    def set_state(self, state: GaitStateName) -> None:
        """Switch state and restart the state's tick counter."""
        if state not in self._states:
            raise ConfigurationError(labels.STATE_UNKNOWN.format(state))

        log.info(labels.STATE_TRANSITION.format(state.value))
        self.state_counter = 0
        self._current_state = state

    def advance(self) -> None:
        self.state_counter += 1

    def current_leg_set(self) -> List[int]:
        return self.leg_sets[self.leg_set_index]

    def step_up_height(self, event: ControllerEvent) -> float:
        """Height to lift stepping feet to; holding the trigger lifts them higher."""
        trigger = event.left_trigger / 255.0
        return self.parameters.base_foot_up + trigger * self.parameters.foot_up_trigger_range

    def request_sit_down(self) -> None:
        if self._current_state not in (GaitStateName.SIT_DOWN, GaitStateName.HALT):
            self.set_state(GaitStateName.SIT_DOWN)

    def update(self, hexapod: 'Hexapod', event: ControllerEvent) -> bool:
        """Run the current state for one tick.

        Returns:
            False once a terminal state has run, True otherwise.
        """
        state = self._states[self._current_state]
        next_state = state.update(self, hexapod, event)

        if state.terminal:
            return False

        if next_state is not None:
            self.set_state(next_state)

        return True
