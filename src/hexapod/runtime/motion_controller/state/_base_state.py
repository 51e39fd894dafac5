from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

from hexapod.logger import Logger
from hexapod.runtime.controller_event import ControllerEvent

if TYPE_CHECKING:
    from hexapod.runtime.motion_controller.hexapod import Hexapod
    from hexapod.runtime.motion_controller.state.state_machine import GaitStateMachine


class GaitStateName(Enum):
    INIT = 'init'
    STAND_UP = 'stand_up'
    STAND = 'stand'
    STEP_UP = 'step_up'
    STEP_OVER = 'step_over'
    STEP_DOWN = 'step_down'
    SIT_DOWN = 'sit_down'
    HALT = 'halt'


class BaseGaitState(ABC):
    _log = Logger().setup_logger('Gait state')

    # A terminal state ends the control loop once it has been updated
    terminal: bool = False

    @abstractmethod
    def update(self, gait: 'GaitStateMachine', hexapod: 'Hexapod', event: ControllerEvent) -> GaitStateName | None:
        """Run one tick of this state and return the state to switch to, if any."""
