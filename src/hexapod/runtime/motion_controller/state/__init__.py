from ._base_state import BaseGaitState, GaitStateName
from .state_machine import GaitStateMachine

__all__ = ["BaseGaitState", "GaitStateName", "GaitStateMachine"]
