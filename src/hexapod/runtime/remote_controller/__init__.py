"""Remote controller package for joystick device handling."""

from .remote_control_service import RemoteControlService

__all__ = [
    'RemoteControlService',
]
