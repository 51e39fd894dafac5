"""
This module defines the ControllerEvent dataclass for handling controller inputs.
"""

from dataclasses import dataclass


@dataclass
class ControllerEvent:
    """Snapshot of the gamepad state used by one control tick."""

    # Thumbsticks, -127..127
    left_stick_x: int = 0
    left_stick_y: int = 0
    right_stick_x: int = 0

    # Trigger, 0..255
    left_trigger: int = 0

    # D-Pad (digital)
    dpad_up: bool = False
    dpad_down: bool = False

    # Buttons (digital)
    square: bool = False
    start: bool = False
    select: bool = False
