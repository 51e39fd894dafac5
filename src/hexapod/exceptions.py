"""
Exception types raised by the Hexapod controller.

Leg failures are split so the gait loop can tell a leg that was never
brought up apart from a target it cannot reach and from a bus that stopped
answering.
"""


class HexapodError(Exception):
    """Base class for all controller errors."""


class ConfigurationError(HexapodError):
    """Invalid gait parameters, leg layout or state table."""


class LegError(HexapodError):
    def __init__(self, leg_name: str, message: str):
        super().__init__(message)
        self.leg_name = leg_name


class LegNotReadyError(LegError):
    """A move was requested on a leg that has not been initialized."""


class UnreachableTargetError(LegError):
    """No joint solution exists for the requested foot target."""

    def __init__(self, leg_name: str, target, message: str):
        super().__init__(leg_name, message)
        self.target = target


class JointLimitError(UnreachableTargetError):
    """The solution puts a joint past the travel of its servo."""

    def __init__(self, leg_name: str, target, joint: str, angle: float, message: str):
        super().__init__(leg_name, target, message)
        self.joint = joint
        self.angle = angle


class LegTransportError(LegError):
    """The actuator bus failed while commanding the leg."""


class LowVoltageError(HexapodError):
    def __init__(self, voltage: float, minimum: float, message: str):
        super().__init__(message)
        self.voltage = voltage
        self.minimum = minimum
