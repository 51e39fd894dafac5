from ._actuator_bus import ActuatorBus, ActuatorBusError
from ._servo import Servo

__all__ = ["ActuatorBus", "ActuatorBusError", "Servo"]
