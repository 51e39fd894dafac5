from abc import ABC, abstractmethod


class ActuatorBusError(Exception):
    """A transport failure or an error reported by a servo."""

    def __init__(self, message: str, servo_id: int | None = None):
        super().__init__(message)
        self.servo_id = servo_id


class ActuatorBus(ABC):
    """A daisy-chained network of smart servos addressed by id.

    Between ``begin_batch`` and ``end_batch`` writes are queued on the servos
    instead of taking effect. ``commit`` makes every queued write take effect
    at once.
    """

    @abstractmethod
    def move_to(self, servo_id: int, angle: float) -> None:
        """Set the goal angle in degrees, 0 being the center of travel."""

    @abstractmethod
    def set_torque_enabled(self, servo_id: int, enabled: bool) -> None:
        pass

    @abstractmethod
    def set_moving_speed(self, servo_id: int, speed: int) -> None:
        pass

    @abstractmethod
    def set_led(self, servo_id: int, enabled: bool) -> None:
        pass

    @abstractmethod
    def set_status_return_level(self, servo_id: int, level: int) -> None:
        pass

    @abstractmethod
    def read_voltage(self, servo_id: int) -> float:
        pass

    @abstractmethod
    def begin_batch(self) -> None:
        pass

    @abstractmethod
    def end_batch(self) -> None:
        pass

    @abstractmethod
    def commit(self) -> None:
        pass

    def close(self) -> None:
        pass
