from ._actuator_bus import ActuatorBus


class Servo:
    """A handle to one servo on a bus the caller does not own."""

    def __init__(self, bus: ActuatorBus, servo_id: int):
        self._bus = bus
        self.servo_id = servo_id

    def move_to(self, angle: float) -> None:
        self._bus.move_to(self.servo_id, angle)

    def set_torque_enabled(self, enabled: bool) -> None:
        self._bus.set_torque_enabled(self.servo_id, enabled)

    def set_moving_speed(self, speed: int) -> None:
        self._bus.set_moving_speed(self.servo_id, speed)

    def set_led(self, enabled: bool) -> None:
        self._bus.set_led(self.servo_id, enabled)

    def set_status_return_level(self, level: int) -> None:
        self._bus.set_status_return_level(self.servo_id, level)

    def voltage(self) -> float:
        return self._bus.read_voltage(self.servo_id)

    def __repr__(self) -> str:
        return f'Servo({self.servo_id})'
