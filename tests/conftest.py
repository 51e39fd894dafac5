import pytest

from hexapod.configuration import GaitParameters
from hexapod.hardware.actuator_bus import ActuatorBus, ActuatorBusError
from hexapod.runtime.controller_event import ControllerEvent
from hexapod.runtime.motion_controller.hexapod import Hexapod
from hexapod.runtime.motion_controller.state import GaitStateName


class FakeActuatorBus(ActuatorBus):
    """Records every call and keeps the last value written to each servo."""

    def __init__(self, voltage=12.0):
        self.voltage = voltage
        self.voltage_error = False
        self.fail_ids = set()

        self.calls = []
        self.buffered = False
        self.pending = {}
        self.batches = []
        self._current_batch = None

        self.positions = {}
        self.torque = {}
        self.speeds = {}
        self.leds = {}
        self.status_levels = {}
        self.voltage_reads = 0
        self.closed = False

    def _check(self, servo_id):
        if servo_id in self.fail_ids:
            raise ActuatorBusError(f"servo {servo_id} did not answer", servo_id)

    def move_to(self, servo_id, angle):
        self._check(servo_id)
        self.calls.append(("move_to", servo_id, angle, self.buffered))
        if self.buffered:
            self.pending[servo_id] = angle
            self._current_batch.append((servo_id, angle))
        else:
            self.positions[servo_id] = angle

    def set_torque_enabled(self, servo_id, enabled):
        self._check(servo_id)
        self.calls.append(("set_torque_enabled", servo_id, enabled, self.buffered))
        self.torque[servo_id] = enabled

    def set_moving_speed(self, servo_id, speed):
        self._check(servo_id)
        self.calls.append(("set_moving_speed", servo_id, speed, self.buffered))
        self.speeds[servo_id] = speed

    def set_led(self, servo_id, enabled):
        self._check(servo_id)
        self.calls.append(("set_led", servo_id, enabled, self.buffered))
        self.leds[servo_id] = enabled

    def set_status_return_level(self, servo_id, level):
        self._check(servo_id)
        self.calls.append(("set_status_return_level", servo_id, level, self.buffered))
        self.status_levels[servo_id] = level

    def read_voltage(self, servo_id):
        self.calls.append(("read_voltage", servo_id))
        self.voltage_reads += 1
        if self.voltage_error:
            raise ActuatorBusError("no status packet", servo_id)
        return self.voltage

    def begin_batch(self):
        assert not self.buffered, "batch opened twice"
        self.calls.append(("begin_batch",))
        self.buffered = True
        self._current_batch = []

    def end_batch(self):
        self.calls.append(("end_batch",))
        self.buffered = False

    def commit(self):
        assert not self.buffered, "commit while batch is open"
        self.calls.append(("commit",))
        self.positions.update(self.pending)
        self.pending.clear()
        self.batches.append(self._current_batch or [])
        self._current_batch = None

    def close(self):
        self.closed = True


ALL_SERVO_IDS = [base + joint for base in (10, 20, 30, 40, 50, 60) for joint in (1, 2, 3, 4)]


@pytest.fixture
def bus():
    return FakeActuatorBus()


@pytest.fixture
def parameters():
    return GaitParameters()


@pytest.fixture
def hexapod(bus, parameters):
    return Hexapod(bus, parameters)


@pytest.fixture
def standing_hexapod(hexapod):
    """All legs up, feet planted at their home positions, gait in Stand."""
    for leg in hexapod.legs:
        leg.initialized = True
    hexapod.gait.feet = [
        hexapod.home_foot_position(leg).with_y(hexapod.parameters.foot_down) for leg in hexapod.legs
    ]
    hexapod.gait.set_state(GaitStateName.STAND)
    return hexapod


@pytest.fixture
def neutral():
    return ControllerEvent()


def record_states(gait):
    """Wrap ``gait.set_state`` so every transition is appended to the returned list."""
    visited = []
    original = gait.set_state

    def set_state(state):
        visited.append(state)
        original(state)

    gait.set_state = set_state
    return visited
