import struct

import pytest

from hexapod.runtime.controller_event import ControllerEvent
from hexapod.runtime.remote_controller import RemoteControlService
from hexapod.runtime.remote_controller import _mappings
from hexapod.runtime.remote_controller.remote_control_service import JsEvent, scale_stick, scale_trigger

AXES = [_mappings.AXIS_LX, _mappings.AXIS_LY, _mappings.AXIS_LZ, _mappings.AXIS_RX, _mappings.AXIS_HAT0Y]
BUTTONS = [_mappings.BTN_WEST, _mappings.BTN_SELECT, _mappings.BTN_START, _mappings.BTN_DPAD_UP]


class _FakeDevice:
    """Non-blocking joystick file: returns queued events, then None."""

    def __init__(self, events=(), error=None):
        self._chunks = [struct.pack("IhBB", *event) for event in events]
        self._error = error
        self.closed = False

    def read(self, size):
        if self._chunks:
            return self._chunks.pop(0)
        if self._error is not None:
            raise self._error
        return None

    def close(self):
        self.closed = True


@pytest.fixture
def service():
    remote = RemoteControlService("js0")
    remote.axis_codes.extend(AXES)
    remote.button_codes.extend(BUTTONS)
    return remote


def _connect(service, device):
    service.jsdev = device
    service.is_connected = True


def test_scaling():
    assert scale_stick(32767) == 127
    assert scale_stick(-32767) == -127
    assert scale_stick(0) == 0
    assert scale_trigger(-32767) == 0
    assert scale_trigger(32767) == 255
    assert scale_trigger(0) == 128


def test_axes_map_to_controller_fields(service):
    service.apply(JsEvent(0, 32767, _mappings.JS_EVENT_AXIS, 0))
    service.apply(JsEvent(0, -32767, _mappings.JS_EVENT_AXIS, 1))
    service.apply(JsEvent(0, 32767, _mappings.JS_EVENT_AXIS, 2))
    service.apply(JsEvent(0, -16384, _mappings.JS_EVENT_AXIS, 3))

    event = service.controller_event()
    assert event.left_stick_x == 127
    assert event.left_stick_y == -127
    assert event.left_trigger == 255
    assert event.right_stick_x == -64


def test_buttons_map_to_controller_fields(service):
    service.apply(JsEvent(0, 1, _mappings.JS_EVENT_BUTTON, 0))
    service.apply(JsEvent(0, 1, _mappings.JS_EVENT_BUTTON, 2))
    service.apply(JsEvent(0, 1, _mappings.JS_EVENT_BUTTON, 3))

    event = service.controller_event()
    assert event.square
    assert event.start
    assert event.dpad_up
    assert not event.select

    service.apply(JsEvent(0, 0, _mappings.JS_EVENT_BUTTON, 2))
    assert not service.controller_event().start


def test_hat_axis_drives_dpad(service):
    service.apply(JsEvent(0, -32767, _mappings.JS_EVENT_AXIS, 4))
    assert service.controller_event().dpad_up
    assert not service.controller_event().dpad_down

    service.apply(JsEvent(0, 32767, _mappings.JS_EVENT_AXIS, 4))
    assert service.controller_event().dpad_down
    assert not service.controller_event().dpad_up


def test_init_events_and_unknown_indices_are_ignored(service):
    service.apply(JsEvent(0, 1, _mappings.JS_EVENT_BUTTON | _mappings.JS_EVENT_INIT, 2))
    service.apply(JsEvent(0, 1, _mappings.JS_EVENT_BUTTON, 17))
    service.apply(JsEvent(0, 32767, _mappings.JS_EVENT_AXIS, 9))

    assert service.controller_event() == ControllerEvent()


def test_poll_drains_all_pending_events(service):
    _connect(
        service,
        _FakeDevice(
            [
                (1, 1000, _mappings.JS_EVENT_AXIS, 0),
                (2, 32767, _mappings.JS_EVENT_AXIS, 0),
                (3, 1, _mappings.JS_EVENT_BUTTON, 1),
            ]
        ),
    )

    event = service.poll()

    assert event.left_stick_x == 127
    assert event.select


def test_poll_returns_a_snapshot(service):
    _connect(service, _FakeDevice([(1, 1, _mappings.JS_EVENT_BUTTON, 2)]))

    first = service.poll()
    service.apply(JsEvent(0, 0, _mappings.JS_EVENT_BUTTON, 2))

    assert first.start
    assert not service.controller_event().start


def test_read_error_disconnects_and_goes_neutral(service):
    device = _FakeDevice([(1, 32767, _mappings.JS_EVENT_AXIS, 0)], error=OSError(19, "No such device"))
    _connect(service, device)

    event = service.poll()

    assert event.left_stick_x == 0
    assert not service.is_connected
    assert device.closed


def test_poll_without_device_is_neutral(service):
    event = service.poll()

    assert event.left_stick_x == 0
    assert not event.start


def test_scan_reports_missing_device(monkeypatch, service):
    monkeypatch.setattr("hexapod.runtime.remote_controller.remote_control_service.os.listdir", lambda path: ["event0"])

    assert service.scan() is False
    assert not service.is_connected
