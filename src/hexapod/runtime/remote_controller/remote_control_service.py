"""
Remote control service for reading a gamepad through the Linux joystick API.

The device is opened non-blocking and every pending event is drained once
per control tick, so the gait loop always sees the latest stick positions
without ever waiting on the gamepad.
"""

import array
import dataclasses
from dataclasses import dataclass
from fcntl import ioctl
import os
import struct

from hexapod import labels
from hexapod.constants import (
    AXIS_RAW_RANGE,
    DEVICE_PATH,
    JSDEV_READ_SIZE,
    JSIOCGAXES,
    JSIOCGAXMAP,
    JSIOCGBTNMAP,
    JSIOCGBUTTONS,
    JSIOCGNAME,
    STICK_RANGE,
    TRIGGER_RANGE,
)
from hexapod.logger import Logger
from hexapod.runtime.controller_event import ControllerEvent

from ._mappings import BUTTONS, HAT_AXES, JS_EVENT_AXIS, JS_EVENT_BUTTON, JS_EVENT_INIT, STICK_AXES, TRIGGER_AXES, code_name


@dataclass
class JsEvent:
    """Represents a single event from a Linux joystick device."""

    time: int  # Event timestamp (ms)
    value: int  # Value (-32767–32767 for axes, 0/1 for buttons)
    event_type: int  # Event type bitmask (JS_EVENT_AXIS, JS_EVENT_BUTTON, etc.)
    number: int  # Axis or button index


log = Logger().setup_logger('Remote Control Service')


def scale_stick(value: int) -> int:
    scaled = round(value / AXIS_RAW_RANGE * STICK_RANGE)
    return max(-STICK_RANGE, min(STICK_RANGE, scaled))


def scale_trigger(value: int) -> int:
    """Map a trigger axis (-32767 released, 32767 fully pressed) to 0..255."""
    scaled = round((value + AXIS_RAW_RANGE) / (2 * AXIS_RAW_RANGE) * TRIGGER_RANGE)
    return max(0, min(TRIGGER_RANGE, scaled))


class RemoteControlService:
    """
    Service for managing the joystick device connection and parsing input events.

    Attributes:
        device_name: The configured device name to search for (e.g., 'js0')
        axis_codes: Driver axis code for each axis index of the device
        button_codes: Driver button code for each button index of the device
    """

    def __init__(self, device_name: str):
        self.device_name = device_name
        self.jsdev = None
        self._controller_event = ControllerEvent()
        self.button_codes: list = []
        self.axis_codes: list = []
        self.is_connected = False

    def scan(self) -> bool:
        """
        Look for the configured joystick device in /dev/input and open it.

        Returns:
            True if device was found and opened, False otherwise.
        """
        log.info(labels.REMOTE_LOOKING_FOR_DEVICES.format(self.device_name))
        self.is_connected = False
        self.jsdev = None

        if self.device_name in os.listdir(DEVICE_PATH):
            return self._open_device(self.device_name)

        log.error(labels.REMOTE_NOT_FOUND.format(self.device_name, DEVICE_PATH))
        return False

    def _open_device(self, device_name: str) -> bool:
        device_path = f'{DEVICE_PATH}/{device_name}'

        try:
            self.jsdev = open(device_path, 'rb', buffering=0)
            os.set_blocking(self.jsdev.fileno(), False)
            self._initialize_device_mappings()
        except OSError as e:
            log.error(labels.REMOTE_OPEN_ERROR.format(device_path, e))
            self.disconnect()
            return False

        log.info(labels.REMOTE_OPEN_SUCCESS.format(device_path))
        self.is_connected = True
        return True

    def _initialize_device_mappings(self) -> None:
        """
        Query the joystick device for its name and axis and button mappings.
        """
        buf = array.array('B', [0] * 64)
        ioctl(self.jsdev, JSIOCGNAME + (0x10000 * len(buf)), buf)  # type: ignore
        js_name = buf.tobytes().rstrip(b'\x00').decode('utf-8', errors='replace')
        log.info(labels.REMOTE_CONNECTED_TO.format(js_name))

        buf = array.array('B', [0])
        ioctl(self.jsdev, JSIOCGAXES, buf)  # type: ignore
        num_axes = buf[0]

        buf = array.array('B', [0])
        ioctl(self.jsdev, JSIOCGBUTTONS, buf)  # type: ignore
        num_buttons = buf[0]

        self.axis_codes.clear()
        self.button_codes.clear()

        buf = array.array('B', [0] * 0x40)
        ioctl(self.jsdev, JSIOCGAXMAP, buf)  # type: ignore
        self.axis_codes.extend(buf[:num_axes])

        buf = array.array('H', [0] * 0x200)
        ioctl(self.jsdev, JSIOCGBTNMAP, buf)  # type: ignore
        self.button_codes.extend(buf[:num_buttons])

        log.info(labels.REMOTE_AXES_FOUND.format(num_axes, ", ".join(code_name(axis) for axis in self.axis_codes)))
        log.info(labels.REMOTE_BUTTONS_FOUND.format(num_buttons, ", ".join(code_name(btn) for btn in self.button_codes)))

    def apply(self, event: JsEvent) -> None:
        """Fold one device event into the current controller state."""
        # Skip initialization events
        if event.event_type & JS_EVENT_INIT:
            return

        if event.event_type & JS_EVENT_BUTTON:
            if event.number < len(self.button_codes):
                button = BUTTONS.get(self.button_codes[event.number])
                if button:
                    setattr(self._controller_event, button, bool(event.value))

        elif event.event_type & JS_EVENT_AXIS:
            if event.number >= len(self.axis_codes):
                return

            driver_code = self.axis_codes[event.number]
            if driver_code in STICK_AXES:
                setattr(self._controller_event, STICK_AXES[driver_code], scale_stick(event.value))
            elif driver_code in TRIGGER_AXES:
                setattr(self._controller_event, TRIGGER_AXES[driver_code], scale_trigger(event.value))
            elif driver_code in HAT_AXES:
                negative, positive = HAT_AXES[driver_code]
                setattr(self._controller_event, negative, event.value < 0)
                setattr(self._controller_event, positive, event.value > 0)

    def poll(self) -> ControllerEvent:
        """
        Drain every pending device event and return a snapshot of the controller state.

        A read error drops the connection and returns neutral input.
        """
        if not self.is_connected or self.jsdev is None:
            return dataclasses.replace(self._controller_event)

        try:
            while True:
                evbuf = self.jsdev.read(JSDEV_READ_SIZE)
                if not evbuf or len(evbuf) != JSDEV_READ_SIZE:
                    break
                self.apply(JsEvent(*struct.unpack("IhBB", evbuf)))

        except OSError as e:
            log.error(labels.REMOTE_READ_ERROR.format(e))
            self.disconnect()
            self.clear()

        return dataclasses.replace(self._controller_event)

    def controller_event(self) -> ControllerEvent:
        """
        Get the current state of all axes and buttons without reading new events.
        """
        return self._controller_event

    def clear(self) -> None:
        """
        Reset the current state to neutral sticks and released buttons.
        """
        self._controller_event = ControllerEvent()

    def disconnect(self) -> None:
        """Close the device connection if open."""
        if self.jsdev:
            try:
                self.jsdev.close()
            except OSError as e:
                log.warning(labels.REMOTE_CLOSE_WARNING.format(e))
        self.jsdev = None
        self.is_connected = False
