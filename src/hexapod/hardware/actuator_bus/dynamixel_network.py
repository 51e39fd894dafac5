"""
Actuator bus backed by AX-12 Dynamixel servos speaking protocol 1.0.

Buffered writes use REG_WRITE so each servo stores the instruction without
acting on it, and ``commit`` broadcasts ACTION so every stored instruction
takes effect at the same moment.
"""

from dynamixel_sdk import (  # type: ignore
    BROADCAST_ID,
    COMM_SUCCESS,
    DXL_HIBYTE,
    DXL_LOBYTE,
    PacketHandler,
    PortHandler,
)

from hexapod import labels
from hexapod.constants import DEFAULT_BAUD_RATE, STATUS_RETURN_ALL
from hexapod.logger import Logger

from ._actuator_bus import ActuatorBus, ActuatorBusError

log = Logger().setup_logger('Dynamixel network')

PROTOCOL_VERSION = 1.0

# AX-12 control table
ADDR_STATUS_RETURN_LEVEL = 16
ADDR_TORQUE_ENABLE = 24
ADDR_LED = 25
ADDR_GOAL_POSITION = 30
ADDR_MOVING_SPEED = 32
ADDR_PRESENT_VOLTAGE = 42

# Goal position units: 0..1023 across 300 degrees, 512 is the center
POSITION_CENTER = 512
POSITION_MAX = 1023
DEGREES_RANGE = 300.0


def angle_to_position(angle: float) -> int:
    """Convert an angle in degrees (0 at center) to an AX-12 goal position."""
    return int(round(POSITION_CENTER + angle * POSITION_MAX / DEGREES_RANGE))


class DynamixelNetwork(ActuatorBus):
    """Serial Dynamixel bus.

    Each servo's status return level is tracked so writes only wait for a
    status packet from servos that will send one.
    """

    def __init__(self, device_name: str, baudrate: int = DEFAULT_BAUD_RATE):
        log.info(labels.BUS_OPENING.format(device_name, baudrate))

        self.portHandler = PortHandler(device_name)
        self.packetHandler = PacketHandler(PROTOCOL_VERSION)

        if not self.portHandler.openPort():
            raise ActuatorBusError(labels.BUS_OPEN_ERROR.format(device_name))
        if not self.portHandler.setBaudRate(baudrate):
            self.portHandler.closePort()
            raise ActuatorBusError(labels.BUS_BAUD_ERROR.format(baudrate, device_name))

        self.portHandler.clearPort()

        self._buffered = False
        self._status_levels: dict[int, int] = {}

    def _check(self, servo_id: int, dxl_comm_result: int, dxl_error: int = 0) -> None:
        if dxl_comm_result != COMM_SUCCESS:
            raise ActuatorBusError(
                labels.BUS_COMM_ERROR.format(servo_id, self.packetHandler.getTxRxResult(dxl_comm_result)), servo_id
            )
        if dxl_error != 0:
            raise ActuatorBusError(
                labels.BUS_PACKET_ERROR.format(servo_id, self.packetHandler.getRxPacketError(dxl_error)), servo_id
            )

    def _replies_to_writes(self, servo_id: int) -> bool:
        return self._status_levels.get(servo_id, STATUS_RETURN_ALL) >= STATUS_RETURN_ALL

    def _write(self, servo_id: int, address: int, data: list[int]) -> None:
        length = len(data)

        if self._buffered:
            if self._replies_to_writes(servo_id):
                self._check(servo_id, *self.packetHandler.regWriteTxRx(self.portHandler, servo_id, address, length, data))
            else:
                self._check(servo_id, self.packetHandler.regWriteTxOnly(self.portHandler, servo_id, address, length, data))
            return

        if self._replies_to_writes(servo_id):
            self._check(servo_id, *self.packetHandler.writeTxRx(self.portHandler, servo_id, address, length, data))
        else:
            self._check(servo_id, self.packetHandler.writeTxOnly(self.portHandler, servo_id, address, length, data))

    def _write_byte(self, servo_id: int, address: int, value: int) -> None:
        self._write(servo_id, address, [value & 0xFF])

    def _write_word(self, servo_id: int, address: int, value: int) -> None:
        self._write(servo_id, address, [DXL_LOBYTE(value), DXL_HIBYTE(value)])

    def move_to(self, servo_id: int, angle: float) -> None:
        position = angle_to_position(angle)
        if position < 0 or position > POSITION_MAX:
            raise ActuatorBusError(labels.BUS_ANGLE_OUT_OF_RANGE.format(angle, servo_id), servo_id)
        self._write_word(servo_id, ADDR_GOAL_POSITION, position)

    def set_torque_enabled(self, servo_id: int, enabled: bool) -> None:
        self._write_byte(servo_id, ADDR_TORQUE_ENABLE, 1 if enabled else 0)

    def set_moving_speed(self, servo_id: int, speed: int) -> None:
        self._write_word(servo_id, ADDR_MOVING_SPEED, speed)

    def set_led(self, servo_id: int, enabled: bool) -> None:
        self._write_byte(servo_id, ADDR_LED, 1 if enabled else 0)

    def set_status_return_level(self, servo_id: int, level: int) -> None:
        # The status packet for this write already follows the new level
        self._status_levels[servo_id] = level
        self._write_byte(servo_id, ADDR_STATUS_RETURN_LEVEL, level)

    def read_voltage(self, servo_id: int) -> float:
        value, dxl_comm_result, dxl_error = self.packetHandler.read1ByteTxRx(
            self.portHandler, servo_id, ADDR_PRESENT_VOLTAGE
        )
        self._check(servo_id, dxl_comm_result, dxl_error)
        return value / 10.0

    def begin_batch(self) -> None:
        if self._buffered:
            raise ActuatorBusError(labels.BUS_BATCH_ALREADY_OPEN)
        self._buffered = True

    def end_batch(self) -> None:
        self._buffered = False

    def commit(self) -> None:
        self._check(BROADCAST_ID, self.packetHandler.action(self.portHandler, BROADCAST_ID))

    def close(self) -> None:
        self.portHandler.closePort()
        log.info(labels.BUS_CLOSED)
