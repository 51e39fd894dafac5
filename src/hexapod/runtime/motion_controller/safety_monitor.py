"""
Periodic battery voltage check.

Running a LiPo below its cutoff damages it, so a low sample stops the robot
without the sit-down choreography.
"""

from hexapod import labels
from hexapod.configuration import GaitParameters
from hexapod.exceptions import LowVoltageError
from hexapod.hardware.actuator_bus import Servo
from hexapod.logger import Logger

log = Logger().setup_logger('Safety monitor')


class SafetyMonitor:
    """Samples one servo's supply voltage every ``check_ticks`` control ticks.

    The first tick always samples. A failed read raises ``ActuatorBusError``
    and is never retried here.
    """

    def __init__(self, servo: Servo, minimum_voltage: float, check_ticks: int):
        self._servo = servo
        self.minimum_voltage = minimum_voltage
        self._check_ticks = check_ticks
        self._ticks_until_check = 0
        self.last_voltage: float | None = None

    @classmethod
    def from_parameters(cls, servo: Servo, parameters: GaitParameters) -> 'SafetyMonitor':
        return cls(servo, parameters.minimum_voltage, parameters.voltage_check_ticks)

    def tick(self) -> float | None:
        """Sample the voltage if the interval has elapsed.

        Returns:
            The sampled voltage, or None when no sample was due.

        Raises:
            LowVoltageError: the sample is below the cutoff.
        """
        if self._ticks_until_check > 0:
            self._ticks_until_check -= 1
            return None

        self._ticks_until_check = self._check_ticks - 1
        return self.check()

    def check(self) -> float:
        voltage = self._servo.voltage()
        self.last_voltage = voltage
        log.info(labels.SAFETY_VOLTAGE.format(voltage))

        if voltage < self.minimum_voltage:
            raise LowVoltageError(
                voltage, self.minimum_voltage, labels.SAFETY_LOW_VOLTAGE.format(voltage, self.minimum_voltage)
            )

        return voltage
