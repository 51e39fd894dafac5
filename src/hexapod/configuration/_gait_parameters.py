from dataclasses import dataclass, field, fields
import json
import os
from pathlib import Path
from typing import List, Optional

from hexapod import labels
from hexapod.constants import LEG_COUNT
from hexapod.exceptions import ConfigurationError
from hexapod.logger import Logger

log = Logger().setup_logger('Configuration')

DEFAULT_PARAMETERS_PATH: Path = Path.home() / 'hexapod' / 'configuration' / 'gait_parameters.json'

_LEG_SETS = {
    1: [[0], [1], [2], [3], [4], [5]],
    2: [[0, 3], [1, 4], [2, 5]],
    3: [[0, 2, 4], [1, 3, 5]],
}


def _is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return _is_integer(value) or isinstance(value, float)


@dataclass
class GaitParameters:
    """Tuning parameters for the gait loop.

    Distances are in mm, heights are on the world Y axis, durations in
    seconds and speeds per tick.
    """

    # Timing
    tick_period: float = 0.01
    init_interval: float = 0.25
    voltage_check_interval: float = 5.0

    # Leg grouping
    leg_set_size: int = 2
    init_order: List[int] = field(default_factory=lambda: [0, 3, 1, 4, 2, 5])

    # Body motion
    body_step: float = 2.0
    body_raise_step: float = 2.0
    rotation_speed: float = 0.5

    # Foot heights
    foot_down: float = -80.0
    foot_home_height: float = -43.0
    base_foot_up: float = -40.0
    foot_up_trigger_range: float = 50.0
    foot_step: float = 2.0

    # Stepping
    step_radius: float = 220.0
    min_step_distance: float = 20.0
    step_up_ticks: int = 2
    step_over_ticks: int = 2
    step_down_ticks: int = 3

    # Servos
    init_moving_speed: int = 512

    # Safety
    minimum_voltage: float = 9.6

    # Derived (computed from above)
    init_interval_ticks: int = field(default=0, init=False)
    voltage_check_ticks: int = field(default=0, init=False)

    def __post_init__(self):
        self.validate()
        self._calculate_additional_parameters()

    @classmethod
    def from_json(cls, json_path: Optional[Path | str] = None) -> 'GaitParameters':
        """Load parameters from a JSON object, falling back to defaults for missing keys.

        Without an explicit path the default location is tried, and a missing
        file there just means the defaults are used.
        """
        if json_path is None:
            if not os.path.exists(DEFAULT_PARAMETERS_PATH):
                log.info(labels.CONFIG_DEFAULTS.format(DEFAULT_PARAMETERS_PATH))
                return cls()
            json_path = DEFAULT_PARAMETERS_PATH

        if not os.path.exists(json_path):
            raise ConfigurationError(labels.CONFIG_NOT_FOUND.format(json_path))

        with open(json_path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(labels.CONFIG_MALFORMED.format(json_path, e)) from e

        if not isinstance(data, dict):
            raise ConfigurationError(labels.CONFIG_MALFORMED.format(json_path, type(data).__name__))

        known = {f.name for f in fields(cls) if f.init}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(labels.CONFIG_UNKNOWN_KEYS.format(', '.join(unknown)))

        parameters = cls(**data)
        log.info(labels.CONFIG_LOADED.format(json_path))
        return parameters

    def validate(self) -> None:
        self._check_types()

        if self.leg_set_size not in _LEG_SETS:
            raise ConfigurationError(labels.CONFIG_INVALID_LEG_SET_SIZE.format(self.leg_set_size))

        if sorted(self.init_order) != list(range(LEG_COUNT)):
            raise ConfigurationError(labels.CONFIG_INVALID_INIT_ORDER.format(self.init_order, LEG_COUNT - 1))

        for name in (
            'tick_period',
            'init_interval',
            'voltage_check_interval',
            'step_up_ticks',
            'step_over_ticks',
            'step_down_ticks',
            'foot_step',
        ):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigurationError(labels.CONFIG_NOT_POSITIVE.format(name, value))

    def _check_types(self) -> None:
        """Reject values of the wrong JSON type before they reach any comparison."""
        for f in fields(self):
            if not f.init:
                continue

            value = getattr(self, f.name)
            if f.type is float:
                valid = _is_number(value)
                expected = 'a number'
            elif f.type is int:
                valid = _is_integer(value)
                expected = 'an integer'
            else:
                valid = isinstance(value, list) and all(_is_integer(item) for item in value)
                expected = 'a list of integers'

            if not valid:
                raise ConfigurationError(labels.CONFIG_INVALID_TYPE.format(f.name, expected, value))

    def _calculate_additional_parameters(self) -> None:
        """Convert durations to whole ticks of the control loop."""
        self.init_interval_ticks = max(1, round(self.init_interval / self.tick_period))
        self.voltage_check_ticks = max(1, round(self.voltage_check_interval / self.tick_period))

    def leg_sets(self) -> List[List[int]]:
        """Groups of leg indices which step together."""
        return [list(group) for group in _LEG_SETS[self.leg_set_size]]
