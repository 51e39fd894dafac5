import json

import pytest

from hexapod.configuration import DEFAULT_LEGS, GaitParameters, LegName
from hexapod.configuration import _gait_parameters
from hexapod.exceptions import ConfigurationError
from hexapod.runtime.motion_controller.hexapod import Hexapod


def test_defaults_match_the_tuned_gait():
    parameters = GaitParameters()

    assert parameters.leg_set_size == 2
    assert parameters.init_order == [0, 3, 1, 4, 2, 5]
    assert parameters.foot_down == -80.0
    assert parameters.min_step_distance == 20.0
    assert parameters.minimum_voltage == 9.6
    assert parameters.init_interval_ticks == 25
    assert parameters.voltage_check_ticks == 500


@pytest.mark.parametrize(
    "leg_set_size, expected",
    [
        (1, [[0], [1], [2], [3], [4], [5]]),
        (2, [[0, 3], [1, 4], [2, 5]]),
        (3, [[0, 2, 4], [1, 3, 5]]),
    ],
)
def test_leg_sets_by_size(leg_set_size, expected):
    assert GaitParameters(leg_set_size=leg_set_size).leg_sets() == expected


@pytest.mark.parametrize("leg_set_size", [0, 4, 6])
def test_invalid_leg_set_size_is_rejected(leg_set_size):
    with pytest.raises(ConfigurationError):
        GaitParameters(leg_set_size=leg_set_size)


@pytest.mark.parametrize("init_order", [[0, 1, 2], [0, 0, 1, 2, 3, 4], [1, 2, 3, 4, 5, 6]])
def test_init_order_must_cover_every_leg_once(init_order):
    with pytest.raises(ConfigurationError):
        GaitParameters(init_order=init_order)


@pytest.mark.parametrize("name", ["tick_period", "init_interval", "step_down_ticks", "foot_step"])
def test_non_positive_timing_is_rejected(name):
    with pytest.raises(ConfigurationError):
        GaitParameters(**{name: 0})


def test_from_json_overrides_only_given_keys(tmp_path):
    path = tmp_path / "gait_parameters.json"
    path.write_text(json.dumps({"leg_set_size": 3, "foot_down": -90.0, "tick_period": 0.05}))

    parameters = GaitParameters.from_json(path)

    assert parameters.leg_set_size == 3
    assert parameters.foot_down == -90.0
    assert parameters.step_radius == 220.0
    assert parameters.init_interval_ticks == 5


def test_from_json_rejects_unknown_keys(tmp_path):
    path = tmp_path / "gait_parameters.json"
    path.write_text(json.dumps({"walk_speed": 3}))

    with pytest.raises(ConfigurationError):
        GaitParameters.from_json(path)


def test_from_json_rejects_non_objects(tmp_path):
    path = tmp_path / "gait_parameters.json"
    path.write_text("[1, 2, 3]")

    with pytest.raises(ConfigurationError):
        GaitParameters.from_json(path)


def test_from_json_rejects_malformed_json(tmp_path):
    path = tmp_path / "gait_parameters.json"
    path.write_text("{not json")

    with pytest.raises(ConfigurationError):
        GaitParameters.from_json(path)


def test_missing_explicit_file_is_an_error(tmp_path):
    with pytest.raises(ConfigurationError):
        GaitParameters.from_json(tmp_path / "missing.json")


def test_missing_default_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.setattr(_gait_parameters, "DEFAULT_PARAMETERS_PATH", tmp_path / "absent.json")

    assert GaitParameters.from_json() == GaitParameters()


def test_default_leg_layout():
    assert [leg.name for leg in DEFAULT_LEGS] == [
        LegName.FRONT_LEFT,
        LegName.FRONT_RIGHT,
        LegName.MID_RIGHT,
        LegName.BACK_RIGHT,
        LegName.BACK_LEFT,
        LegName.MID_LEFT,
    ]
    assert [leg.heading for leg in DEFAULT_LEGS] == [-120, -60, 0, 60, 120, 180]
    assert DEFAULT_LEGS[3].servo_ids() == (41, 42, 43, 44)


def test_hexapod_requires_six_legs(bus):
    with pytest.raises(ConfigurationError):
        Hexapod(bus, GaitParameters(), DEFAULT_LEGS[:4])


@pytest.mark.parametrize(
    "overrides",
    [
        {"tick_period": "x"},
        {"step_up_ticks": 2.5},
        {"leg_set_size": True},
        {"init_order": "031425"},
        {"init_order": [0, 3, 1, 4, 2, None]},
        {"minimum_voltage": None},
    ],
)
def test_values_of_the_wrong_type_are_configuration_errors(tmp_path, overrides):
    path = tmp_path / "gait_parameters.json"
    path.write_text(json.dumps(overrides))

    with pytest.raises(ConfigurationError):
        GaitParameters.from_json(path)


def test_integer_values_are_accepted_for_float_parameters():
    parameters = GaitParameters(foot_down=-90, tick_period=1)

    assert parameters.foot_down == -90
    assert parameters.init_interval_ticks == 1
