import pytest

from conftest import ALL_SERVO_IDS
from hexapod.hardware.actuator_bus import ActuatorBusError
from hexapod.motion.inverse_kinematics import JointAngles, Vector3, leg_solver
from hexapod.runtime.controller_event import ControllerEvent
from hexapod.runtime.motion_controller.state import GaitStateName


def _tick_spans(calls):
    """Split the call log into (begin, end, commit) index triples."""
    spans = []
    begin = end = None
    for index, call in enumerate(calls):
        if call[0] == "begin_batch":
            begin = index
        elif call[0] == "end_batch":
            end = index
        elif call[0] == "commit":
            spans.append((begin, end, index))
    return spans


def test_every_tick_commits_one_batch_of_moves(standing_hexapod, bus):
    standing_hexapod.gait.feet = [foot.add(Vector3(30, 0, 0)) for foot in standing_hexapod.gait.feet]
    walk = ControllerEvent(left_stick_y=-127)

    for _ in range(15):
        standing_hexapod.tick(walk)

    assert len(bus.batches) == 15
    assert all(len(batch) == 24 for batch in bus.batches)
    assert all(call[3] for call in bus.calls if call[0] == "move_to")

    spans = _tick_spans(bus.calls)
    assert len(spans) == 15
    for begin, end, commit in spans:
        assert begin < end < commit
        between = [call[0] for call in bus.calls[begin + 1:end]]
        assert set(between) == {"move_to"}
        assert "commit" not in between


def test_run_batched_commits_once(hexapod, bus):
    hexapod.run_batched(lambda: hexapod.legs[0].coxa.move_to(10))

    assert [call[0] for call in bus.calls] == ["begin_batch", "move_to", "end_batch", "commit"]
    assert bus.positions[11] == 10


def test_run_batched_does_not_commit_when_callback_fails(hexapod, bus):
    def fail():
        hexapod.legs[0].coxa.move_to(10)
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        hexapod.run_batched(fail)

    assert [call[0] for call in bus.calls] == ["begin_batch", "move_to", "end_batch"]
    assert 11 not in bus.positions


def test_unreachable_leg_is_skipped_and_others_commit(standing_hexapod, bus, neutral):
    standing_hexapod.gait.feet[2] = Vector3(1000, -80, 0)

    assert standing_hexapod.tick(neutral) is True

    moved = {servo_id for servo_id, _ in bus.batches[-1]}
    assert moved == set(ALL_SERVO_IDS) - {31, 32, 33, 34}


def test_transport_failure_on_one_leg_does_not_stop_the_tick(standing_hexapod, bus, neutral):
    bus.fail_ids = {32}

    assert standing_hexapod.tick(neutral) is True

    moved = {servo_id for servo_id, _ in bus.batches[-1]}
    assert 31 in moved
    assert 33 not in moved
    assert {41, 42, 43, 44} <= moved
    assert bus.calls[-1] == ("commit",)


def test_uninitialized_legs_are_not_commanded(hexapod, bus, neutral):
    hexapod.move_feet(hexapod.gait.feet)

    assert bus.batches == [[]]


def test_halt_tick_does_not_move_feet(standing_hexapod, bus, neutral):
    standing_hexapod.gait.set_state(GaitStateName.HALT)
    batches = len(bus.batches)

    assert standing_hexapod.tick(neutral) is False
    assert len(bus.batches) == batches


def test_shutdown_parks_then_relaxes(hexapod, bus):
    waits = []

    hexapod.shutdown(sleep=waits.append)

    assert waits == [2.0]
    assert len(bus.batches) == 1
    assert len(bus.batches[0]) == 24
    for base in (10, 20, 30, 40, 50, 60):
        assert bus.positions[base + 1] == 0
        assert bus.positions[base + 2] == -60
        assert bus.positions[base + 3] == 60
        assert bus.positions[base + 4] == 60
    assert all(bus.speeds[servo_id] == 128 for servo_id in ALL_SERVO_IDS)
    assert not any(bus.torque[servo_id] for servo_id in ALL_SERVO_IDS)


def test_relax_tries_every_servo(hexapod, bus):
    bus.fail_ids = {11, 42}

    hexapod.relax()

    assert set(bus.torque) == set(ALL_SERVO_IDS) - {11, 42}
    assert not any(bus.torque.values())


def test_main_loop_runs_until_halt(hexapod, bus):
    class Events:
        def poll(self):
            return ControllerEvent(start=True)

    waits = []

    exit_code = hexapod.main_loop(Events(), sleep=waits.append, clock=lambda: 0.0)

    assert exit_code == 0
    assert hexapod.gait.current_state == GaitStateName.HALT
    assert hexapod.ticks == 3
    assert waits == [pytest.approx(0.01)] * 2
    assert bus.calls[0] == ("set_status_return_level", 11, 1, False)
    assert all(bus.status_levels[servo_id] == 2 for servo_id in ALL_SERVO_IDS)


def test_main_loop_does_not_sleep_after_overrun(hexapod, bus):
    class Events:
        def poll(self):
            return ControllerEvent(start=True)

    times = iter([0.0, 0.5, 1.0, 1.5, 2.0, 2.5])
    waits = []

    hexapod.main_loop(Events(), sleep=waits.append, clock=lambda: next(times))

    assert waits == []


def test_main_loop_relaxes_servos_on_bus_failure(hexapod, bus, neutral):
    class Events:
        def poll(self):
            return neutral

    bus.voltage_error = True

    with pytest.raises(ActuatorBusError):
        hexapod.main_loop(Events(), sleep=lambda _: None, clock=lambda: 0.0)

    assert not any(bus.torque[servo_id] for servo_id in ALL_SERVO_IDS)


def test_leg_past_servo_travel_is_left_out_of_the_batch(standing_hexapod, bus, neutral, monkeypatch):
    solve = leg_solver.solve

    def tibia_too_far_on_front_right(target, geometry, leg_name):
        angles = solve(target, geometry, leg_name)
        if leg_name == "FR":
            return JointAngles(angles.coxa, angles.femur, 152.0, angles.tarsus)
        return angles

    monkeypatch.setattr(leg_solver, "solve", tibia_too_far_on_front_right)

    assert standing_hexapod.tick(neutral) is True

    moved = {servo_id for servo_id, _ in bus.batches[-1]}
    assert moved == set(ALL_SERVO_IDS) - {21, 22, 23, 24}
    assert standing_hexapod.legs[1].last_angles is None
