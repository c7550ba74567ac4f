import pytest

from simulator.core.load_sensor import LoadSensor
from simulator.core.mover import DISPATCHED, EN_ROUTE
from simulator.core.requests import CabinRequest, HallwayRequest
from simulator.core.sensor import Direction, MotionState
from simulator.infrastructure.message_broker import REQUEST_SERVICED_TOPIC, STATUS_TOPIC


def published(broker, topic):
    return [b['message'] for b in broker.drain_broadcasts() if b['topic'] == topic]


def test_hall_call_in_travel_direction_is_picked_up_en_route(env, mover, ledger, sensor, event_log, run_process):
    ledger.add_hallway(HallwayRequest(3, Direction.UP))

    run_process(mover.travel_to(5))

    assert not ledger.has_hallway()
    assert ledger.visited_floors == {3, 5}
    assert sensor.current_floor == 5
    assert sensor.motion is MotionState.STOPPED
    assert sensor.direction is Direction.UP

    messages = event_log.messages
    serviced = messages.index("Floor 3 UP request serviced.")
    assert messages.index("Passed floor 3.") < serviced < messages.index("Passed floor 4.")
    assert messages[-1] == "Stopped at floor 5"
    # 4 floor steps + one en-route service + normal dwell
    assert env.now == pytest.approx(4 * 1.0 + 0.5 + 2.0)


def test_duplicate_hall_calls_collapse_into_one_service(env, mover, ledger, sensor, event_log, broker, run_process):
    sensor.current_floor = 6
    ledger.add_hallway(HallwayRequest(4, Direction.DOWN))
    ledger.add_hallway(HallwayRequest(4, Direction.DOWN))
    ledger.add_hallway(HallwayRequest(2, Direction.UP))
    before = len(ledger.hallway_requests)

    run_process(mover.travel_to(1))

    assert before - len(ledger.hallway_requests) == 2
    assert event_log.count("request serviced") == 1
    serviced = published(broker, REQUEST_SERVICED_TOPIC)
    assert [(s['floor'], s['mode']) for s in serviced] == [(4, EN_ROUTE), (4, EN_ROUTE)]


def test_hall_call_in_other_direction_is_left_and_extends_dwell(env, mover, ledger, event_log, run_process):
    ledger.add_hallway(HallwayRequest(3, Direction.DOWN))

    run_process(mover.travel_to(5))

    assert [r.token for r in ledger.hallway_requests] == ["3D"]
    assert event_log.count("request serviced") == 0
    # Hall call left behind the cabin: extended dwell instead of the normal one
    assert env.now == pytest.approx(4 * 1.0 + 4.0)


def test_hall_call_above_extends_dwell_when_going_down(env, mover, ledger, sensor, run_process):
    sensor.current_floor = 5
    ledger.add_hallway(HallwayRequest(7, Direction.DOWN))

    run_process(mover.travel_to(3))

    assert env.now == pytest.approx(2 * 1.0 + 4.0)


def test_hall_call_at_target_floor_is_not_taken_on_arrival(mover, ledger, run_process):
    ledger.add_hallway(HallwayRequest(5, Direction.UP))

    run_process(mover.travel_to(5))

    assert [r.token for r in ledger.hallway_requests] == ["5U"]


def test_travel_to_current_floor_just_stops(env, mover, sensor, ledger, event_log, run_process):
    sensor.current_floor = 2

    run_process(mover.travel_to(2))

    assert sensor.direction is Direction.NONE
    assert sensor.motion is MotionState.STOPPED
    assert ledger.visited_floors == {2}
    assert event_log.messages == ["Stopped at floor 2"]
    assert env.now == pytest.approx(2.0)


def test_floor_changes_by_one_per_step(mover, broker, sensor, run_process):
    sensor.current_floor = 7

    run_process(mover.travel_to(2))

    floors = [m['current_floor'] for m in published(broker, STATUS_TOPIC)]
    assert floors[0] == 7 and floors[-1] == 2
    assert all(abs(b - a) <= 1 for a, b in zip(floors, floors[1:]))


def test_moving_status_always_carries_a_direction(mover, broker, run_process):
    run_process(mover.travel_to(4))

    statuses = published(broker, STATUS_TOPIC)
    assert statuses[0]['motion'] == "MOVING"
    assert statuses[-1]['motion'] == "STOPPED"
    assert all(s['direction'] != "NO_DIRECTION" for s in statuses if s['motion'] == "MOVING")


def test_overweight_trip_serves_car_calls_not_hall_calls(mover, ledger, event_log, run_process):
    ledger.add_cabin(CabinRequest(2))
    ledger.add_hallway(HallwayRequest(2, Direction.UP))
    ledger.add_hallway(HallwayRequest(3, Direction.UP))

    run_process(mover.travel_to(4, overweight=True))

    assert not ledger.has_cabin()
    assert [r.token for r in ledger.hallway_requests] == ["2U", "3U"]
    assert event_log.count("Inside request for floor 2 serviced (overweight).") == 1
    assert ledger.visited_floors == {2, 4}


def test_normal_trip_ignores_car_calls_en_route(mover, ledger, run_process):
    ledger.add_cabin(CabinRequest(3))

    run_process(mover.travel_to(5, overweight=False))

    assert [r.floor for r in ledger.cabin_requests] == [3]
    assert ledger.visited_floors == {5}


def test_load_is_read_once_per_trip(env, mover, ledger, sensor, run_process):
    ledger.add_cabin(CabinRequest(3))
    ledger.add_hallway(HallwayRequest(4, Direction.UP))
    # Cabin becomes overweight while passing floor 2
    LoadSensor(env, sensor, [(1.5, True)])

    run_process(mover.travel_to(5))

    assert sensor.overweight is True
    assert not ledger.has_hallway()
    assert [r.floor for r in ledger.cabin_requests] == [3]


def test_dispatched_request_reported_on_arrival(env, mover, broker, run_process):
    request = CabinRequest(3, submitted_at=0.0)

    run_process(mover.travel_to(3, request=request))

    serviced = published(broker, REQUEST_SERVICED_TOPIC)
    assert len(serviced) == 1
    assert serviced[0]['mode'] == DISPATCHED
    assert serviced[0]['kind'] == "cabin"
    assert serviced[0]['wait_time'] == pytest.approx(2.0)


def test_invalid_target_floor(mover, run_process):
    with pytest.raises(ValueError):
        run_process(mover.travel_to(0))
