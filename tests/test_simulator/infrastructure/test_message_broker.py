import simpy
import pytest

from simulator.infrastructure.message_broker import STATUS_TOPIC, MessageBroker
from simulator.infrastructure.realtime_env import RealtimeEnvironment, create_environment


def test_publish_stamps_and_broadcasts(env, broker):
    env.run(until=3)

    message = broker.publish(STATUS_TOPIC, current_floor=2)

    assert message == {"timestamp": 3, "current_floor": 2}
    assert broker.drain_broadcasts() == [{"topic": STATUS_TOPIC, "message": message}]
    assert broker.drain_broadcasts() == []


def test_subscribers_receive_messages_published_after_subscribing(env, broker):
    received = []

    def listener():
        while True:
            message = yield broker.get("requests/added")
            received.append(message["floor"])

    env.process(listener())
    env.run(until=1)
    broker.publish("requests/added", floor=4)
    broker.publish("requests/added", floor=7)
    env.run(until=2)

    assert received == [4, 7]


def test_unsubscribed_topics_are_not_stored(broker):
    broker.publish("dispatcher/trip", target=3)
    assert "dispatcher/trip" not in broker.topics


def test_create_environment():
    assert type(create_environment(0.0)) is simpy.Environment
    realtime = create_environment(50.0)
    assert isinstance(realtime, RealtimeEnvironment)
    assert realtime.get_speed() == 50.0


def test_realtime_environment_advances_simulated_time():
    env = RealtimeEnvironment(speed_factor=1000.0)

    def ticker():
        yield env.timeout(1)

    env.run(until=env.process(ticker()))
    assert env.now == 1

    env.set_speed(0.0)
    assert env.get_speed() == 0.0
    with pytest.raises(ValueError):
        env.set_speed(-1)
    with pytest.raises(ValueError):
        RealtimeEnvironment(speed_factor=-1)
