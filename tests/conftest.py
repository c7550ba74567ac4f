"""
Shared fixtures

Timings are kept short and distinct so tests can reason about simulated
time: one floor step = 1 s, en-route service = 0.5 s, dwell = 2 s,
extended dwell = 4 s, overweight settle = 3 s.
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
import simpy

from config.simulation import TimingConfig
from controller.dispatcher import Dispatcher
from simulator.core.requests import RequestLedger
from simulator.core.sensor import ElevatorSensor
from simulator.core.mover import Mover
from simulator.infrastructure.event_log import EventRecorder, MemoryEventLog
from simulator.infrastructure.message_broker import MessageBroker


@pytest.fixture
def env():
    return simpy.Environment()


@pytest.fixture
def event_log():
    return MemoryEventLog()


@pytest.fixture
def broker(env):
    return MessageBroker(env)


@pytest.fixture
def timing():
    return TimingConfig(
        floor_travel_time=1.0,
        service_time=0.5,
        dwell_time=2.0,
        extended_dwell_time=4.0,
        overweight_settle_time=3.0,
    )


@pytest.fixture
def dispatcher(env, event_log, timing, broker):
    return Dispatcher(env, event_log, timing=timing, broker=broker, echo=False)


@pytest.fixture
def sensor():
    return ElevatorSensor()


@pytest.fixture
def ledger():
    return RequestLedger()


@pytest.fixture
def mover(env, sensor, ledger, timing, event_log, broker):
    return Mover(env, sensor, ledger, timing, EventRecorder(env, event_log, "Mover", echo=False), broker)


@pytest.fixture
def run_process(env):
    """Run a SimPy generator to completion and return the process"""
    def _run(generator):
        process = env.process(generator)
        env.run(until=process)
        return process
    return _run
