"""
Elevator Simulator - single-cabin dispatch simulation

This package provides the cabin state, request ledger, floor-by-floor mover
and the infrastructure (event logs, message broker, environments) used by
the dispatcher.
"""

__version__ = "0.1.0"

from .core.sensor import Direction, MotionState, ElevatorSensor
from .core.requests import HallwayRequest, CabinRequest, RequestLedger
from .core.mover import Mover
from .core.load_sensor import LoadSensor
from .core.entity import Entity

from .infrastructure.message_broker import MessageBroker
from .infrastructure.realtime_env import RealtimeEnvironment
from .infrastructure.event_log import EventRecorder, FileEventLog, MemoryEventLog

from .exceptions import DispatchInvariantError, InvalidRequestError

__all__ = [
    'Direction',
    'MotionState',
    'ElevatorSensor',
    'HallwayRequest',
    'CabinRequest',
    'RequestLedger',
    'Mover',
    'LoadSensor',
    'Entity',
    'MessageBroker',
    'RealtimeEnvironment',
    'EventRecorder',
    'FileEventLog',
    'MemoryEventLog',
    'DispatchInvariantError',
    'InvalidRequestError',
]
