"""Core simulation entities"""

from .entity import Entity
from .sensor import Direction, MotionState, ElevatorSensor
from .requests import HallwayRequest, CabinRequest, RequestLedger
from .mover import Mover
from .load_sensor import LoadSensor

__all__ = [
    'Entity',
    'Direction',
    'MotionState',
    'ElevatorSensor',
    'HallwayRequest',
    'CabinRequest',
    'RequestLedger',
    'Mover',
    'LoadSensor',
]
