"""
Elevator sensor state

Holds what the cabin currently knows about itself: floor, committed travel
direction, motion state and the overweight flag reported by the load sensor.
"""

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Travel direction of the cabin or desired direction of a hall call"""
    UP = "UP"
    DOWN = "DOWN"
    NONE = "NO_DIRECTION"

    def opposite(self) -> "Direction":
        """
        Reverse a committed direction.

        NONE has no opposite and is returned unchanged.
        """
        if self is Direction.UP:
            return Direction.DOWN
        if self is Direction.DOWN:
            return Direction.UP
        return Direction.NONE

    @property
    def token(self) -> str:
        """One-letter form used by hall call tokens ('U' / 'D')"""
        return {"UP": "U", "DOWN": "D"}.get(self.value, "")

    @classmethod
    def from_token(cls, token: str) -> "Direction":
        """Convert 'U' / 'D' (any case) to a direction"""
        token = token.upper()
        if token == "U":
            return cls.UP
        if token == "D":
            return cls.DOWN
        raise ValueError(f"Unknown direction token '{token}'. Must be 'U' or 'D'")


class MotionState(Enum):
    STOPPED = "STOPPED"
    MOVING = "MOVING"


@dataclass
class ElevatorSensor:
    """
    Live state of a single cabin.

    Only the dispatcher (and the mover working on its behalf) changes
    current_floor, direction and motion. overweight is written by the load
    sensor.
    """
    current_floor: int = 1
    direction: Direction = Direction.NONE
    motion: MotionState = MotionState.STOPPED
    overweight: bool = False

    def __post_init__(self):
        if self.current_floor < 1:
            raise ValueError("current_floor must be at least 1")

    def to_dict(self) -> dict:
        """Status snapshot for publishing"""
        return {
            "current_floor": self.current_floor,
            "direction": self.direction.value,
            "motion": self.motion.value,
            "overweight": self.overweight,
        }
