"""
Load sensor

Writes the overweight flag of the cabin sensor from outside the dispatcher,
replaying a list of readings over simulated time.
"""

from typing import Iterable, List, Optional, Tuple

import simpy

from .entity import Entity
from .sensor import ElevatorSensor

OVERWEIGHT = "OVERWEIGHT"
NORMAL = "NORMAL"


class LoadSensor(Entity):
    """
    Replays load readings against an ElevatorSensor.

    Each reading is (delay, overweight): wait delay simulated seconds after
    the previous reading, then set the flag. A zero delay is applied as soon
    as the process starts, before any later-started process runs.

    Usage:
        # Cabin overweight for the next 10 seconds
        LoadSensor(env, sensor, [(0, True), (10, False)])

        # Same, extendable while it lasts
        load_sensor = LoadSensor(env, sensor, [])
        load_sensor.hold_overweight(10)
    """

    def __init__(self, env: simpy.Environment, sensor: ElevatorSensor,
                 readings: Iterable[Tuple[float, bool]], name: Optional[str] = None):
        self.sensor = sensor
        self.readings: List[Tuple[float, bool]] = list(readings)
        for delay, _ in self.readings:
            if delay < 0:
                raise ValueError("Load reading delay cannot be negative")
        self._clear_at: Optional[float] = None
        super().__init__(env, name, initial_state=OVERWEIGHT if sensor.overweight else NORMAL)

    def hold_overweight(self, duration: float):
        """
        Mark the cabin overweight now and keep it so for at least duration seconds

        Overlapping holds merge: the flag clears at the latest end time
        requested, never in the middle of a later hold.
        """
        if duration <= 0:
            raise ValueError("Overweight duration must be positive")
        clear_at = self.env.now + duration
        self.sensor.overweight = True
        self.set_state(OVERWEIGHT)
        if self._clear_at is None or clear_at > self._clear_at:
            self._clear_at = clear_at
            self.env.process(self._clear_when_due(clear_at))

    def _clear_when_due(self, clear_at: float):
        yield self.env.timeout(clear_at - self.env.now)
        # A later hold moved the clear time
        if self._clear_at != clear_at:
            return
        self._clear_at = None
        self.sensor.overweight = False
        self.set_state(NORMAL)

    def run(self):
        for delay, overweight in self.readings:
            if delay > 0:
                yield self.env.timeout(delay)
            self.sensor.overweight = overweight
            self.set_state(OVERWEIGHT if overweight else NORMAL)
