"""
Mover

Simulates the cabin travelling floor by floor, picking up hall calls it
passes in its own direction and stopping at the target.
"""

from typing import Optional, Union

import simpy

from config.simulation import TimingConfig
from .requests import CabinRequest, HallwayRequest, RequestLedger
from .sensor import Direction, ElevatorSensor, MotionState
from ..infrastructure.event_log import EventRecorder
from ..infrastructure.message_broker import MessageBroker, REQUEST_SERVICED_TOPIC, STATUS_TOPIC

EN_ROUTE = "en_route"
DISPATCHED = "dispatched"


class Mover:
    """
    Moves the cabin one floor at a time toward a target floor.

    Before each step the current floor is checked for requests that can be
    served without a dedicated trip:
    - normal load: every hall call at this floor in the travel direction
    - overweight: one car call for this floor (hall calls are left pending)
    """

    def __init__(self, env: simpy.Environment, sensor: ElevatorSensor, ledger: RequestLedger,
                 timing: TimingConfig, recorder: EventRecorder, broker: Optional[MessageBroker] = None):
        self.env = env
        self.sensor = sensor
        self.ledger = ledger
        self.timing = timing
        self.recorder = recorder
        self.broker = broker

    def travel_to(self, target_floor: int, overweight: Optional[bool] = None,
                  request: Union[HallwayRequest, CabinRequest, None] = None):
        """
        SimPy generator: travel to target_floor and stop there.

        Args:
            target_floor: Destination floor
            overweight: Load state for the whole trip. Read from the sensor
                once when omitted; later changes of the flag do not affect a
                trip already under way.
            request: Request this trip was dispatched for (reported as
                serviced on arrival)
        """
        if target_floor < 1:
            raise ValueError(f"Invalid target floor {target_floor}")
        if overweight is None:
            overweight = self.sensor.overweight

        wait_time = self.timing.dwell_time

        if target_floor != self.sensor.current_floor:
            direction = Direction.UP if target_floor > self.sensor.current_floor else Direction.DOWN
            step = 1 if direction is Direction.UP else -1
            self.sensor.motion = MotionState.MOVING
            self.sensor.direction = direction
            self._report_status()

            while self.sensor.current_floor != target_floor:
                yield from self._service_current_floor(overweight)

                if self.timing.floor_travel_time > 0:
                    yield self.env.timeout(self.timing.floor_travel_time)
                self.sensor.current_floor += step
                self.recorder.record(f"Passed floor {self.sensor.current_floor}.")
                self._report_status()

                # Hall calls behind the cabin: give riders time before reversing
                if self.ledger.has_opposite_hallway(self.sensor.current_floor, direction):
                    wait_time = max(wait_time, self.timing.extended_dwell_time)

        self.sensor.motion = MotionState.STOPPED
        self.ledger.mark_visited(self.sensor.current_floor)
        self.recorder.record(f"Stopped at floor {self.sensor.current_floor}")
        self._report_status()
        if request is not None:
            self.report_serviced(request, DISPATCHED)

        yield self.env.timeout(wait_time)

    def _service_current_floor(self, overweight: bool):
        floor = self.sensor.current_floor

        if not overweight:
            served = self.ledger.take_hallway_at(floor, self.sensor.direction)
            if served:
                self.ledger.mark_visited(floor)
                self.recorder.record(f"Floor {floor} {self.sensor.direction.value} request serviced.")
                for request in served:
                    self.report_serviced(request, EN_ROUTE)
                yield self.env.timeout(self.timing.service_time)
        else:
            cabin_request = self.ledger.take_cabin_at(floor)
            if cabin_request is not None:
                self.ledger.mark_visited(floor)
                self.recorder.record(f"Inside request for floor {floor} serviced (overweight).")
                self.report_serviced(cabin_request, EN_ROUTE)
                yield self.env.timeout(self.timing.service_time)

    def report_serviced(self, request: Union[HallwayRequest, CabinRequest], mode: str):
        """Publish a serviced request with its waiting time"""
        if self.broker is None:
            return
        if isinstance(request, HallwayRequest):
            kind, direction = "hallway", request.direction.value
        else:
            kind, direction = "cabin", None
        self.broker.publish(
            REQUEST_SERVICED_TOPIC,
            floor=request.floor,
            kind=kind,
            direction=direction,
            mode=mode,
            wait_time=self.env.now - request.submitted_at,
        )

    def _report_status(self):
        if self.broker is not None:
            self.broker.publish(STATUS_TOPIC, **self.sensor.to_dict())
