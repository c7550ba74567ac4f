from typing import Optional, Set

import simpy

from config.simulation import TimingConfig
from simulator.core.mover import Mover
from simulator.core.requests import CabinRequest, HallwayRequest, RequestLedger
from simulator.core.sensor import Direction, ElevatorSensor
from simulator.infrastructure.event_log import EventRecorder
from simulator.infrastructure.message_broker import (
    COMPLETED_TOPIC,
    REQUEST_ADDED_TOPIC,
    TRIP_TOPIC,
    MessageBroker,
)
from simulator.interfaces.event_sink import IEventSink
from .algorithms.direction_biased import DirectionBiasedStrategy
from .interfaces.selection_strategy import ISelectionStrategy


class Dispatcher:
    """
    Single-cabin dispatcher

    Owns the cabin sensor, the request ledger and the mover. Requests are
    queued with add_hallway_request() / add_cabin_request(); run() then
    serves trips until both collections are empty.

    One dispatch cycle:
    - overweight: travel to the nearest car call, or wait for the load to
      settle when there is none (hall calls are not served)
    - otherwise: hall calls first (via the selection strategy), then car calls

    The overweight flag is read once per cycle and holds for the whole trip.
    """

    def __init__(self, env: simpy.Environment, event_sink: IEventSink,
                 timing: Optional[TimingConfig] = None,
                 strategy: Optional[ISelectionStrategy] = None,
                 broker: Optional[MessageBroker] = None,
                 home_floor: int = 1,
                 name: str = "Dispatcher",
                 echo: bool = True):
        """
        Args:
            env: SimPy environment driving simulated time
            event_sink: Receives human-readable event lines
            timing: Simulated durations (defaults to TimingConfig())
            strategy: Next-target selection (defaults to DirectionBiasedStrategy)
            broker: Status publishing (a private broker is created if omitted)
            home_floor: Floor the cabin starts at
            name: Name shown in console lines
            echo: Print events on the console as well
        """
        self.env = env
        self.name = name
        self.timing = timing or TimingConfig()
        self.strategy = strategy or DirectionBiasedStrategy()
        self.broker = broker or MessageBroker(env)

        self.sensor = ElevatorSensor(current_floor=home_floor)
        self.ledger = RequestLedger()
        self.recorder = EventRecorder(env, event_sink, name, echo=echo)
        self.mover = Mover(env, self.sensor, self.ledger, self.timing,
                           EventRecorder(env, event_sink, "Mover", echo=echo), self.broker)

        self._process: Optional[simpy.Process] = None
        self.trip_count = 0

        if echo:
            print(f"{self.env.now:.2f} [{self.name}] Using strategy: {self.strategy.get_strategy_name()}")

    # --- Request intake ---

    def add_hallway_request(self, floor: int, direction: Direction) -> HallwayRequest:
        """
        Queue a hall call

        Raises:
            ValueError: If floor is below 1 or direction is not UP/DOWN
        """
        request = HallwayRequest(floor, direction, submitted_at=self.env.now)
        self.ledger.add_hallway(request)
        self.recorder.record(f"Outside floor {floor} {direction.value} request added.")
        self.broker.publish(REQUEST_ADDED_TOPIC, floor=floor, kind="hallway", direction=direction.value)
        return request

    def add_cabin_request(self, floor: int) -> CabinRequest:
        """
        Queue a car call

        Raises:
            ValueError: If floor is below 1
        """
        request = CabinRequest(floor, submitted_at=self.env.now)
        self.ledger.add_cabin(request)
        self.recorder.record(f"Inside floor {floor} request added.")
        self.broker.publish(REQUEST_ADDED_TOPIC, floor=floor, kind="cabin", direction=None)
        return request

    def set_overweight(self, overweight: bool):
        """Load sensor input. Takes effect from the next dispatch cycle."""
        self.sensor.overweight = overweight

    # --- Dispatching ---

    def run(self):
        """
        Serve pending requests until none are left

        Blocks until the dispatch process has finished. Simulated time keeps
        advancing across calls.

        Raises:
            RuntimeError: If called while a dispatch process is still alive
            DispatchInvariantError: If the selection policy breaks down
        """
        if self._process is not None and self._process.is_alive:
            raise RuntimeError(f"{self.name} is already running")
        self._process = self.env.process(self._dispatch_loop())
        self.env.run(until=self._process)

    def _dispatch_loop(self):
        while not self.ledger.is_empty():
            overweight = self.sensor.overweight

            if overweight:
                if self.ledger.has_cabin():
                    request = self._take_cabin_target()
                    yield from self._trip(request, overweight)
                else:
                    self.recorder.record("Waiting for passengers to exit (overweight).")
                    yield self.env.timeout(self.timing.overweight_settle_time)
            elif self.ledger.has_hallway():
                request = self._take_hallway_target()
                yield from self._trip(request, overweight)
            else:
                request = self._take_cabin_target()
                yield from self._trip(request, overweight)

        self.recorder.record("All requests completed. Elevator stopped.")
        self.broker.publish(
            COMPLETED_TOPIC,
            current_floor=self.sensor.current_floor,
            visited_floors=sorted(self.ledger.visited_floors),
        )

    def _take_hallway_target(self) -> HallwayRequest:
        previous = self.sensor.direction
        request, direction = self.strategy.select_hallway(
            self.sensor.current_floor, previous, self.ledger.hallway_requests)
        if direction is not previous:
            self.sensor.direction = direction
            self.recorder.record(f"Direction reversed: {previous.value} -> {direction.value}.")
        self.ledger.remove_hallway(request)
        return request

    def _take_cabin_target(self) -> CabinRequest:
        request = self.strategy.select_cabin(self.sensor.current_floor, self.ledger.cabin_requests)
        self.ledger.remove_cabin(request)
        return request

    def _trip(self, request, overweight: bool):
        kind = "hallway" if isinstance(request, HallwayRequest) else "cabin"
        self.trip_count += 1
        self.recorder.record(f"Heading to floor {request.floor} for {kind} request {request.token}.")
        self.broker.publish(TRIP_TOPIC, origin=self.sensor.current_floor, target=request.floor,
                            kind=kind, overweight=overweight)
        yield from self.mover.travel_to(request.floor, overweight=overweight, request=request)

    # --- Reporting ---

    @property
    def visited_floors(self) -> Set[int]:
        """Floors the cabin stopped at or served this session (unordered)"""
        return set(self.ledger.visited_floors)

    @property
    def current_floor(self) -> int:
        return self.sensor.current_floor

    @property
    def pending_count(self) -> int:
        return len(self.ledger)
