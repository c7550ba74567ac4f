"""
Floor service requests and the request ledger

Hallway requests come from hall call buttons and carry a desired direction.
Cabin requests come from the floor buttons inside the car and carry only a
floor. Every button press is kept as its own entry, so duplicates are allowed.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from .sensor import Direction


@dataclass(frozen=True)
class HallwayRequest:
    """Hall call: floor plus desired direction ('UP' or 'DOWN')"""
    floor: int
    direction: Direction
    submitted_at: float = field(default=0.0, compare=False)

    def __post_init__(self):
        if self.floor < 1:
            raise ValueError(f"Invalid floor {self.floor}. Must be at least 1.")
        if self.direction not in (Direction.UP, Direction.DOWN):
            raise ValueError("Hallway request direction must be UP or DOWN")

    @property
    def token(self) -> str:
        return f"{self.floor}{self.direction.token}"


@dataclass(frozen=True)
class CabinRequest:
    """Car call: destination floor only"""
    floor: int
    submitted_at: float = field(default=0.0, compare=False)

    def __post_init__(self):
        if self.floor < 1:
            raise ValueError(f"Invalid floor {self.floor}. Must be at least 1.")

    @property
    def token(self) -> str:
        return str(self.floor)


class RequestLedger:
    """
    Pending hallway and cabin requests plus the floors visited this run.

    Both collections keep submission order, which is what makes
    "first submitted wins" tie-breaks possible for the selection strategy.
    """

    def __init__(self):
        self._hallway_requests: List[HallwayRequest] = []
        self._cabin_requests: List[CabinRequest] = []
        self.visited_floors: Set[int] = set()

    @property
    def hallway_requests(self) -> Tuple[HallwayRequest, ...]:
        return tuple(self._hallway_requests)

    @property
    def cabin_requests(self) -> Tuple[CabinRequest, ...]:
        return tuple(self._cabin_requests)

    def add_hallway(self, request: HallwayRequest):
        self._hallway_requests.append(request)

    def add_cabin(self, request: CabinRequest):
        self._cabin_requests.append(request)

    def has_hallway(self) -> bool:
        return bool(self._hallway_requests)

    def has_cabin(self) -> bool:
        return bool(self._cabin_requests)

    def is_empty(self) -> bool:
        return not self._hallway_requests and not self._cabin_requests

    def remove_hallway(self, request: HallwayRequest):
        """Remove one specific hallway request (the selected dispatch target)"""
        for index, pending in enumerate(self._hallway_requests):
            if pending is request:
                del self._hallway_requests[index]
                return
        raise KeyError(f"Hallway request {request.token} is not pending")

    def remove_cabin(self, request: CabinRequest):
        """Remove one specific cabin request (the selected dispatch target)"""
        for index, pending in enumerate(self._cabin_requests):
            if pending is request:
                del self._cabin_requests[index]
                return
        raise KeyError(f"Cabin request {request.token} is not pending")

    def take_hallway_at(self, floor: int, direction: Direction) -> List[HallwayRequest]:
        """
        Remove every hallway request for floor/direction.

        Several presses of the same hall button are served by a single stop.

        Returns:
            The removed requests, in submission order (empty if none matched)
        """
        taken = [r for r in self._hallway_requests if r.floor == floor and r.direction == direction]
        if taken:
            self._hallway_requests = [
                r for r in self._hallway_requests
                if not (r.floor == floor and r.direction == direction)
            ]
        return taken

    def take_cabin_at(self, floor: int) -> Optional[CabinRequest]:
        """Remove the first cabin request for floor, if any"""
        for index, pending in enumerate(self._cabin_requests):
            if pending.floor == floor:
                return self._cabin_requests.pop(index)
        return None

    def has_opposite_hallway(self, floor: int, direction: Direction) -> bool:
        """
        Check for hall calls behind the cabin.

        True when a hallway request lies below floor while travelling UP, or
        above floor while travelling DOWN.
        """
        if direction is Direction.UP:
            return any(r.floor < floor for r in self._hallway_requests)
        if direction is Direction.DOWN:
            return any(r.floor > floor for r in self._hallway_requests)
        return False

    def mark_visited(self, floor: int):
        self.visited_floors.add(floor)

    def __len__(self):
        return len(self._hallway_requests) + len(self._cabin_requests)
