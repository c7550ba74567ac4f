"""
Direction Biased Strategy

Keeps the cabin going the way it is already going and serves the nearest
hall call in that direction.
"""

from typing import Sequence, Tuple, TypeVar

from simulator.core.requests import CabinRequest, HallwayRequest
from simulator.core.sensor import Direction
from simulator.exceptions import DispatchInvariantError
from ..interfaces.selection_strategy import ISelectionStrategy

R = TypeVar('R', HallwayRequest, CabinRequest)


class DirectionBiasedStrategy(ISelectionStrategy):
    """
    Direction-biased nearest request strategy

    Selection Logic:
    - Hallway: candidates are the hall calls whose direction equals the
      committed direction (all of them while the cabin has none). If there
      are no candidates the direction is reversed once and the search is
      repeated. Every hall call is UP or DOWN, so the second pass always
      finds one in a non-empty collection.
    - Cabin: every car call is a candidate.
    - Among candidates the nearest floor wins; on equal distance the
      request submitted first wins.

    Usage:
        strategy = DirectionBiasedStrategy()
        request, direction = strategy.select_hallway(3, Direction.UP, ledger.hallway_requests)
    """

    MAX_REVERSALS = 1

    def select_hallway(
        self,
        current_floor: int,
        direction: Direction,
        requests: Sequence[HallwayRequest]
    ) -> Tuple[HallwayRequest, Direction]:
        if not requests:
            raise DispatchInvariantError("Hallway selection entered with no pending hallway requests")

        committed = direction
        for _ in range(self.MAX_REVERSALS + 1):
            candidates = [
                r for r in requests
                if committed is Direction.NONE or r.direction == committed
            ]
            if candidates:
                return self._nearest(current_floor, candidates), committed
            committed = committed.opposite()

        raise DispatchInvariantError(
            f"No hallway request matches {direction.value} or its reverse "
            f"among {[r.token for r in requests]}"
        )

    def select_cabin(self, current_floor: int, requests: Sequence[CabinRequest]) -> CabinRequest:
        if not requests:
            raise DispatchInvariantError("Cabin selection entered with no pending cabin requests")
        return self._nearest(current_floor, requests)

    @staticmethod
    def _nearest(current_floor: int, requests: Sequence[R]) -> R:
        # min() keeps the first of equally distant requests
        return min(requests, key=lambda r: abs(r.floor - current_floor))

    def get_strategy_name(self) -> str:
        """Return strategy name"""
        return "Direction Biased (Nearest Request)"
