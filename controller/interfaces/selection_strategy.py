"""
Selection Strategy Interface

Defines how the dispatcher picks the next floor to serve.
"""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

from simulator.core.requests import CabinRequest, HallwayRequest
from simulator.core.sensor import Direction


class ISelectionStrategy(ABC):
    """
    Interface for next-target selection strategies

    The dispatcher decides which collection to draw from (hallway or cabin,
    depending on load); the strategy decides which request in it comes next.
    Strategies never modify the ledger.
    """

    @abstractmethod
    def select_hallway(
        self,
        current_floor: int,
        direction: Direction,
        requests: Sequence[HallwayRequest]
    ) -> Tuple[HallwayRequest, Direction]:
        """
        Select the next hallway request to dispatch the cabin to

        Args:
            current_floor: Floor the cabin is at
            direction: Direction the cabin is committed to (NONE when idle)
            requests: Pending hallway requests in submission order (non-empty)

        Returns:
            (selected request, direction the cabin is committed to after
            selection). The direction differs from the input when the
            strategy reversed it.

        Raises:
            DispatchInvariantError: If nothing can be selected
        """
        pass

    @abstractmethod
    def select_cabin(self, current_floor: int, requests: Sequence[CabinRequest]) -> CabinRequest:
        """
        Select the next cabin request

        Args:
            current_floor: Floor the cabin is at
            requests: Pending cabin requests in submission order (non-empty)

        Raises:
            DispatchInvariantError: If requests is empty
        """
        pass

    @abstractmethod
    def get_strategy_name(self) -> str:
        """
        Get the name of this strategy

        Returns:
            str: Strategy name (for logging and debugging)
        """
        pass
