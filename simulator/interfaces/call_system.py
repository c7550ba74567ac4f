"""
Call System Interface

Defines which call buttons a building offers, so request intake can tell a
real button press from a token that no button could have produced.
"""

from abc import ABC, abstractmethod
from typing import List

from simulator.core.sensor import Direction


class ICallSystem(ABC):
    """
    Interface for building call equipment

    Describes the hall buttons installed at each floor and the floor range
    served by the car buttons.

    Usage Examples:
    - Traditional: Ground floor has UP only, top floor DOWN only,
      every other floor has both
    """

    @abstractmethod
    def get_available_directions(self, floor: int) -> List[Direction]:
        """
        Get available direction buttons at a specific floor

        Args:
            floor: Floor number

        Returns:
            Directions of the hall buttons installed at the floor

        Example:
            10-floor building:
                floor 1 -> [UP]         # Ground floor, only UP
                floor 2-9 -> [UP, DOWN]
                floor 10 -> [DOWN]      # Top floor, only DOWN
        """
        pass

    @abstractmethod
    def get_num_floors(self) -> int:
        """
        Get the total number of floors in the building

        Returns:
            Total number of floors
        """
        pass

    @abstractmethod
    def get_lowest_floor(self) -> int:
        """
        Get the number of the lowest served floor

        Returns:
            Lowest floor number (typically 1)
        """
        pass

    def get_top_floor(self) -> int:
        return self.get_lowest_floor() + self.get_num_floors() - 1

    def is_valid_floor(self, floor: int) -> bool:
        """
        Check if a floor exists in the building

        Default implementation uses get_lowest_floor() and get_num_floors().
        """
        return self.get_lowest_floor() <= floor <= self.get_top_floor()

    def has_hall_button(self, floor: int, direction: Direction) -> bool:
        """Check if the floor has a hall button for direction"""
        return self.is_valid_floor(floor) and direction in self.get_available_directions(floor)
