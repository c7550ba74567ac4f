"""
Traditional Call System Implementation

All floors have UP/DOWN buttons, except the ends of the shaft.
"""

from typing import List

from simulator.core.sensor import Direction
from simulator.interfaces.call_system import ICallSystem


class TraditionalCallSystem(ICallSystem):
    """
    Traditional elevator call system

    Hall buttons carry a direction, car buttons carry a floor.

    Usage:
        call_system = TraditionalCallSystem(num_floors=10)
    """

    def __init__(self, num_floors: int, lowest_floor: int = 1):
        """
        Initialize traditional call system

        Args:
            num_floors: Total number of floors in the building
            lowest_floor: Number of the ground floor
        """
        if num_floors < 2:
            raise ValueError("num_floors must be at least 2")
        if lowest_floor < 1:
            raise ValueError("lowest_floor must be at least 1")
        self.num_floors = num_floors
        self.lowest_floor = lowest_floor

    def get_available_directions(self, floor: int) -> List[Direction]:
        """
        Get available direction buttons at each floor

        Ground floor: UP only
        Top floor: DOWN only
        Middle floors: UP and DOWN
        """
        if not self.is_valid_floor(floor):
            return []
        if floor == self.lowest_floor:
            return [Direction.UP]
        elif floor == self.get_top_floor():
            return [Direction.DOWN]
        else:
            return [Direction.UP, Direction.DOWN]

    def get_num_floors(self) -> int:
        """Return total number of floors"""
        return self.num_floors

    def get_lowest_floor(self) -> int:
        return self.lowest_floor
