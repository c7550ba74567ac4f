"""
Elevator Dispatch Control

This package provides the single-cabin dispatcher and its pluggable
next-target selection strategies.
"""

__version__ = "0.1.0"

from .dispatcher import Dispatcher
from .algorithms.direction_biased import DirectionBiasedStrategy
from .interfaces.selection_strategy import ISelectionStrategy

__all__ = ['Dispatcher', 'DirectionBiasedStrategy', 'ISelectionStrategy']
