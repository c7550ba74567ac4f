"""Strategy interfaces for the dispatcher"""

from .selection_strategy import ISelectionStrategy

__all__ = ['ISelectionStrategy']
