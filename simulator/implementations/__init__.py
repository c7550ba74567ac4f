"""Implementation variants of simulator components"""

from . import traditional

__all__ = [
    'traditional',
]
