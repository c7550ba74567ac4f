"""Selection strategies"""

from .direction_biased import DirectionBiasedStrategy

__all__ = ['DirectionBiasedStrategy']
