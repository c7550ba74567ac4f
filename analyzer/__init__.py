"""
Elevator Dispatch Analyzer

Statistical analysis and reporting for dispatcher sessions.

Components:
- Statistics: Collects published dispatcher messages, summarizes trips and
  waiting times, exports JSON Lines logs and trajectory diagrams
"""

__version__ = "0.1.0"

from .statistics import Statistics

__all__ = ['Statistics']
