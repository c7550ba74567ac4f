"""Interfaces between the dispatcher core and its collaborators"""

from .call_system import ICallSystem
from .event_sink import IEventSink

__all__ = [
    'ICallSystem',
    'IEventSink',
]
