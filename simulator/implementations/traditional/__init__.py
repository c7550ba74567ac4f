"""Traditional (hall button + car button) call equipment"""

from .call_system import TraditionalCallSystem
from .request_parser import RequestParser

__all__ = [
    'TraditionalCallSystem',
    'RequestParser',
]
