"""
Event Sink Interface

Defines where the dispatcher core sends its human-readable event lines.
"""

from abc import ABC, abstractmethod


class IEventSink(ABC):
    """
    Append-only destination for event messages

    The core only hands over the message text. Timestamps and storage are the
    sink's business, so a file log, an in-memory capture for tests, or any
    other backend can be plugged in.
    """

    @abstractmethod
    def record(self, message: str):
        """
        Append one event message

        Args:
            message: Event description, e.g. "Passed floor 3."

        Raises:
            OSError: If the backing store cannot be written
        """
        pass
