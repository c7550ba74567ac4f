"""
Event log sinks

File-backed and in-memory implementations of IEventSink, and the recorder the
dispatcher core uses to emit events.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Union

import simpy

from ..interfaces.event_sink import IEventSink


class FileEventLog(IEventSink):
    """
    Plain text, append-only event log.

    Every message becomes one line: "[<timestamp>] <message>".
    """

    def __init__(self, path: Union[str, Path] = "elevator.txt", clock: Callable[[], object] = datetime.now):
        """
        Args:
            path: Log file location
            clock: Returns the timestamp written in front of each line
        """
        self.path = Path(path)
        self.clock = clock

    def reset(self):
        """Remove a log left over from a previous run"""
        if self.path.exists():
            os.remove(self.path)

    def record(self, message: str):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'a', encoding='utf-8') as f:
            f.write(f"[{self.clock()}] {message}\n")


class MemoryEventLog(IEventSink):
    """Keeps messages in a list (for tests and diagnostics)"""

    def __init__(self):
        self.messages: List[str] = []

    def record(self, message: str):
        self.messages.append(message)

    def clear(self):
        self.messages = []

    def count(self, text: str) -> int:
        """Number of recorded messages containing text"""
        return sum(1 for m in self.messages if text in m)


class EventRecorder:
    """
    Emits events on behalf of one component.

    Prints a console line stamped with the simulation clock and forwards the
    message to the sink. A failing sink never stops dispatching.
    """

    def __init__(self, env: simpy.Environment, sink: IEventSink, source: str, echo: bool = True):
        """
        Args:
            env: SimPy environment (for the console timestamp)
            sink: Where event messages are appended
            source: Component name shown in console lines
            echo: Print console lines as well
        """
        self.env = env
        self.sink = sink
        self.source = source
        self.echo = echo

    def record(self, message: str):
        if self.echo:
            print(f"{self.env.now:.2f} [{self.source}] {message}")
        try:
            self.sink.record(message)
        except OSError as e:
            print(f"{self.env.now:.2f} [{self.source}] WARNING: event log write failed: {e}")
