import itertools
from abc import ABC, abstractmethod
from typing import Optional

import simpy


class Entity(ABC):
    """
    Abstract base class for simulated devices that run as SimPy processes.

    The process is started from the constructor, so creating the entity is
    enough to put it to work in the environment.
    """
    _entity_id_counter = itertools.count()

    def __init__(self, env: simpy.Environment, name: Optional[str] = None, initial_state: str = "IDLE"):
        """
        Args:
            env: The SimPy simulation environment this entity belongs to.
            name: Entity name. Auto-generated from class name and ID if omitted.
            initial_state: State before the process starts.
        """
        self.env = env
        self.entity_id: int = next(self._entity_id_counter)
        self.name: str = name if name is not None else f"{self.__class__.__name__}_{self.entity_id}"
        self.state: str = initial_state

        self._process = self.env.process(self.run())
        print(f'{self.env.now:.2f}: Entity "{self.name}" ({self.__class__.__name__}, ID:{self.entity_id}) created.')

    @abstractmethod
    def run(self):
        """
        Generator that forms the entity's SimPy process.

        Use yield to wait for events and advance simulation time.
        """
        pass

    def set_state(self, new_state: str):
        """Transition the entity's state, logging real changes only"""
        if self.state != new_state:
            old_state = self.state
            self.state = new_state
            self._on_state_changed(old_state, new_state)

    def get_state(self) -> str:
        return self.state

    def _on_state_changed(self, old_state: str, new_state: str):
        """Hook called after a state change. Subclasses extend it."""
        print(f'{self.env.now:.2f}: Entity "{self.name}" ({self.__class__.__name__}, ID:{self.entity_id}) state transition: {old_state} -> {new_state}')

    @property
    def process(self) -> simpy.Process:
        return self._process
