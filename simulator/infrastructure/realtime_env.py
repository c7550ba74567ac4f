"""
RealtimeEnvironment.py

A SimPy environment that paces simulated time against the wall clock, so a
console session shows the cabin moving at a watchable speed. Dispatch
decisions never depend on the pacing.
"""

import time

import simpy


class RealtimeEnvironment(simpy.Environment):
    """
    SimPy environment with real-time synchronization.

    Args:
        speed_factor (float): Simulated seconds per real second
            - 1.0 = real-time
            - 2.0 = double speed
            - 0.0 = no delay (plain SimPy behavior)

    Example:
        >>> env = RealtimeEnvironment(speed_factor=4.0)  # dwell of 3 s takes 0.75 s
    """

    def __init__(self, speed_factor=1.0, initial_time=0):
        super().__init__(initial_time=initial_time)
        if speed_factor < 0:
            raise ValueError("speed_factor cannot be negative")
        self.speed_factor = speed_factor
        self._sync_reference()

    def _sync_reference(self):
        self.real_start_time = time.time()
        self.sim_start_time = self.now

    def run(self, until=None):
        # Time spent waiting for console input between runs must not count
        # as simulated time already played back.
        self._sync_reference()
        return super().run(until=until)

    def step(self):
        """
        Execute one simulation step, then sleep until the wall clock has
        caught up with the simulated time.
        """
        result = super().step()

        if self.speed_factor > 0:
            sim_elapsed = self.now - self.sim_start_time
            target_real_time = self.real_start_time + (sim_elapsed / self.speed_factor)
            sleep_time = target_real_time - time.time()
            if sleep_time > 0:
                time.sleep(sleep_time)

        return result

    def set_speed(self, speed_factor):
        """
        Change simulation speed during runtime.

        Args:
            speed_factor (float): New speed multiplier (0.0 = fastest)
        """
        if speed_factor < 0:
            raise ValueError("speed_factor cannot be negative")
        self.speed_factor = speed_factor
        self._sync_reference()

    def get_speed(self):
        return self.speed_factor


def create_environment(realtime_factor: float = 0.0) -> simpy.Environment:
    """
    Build the environment for a session

    Args:
        realtime_factor: 0.0 runs as fast as possible, otherwise the speed
            multiplier for RealtimeEnvironment

    Returns:
        simpy.Environment or RealtimeEnvironment
    """
    if realtime_factor > 0:
        return RealtimeEnvironment(speed_factor=realtime_factor)
    return simpy.Environment()
