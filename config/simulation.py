"""
Simulation Configuration

Building layout, cabin home floor, simulated timings and logging options for
a single-cabin dispatcher session.
"""

from dataclasses import dataclass, field
from typing import Optional


def _section(data: dict, key: str) -> dict:
    """Return the mapping stored under key (empty when missing)"""
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{key}' section must be a mapping, got {type(section).__name__}")
    return section


@dataclass
class BuildingConfig:
    """Building specifications"""
    num_floors: int = 10
    lowest_floor: int = 1

    def __post_init__(self):
        if self.num_floors < 2:
            raise ValueError("num_floors must be at least 2")
        if self.lowest_floor < 1:
            raise ValueError("lowest_floor must be at least 1")

    @property
    def top_floor(self) -> int:
        return self.lowest_floor + self.num_floors - 1


@dataclass
class ElevatorConfig:
    """Cabin specifications"""
    home_floor: int = 1  # Floor the cabin starts at

    def __post_init__(self):
        if self.home_floor < 1:
            raise ValueError("home_floor must be at least 1")


@dataclass
class TimingConfig:
    """Simulated durations (seconds)"""
    floor_travel_time: float = 1.0  # per floor step
    service_time: float = 1.0  # hold after an en-route pickup/drop
    dwell_time: float = 3.0  # hold after stopping at the target
    extended_dwell_time: float = 5.0  # dwell when hall calls wait behind the cabin
    overweight_settle_time: float = 5.0  # wait before re-checking the load

    def __post_init__(self):
        if self.floor_travel_time < 0:
            raise ValueError("floor_travel_time cannot be negative")
        if self.service_time < 0:
            raise ValueError("service_time cannot be negative")
        if self.dwell_time < 0:
            raise ValueError("dwell_time cannot be negative")
        if self.extended_dwell_time < self.dwell_time:
            raise ValueError("extended_dwell_time cannot be shorter than dwell_time")
        # A zero settle time would spin forever without advancing the clock
        if self.overweight_settle_time <= 0:
            raise ValueError("overweight_settle_time must be positive")


@dataclass
class LoggingConfig:
    """Event log and report outputs"""
    log_file: str = "elevator.txt"
    reset_on_start: bool = True  # delete the previous log at startup
    console: bool = True  # print timestamped events to stdout
    event_log_jsonl: Optional[str] = None  # JSON Lines export of published messages
    trajectory_plot: Optional[str] = None  # PNG trajectory diagram

    def __post_init__(self):
        if not self.log_file:
            raise ValueError("log_file cannot be empty")


@dataclass
class SimulationConfig:
    """
    Complete session configuration

    Combines building, elevator, timing and logging settings.
    """
    building: BuildingConfig = field(default_factory=BuildingConfig)
    elevator: ElevatorConfig = field(default_factory=ElevatorConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Simulation control
    realtime_factor: float = 0.0  # 0.0 = as fast as possible, 1.0 = realtime

    def __post_init__(self):
        if self.realtime_factor < 0:
            raise ValueError("realtime_factor cannot be negative")

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        data = data or {}
        sim_data = _section(data, 'simulation') if 'simulation' in data else data

        building_data = _section(sim_data, 'building')
        building = BuildingConfig(
            num_floors=building_data.get('num_floors', 10),
            lowest_floor=building_data.get('lowest_floor', 1)
        )

        elevator_data = _section(sim_data, 'elevator')
        elevator = ElevatorConfig(
            home_floor=elevator_data.get('home_floor', building.lowest_floor)
        )

        timing_data = _section(sim_data, 'timing')
        timing = TimingConfig(
            floor_travel_time=timing_data.get('floor_travel_time', 1.0),
            service_time=timing_data.get('service_time', 1.0),
            dwell_time=timing_data.get('dwell_time', 3.0),
            extended_dwell_time=timing_data.get('extended_dwell_time', 5.0),
            overweight_settle_time=timing_data.get('overweight_settle_time', 5.0)
        )

        logging_data = _section(sim_data, 'logging')
        logging = LoggingConfig(
            log_file=logging_data.get('log_file', 'elevator.txt'),
            reset_on_start=logging_data.get('reset_on_start', True),
            console=logging_data.get('console', True),
            event_log_jsonl=logging_data.get('event_log_jsonl'),
            trajectory_plot=logging_data.get('trajectory_plot')
        )

        return cls(
            building=building,
            elevator=elevator,
            timing=timing,
            logging=logging,
            realtime_factor=sim_data.get('realtime_factor', 0.0)
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        result = {
            'simulation': {
                'building': {
                    'num_floors': self.building.num_floors,
                    'lowest_floor': self.building.lowest_floor
                },
                'elevator': {
                    'home_floor': self.elevator.home_floor
                },
                'timing': {
                    'floor_travel_time': self.timing.floor_travel_time,
                    'service_time': self.timing.service_time,
                    'dwell_time': self.timing.dwell_time,
                    'extended_dwell_time': self.timing.extended_dwell_time,
                    'overweight_settle_time': self.timing.overweight_settle_time
                },
                'logging': {
                    'log_file': self.logging.log_file,
                    'reset_on_start': self.logging.reset_on_start,
                    'console': self.logging.console
                },
                'realtime_factor': self.realtime_factor
            }
        }

        if self.logging.event_log_jsonl is not None:
            result['simulation']['logging']['event_log_jsonl'] = self.logging.event_log_jsonl
        if self.logging.trajectory_plot is not None:
            result['simulation']['logging']['trajectory_plot'] = self.logging.trajectory_plot

        return result

    def validate(self):
        """Validate configuration consistency"""
        if not (self.building.lowest_floor <= self.elevator.home_floor <= self.building.top_floor):
            raise ValueError(
                f"elevator.home_floor ({self.elevator.home_floor}) must be between "
                f"{self.building.lowest_floor} and {self.building.top_floor}"
            )
