"""
Configuration management package

Provides configuration classes for a dispatcher session.
"""

from .simulation import (
    SimulationConfig,
    BuildingConfig,
    ElevatorConfig,
    TimingConfig,
    LoggingConfig
)

from .config_loader import (
    ConfigLoader,
    load_simulation_config,
    save_simulation_config
)

__all__ = [
    'SimulationConfig',
    'BuildingConfig',
    'ElevatorConfig',
    'TimingConfig',
    'LoggingConfig',

    'ConfigLoader',
    'load_simulation_config',
    'save_simulation_config',
]
