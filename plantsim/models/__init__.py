"""
Plant subsystem models.

Each model owns the update rule for one snapshot type; the engine owns the
canonical snapshots and calls the models once per tick.
"""

from .base import PlantModel
from .energy_mix import EnergyMixModel, generation_shares
from .reactor import ReactorModel
from .thermal import ThermalModel, cycle_efficiency
from .waste import DRY_CASK_CAPACITY, WasteModel

__all__ = [
    'PlantModel',
    'ReactorModel',
    'EnergyMixModel',
    'ThermalModel',
    'WasteModel',
    'generation_shares',
    'cycle_efficiency',
    'DRY_CASK_CAPACITY',
]
