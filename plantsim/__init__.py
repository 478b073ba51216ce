"""
plantsim - Nuclear Plant Dashboard Simulation Engine

A bounded stochastic model of a nuclear power plant for training and demo
dashboards.

This library provides:
- Reactor, energy-mix, thermal-efficiency and waste-management models
- Derived automatic shutdown (SCRAM) evaluation against fixed alert thresholds
- A control surface for live/training mode, emergency-scenario injection,
  time acceleration and manual control-rod override
- YAML-loadable, validated engine configuration

Example:
    >>> from plantsim import SimulationEngine
    >>> engine = SimulationEngine()
    >>> reactor = engine.update_reactor()
    >>> print(f"Core temperature: {reactor.core_temperature} °C")
"""

__version__ = "1.0.0"
__author__ = "Nuclear Sim Team"

from plantsim.config import SimulationConfig, load_config
from plantsim.engine import SimulationEngine
from plantsim.exceptions import ConfigurationError, InvalidArgumentError, PlantSimError
from plantsim.models import DRY_CASK_CAPACITY, cycle_efficiency, generation_shares
from plantsim.safety import ALERT_THRESHOLDS, AlertThresholds, ScramSystem
from plantsim.types import (
    ControlState,
    EmergencyKind,
    EmergencyStatus,
    EnergyMixState,
    ParameterStatus,
    ReactorState,
    SetpointResult,
    SimulationMode,
    ThermalState,
    WasteState,
)

__all__ = [
    'SimulationEngine',
    'SimulationConfig',
    'load_config',
    'ReactorState',
    'EnergyMixState',
    'ThermalState',
    'WasteState',
    'ControlState',
    'EmergencyStatus',
    'SetpointResult',
    'SimulationMode',
    'EmergencyKind',
    'ParameterStatus',
    'ALERT_THRESHOLDS',
    'AlertThresholds',
    'ScramSystem',
    'DRY_CASK_CAPACITY',
    'generation_shares',
    'cycle_efficiency',
    'PlantSimError',
    'InvalidArgumentError',
    'ConfigurationError',
]
