"""
Simulation Configuration

Validated engine settings, optionally loaded from a YAML file:

    simulation:
      seed: 42
      mode: live
      time_multiplier: 1.0
      peak_demand_hour: 18
"""

import logging
import os
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from plantsim.exceptions import ConfigurationError
from plantsim.types import SimulationMode

logger = logging.getLogger(__name__)


class SimulationConfig(BaseModel):
    """Start-up settings for a SimulationEngine."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    seed: Optional[int] = None                           # None draws fresh OS entropy
    mode: SimulationMode = SimulationMode.LIVE
    time_multiplier: float = Field(default=1.0, gt=0.0, allow_inf_nan=False)  # scales burnup and fuel-usage rates
    peak_demand_hour: float = Field(default=0.0, ge=0.0, lt=24.0)  # hour of daily demand peak

    @field_validator("mode", mode="before")
    @classmethod
    def _parse_mode(cls, value):
        return SimulationMode.parse(value)


def load_config(path: Union[str, os.PathLike]) -> SimulationConfig:
    """
    Load a SimulationConfig from a YAML file

    Args:
        path: YAML file, either flat or with a top-level ``simulation`` section

    Returns:
        Validated configuration (defaults for an empty file)

    Raises:
        ConfigurationError: file missing, unparseable or invalid
    """
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration {path} must be a mapping")
    if "simulation" in data:
        data = data["simulation"] or {}

    try:
        config = SimulationConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e

    logger.info(f"Loaded simulation configuration from {path}: {config}")
    return config
