"""
Thermal-Efficiency Model

Ambient temperature drives cooling-tower performance, and cooling-tower
performance in turn drives both the heat rate and the turbine efficiency.
Condenser vacuum and feedwater temperature drift independently.
"""

from datetime import datetime

import numpy as np

from plantsim.models.base import PlantModel
from plantsim.random_walk import step
from plantsim.types import ControlState, ThermalState

DESIGN_COOLING_EFFICIENCY = 85.0   # % at the 15 °C reference ambient
BASE_HEAT_RATE = 10000.0           # BTU/kWh
PERFECT_HEAT_RATE = 3412.0         # BTU/kWh for 100% conversion


def ambient_baseline(hour: float) -> float:
    """Daily ambient temperature cycle, 20 +/- 8 °C."""
    return 20 + 8 * float(np.sin(2 * np.pi * hour / 24))


def cooling_factor(ambient_temperature: float) -> float:
    return 1 - (ambient_temperature - 15) / 40


def cycle_efficiency(state: ThermalState) -> float:
    """Overall thermal efficiency in percent implied by the heat rate."""
    if state.heat_rate <= 0:
        return 0.0
    return PERFECT_HEAT_RATE / state.heat_rate * 100


class ThermalModel(PlantModel[ThermalState]):
    """Heat rate, turbine, condenser, feedwater and cooling tower"""

    name = "thermal"

    def default_state(self, now: datetime) -> ThermalState:
        return ThermalState(
            heat_rate=10200.0,
            turbine_efficiency=92.0,
            condenser_vacuum=5.1,
            feedwater_temperature=220.0,
            ambient_temperature=25.0,
            cooling_tower_efficiency=85.0,
            time_last_updated=now,
        )

    def _advance(self, state: ThermalState, control: ControlState, now: datetime) -> ThermalState:
        rng = self.rng

        ambient = step(ambient_baseline(now.hour), 5, 35, 0.5, rng)
        cooling_tower_efficiency = round(DESIGN_COOLING_EFFICIENCY * cooling_factor(ambient), 1)

        # Both heat rate and turbine efficiency degrade with the cooling deficit
        cooling_deficit = DESIGN_COOLING_EFFICIENCY - cooling_tower_efficiency
        heat_rate = step(BASE_HEAT_RATE + cooling_deficit * 10, 9800, 10600, 20, rng)
        turbine_efficiency = step(92 - cooling_deficit / 10, 88, 93, 0.1, rng)

        condenser_vacuum = step(state.condenser_vacuum, 4.8, 5.4, 0.05, rng)
        feedwater_temperature = step(state.feedwater_temperature, 215, 225, 0.2, rng)

        return ThermalState(
            heat_rate=heat_rate,
            turbine_efficiency=turbine_efficiency,
            condenser_vacuum=condenser_vacuum,
            feedwater_temperature=feedwater_temperature,
            ambient_temperature=ambient,
            cooling_tower_efficiency=cooling_tower_efficiency,
            time_last_updated=now,
        )
