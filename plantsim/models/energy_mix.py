"""
Energy-Mix Model

Grid generation mix. Solar follows the daylight hours, wind follows a
smoothed random factor, hydro drifts slowly and demand follows a daily
cycle. Nuclear output is not walked: it is dispatched as the residual that
balances demand, limited to the plant's output envelope.
"""

import logging
from datetime import datetime
from typing import Dict

import numpy as np

from plantsim.models.base import PlantModel
from plantsim.random_walk import step
from plantsim.types import ControlState, EnergyMixState

logger = logging.getLogger(__name__)

NUCLEAR_MIN_MW = 600.0
NUCLEAR_MAX_MW = 1200.0
CO2_TONS_PER_MW = 0.82      # coal-equivalent emissions avoided per MW for one hour
INITIAL_WIND_FACTOR = 0.7


def solar_factor(hour: int) -> float:
    """Daylight factor peaking at noon; small floor outside 07:00-17:00."""
    if 7 <= hour <= 17:
        return 1 - abs(12 - hour) / 10
    return 0.1


def baseline_demand(hour: float, peak_hour: float = 0.0) -> float:
    """Daily demand cycle of +/-300 MW around 1500 MW, peaking at ``peak_hour``."""
    return 1500 + 300 * float(np.cos(2 * np.pi * (hour - peak_hour) / 24))


def residual_dispatch(demand: float, solar: float, wind: float, hydro: float) -> float:
    """Nuclear output needed to balance demand, clamped to the plant envelope."""
    nuclear = np.clip(demand - solar - wind - hydro, NUCLEAR_MIN_MW, NUCLEAR_MAX_MW)
    return round(float(nuclear), 2)


def generation_shares(state: EnergyMixState) -> Dict[str, float]:
    """
    Percentage share of each source in total generation

    Args:
        state: Energy-mix snapshot

    Returns:
        Mapping of source name to percent, all 0.0 when nothing is generated
    """
    sources = {
        "nuclear": state.nuclear,
        "solar": state.solar,
        "wind": state.wind,
        "hydro": state.hydro,
    }
    total = sum(sources.values())
    if total == 0:
        return {name: 0.0 for name in sources}
    return {name: round(value / total * 100, 1) for name, value in sources.items()}


class EnergyMixModel(PlantModel[EnergyMixState]):
    """Nuclear, solar, wind and hydro output against grid demand"""

    name = "energy_mix"

    def __init__(self, rng, peak_demand_hour: float = 0.0):
        super().__init__(rng)
        self.peak_demand_hour = peak_demand_hour
        self.wind_factor = INITIAL_WIND_FACTOR

    def default_state(self, now: datetime) -> EnergyMixState:
        return EnergyMixState(
            nuclear=1000.0,
            solar=200.0,
            wind=300.0,
            hydro=400.0,
            demand=1700.0,
            co2_avoided=1450.0,
            time_last_updated=now,
        )

    def reset(self) -> None:
        self.wind_factor = INITIAL_WIND_FACTOR

    def _advance(self, state: EnergyMixState, control: ControlState, now: datetime) -> EnergyMixState:
        rng = self.rng
        hour = now.hour

        self.wind_factor = step(self.wind_factor, 0.3, 1.0, 0.1, rng)

        solar = step(200 * solar_factor(hour), 0, 300, 10, rng)
        wind = step(300 * self.wind_factor, 100, 500, 20, rng)
        hydro = step(state.hydro, 350, 450, 5, rng)
        demand = step(baseline_demand(hour, self.peak_demand_hour), 1400, 2000, 30, rng)

        nuclear = residual_dispatch(demand, solar, wind, hydro)
        co2_avoided = float(round((nuclear + solar + wind + hydro) * CO2_TONS_PER_MW))

        return EnergyMixState(
            nuclear=nuclear,
            solar=solar,
            wind=wind,
            hydro=hydro,
            demand=demand,
            co2_avoided=co2_avoided,
            time_last_updated=now,
        )
