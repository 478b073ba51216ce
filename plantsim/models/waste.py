"""
Waste-Management Model

Tracks one batch of fuel through its lifecycle: in-core usage, transfer to
the spent-fuel pool once the batch is exhausted, and transfer of pool
inventory into dry casks once the pool is nearly full.
"""

import logging
from datetime import datetime

from plantsim.models.base import PlantModel
from plantsim.random_walk import PRECISION, chance, step
from plantsim.types import ControlState, WasteState

logger = logging.getLogger(__name__)

USAGE_PROBABILITY = 0.02
USAGE_RATE = 0.05              # % per event at time multiplier 1
CORE_TO_POOL_PROBABILITY = 0.1
POOL_INCREMENT = 2.0           # % of pool per discharged batch
POOL_TO_CASK_THRESHOLD = 90.0
POOL_TO_CASK_PROBABILITY = 0.2
POOL_PER_CASK = 10.0           # % of pool moved into one cask
DRY_CASK_CAPACITY = 24         # display limit, not enforced by the model


class WasteModel(PlantModel[WasteState]):
    """In-core fuel, spent-fuel pool and dry-cask storage"""

    name = "waste"

    def default_state(self, now: datetime) -> WasteState:
        return WasteState(
            fuel_usage_percentage=34.0,
            spent_fuel_pool_capacity=45.0,
            spent_fuel_temperature=38.0,
            dry_cask_occupancy=12,
            waste_radiation_level=2.3,
            time_last_updated=now,
        )

    def _advance(self, state: WasteState, control: ControlState, now: datetime) -> WasteState:
        rng = self.rng

        fuel_usage = state.fuel_usage_percentage
        if chance(USAGE_PROBABILITY, rng):
            fuel_usage = min(fuel_usage + USAGE_RATE * control.time_multiplier, 100.0)

        pool = state.spent_fuel_pool_capacity
        if fuel_usage >= 100 and chance(CORE_TO_POOL_PROBABILITY, rng):
            fuel_usage = 0.0
            pool = min(pool + POOL_INCREMENT, 100.0)
            logger.info(f"Spent batch discharged to pool (pool at {pool:.1f}%)")

        spent_fuel_temperature = step(30 + pool * 0.15, 25, 50, 0.2, rng)

        casks = state.dry_cask_occupancy
        if pool > POOL_TO_CASK_THRESHOLD and chance(POOL_TO_CASK_PROBABILITY, rng):
            pool -= POOL_PER_CASK
            casks += 1
            logger.info(f"Pool inventory loaded into dry cask #{casks} (pool at {pool:.1f}%)")

        waste_radiation_level = step(1 + pool * 0.03, 0.5, 5, 0.1, rng)

        return WasteState(
            fuel_usage_percentage=round(fuel_usage, PRECISION),
            spent_fuel_pool_capacity=round(pool, PRECISION),
            spent_fuel_temperature=spent_fuel_temperature,
            dry_cask_occupancy=casks,
            waste_radiation_level=waste_radiation_level,
            time_last_updated=now,
        )
