"""
Reactor Model

Bounded stochastic model of the reactor core and primary loop. Emergency
scenarios raise the noise level and widen the operating bands; SCRAM is
re-derived from the new values on every tick.
"""

import logging
from datetime import datetime

from plantsim.models.base import PlantModel
from plantsim.random_walk import chance, step
from plantsim.safety.scram_logic import ScramSystem
from plantsim.types import ControlState, EmergencyKind, ReactorState

logger = logging.getLogger(__name__)

NOMINAL_VOLATILITY = 0.5
EMERGENCY_VOLATILITY = 2.0

DEFAULT_ROD_POSITIONS = (65.0, 60.0, 70.0, 55.0, 62.0)
BURNUP_PROBABILITY = 0.05
BURNUP_RATE = 0.01          # % per event at time multiplier 1
ROD_DRIFT_PROBABILITY = 0.2


class ReactorModel(PlantModel[ReactorState]):
    """Reactor core temperature, pressure, flow, burnup, rods and containment"""

    name = "reactor"

    def __init__(self, rng, scram_system: ScramSystem = None):
        super().__init__(rng)
        self.scram_system = scram_system or ScramSystem()

    def default_state(self, now: datetime) -> ReactorState:
        return ReactorState(
            core_temperature=320.0,
            primary_loop_pressure=15.5,
            coolant_flow_rate=55000.0,
            fuel_burnup=34.0,
            control_rod_positions=DEFAULT_ROD_POSITIONS,
            containment_pressure=101.3,
            radiation_level=0.12,
            scram_active=False,
            time_last_updated=now,
        )

    def _advance(self, state: ReactorState, control: ControlState, now: datetime) -> ReactorState:
        rng = self.rng
        volatility = EMERGENCY_VOLATILITY if control.emergency_active else NOMINAL_VOLATILITY
        loca = control.is_emergency(EmergencyKind.LOCA)

        core_temperature = step(state.core_temperature, 315, 380 if loca else 330, volatility, rng)
        primary_pressure = step(state.primary_loop_pressure, 15.0, 16.5 if loca else 15.8,
                                volatility * 0.1, rng)
        coolant_flow = step(state.coolant_flow_rate, 40000 if loca else 52000, 58000,
                            volatility * 100, rng)

        burnup = state.fuel_burnup
        if chance(BURNUP_PROBABILITY, rng):
            burnup = min(burnup + BURNUP_RATE * control.time_multiplier, 100.0)

        rods = list(state.control_rod_positions)
        if chance(ROD_DRIFT_PROBABILITY, rng):
            index = int(rng.integers(len(rods)))
            rods[index] = step(rods[index], 0, 100, volatility, rng)

        containment_pressure = step(state.containment_pressure, 100,
                                    115 if control.emergency_active else 103,
                                    volatility * 0.2, rng)
        radiation_level = step(state.radiation_level, 0.1,
                               0.8 if control.emergency_active else 0.15,
                               volatility * 0.01, rng)

        new_state = ReactorState(
            core_temperature=core_temperature,
            primary_loop_pressure=primary_pressure,
            coolant_flow_rate=coolant_flow,
            fuel_burnup=burnup,
            control_rod_positions=tuple(rods),
            containment_pressure=containment_pressure,
            radiation_level=radiation_level,
            scram_active=False,
            time_last_updated=now,
        )
        scram_active = self.scram_system.check(new_state)

        if scram_active and not state.scram_active:
            tripped = ", ".join(self.scram_system.get_tripped_conditions(new_state))
            logger.warning(f"SCRAM: automatic trip on {tripped}")
        elif state.scram_active and not scram_active:
            logger.info("SCRAM conditions cleared")

        return new_state.replace(scram_active=scram_active)
