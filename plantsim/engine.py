"""
Simulation Engine

Owns the canonical plant snapshots and the control surface (mode, emergency
scenario, time multiplier, manual rod override, reset). Display surfaces
poll the ``get_initial_*`` and ``update_*`` methods on their own cadence.

Every tick and every control call runs under one engine-wide lock: flags are
read, the model is advanced and the result committed as a unit. Ticks of
different models are independent, so there is no atomicity across models
(last writer wins).
"""

import logging
import math
import threading
from datetime import datetime
from typing import Callable, Optional

import numpy as np

from plantsim.config import SimulationConfig
from plantsim.models import EnergyMixModel, PlantModel, ReactorModel, ThermalModel, WasteModel
from plantsim.types import (
    ControlState,
    EmergencyKind,
    EmergencyStatus,
    EnergyMixState,
    ReactorState,
    SetpointResult,
    SimulationMode,
    ThermalState,
    WasteState,
)

logger = logging.getLogger(__name__)


class SimulationEngine:
    """
    Shared plant simulation state and its control surface

    Example:
        >>> engine = SimulationEngine(SimulationConfig(seed=7))
        >>> engine.activate_emergency("LOCA")
        >>> reactor = engine.update_reactor()
        >>> reactor.core_temperature <= 380
        True
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize engine with default plant state

        Args:
            config: Start-up settings (defaults if omitted)
            clock: Zero-argument callable returning the current time
        """
        self.config = config or SimulationConfig()
        self.clock = clock or datetime.now
        self.rng = np.random.default_rng(self.config.seed)
        self._lock = threading.RLock()

        self.reactor_model = ReactorModel(self.rng)
        self.energy_mix_model = EnergyMixModel(self.rng, peak_demand_hour=self.config.peak_demand_hour)
        self.thermal_model = ThermalModel(self.rng)
        self.waste_model = WasteModel(self.rng)

        self._mode = self.config.mode
        self._emergency_active = False
        self._emergency_kind: Optional[EmergencyKind] = None
        self._time_multiplier = self.config.time_multiplier

        self._load_defaults()
        logger.info(f"Simulation engine initialized: mode={self._mode.value}, seed={self.config.seed}")

    def __repr__(self) -> str:
        return (f"SimulationEngine(mode={self._mode.value}, "
                f"emergency={self._emergency_kind.value if self._emergency_kind else None}, "
                f"time_multiplier={self._time_multiplier})")

    def _load_defaults(self) -> None:
        now = self.clock()
        self._reactor: ReactorState = self.reactor_model.default_state(now)
        self._energy_mix: EnergyMixState = self.energy_mix_model.default_state(now)
        self._thermal: ThermalState = self.thermal_model.default_state(now)
        self._waste: WasteState = self.waste_model.default_state(now)
        for model in self._models():
            model.reset()

    def _models(self):
        return (self.reactor_model, self.energy_mix_model, self.thermal_model, self.waste_model)

    def _tick(self, model: PlantModel, attr: str):
        with self._lock:
            control = self.get_control_state()
            state = getattr(self, attr)
            new_state = model.advance(state, control, self.clock())
            setattr(self, attr, new_state)
        if new_state is not state:
            logger.debug(f"{model.name} tick: {new_state}")
        return new_state

    # --- Snapshot access ---

    def get_initial_reactor(self) -> ReactorState:
        """Current reactor snapshot, without advancing it"""
        with self._lock:
            return self._reactor

    def get_initial_energy_mix(self) -> EnergyMixState:
        """Current energy-mix snapshot, without advancing it"""
        with self._lock:
            return self._energy_mix

    def get_initial_thermal(self) -> ThermalState:
        """Current thermal snapshot, without advancing it"""
        with self._lock:
            return self._thermal

    def get_initial_waste(self) -> WasteState:
        """Current waste snapshot, without advancing it"""
        with self._lock:
            return self._waste

    def update_reactor(self) -> ReactorState:
        """Advance the reactor model one tick and return the new snapshot"""
        return self._tick(self.reactor_model, "_reactor")

    def update_energy_mix(self) -> EnergyMixState:
        """Advance the energy-mix model one tick and return the new snapshot"""
        return self._tick(self.energy_mix_model, "_energy_mix")

    def update_thermal(self) -> ThermalState:
        """Advance the thermal model one tick and return the new snapshot"""
        return self._tick(self.thermal_model, "_thermal")

    def update_waste(self) -> WasteState:
        """Advance the waste model one tick and return the new snapshot"""
        return self._tick(self.waste_model, "_waste")

    # --- Control surface ---

    def get_control_state(self) -> ControlState:
        """Read-only snapshot of the control flags"""
        with self._lock:
            return ControlState(
                mode=self._mode,
                emergency_active=self._emergency_active,
                emergency_kind=self._emergency_kind,
                time_multiplier=self._time_multiplier,
            )

    def set_mode(self, mode) -> None:
        """
        Switch between live and training mode

        Args:
            mode: SimulationMode or its string value

        Raises:
            InvalidArgumentError: unknown mode
        """
        mode = SimulationMode.parse(mode)
        with self._lock:
            previous, self._mode = self._mode, mode
        if previous is not mode:
            logger.info(f"Simulation mode changed: {previous.value} -> {mode.value}")

    def get_mode(self) -> SimulationMode:
        with self._lock:
            return self._mode

    def activate_emergency(self, kind) -> None:
        """
        Inject an emergency scenario, replacing any active one

        Args:
            kind: EmergencyKind or its string value

        Raises:
            InvalidArgumentError: unknown scenario
        """
        kind = EmergencyKind.parse(kind)
        with self._lock:
            previous = self._emergency_kind
            self._emergency_active = True
            self._emergency_kind = kind
        if previous is not None and previous is not kind:
            logger.warning(f"Emergency scenario {previous.value} replaced by {kind.value}")
        else:
            logger.warning(f"Emergency scenario activated: {kind.value}")

    def deactivate_emergency(self) -> None:
        with self._lock:
            was_active = self._emergency_active
            self._emergency_active = False
            self._emergency_kind = None
        if was_active:
            logger.info("Emergency scenario deactivated")

    def get_emergency_status(self) -> EmergencyStatus:
        with self._lock:
            return EmergencyStatus(active=self._emergency_active, kind=self._emergency_kind)

    def set_time_multiplier(self, value: float) -> SetpointResult:
        """
        Set the simulated-time acceleration factor

        Args:
            value: Positive, finite multiplier

        Returns:
            SetpointResult; non-positive or non-finite values are rejected
            and leave the multiplier unchanged
        """
        if isinstance(value, bool):
            multiplier = math.nan
        else:
            try:
                multiplier = float(value)
            except (TypeError, ValueError):
                multiplier = math.nan
        if not math.isfinite(multiplier) or multiplier <= 0:
            reason = f"time multiplier must be a positive finite number, got {value!r}"
            logger.warning(f"Rejected setpoint: {reason}")
            return SetpointResult(accepted=False, requested=value, reason=reason)

        with self._lock:
            self._time_multiplier = multiplier
        logger.info(f"Time multiplier set to {multiplier}")
        return SetpointResult(accepted=True, requested=value, applied=multiplier)

    def set_manual_rod_position(self, index: int, value: float) -> SetpointResult:
        """
        Force one control rod to a position, bypassing the random walk

        Allowed in training mode. Positions outside [0, 100] are clamped.

        Args:
            index: Rod index (0-based, positional)
            value: Requested insertion in percent

        Returns:
            SetpointResult; an unknown rod index or non-finite value is rejected
        """
        try:
            position = float(value)
        except (TypeError, ValueError):
            position = math.nan

        with self._lock:
            rods = list(self._reactor.control_rod_positions)
            if not isinstance(index, (int, np.integer)) or isinstance(index, bool) \
                    or not 0 <= index < len(rods):
                reason = f"rod index must be an integer in 0..{len(rods) - 1}, got {index!r}"
                logger.warning(f"Rejected setpoint: {reason}")
                return SetpointResult(accepted=False, requested=value, reason=reason)
            if not math.isfinite(position):
                reason = f"rod position must be a finite number, got {value!r}"
                logger.warning(f"Rejected setpoint: {reason}")
                return SetpointResult(accepted=False, requested=value, reason=reason)

            applied = float(np.clip(position, 0.0, 100.0))
            rods[index] = applied
            self._reactor = self._reactor.replace(
                control_rod_positions=tuple(rods),
                time_last_updated=self.clock(),
            )

        clamped = applied != position
        if clamped:
            logger.warning(f"Rod {index} position {position} clamped to {applied}")
        logger.info(f"Rod {index} manually set to {applied}%")
        return SetpointResult(
            accepted=True,
            requested=value,
            applied=applied,
            clamped=clamped,
            reason="clamped into [0, 100]" if clamped else None,
        )

    def reset_to_defaults(self) -> None:
        """Restore all plant snapshots to defaults and clear any emergency

        Mode and time multiplier are left as they are.
        """
        with self._lock:
            self._load_defaults()
            self._emergency_active = False
            self._emergency_kind = None
        logger.info("Simulation reset to defaults")
