"""
Data structures for the plant simulation engine.

Defines the enums, immutable snapshot records and control-surface results
exchanged between the engine and its display consumers.
"""

import dataclasses
from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from plantsim.exceptions import InvalidArgumentError


class _ParseableEnum(Enum):
    """Enum accepting its members or their (case-insensitive) string values."""

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        raise InvalidArgumentError(
            cls.__name__, value,
            f"Unknown {cls.__name__}: {value!r} "
            f"(expected one of {', '.join(m.value for m in cls)})"
        )


class SimulationMode(_ParseableEnum):
    """Engine operating modes."""
    LIVE = "live"          # models advance every tick
    TRAINING = "training"  # models are frozen


class EmergencyKind(_ParseableEnum):
    """Injectable emergency scenarios."""
    LOCA = "LOCA"                  # loss-of-coolant accident
    BLACKOUT = "BLACKOUT"          # station blackout
    OVERPRESSURE = "OVERPRESSURE"
    CYBER = "CYBER"


class ParameterStatus(Enum):
    """Display classification of a monitored parameter."""
    NORMAL = "normal"
    WARNING = "warning"
    DANGER = "danger"


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class _Snapshot:
    """Mixin giving snapshots their record shape for consumers."""

    def to_dict(self) -> Dict[str, Any]:
        """Return the snapshot keyed by camelCase field names."""
        record = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, datetime):
                value = value.isoformat()
            elif isinstance(value, tuple):
                value = list(value)
            record[_camel(f.name)] = value
        return record

    def replace(self, **changes):
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class ReactorState(_Snapshot):
    """Reactor core and primary-loop snapshot."""
    core_temperature: float          # °C
    primary_loop_pressure: float     # MPa
    coolant_flow_rate: float         # m³/h
    fuel_burnup: float               # %
    control_rod_positions: Tuple[float, ...]  # % inserted, one entry per physical rod
    containment_pressure: float      # kPa
    radiation_level: float           # mSv/h
    scram_active: bool
    time_last_updated: datetime


@dataclass(frozen=True)
class EnergyMixState(_Snapshot):
    """Grid generation mix snapshot (all outputs in MW)."""
    nuclear: float
    solar: float
    wind: float
    hydro: float
    demand: float
    co2_avoided: float  # tons, instantaneous estimate for this tick
    time_last_updated: datetime

    @property
    def total_generation(self) -> float:
        return self.nuclear + self.solar + self.wind + self.hydro


@dataclass(frozen=True)
class ThermalState(_Snapshot):
    """Thermal-cycle snapshot."""
    heat_rate: float                 # BTU/kWh
    turbine_efficiency: float        # %
    condenser_vacuum: float          # kPa
    feedwater_temperature: float     # °C
    ambient_temperature: float       # °C
    cooling_tower_efficiency: float  # %
    time_last_updated: datetime


@dataclass(frozen=True)
class WasteState(_Snapshot):
    """Spent-fuel lifecycle snapshot."""
    fuel_usage_percentage: float     # % of the in-core batch consumed
    spent_fuel_pool_capacity: float  # % of pool occupied
    spent_fuel_temperature: float    # °C
    dry_cask_occupancy: int          # casks filled
    waste_radiation_level: float     # mSv/h
    time_last_updated: datetime


@dataclass(frozen=True)
class ControlState:
    """Read-only view of the control flags handed to every model update."""
    mode: SimulationMode = SimulationMode.LIVE
    emergency_active: bool = False
    emergency_kind: Optional[EmergencyKind] = None
    time_multiplier: float = 1.0

    @property
    def frozen(self) -> bool:
        return self.mode is SimulationMode.TRAINING

    def is_emergency(self, kind: EmergencyKind) -> bool:
        return self.emergency_active and self.emergency_kind is kind


@dataclass(frozen=True)
class EmergencyStatus:
    """Current emergency scenario."""
    active: bool
    kind: Optional[EmergencyKind]

    def to_dict(self) -> Dict[str, Any]:
        return {"active": self.active, "kind": self.kind.value if self.kind else None}


@dataclass(frozen=True)
class SetpointResult:
    """Outcome of a validated control setter.

    A rejected setpoint leaves engine state unchanged. An accepted one may
    still have been clamped into range, in which case ``applied`` differs
    from ``requested``.
    """
    accepted: bool
    requested: Any
    applied: Optional[float] = None
    clamped: bool = False
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.accepted

    def raise_for_status(self) -> None:
        """Raise InvalidArgumentError if the setpoint was rejected."""
        if not self.accepted:
            raise InvalidArgumentError("setpoint", self.requested, self.reason)
