"""
SCRAM Logic System

This module implements the automatic reactor shutdown (SCRAM) evaluation:
the alert thresholds, the trip decision, safety margins and the
normal/warning/danger classification used by plant overview displays.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from plantsim.types import ParameterStatus, ReactorState


@dataclass(frozen=True)
class AlertThresholds:
    """Reactor trip setpoints"""
    high_core_temperature: float = 340.0        # °C
    high_primary_pressure: float = 16.0         # MPa
    low_coolant_flow: float = 50000.0           # m³/h
    high_radiation: float = 0.5                 # mSv/h
    high_containment_pressure: float = 110.0    # kPa


ALERT_THRESHOLDS = AlertThresholds()


def _classify_high(value: float, warning: float, danger: float) -> ParameterStatus:
    if value >= danger:
        return ParameterStatus.DANGER
    if value >= warning:
        return ParameterStatus.WARNING
    return ParameterStatus.NORMAL


class ScramSystem:
    """
    Reactor SCRAM system for automatic shutdown logic

    SCRAM is derived, never latched: it is active exactly while at least one
    threshold is breached by the state being evaluated.
    """

    def __init__(self, thresholds: AlertThresholds = ALERT_THRESHOLDS):
        self.thresholds = thresholds

    def check(self, reactor_state: ReactorState) -> bool:
        """
        Evaluate the trip conditions

        Args:
            reactor_state: Reactor snapshot to evaluate

        Returns:
            True if any threshold is breached
        """
        return any(c["exceeded"] for c in self.get_scram_conditions(reactor_state))

    def get_scram_conditions(self, reactor_state: ReactorState) -> List[Dict[str, Any]]:
        """
        Get detailed information about all SCRAM conditions

        Args:
            reactor_state: Reactor snapshot to evaluate

        Returns:
            List of dictionaries with condition details
        """
        t = self.thresholds
        return [
            {
                "name": "High Core Temperature",
                "current_value": reactor_state.core_temperature,
                "limit": t.high_core_temperature,
                "unit": "°C",
                "exceeded": reactor_state.core_temperature > t.high_core_temperature,
                "margin": t.high_core_temperature - reactor_state.core_temperature,
            },
            {
                "name": "High Primary Pressure",
                "current_value": reactor_state.primary_loop_pressure,
                "limit": t.high_primary_pressure,
                "unit": "MPa",
                "exceeded": reactor_state.primary_loop_pressure > t.high_primary_pressure,
                "margin": t.high_primary_pressure - reactor_state.primary_loop_pressure,
            },
            {
                "name": "Low Coolant Flow",
                "current_value": reactor_state.coolant_flow_rate,
                "limit": t.low_coolant_flow,
                "unit": "m³/h",
                "exceeded": reactor_state.coolant_flow_rate < t.low_coolant_flow,
                "margin": reactor_state.coolant_flow_rate - t.low_coolant_flow,
            },
            {
                "name": "High Radiation",
                "current_value": reactor_state.radiation_level,
                "limit": t.high_radiation,
                "unit": "mSv/h",
                "exceeded": reactor_state.radiation_level > t.high_radiation,
                "margin": t.high_radiation - reactor_state.radiation_level,
            },
            {
                "name": "High Containment Pressure",
                "current_value": reactor_state.containment_pressure,
                "limit": t.high_containment_pressure,
                "unit": "kPa",
                "exceeded": reactor_state.containment_pressure > t.high_containment_pressure,
                "margin": t.high_containment_pressure - reactor_state.containment_pressure,
            },
        ]

    def get_safety_margins(self, reactor_state: ReactorState) -> Dict[str, float]:
        """Safety margins per monitored parameter (positive = safe, negative = exceeded)"""
        keys = [
            "core_temperature_margin",
            "primary_pressure_margin",
            "coolant_flow_margin",
            "radiation_margin",
            "containment_pressure_margin",
        ]
        conditions = self.get_scram_conditions(reactor_state)
        return {key: c["margin"] for key, c in zip(keys, conditions)}

    def get_tripped_conditions(self, reactor_state: ReactorState) -> List[str]:
        """Names of the conditions currently breached"""
        return [c["name"] for c in self.get_scram_conditions(reactor_state) if c["exceeded"]]

    def get_parameter_status(self, reactor_state: ReactorState) -> Dict[str, ParameterStatus]:
        """
        Classify each monitored parameter for display

        Warning bands sit just inside the trip setpoints: 10 °C below the
        temperature limit, 0.3 MPa below the pressure limit, 2000 m³/h above
        the flow limit, 5 kPa below the containment limit and at half the
        radiation limit.
        """
        t = self.thresholds
        flow = reactor_state.coolant_flow_rate
        if flow < t.low_coolant_flow:
            coolant_status = ParameterStatus.DANGER
        elif flow < t.low_coolant_flow + 2000:
            coolant_status = ParameterStatus.WARNING
        else:
            coolant_status = ParameterStatus.NORMAL

        return {
            "core_temperature": _classify_high(
                reactor_state.core_temperature,
                t.high_core_temperature - 10, t.high_core_temperature),
            "primary_loop_pressure": _classify_high(
                reactor_state.primary_loop_pressure,
                t.high_primary_pressure - 0.3, t.high_primary_pressure),
            "coolant_flow_rate": coolant_status,
            "containment_pressure": _classify_high(
                reactor_state.containment_pressure,
                t.high_containment_pressure - 5, t.high_containment_pressure),
            "radiation_level": _classify_high(
                reactor_state.radiation_level,
                t.high_radiation / 2, t.high_radiation),
        }

    def get_safety_status_summary(self, reactor_state: ReactorState) -> str:
        """
        Generate a formatted summary of safety system status

        Args:
            reactor_state: Reactor snapshot to summarise

        Returns:
            Formatted string with safety status
        """
        summary = "Safety System Status:\n"
        summary += "=" * 60 + "\n"
        summary += f"SCRAM Status: {'ACTIVE' if reactor_state.scram_active else 'NORMAL'}\n"
        summary += "-" * 60 + "\n"
        for condition in self.get_scram_conditions(reactor_state):
            status = "EXCEEDED" if condition["exceeded"] else "NORMAL"
            summary += f"{condition['name']:<26}: {condition['current_value']:>10.2f} {condition['unit']:<5} "
            summary += f"(Limit: {condition['limit']:>8.1f}) [{status}]\n"
        return summary
