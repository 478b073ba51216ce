"""
Reactor safety logic.
"""

from .scram_logic import ALERT_THRESHOLDS, AlertThresholds, ScramSystem

__all__ = [
    'ALERT_THRESHOLDS',
    'AlertThresholds',
    'ScramSystem',
]
