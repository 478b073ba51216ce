"""
Shared fixtures for the plantsim test suite.
"""

import pytest

from plantsim.config import SimulationConfig
from plantsim.engine import SimulationEngine
from plantsim.tests.helpers import NOON
from plantsim.types import ControlState


@pytest.fixture
def live():
    return ControlState()


@pytest.fixture
def engine():
    return SimulationEngine(SimulationConfig(seed=1234), clock=lambda: NOON)
