"""
Plant Model Interface

Abstract base class for the per-subsystem models driven by the engine.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Generic, TypeVar

import numpy as np

from plantsim.types import ControlState

StateT = TypeVar("StateT")


class PlantModel(ABC, Generic[StateT]):
    """Abstract base class for all plant models"""

    name = "model"

    def __init__(self, rng: np.random.Generator):
        """
        Initialize model

        Args:
            rng: Random generator shared with the owning engine
        """
        self.rng = rng

    @abstractmethod
    def default_state(self, now: datetime) -> StateT:
        """
        Build the fixed start-up snapshot

        Args:
            now: Timestamp for the snapshot
        """
        pass

    def advance(self, state: StateT, control: ControlState, now: datetime) -> StateT:
        """
        Advance the model by one tick

        In training mode the model is frozen and ``state`` itself is returned.

        Args:
            state: Current canonical snapshot
            control: Control flags for this tick
            now: Wall-clock time of the tick

        Returns:
            New snapshot (or ``state`` unchanged when frozen)
        """
        if control.frozen:
            return state
        return self._advance(state, control, now)

    @abstractmethod
    def _advance(self, state: StateT, control: ControlState, now: datetime) -> StateT:
        pass

    def reset(self) -> None:
        """Clear any model-internal state kept between ticks."""
        pass
