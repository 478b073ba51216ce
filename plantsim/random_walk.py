"""
Random-walk primitive shared by every plant model.

Each tick perturbs a value uniformly within +/- volatility, clamps it into
its operating band and rounds it so displayed values stay stable.
"""

import numpy as np

PRECISION = 2  # decimal places kept after every step


def step(current: float, minimum: float, maximum: float, volatility: float,
         rng: np.random.Generator) -> float:
    """
    Advance a bounded random walk by one step

    Args:
        current: Value before the step
        minimum: Lower bound of the operating band
        maximum: Upper bound of the operating band
        volatility: Half-width of the uniform perturbation
        rng: Random generator supplying the draw

    Returns:
        New value inside [minimum, maximum], rounded to PRECISION places
    """
    change = rng.uniform(-volatility, volatility)
    new_value = np.clip(current + change, minimum, maximum)
    return round(float(new_value), PRECISION)


def chance(probability: float, rng: np.random.Generator) -> bool:
    """Return True with the given per-tick probability."""
    return bool(rng.random() < probability)
