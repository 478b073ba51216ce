"""
Test doubles shared across the plantsim test suite.
"""

from datetime import datetime
from unittest.mock import Mock

import numpy as np

NOON = datetime(2024, 6, 1, 12, 0, 0)


def scripted_rng(random_values=(1.0,), uniform=0.0, integers=0):
    """Generator double: fixed perturbations and a scripted sequence of event draws.

    ``random()`` returns the scripted values in order, then repeats the last
    one. The default draw of 1.0 never fires a probabilistic event.
    """
    values = list(random_values)

    def _random():
        return values.pop(0) if len(values) > 1 else values[0]

    rng = Mock(spec=np.random.Generator)
    rng.random.side_effect = _random
    rng.uniform.return_value = uniform
    rng.integers.return_value = integers
    return rng
