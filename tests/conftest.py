"""Pytest configuration and shared fixtures."""

import pytest
import random
import sys
from pathlib import Path

# Add the package sources to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def rng():
    """A seeded uniform random source, handed to genome operations."""
    return random.Random(42)


@pytest.fixture
def zero_net_params():
    """
    Parameters of a 2-neuron network with zero weights and zero gains.

    With zero gain every neuron outputs sigma(0) = 0.5, so only the input
    term can move the states.
    """
    return {
        'num_neurons'  : 2,
        'time_constant': [1.0, 2.0],
        'gain'         : [0.0, 0.0],
        'bias'         : [-5.0, -5.0],
        'input_scaling': [1.0, 1.0],
        'weight'       : [[0.0, 0.0],
                          [0.0, 0.0]],
    }
