"""
Shared fixtures for integration tests.
"""

import pytest
from pathlib import Path
from ctrnn.run.config import Config


@pytest.fixture
def example_config():
    """The configuration shipped with the example script."""
    path = Path(__file__).parent.parent.parent / "examples" / "config_ctrnn.ini"
    return Config(str(path))


@pytest.fixture
def seeded_config():
    """Default configuration with a fixed seed, for reproducibility."""
    config = Config()
    config.num_neurons = 3
    config.num_steps = 50
    config.seed = 42
    return config
