"""
CTRNN - Continuous-Time Recurrent Neural Networks and their genetic encoding.

This package provides the two halves used in evolutionary-robotics experiments:
a genome (a fixed-layout vector of genes in [0, 1]) and the fully-interconnected
CTRNN it expresses into, simulated forward with explicit-Euler steps.

Main components:
- genotype:    Genome (random creation, Gaussian mutation, expression)
- phenotype:   NeuralNet (validated parameters, per-step update)
- run:         Configuration and simulation driver
- activations: The CTRNN activation function

Example:
    >>> from ctrnn import Config, Genome, Simulation
    >>> config = Config("config_ctrnn.ini")
    >>> rng = config.make_rng()
    >>> genome = Genome.random(config.num_neurons, rng).mutate(rng, config.mutation_std_dev)
    >>> network = genome.express()
    >>> network.set_input(0, 1.0)
    >>> network.update()
    >>> network.get_state(0)
"""

__version__ = "0.1.0"

from ctrnn.run.config        import Config
from ctrnn.run.simulation    import Simulation
from ctrnn.genotype.genome   import Genome
from ctrnn.phenotype         import NeuralNet, PARAMETER_RANGES

__all__ = [
    "Config",
    "Simulation",
    "Genome",
    "NeuralNet",
    "PARAMETER_RANGES",
]
