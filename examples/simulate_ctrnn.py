"""
Random CTRNN Simulation

This script walks through the life cycle of a CTRNN genome: a random genome
is created, a few mutants are derived from it, and every genome is expressed
into a network which is then simulated while neuron 0 is driven by a
constant external input.

The mutants share most of their parent's dynamics, which shows how gently a
small 'mutation_std_dev' moves a genome through parameter space.

Usage:
    python simulate_ctrnn.py
    python simulate_ctrnn.py --config my_config.ini --mutants 5
"""

import argparse
import numpy as np
from pathlib import Path

from ctrnn import Config, Genome, Simulation

def main():
    parser = argparse.ArgumentParser(description="Simulate a random CTRNN and some of its mutants")
    parser.add_argument('--config',  type=str, default=str(Path(__file__).parent / 'config_ctrnn.ini'),
                        help="path to the INI configuration file")
    parser.add_argument('--mutants', type=int, default=3,
                        help="number of mutants to derive from the parent genome")
    parser.add_argument('--visualize', action='store_true',
                        help="render the parent network with Graphviz")
    args = parser.parse_args()

    config = Config(args.config)
    rng    = config.make_rng()

    # Only neuron 0 receives an external input
    inputs    = np.zeros(config.num_neurons)
    inputs[0] = 1.0

    parent = Genome.random(config.num_neurons, rng)
    print("=== parent ===")
    print(parent)
    print()

    network = parent.express()
    print(network)
    print()
    parent_trajectory = Simulation(network, config).run(inputs)

    if args.visualize:
        try:
            network.visualize(view=True)
        except Exception as e:
            print(f"Could not visualize network: {e}")

    for k in range(args.mutants):
        child      = parent.mutate(rng, config.mutation_std_dev)
        trajectory = Simulation(child.express(), config, suppress_output=True).run(inputs)
        divergence = np.max(np.abs(trajectory - parent_trajectory))
        print(f"mutant {k}: max distance from parent trajectory = {divergence:.4f}")

if __name__ == "__main__":
    main()
