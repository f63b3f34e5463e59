"""
Integration tests for the genome => network => simulation pipeline.

These tests use a fixed random seed for reproducibility.
"""

import pytest
import numpy as np

from ctrnn import Config, Genome, NeuralNet, Simulation, PARAMETER_RANGES


# ============================================================================
# Test Pipeline
# ============================================================================

class TestGenomeToSimulation:
    """Create, mutate, express and simulate genomes end-to-end."""

    def test_example_config_loads(self, example_config):
        assert example_config.num_neurons == 3
        assert example_config.num_steps == 200
        assert example_config.seed == 42

    def test_pipeline_is_reproducible(self, seeded_config):
        """Same seed, same genomes, same trajectories."""
        def pipeline():
            rng    = seeded_config.make_rng()
            parent = Genome.random(seeded_config.num_neurons, rng)
            child  = parent.mutate(rng, seeded_config.mutation_std_dev)
            inputs = np.ones(seeded_config.num_neurons)
            return Simulation(child.express(), seeded_config, suppress_output=True).run(inputs)

        np.testing.assert_array_equal(pipeline(), pipeline())

    def test_generations_stay_valid(self, seeded_config):
        """Many rounds of mutation keep genes in [0, 1] and networks in range."""
        rng    = seeded_config.make_rng()
        genome = Genome.random(seeded_config.num_neurons, rng)

        for _ in range(30):
            genome = genome.mutate(rng, 0.3)
            net    = genome.express()
            for name, (low, high) in PARAMETER_RANGES.items():
                values = getattr(net, name)
                assert np.all(values >= low) and np.all(values <= high)

    def test_expressed_networks_are_independent(self, seeded_config):
        rng     = seeded_config.make_rng()
        genome  = Genome.random(seeded_config.num_neurons, rng)
        first   = genome.express()
        second  = genome.express()

        Simulation(first, seeded_config, suppress_output=True).run(np.ones(seeded_config.num_neurons))

        np.testing.assert_array_equal(second.state, np.zeros(seeded_config.num_neurons))

    def test_small_mutation_gives_similar_dynamics(self, seeded_config):
        rng    = seeded_config.make_rng()
        parent = Genome.random(seeded_config.num_neurons, rng)
        inputs = np.ones(seeded_config.num_neurons)

        base  = Simulation(parent.express(), seeded_config, suppress_output=True).run(inputs)
        same  = Simulation(parent.mutate(rng, 0.0).express(), seeded_config, suppress_output=True).run(inputs)
        close = Simulation(parent.mutate(rng, 1e-6).express(), seeded_config, suppress_output=True).run(inputs)

        np.testing.assert_array_equal(base, same)
        np.testing.assert_allclose(base, close, atol=1e-3)

    def test_states_stay_finite(self, seeded_config):
        """Parameter ranges keep the dynamics bounded for bounded inputs."""
        seeded_config.num_steps = 1000
        rng = seeded_config.make_rng()

        for _ in range(10):
            net        = Genome.random(4, rng).express()
            trajectory = Simulation(net, seeded_config, suppress_output=True).run(rng.random() * np.ones(4))
            assert np.all(np.isfinite(trajectory))

    def test_all_zero_genome_converges_to_weighted_rest_point(self, seeded_config):
        """
        Zero genes give zero gain, so every neuron outputs 0.5 into weights of -5:
        each state converges to -5 * n with zero input.
        """
        n   = seeded_config.num_neurons
        net = Genome(n, np.zeros(Genome.length_for(n))).express()

        seeded_config.num_steps = 200
        trajectory = Simulation(net, seeded_config, suppress_output=True).run(np.zeros(n))

        np.testing.assert_allclose(trajectory[-1], -5.0 * 0.5 * n, rtol=1e-6)

    def test_hand_built_network_matches_expressed(self):
        """A genome and the equivalent explicit parameters yield the same network."""
        n = 2
        values = np.full(Genome.length_for(n), 0.5)
        expressed = Genome(n, values).express()

        explicit = NeuralNet(n,
                             [10.5, 10.5],
                             [0.25, 0.25],
                             [-5.0, -5.0],
                             [0.0, 0.0],
                             [[0.0, 0.0], [0.0, 0.0]])

        for _ in range(10):
            expressed.update()
            explicit.update()
        np.testing.assert_array_equal(expressed.state, explicit.state)
