"""
Unit tests for Simulation class.

Tests cover input scheduling, trajectory recording, and progress reporting.
"""

import pytest
import numpy as np
from unittest.mock import Mock

from ctrnn.phenotype import NeuralNet
from ctrnn.run.config import Config
from ctrnn.run.simulation import Simulation


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def config():
    config = Config()
    config.num_steps = 4
    config.report_interval = 0
    return config


@pytest.fixture
def network(zero_net_params):
    p = zero_net_params
    return NeuralNet(p['num_neurons'], p['time_constant'], p['gain'], p['bias'], p['input_scaling'], p['weight'])


# ============================================================================
# Test Run
# ============================================================================

class TestSimulationRun:
    """Test Simulation.run."""

    def test_trajectory_shape(self, network, config):
        trajectory = Simulation(network, config, suppress_output=True).run()
        assert trajectory.shape == (4, 2)

    def test_trajectory_none_before_run(self, network, config):
        assert Simulation(network, config).trajectory is None

    def test_no_inputs_keeps_network_inputs(self, network, config):
        network.set_input(0, 2.0)
        trajectory = Simulation(network, config, suppress_output=True).run()

        # tau = 1 reaches s * I in one step
        np.testing.assert_array_equal(trajectory[:, 0], [2.0, 2.0, 2.0, 2.0])
        np.testing.assert_array_equal(trajectory[:, 1], [0.0, 0.0, 0.0, 0.0])

    def test_constant_inputs_persist(self, network, config):
        trajectory = Simulation(network, config, suppress_output=True).run([2.0, 2.0])

        # tau = 2 halves the distance to s * I at each step
        np.testing.assert_array_equal(trajectory[:, 1], [1.0, 1.5, 1.75, 1.875])
        np.testing.assert_array_equal(network.input, [2.0, 2.0])

    def test_input_schedule(self, network, config):
        schedule = np.array([[1.0, 0.0],
                             [2.0, 0.0],
                             [3.0, 0.0],
                             [4.0, 0.0]])
        trajectory = Simulation(network, config, suppress_output=True).run(schedule)

        np.testing.assert_array_equal(trajectory[:, 0], [1.0, 2.0, 3.0, 4.0])

    def test_matches_manual_loop(self, zero_net_params, config):
        p = dict(zero_net_params)
        p['gain']   = [0.3, 0.5]
        p['weight'] = [[1.0, -2.0], [3.0, 0.5]]
        make = lambda: NeuralNet(p['num_neurons'], p['time_constant'], p['gain'], p['bias'], p['input_scaling'], p['weight'])

        manual = make()
        manual.set_input(0, 0.7)
        manual.set_input(1, -0.2)
        expected = []
        for _ in range(config.num_steps):
            manual.update()
            expected.append([manual.get_state(0), manual.get_state(1)])

        trajectory = Simulation(make(), config, suppress_output=True).run([0.7, -0.2])
        np.testing.assert_array_equal(trajectory, expected)

    def test_network_not_reset_between_runs(self, network, config):
        simulation = Simulation(network, config, suppress_output=True)
        first  = simulation.run([2.0, 2.0])
        second = simulation.run()

        assert second[0, 1] > first[-1, 1]

    @pytest.mark.parametrize("bad_inputs", [
        [1.0],
        [1.0, 2.0, 3.0],
        np.zeros((3, 2)),
        np.zeros((4, 3)),
        np.zeros((4, 2, 1)),
    ])
    def test_bad_input_shape_raises(self, network, config, bad_inputs):
        with pytest.raises(ValueError, match="Inputs must have shape"):
            Simulation(network, config, suppress_output=True).run(bad_inputs)

    def test_uses_the_per_step_interface(self, config):
        network = Mock(spec=NeuralNet)
        network.num_neurons = 2
        network.get_state.return_value = 0.5

        Simulation(network, config, suppress_output=True).run([1.0, 2.0])

        assert network.update.call_count == 4
        assert network.set_input.call_count == 2
        network.set_input.assert_any_call(0, 1.0)
        network.set_input.assert_any_call(1, 2.0)


# ============================================================================
# Test Reporting
# ============================================================================

class TestSimulationReporting:
    """Test progress and final reports."""

    def test_final_report_printed(self, network, config, capsys):
        Simulation(network, config).run([2.0, 2.0])
        out = capsys.readouterr().out

        assert "Simulated 4 steps of 2 neurons" in out
        assert "final states" in out

    def test_progress_reports_every_interval(self, network, config, capsys):
        config.report_interval = 2
        Simulation(network, config).run([2.0, 2.0])
        lines = capsys.readouterr().out.splitlines()

        progress = [line for line in lines if line.startswith("step")]
        assert len(progress) == 2
        assert progress[0].startswith("step     2:")
        assert progress[1].startswith("step     4:")

    def test_suppress_output(self, network, config, capsys):
        config.report_interval = 1
        Simulation(network, config, suppress_output=True).run([2.0, 2.0])
        assert capsys.readouterr().out == ""
