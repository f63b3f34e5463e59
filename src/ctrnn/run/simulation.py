"""
CTRNN Simulation Module

This module defines the Simulation class, which drives a NeuralNet through a
number of discrete time steps, feeding it external inputs and recording the
state of every neuron after each step.

A simulation is the per-step 'set_input() / update() / get_state()' loop every
driver program needs, packaged with progress reporting.
"""

import numpy as np

from ctrnn.phenotype.neural_net import NeuralNet
from ctrnn.run.config           import Config

class Simulation:
    """
    Drives a CTRNN over 'config.num_steps' time steps.

    Subclasses can override:
    - _report_progress(): Display progress every 'config.report_interval' steps
    - _final_report():    Display results at the end of the run

    Public Attributes:
        trajectory: States recorded by the last run, shape (num_steps, num_neurons)
                    (None before the first run)

    Public Methods:
        run(inputs): Simulate the network and return the recorded states
    """

    def __init__(self, network: NeuralNet, config: Config, suppress_output: bool = False):
        """
        Initialize the simulation.

        Parameters:
            network:         The network to simulate (its state is advanced in place)
            config:          Configuration parameters
            suppress_output: If True, suppress progress and final reports
        """
        self._network        : NeuralNet = network
        self._config         : Config    = config
        self._suppress_output: bool      = suppress_output
        self._step_counter   : int       = 0
        self.trajectory      : np.ndarray | None = None

    def _reset(self):
        """
        Reset the simulation state before starting a new run.
        The network itself is not reset; call 'NeuralNet.reset()' for that.
        """
        self._step_counter = 0
        self.trajectory    = np.zeros((self._config.num_steps, self._network.num_neurons), dtype=np.float64)

    def _prepare_inputs(self, inputs) -> np.ndarray | None:
        """
        Turn the inputs passed to 'run()' into one row of inputs per step.

        Returns:
            None if the inputs are left untouched, otherwise an array
            of shape (num_steps, num_neurons)
        """
        if inputs is None:
            return None

        n      = self._network.num_neurons
        steps  = self._config.num_steps
        inputs = np.asarray(inputs, dtype=np.float64)

        # Constant inputs: set once, they persist across updates
        if inputs.shape == (n,):
            return inputs.reshape(1, n)
        if inputs.shape == (steps, n):
            return inputs
        raise ValueError(f"Inputs must have shape ({n},) or ({steps}, {n}), got {inputs.shape}")

    def run(self, inputs=None) -> np.ndarray:
        """
        Run the simulation.

        Parameters:
            inputs: External inputs, either
                    None                         - keep whatever inputs the network holds
                    shape (num_neurons,)         - applied before the first step, then persist
                    shape (num_steps, num_neurons) - row t applied before step t

        Returns:
            The state of every neuron after every step, shape (num_steps, num_neurons)
        """
        schedule = self._prepare_inputs(inputs)
        self._reset()

        for step in range(self._config.num_steps):
            if schedule is not None and step < len(schedule):
                for i, value in enumerate(schedule[step]):
                    self._network.set_input(i, value)

            self._network.update()

            for i in range(self._network.num_neurons):
                self.trajectory[step, i] = self._network.get_state(i)
            self._step_counter = step + 1

            interval = self._config.report_interval
            if not self._suppress_output and interval > 0 and self._step_counter % interval == 0:
                self._report_progress()

        if not self._suppress_output:
            self._final_report()

        return self.trajectory

    def _report_progress(self):
        """
        Display the neuron states reached at the current step.
        """
        states = " ".join(f"{y:+.4f}" for y in self.trajectory[self._step_counter - 1])
        print(f"step {self._step_counter:5d}: {states}")

    def _final_report(self):
        """
        Display a summary of the whole run.

        This method is suppressed by setting 'self._suppress_output' to 'True',
        which we might do when simulating many networks in a row.
        """
        s  = f"Simulated {self._step_counter} steps of {self._network.num_neurons} neurons\n"
        s += "  final states: " + " ".join(f"{y:+.4f}" for y in self.trajectory[-1]) + "\n"
        s += f"  state range : [{self.trajectory.min():+.4f}, {self.trajectory.max():+.4f}]"
        print(s)
