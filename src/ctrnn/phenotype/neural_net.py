"""
CTRNN Neural Network Module

This module implements the phenotype of a CTRNN genome: a fully-interconnected
Continuous-Time Recurrent Neural Network whose neuron states evolve according to

    tau_i * dy_i/dt = -y_i + sum_j w_ij * sigma(g_j * (y_j + b_j)) + s_i * I_i

integrated with a fixed explicit-Euler step of unit length.

Constants:
    TIME_CONSTANT_RANGE, GAIN_RANGE, BIAS_RANGE,
    INPUT_SCALING_RANGE, WEIGHT_RANGE: declared (low, high) bounds of each parameter family
    PARAMETER_RANGES:                  the same bounds keyed by parameter name

Classes:
    NeuralNet: Validated CTRNN parameters plus mutable neuron state and input
"""

import numpy as np
import graphviz  # type: ignore

from ctrnn.activations import sigma_activation

TIME_CONSTANT_RANGE = ( 1.0, 20.0)
GAIN_RANGE          = ( 0.0,  0.5)
BIAS_RANGE          = (-10.0, 0.0)
INPUT_SCALING_RANGE = (-10.0, 10.0)
WEIGHT_RANGE        = (-5.0,  5.0)

PARAMETER_RANGES = {
    'time_constant': TIME_CONSTANT_RANGE,
    'gain'         : GAIN_RANGE,
    'bias'         : BIAS_RANGE,
    'input_scaling': INPUT_SCALING_RANGE,
    'weight'       : WEIGHT_RANGE,
    }

def _is_integer(value) -> bool:
    # bool is an int subclass but never a meaningful count or index
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))

def check_num_neurons(num_neurons) -> None:
    """
    Raise ValueError unless 'num_neurons' is a positive integer.
    """
    if not _is_integer(num_neurons) or num_neurons <= 0:
        raise ValueError(f"Number of neurons must be a positive integer, got {num_neurons!r}")

class NeuralNet:
    """
    A fully-interconnected Continuous-Time Recurrent Neural Network.

    Every neuron i is described by a time constant, a gain, a bias and an input
    scaling factor, and receives a weighted contribution from every neuron j
    (itself included) through 'weight[i, j]'. All parameters are validated
    against their declared ranges at construction time and are immutable
    afterwards; the network owns independent copies of them.

    The only mutable data are the neuron states (all zero initially) and the
    external inputs (all zero initially). An input keeps its value across
    updates until it is overwritten.

    Public Properties:
        num_neurons:   Number of neurons in the network
        time_constant: Per-neuron time constants (read-only array)
        gain:          Per-neuron gains (read-only array)
        bias:          Per-neuron biases (read-only array)
        input_scaling: Per-neuron input scaling factors (read-only array)
        weight:        Weight matrix, weight[i, j] = connection j => i (read-only array)
        state:         Copy of the current neuron states
        input:         Copy of the currently applied external inputs

    Public Methods:
        get_state(index):        State of a single neuron
        get_input(index):        See the method's note; returns the neuron's *state*
        set_input(index, value): Set the external input driving a single neuron
        update():                Advance the simulation by one time step
        reset():                 Zero all states and inputs
        visualize(view):         Render the network with Graphviz
    """

    def __init__(self,
                 num_neurons  : int,
                 time_constant,
                 gain,
                 bias,
                 input_scaling,
                 weight):
        """
        Initialize the network from explicit parameter values.

        Parameters:
            num_neurons:   Number of neurons (a positive integer)
            time_constant: Sequence of 'num_neurons' values in TIME_CONSTANT_RANGE
            gain:          Sequence of 'num_neurons' values in GAIN_RANGE
            bias:          Sequence of 'num_neurons' values in BIAS_RANGE
            input_scaling: Sequence of 'num_neurons' values in INPUT_SCALING_RANGE
            weight:        'num_neurons' rows of 'num_neurons' values in WEIGHT_RANGE

        Raises:
            ValueError: if 'num_neurons' is not a positive integer, or any parameter is
                        missing, has the wrong length or lies outside its range
        """
        check_num_neurons(num_neurons)
        self._n: int = int(num_neurons)

        self._time_constant = self._validate_vector(time_constant, 'time_constant')
        self._gain          = self._validate_vector(gain,          'gain')
        self._bias          = self._validate_vector(bias,          'bias')
        self._input_scaling = self._validate_vector(input_scaling, 'input_scaling')
        self._weight        = self._validate_matrix(weight,        'weight')

        self._state = np.zeros(self._n, dtype=np.float64)
        self._input = np.zeros(self._n, dtype=np.float64)

    def _validate_vector(self, values, name: str) -> np.ndarray:
        """
        Check a per-neuron parameter and return a private, read-only copy of it.
        """
        if values is None:
            raise ValueError(f"Parameter '{name}' is missing")
        if np.ndim(values) != 1 or len(values) != self._n:
            raise ValueError(f"Parameter '{name}' must hold {self._n} values")

        array = np.array(values, dtype=np.float64)
        self._validate_range(array, name, name)
        array.flags.writeable = False
        return array

    def _validate_matrix(self, rows, name: str) -> np.ndarray:
        """
        Check the weight matrix row by row and return a private, read-only copy of it.
        """
        if rows is None:
            raise ValueError(f"Parameter '{name}' is missing")
        if len(rows) != self._n:
            raise ValueError(f"Parameter '{name}' must hold {self._n} rows")

        for i, row in enumerate(rows):
            if row is None:
                raise ValueError(f"Parameter '{name}[{i}]' is missing")
            if np.ndim(row) != 1 or len(row) != self._n:
                raise ValueError(f"Parameter '{name}[{i}]' must hold {self._n} values")
            self._validate_range(np.asarray(row, dtype=np.float64), name, f"{name}[{i}]")

        matrix = np.array(rows, dtype=np.float64)
        matrix.flags.writeable = False
        return matrix

    @staticmethod
    def _validate_range(array: np.ndarray, family: str, label: str) -> None:
        low, high = PARAMETER_RANGES[family]

        # NaN fails both comparisons, so it is rejected as well
        if not np.all((array >= low) & (array <= high)):
            raise ValueError(f"Values for '{label}' must be between {low} and {high}")

    def _check_index(self, index: int) -> None:
        if not _is_integer(index) or not 0 <= index < self._n:
            raise ValueError(f"Neuron index must be in [0, {self._n}), got {index}")

    @property
    def num_neurons(self) -> int:
        return self._n

    @property
    def time_constant(self) -> np.ndarray:
        return self._time_constant

    @property
    def gain(self) -> np.ndarray:
        return self._gain

    @property
    def bias(self) -> np.ndarray:
        return self._bias

    @property
    def input_scaling(self) -> np.ndarray:
        return self._input_scaling

    @property
    def weight(self) -> np.ndarray:
        return self._weight

    @property
    def state(self) -> np.ndarray:
        return self._state.copy()

    @property
    def input(self) -> np.ndarray:
        return self._input.copy()

    def get_state(self, index: int) -> float:
        """
        Get the state of a neuron.

        Parameters:
            index: Neuron index, 0 <= index < num_neurons

        Returns:
            The neuron's current state
        """
        self._check_index(index)
        return float(self._state[index])

    def get_input(self, index: int) -> float:
        """
        Get the assigned input value of a neuron.

        NOTE: this returns the neuron's current *state*, not the value stored by
              'set_input()'. The behaviour is kept for compatibility with existing
              drivers; use the 'input' property to read the stored inputs.

        Parameters:
            index: Neuron index, 0 <= index < num_neurons
        """
        self._check_index(index)
        return float(self._state[index])

    def set_input(self, index: int, value: float) -> None:
        """
        Set the external input given to a neuron.

        The value is used by every subsequent call to 'update()' until it is
        overwritten. Setting an input does not recompute any state.

        Parameters:
            index: Neuron index, 0 <= index < num_neurons
            value: The new input value
        """
        self._check_index(index)
        self._input[index] = value

    def update(self) -> None:
        """
        Update the state of all neurons over a single time slice.

        One explicit-Euler step of unit length: the derivatives of all neurons
        are computed from the same (pre-update) states, and only then are the
        states advanced. No bounds are imposed on the resulting states.
        """
        outputs     = sigma_activation(self._gain * (self._state + self._bias))
        derivatives = -self._state + self._weight @ outputs + self._input_scaling * self._input

        self._state += derivatives / self._time_constant

    def reset(self) -> None:
        """
        Zero all neuron states and external inputs, as right after construction.
        """
        self._state.fill(0.0)
        self._input.fill(0.0)

    def visualize(self, view: bool = True) -> graphviz.Digraph:
        """
        Visualize the network using Graphviz.

        Every neuron is drawn with its parameters, fed by a grey node standing
        for its external input. One edge is drawn per non-zero weight
        (self-connections included).

        Parameters:
            view: If True, automatically open the visualization after rendering

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')
        dot.attr('graph', labelloc='t')

        common_attrs = {'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5',
                        'fontsize': '5', 'width': '0.6', 'height': '0.6', 'fixedsize': 'true'}
        edge_attrs   = {'fontsize': '5', 'penwidth': '0.5', 'arrowsize': '0.5', 'labelfloat': 'false'}

        with dot.subgraph(name='cluster_input') as input_cluster:
            input_cluster.attr(rank='source', label='Inputs', style='invisible')
            for i in range(self._n):
                input_cluster.node(f"in{i}", label=f"I{i}", fillcolor='lightgrey', **common_attrs)

        with dot.subgraph(name='cluster_neurons') as neuron_cluster:
            neuron_cluster.attr(label='Neurons', style='invisible')
            for i in range(self._n):
                label = (f"id={i}\\ntau={self._time_constant[i]:.2f}"
                         f"\\ngain={self._gain[i]:.2f}\\nbias={self._bias[i]:.2f}")
                neuron_cluster.node(str(i), label=label, fillcolor='lightblue', **common_attrs)

        for i in range(self._n):
            dot.edge(f"in{i}", str(i), label=f"s={self._input_scaling[i]:.2f}", color='gray', **edge_attrs)

        for i in range(self._n):
            for j in range(self._n):
                w = self._weight[i, j]
                if w != 0.0:
                    dot.edge(str(j), str(i), label=f"w={w:+.2f}", color='black', **edge_attrs)

        if view:
            dot.view(cleanup=True)

        return dot

    def __str__(self):
        """String representation listing every neuron and weight."""
        neuron_info = []
        for i in range(self._n):
            neuron_info.append(f"  Neuron {i}: tau={self._time_constant[i]:.2f}, gain={self._gain[i]:.2f}, "
                               f"bias={self._bias[i]:.2f}, s={self._input_scaling[i]:+.2f}, y={self._state[i]:+.4f}")

        weight_info = []
        for i in range(self._n):
            weight_info.append("  " + " ".join(f"{w:+.2f}" for w in self._weight[i]))

        return "\n".join(neuron_info) + "\n\n" + "\n".join(weight_info)

    def __repr__(self):
        return f"NeuralNet(num_neurons={self._n})"
