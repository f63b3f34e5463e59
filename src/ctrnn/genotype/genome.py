"""
CTRNN Genome Module

This module implements the Genome class: a fixed-layout vector of real-valued
genes in [0, 1] which encodes every parameter of one fully-interconnected CTRNN.

Classes:
    Genome: Gene vector with random construction, Gaussian mutation and expression
"""

import math
import numpy as np

from ctrnn.phenotype.neural_net import NeuralNet, PARAMETER_RANGES, check_num_neurons

class Genome:
    """
    A genome encoding a fully-interconnected CTRNN of 'n' neurons.

    The genes form a flat vector, every gene in [0, 1]. Genes are addressed by
    position, in blocks of 'n' genes:

        block 0  [0n, 1n)        time constants
        block 1  [1n, 2n)        gains
        block 2  [2n, 3n)        biases
        block 3  [3n, 4n)        reserved: mutated along with the rest, never expressed
        block 4  [4n, 5n)        input scalings
        rest     [5n, 5n + n*n)  weights, one row of 'n' genes per neuron; row i holds
                                 the weights of the connections arriving at neuron i

    Expressing a genome rescales each block linearly from [0, 1] to the declared
    range of its parameter family (see 'ctrnn.phenotype.PARAMETER_RANGES').

    Genomes are immutable: mutation produces a new genome and leaves the
    parent untouched, so a genome can be freely shared.

    Random numbers are never drawn from a global generator; every operation
    that needs them takes a uniform source as an argument. Any object whose
    'random()' method returns a float in [0, 1) will do ('random.Random',
    'numpy.random.Generator').

    Public Properties:
        num_neurons:         Number of neurons in the encoded network
        values:              The complete gene vector (read-only array)
        time_constant_genes: Genes of block 0
        gain_genes:          Genes of block 1
        bias_genes:          Genes of block 2
        reserved_genes:      Genes of block 3
        input_scaling_genes: Genes of block 4
        weight_genes:        Weight genes as an (n, n) array

    Public Methods:
        mutate(rng, std_dev): Create a mutated copy of this genome
        express():            Decode this genome into a NeuralNet

    Class Methods:
        random(num_neurons, rng): Create a genome with uniformly random genes
        from_values(values):      Create a genome from explicit gene values

    Static Methods:
        length_for(num_neurons):  Number of genes encoding a network of the given size
    """

    # Block index of each scalar parameter family
    _BLOCKS = {
        'time_constant': 0,
        'gain'         : 1,
        'bias'         : 2,
        'reserved'     : 3,
        'input_scaling': 4,
        }
    _WEIGHT_BLOCK = 5

    def __init__(self, num_neurons: int, values):
        """
        Initialize a genome from its gene vector.

        Parameters:
            num_neurons: Number of neurons in the encoded network
            values:      Exactly 'length_for(num_neurons)' genes, each in [0, 1]

        Raises:
            ValueError: if 'num_neurons' is not a positive integer or 'values' is malformed
        """
        check_num_neurons(num_neurons)

        # Adding 0.0 turns -0.0 into 0.0, keeping __hash__ consistent with __eq__
        values   = np.array(values, dtype=np.float64) + 0.0
        expected = Genome.length_for(num_neurons)
        if values.shape != (expected,):
            raise ValueError(f"A genome of {num_neurons} neurons needs {expected} genes, got shape {values.shape}")
        if not np.all((values >= 0.0) & (values <= 1.0)):
            raise ValueError("Gene values must be between 0.0 and 1.0")

        values.flags.writeable = False
        self._n     : int        = int(num_neurons)
        self._values: np.ndarray = values

    @staticmethod
    def length_for(num_neurons: int) -> int:
        """
        The number of genes needed to encode a network of 'num_neurons' neurons.

        Five blocks of 'n' genes (four parameter families plus the reserved
        block) followed by the 'n * n' weights.
        """
        return (Genome._WEIGHT_BLOCK + num_neurons) * num_neurons

    @classmethod
    def random(cls, num_neurons: int, rng) -> 'Genome':
        """
        Create a genome whose genes are drawn independently and uniformly from [0, 1).

        Parameters:
            num_neurons: Number of neurons in the encoded network (a positive integer)
            rng:         Uniform random source

        Returns:
            A new Genome
        """
        check_num_neurons(num_neurons)

        values = [rng.random() for _ in range(cls.length_for(num_neurons))]
        return cls(num_neurons, values)

    @classmethod
    def from_values(cls, values) -> 'Genome':
        """
        Create a genome from explicit gene values.

        The number of neurons is deduced from the number of genes, which must
        equal 'length_for(n)' for some positive 'n'.

        Parameters:
            values: Sequence of genes, each in [0, 1]

        Returns:
            A new Genome
        """
        length = len(values)

        num_neurons = 1
        while cls.length_for(num_neurons) < length:
            num_neurons += 1
        if cls.length_for(num_neurons) != length:
            raise ValueError(f"{length} genes do not encode a whole number of neurons")

        return cls(num_neurons, values)

    @property
    def num_neurons(self) -> int:
        return self._n

    @property
    def values(self) -> np.ndarray:
        return self._values

    def _block(self, family: str) -> np.ndarray:
        start = Genome._BLOCKS[family] * self._n
        return self._values[start : start + self._n]

    @property
    def time_constant_genes(self) -> np.ndarray:
        return self._block('time_constant')

    @property
    def gain_genes(self) -> np.ndarray:
        return self._block('gain')

    @property
    def bias_genes(self) -> np.ndarray:
        return self._block('bias')

    @property
    def reserved_genes(self) -> np.ndarray:
        return self._block('reserved')

    @property
    def input_scaling_genes(self) -> np.ndarray:
        return self._block('input_scaling')

    @property
    def weight_genes(self) -> np.ndarray:
        start = Genome._WEIGHT_BLOCK * self._n
        return self._values[start:].reshape(self._n, self._n)

    def mutate(self, rng, std_dev: float) -> 'Genome':
        """
        Create a mutated copy of this genome.

        Every gene (reserved ones included) is perturbed by zero-mean Gaussian
        noise of standard deviation 'std_dev' and then clipped back to [0, 1].

        NOTE: because of the clipping, repeated small mutations of a gene lying
              close to 0 or 1 drift it towards that boundary. This is a property
              of the closed gene range and is accepted as such.

        Parameters:
            rng:     Uniform random source (two draws per gene)
            std_dev: Standard deviation of the perturbation (non-negative)

        Returns:
            A new Genome; this genome is left unchanged
        """
        if std_dev < 0:
            raise ValueError(f"Mutation standard deviation must be non-negative, got {std_dev}")

        noise  = np.array([Genome._gaussian_noise(rng, std_dev) for _ in range(len(self._values))])
        values = np.clip(self._values + noise, 0.0, 1.0)

        return Genome(self._n, values)

    @staticmethod
    def _gaussian_noise(rng, std_dev: float) -> float:
        """
        Draw one sample of N(0, std_dev^2) with the Box-Muller transform.

        Only the sine branch is used; the companion cosine sample is discarded.
        """
        u1 = 1.0 - rng.random()   # (0, 1], keeps the logarithm finite
        u2 = rng.random()

        std_normal = math.sqrt(-2.0 * math.log(u1)) * math.sin(2.0 * math.pi * u2)
        return std_dev * std_normal

    def _scale_range(self, start: int, family: str) -> np.ndarray:
        """
        Rescale the 'n' genes starting at 'start' into the range of 'family'.
        """
        low, high = PARAMETER_RANGES[family]
        genes = self._values[start : start + self._n]
        return genes * (high - low) + low

    def express(self) -> NeuralNet:
        """
        Decode this genome into a new NeuralNet.

        The decoding is a pure function of the genes, so expressing the same
        genome twice produces two networks with identical parameters.

        Returns:
            A new NeuralNet with all states and inputs at zero
        """
        n = self._n

        time_constant = self._scale_range(Genome._BLOCKS['time_constant'] * n, 'time_constant')
        gain          = self._scale_range(Genome._BLOCKS['gain']          * n, 'gain')
        bias          = self._scale_range(Genome._BLOCKS['bias']          * n, 'bias')
        input_scaling = self._scale_range(Genome._BLOCKS['input_scaling'] * n, 'input_scaling')

        weight = [self._scale_range(n * (Genome._WEIGHT_BLOCK + i), 'weight') for i in range(n)]

        return NeuralNet(n, time_constant, gain, bias, input_scaling, weight)

    def __eq__(self, other):
        if not isinstance(other, Genome):
            return NotImplemented
        return self._n == other._n and np.array_equal(self._values, other._values)

    def __hash__(self):
        return hash((self._n, self._values.tobytes()))

    def __repr__(self):
        return f"Genome(num_neurons={self._n}, genes={len(self._values)})"

    def __str__(self):
        rows = []
        for family in Genome._BLOCKS:
            genes = " ".join(f"{g:.3f}" for g in self._block(family))
            rows.append(f"{family:13s}: {genes}")
        for i, row in enumerate(self.weight_genes):
            genes = " ".join(f"{g:.3f}" for g in row)
            rows.append(f"{'weight[' + str(i) + ']':13s}: {genes}")
        return "\n".join(rows)
