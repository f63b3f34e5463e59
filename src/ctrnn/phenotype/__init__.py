"""
CTRNN Phenotype Package

This package implements the phenotype side of the CTRNN encoding: the executable,
fully-interconnected network a genome is expressed into, together with the
declared ranges of its parameters.

Modules:
    neural_net: The NeuralNet class and the parameter range constants

Exported:
    NeuralNet:           Continuous-Time Recurrent Neural Network
    PARAMETER_RANGES:    (low, high) bounds keyed by parameter name
    TIME_CONSTANT_RANGE, GAIN_RANGE, BIAS_RANGE, INPUT_SCALING_RANGE, WEIGHT_RANGE
"""

from ctrnn.phenotype.neural_net import (
    NeuralNet,
    PARAMETER_RANGES,
    TIME_CONSTANT_RANGE,
    GAIN_RANGE,
    BIAS_RANGE,
    INPUT_SCALING_RANGE,
    WEIGHT_RANGE
)

__all__ = ['NeuralNet',
           'PARAMETER_RANGES',
           'TIME_CONSTANT_RANGE',
           'GAIN_RANGE',
           'BIAS_RANGE',
           'INPUT_SCALING_RANGE',
           'WEIGHT_RANGE']
