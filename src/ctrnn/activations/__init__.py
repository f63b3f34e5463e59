"""
Activations Package

This package provides the activation function used by the CTRNN neurons.

Exported:
    sigma_activation: 1 / (1 + e^z), applied elementwise
"""

from ctrnn.activations.basic_activations import sigma_activation

__all__ = ['sigma_activation']
