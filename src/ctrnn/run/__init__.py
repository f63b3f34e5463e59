"""
CTRNN Run Package

This package implements configuration and simulation of CTRNNs.

Modules:
    config:     Configuration management (INI files)
    simulation: Drives a network over many time steps

Exported Classes:
    Config:     Configuration parameters
    Simulation: Runs a NeuralNet and records its trajectory
"""

from ctrnn.run.config     import Config
from ctrnn.run.simulation import Simulation

__all__ = ['Config', 'Simulation']
