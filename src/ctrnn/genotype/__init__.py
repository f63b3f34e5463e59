"""
CTRNN Genotype Package

This package implements the genetic encoding of a CTRNN: a fixed-layout vector
of genes in [0, 1] which can be randomly created, mutated, and expressed into
an executable network.

Modules:
    genome: Genome class

Exported Classes:
    Genome: Gene vector encoding one fully-interconnected CTRNN
"""

from ctrnn.genotype.genome import Genome

__all__ = ['Genome']
