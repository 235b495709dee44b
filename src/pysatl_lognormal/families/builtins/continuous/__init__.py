"""
Built-in continuous distributions.

This module contains implementations of continuous parametric distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_lognormal.families.builtins.continuous.lognormal import LognormalDistribution
from pysatl_lognormal.families.builtins.continuous.normal import NormalDistribution

__all__ = [
    "NormalDistribution",
    "LognormalDistribution",
]
