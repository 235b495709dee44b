"""
Built-in distributions for PySATL.

This package contains implementations of standard statistical distributions
that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_lognormal.families.builtins.continuous import (
    LognormalDistribution,
    NormalDistribution,
)

__all__ = [
    "NormalDistribution",
    "LognormalDistribution",
]
