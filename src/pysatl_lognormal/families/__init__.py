"""
Parametric families of statistical distributions.

This package provides parametrizations with declarative constraints and the
built-in distributions defined through them.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import LognormalDistribution, NormalDistribution
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)

__all__ = [
    "ParametrizationConstraint",
    "Parametrization",
    "constraint",
    "parametrization",
    "NormalDistribution",
    "LognormalDistribution",
]
