"""
Distributions subpackage

Interfaces and default implementations for probability distributions:

- distribution protocols and the continuous base class (:mod:`.distribution`);
- likelihood fitters (:mod:`.fitters`);
- sample containers (:mod:`.sampling`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .distribution import (
    ContinuousDistribution,
    Distribution,
    ParameterizedDistribution,
)
from .fitters import MaximumLikelihoodFit, fit_maximum_likelihood, log_likelihood
from .sampling import ArraySample, Sample
from .support import ContinuousSupport, Support

__all__ = [
    # distribution
    "Distribution",
    "ParameterizedDistribution",
    "ContinuousDistribution",
    # fitters
    "MaximumLikelihoodFit",
    "fit_maximum_likelihood",
    "log_likelihood",
    # sampling
    "Sample",
    "ArraySample",
    # support
    "Support",
    "ContinuousSupport",
]
