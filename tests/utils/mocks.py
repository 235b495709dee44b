from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np

from pysatl_lognormal.distributions import ContinuousDistribution, ContinuousSupport
from pysatl_lognormal.distributions.distribution import (
    check_generator,
    check_moment_order,
    check_probability,
    finalize,
)


class ExponentialMock(ContinuousDistribution):
    """
    Minimal exponential distribution relying on every default of the base class.

    Only the abstract members are implemented, so ``sf``, ``isf``, ``median``,
    ``variance``, ``skewness``, ``kurtosis`` and ``central_moment`` exercise
    the generic implementations.
    """

    def __init__(self, rate: float = 1.0) -> None:
        self.rate = rate

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def pdf(self, x):
        arr = np.asarray(x, dtype=np.float64)
        return finalize(np.where(arr >= 0.0, self.rate * np.exp(-self.rate * arr), 0.0), x)

    def cdf(self, x):
        arr = np.asarray(x, dtype=np.float64)
        return finalize(np.where(arr >= 0.0, -np.expm1(-self.rate * arr), 0.0), x)

    def ppf(self, p):
        arr = check_probability(p)
        return finalize(-np.log1p(-arr) / self.rate, p)

    def moment(self, n: int) -> float:
        n = check_moment_order(n)
        return math.factorial(n) / self.rate**n

    def sample(self, rng: np.random.Generator) -> float:
        check_generator(rng)
        return float(rng.exponential(1.0 / self.rate))
