"""
Normal distribution implementation.

Contains the Normal distribution with mean-standard deviation and
mean-precision parameterizations. The log-normal distribution delegates its
cumulative probabilities, quantiles and sampling to this class.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import ndtr, ndtri

from pysatl_lognormal.distributions.distribution import (
    ContinuousDistribution,
    check_generator,
    check_moment_order,
    check_parameter_vector,
    check_probability,
    finalize,
)
from pysatl_lognormal.distributions.support import REAL_LINE
from pysatl_lognormal.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pysatl_lognormal.distributions.support import ContinuousSupport
    from pysatl_lognormal.types import Number, NumericArray


SQRT_2PI = math.sqrt(2.0 * math.pi)


@parametrization(name="meanStd")
class MeanStd(Parametrization):
    """
    Standard parametrization of normal distribution.

    Parameters
    ----------
    mu : float
        Mean of the distribution
    sigma : float
        Standard deviation of the distribution
    """

    mu: float
    sigma: float

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        """Check that standard deviation is positive."""
        return self.sigma > 0


@parametrization(name="meanPrec")
class MeanPrec(Parametrization):
    """
    Mean-precision parametrization of normal distribution.

    Parameters
    ----------
    mu : float
        Mean of the distribution
    tau : float
        Precision parameter (inverse variance)
    """

    mu: float
    tau: float

    @constraint(description="tau > 0")
    def check_tau_positive(self) -> bool:
        """Check that precision parameter is positive."""
        return self.tau > 0

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Transform to Standard parametrization.

        Returns
        -------
        Parametrization
            Standard parametrization instance
        """
        sigma = math.sqrt(1 / self.tau)
        return MeanStd(mu=self.mu, sigma=sigma)  # type: ignore[call-arg]


class NormalDistribution(ContinuousDistribution):
    """
    Normal (Gaussian) distribution.

    The normal distribution is a continuous probability distribution characterized
    by its bell-shaped curve. It is symmetric about its mean and is defined by
    two parameters: mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    mu : float, default 0.0
        Mean of the distribution.
    sigma : float, default 1.0
        Standard deviation of the distribution, must be positive.

    Raises
    ------
    OutOfRangeError
        If ``sigma <= 0``.
    """

    __slots__ = ("_parameters",)

    def __init__(self, mu: float = 0.0, sigma: float = 1.0) -> None:
        parameters = MeanStd(mu=float(mu), sigma=float(sigma))  # type: ignore[call-arg]
        parameters.validate()
        self._parameters = cast(MeanStd, parameters)

    @classmethod
    def from_precision(cls, mu: float, tau: float) -> NormalDistribution:
        """Create a normal distribution from its mean and precision ``1 / sigma²``."""
        parameters = MeanPrec(mu=float(mu), tau=float(tau))  # type: ignore[call-arg]
        parameters.validate()
        base = cast(MeanStd, parameters.transform_to_base_parametrization())
        return cls(base.mu, base.sigma)

    def __repr__(self) -> str:
        return f"NormalDistribution(mu={self.mu!r}, sigma={self.sigma!r})"

    @property
    def parameters(self) -> Parametrization:
        """Current parameters in the base parametrization."""
        return self._parameters

    @property
    def mu(self) -> float:
        return self._parameters.mu

    @property
    def sigma(self) -> float:
        return self._parameters.sigma

    @property
    def support(self) -> ContinuousSupport:
        """Support of normal distribution"""
        return REAL_LINE

    def _standardize(self, x: Number | NumericArray) -> NumericArray:
        return cast("NumericArray", (np.asarray(x, dtype=np.float64) - self.mu) / self.sigma)

    def pdf(self, x: Number | NumericArray) -> float | NumericArray:
        """
        Probability density function for normal distribution.

        Parameters
        ----------
        x : Number or NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        float or NumericArray
            Probability density values at points x
        """
        z = self._standardize(x)
        return finalize(np.exp(-0.5 * z * z) / (self.sigma * SQRT_2PI), x)

    def cdf(self, x: Number | NumericArray) -> float | NumericArray:
        """Probabilities ``P(X <= x)``."""
        return finalize(ndtr(self._standardize(x)), x)

    def sf(self, x: Number | NumericArray) -> float | NumericArray:
        """Probabilities ``P(X > x)``, accurate far in the upper tail."""
        return finalize(ndtr(-self._standardize(x)), x)

    def ppf(self, p: Number | NumericArray) -> float | NumericArray:
        """
        Percent point function (inverse CDF) for normal distribution.

        Parameters
        ----------
        p : Number or NumericArray
            Probability from [0, 1]

        Returns
        -------
        float or NumericArray
            Quantiles corresponding to probabilities p
            If p[i] is 0 or 1, then the result[i] is -inf and inf correspondingly

        Raises
        ------
        OutOfRangeError
            If probability is outside [0, 1]
        """
        arr = check_probability(p)
        return finalize(self.mu + self.sigma * ndtri(arr), p)

    def isf(self, q: Number | NumericArray) -> float | NumericArray:
        """Inverse survival function, ``isf(q) = ppf(1 - q)`` without the subtraction."""
        arr = check_probability(q, "q")
        return finalize(self.mu - self.sigma * ndtri(arr), q)

    @property
    def mean(self) -> float:
        return self.mu

    @property
    def median(self) -> float:
        return self.mu

    @property
    def variance(self) -> float:
        return self.sigma**2

    @property
    def skewness(self) -> float:
        return 0.0

    def kurtosis(self, excess: bool = False) -> float:
        """Raw (3) or excess (0) kurtosis of the normal distribution."""
        return 0.0 if excess else 3.0

    def moment(self, n: int) -> float:
        """
        Raw moment ``E[X^n]``.

        Uses the recurrence ``M_n = mu M_{n-1} + (n - 1) sigma² M_{n-2}``.
        """
        n = check_moment_order(n)
        if n == 0:
            return 1.0
        var = self.variance
        prev, cur = 1.0, self.mu
        for k in range(2, n + 1):
            prev, cur = cur, self.mu * cur + (k - 1) * var * prev
        return cur

    def central_moment(self, n: int) -> float:
        """Moment about the mean: ``sigma^n (n-1)!!`` for even ``n``, zero for odd."""
        n = check_moment_order(n)
        if n % 2 == 1:
            return 0.0
        return self.sigma**n * math.prod(range(n - 1, 0, -2))

    def sample(self, rng: np.random.Generator) -> float:
        """
        Draw one variate.

        Raises
        ------
        NullArgumentError
            If ``rng`` is ``None``.
        """
        check_generator(rng)
        return float(rng.normal(self.mu, self.sigma))

    def get_parameters(self) -> NumericArray:
        """Parameter vector ``[mu, sigma]``."""
        return self._parameters.as_vector()

    def set_parameters(self, parameters: Sequence[float] | NumericArray | None) -> None:
        """
        Replace ``mu`` and ``sigma``.

        Raises
        ------
        NullArgumentError
            If ``parameters`` is ``None``.
        DimensionMismatchError
            If ``parameters`` does not have two entries.
        OutOfRangeError
            If the new ``sigma`` is not positive.
        """
        mu, sigma = check_parameter_vector(parameters, 2)
        candidate = MeanStd(mu=float(mu), sigma=float(sigma))  # type: ignore[call-arg]
        candidate.validate()
        self._parameters = cast(MeanStd, candidate)
