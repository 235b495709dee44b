"""
Log-normal distribution implementation.

The logarithm of a log-normal variable is normally distributed. The
distribution owns one :class:`NormalDistribution` with the same ``(mu, sigma)``
and answers cumulative probabilities, quantiles and sampling by forwarding to
it through the ``log`` / ``exp`` transform.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import comb

from pysatl_lognormal.distributions.distribution import (
    ContinuousDistribution,
    check_generator,
    check_moment_order,
    check_parameter_vector,
    check_probability,
    finalize,
)
from pysatl_lognormal.distributions.sampling import as_array
from pysatl_lognormal.distributions.support import NON_NEGATIVE_HALF_LINE
from pysatl_lognormal.errors import OutOfRangeError, PrecisionLossWarning
from pysatl_lognormal.families.builtins.continuous.normal import SQRT_2PI, NormalDistribution
from pysatl_lognormal.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    import numpy.typing as npt

    from pysatl_lognormal.distributions.sampling import Sample
    from pysatl_lognormal.distributions.support import ContinuousSupport
    from pysatl_lognormal.types import Number, NumericArray


PRECISION_LOSS_THRESHOLD = 1e-8
"""Ratio of a central moment to its largest expansion term below which
:class:`~pysatl_lognormal.errors.PrecisionLossWarning` is emitted."""


@parametrization(name="logMeanStd")
class LogMeanStd(Parametrization):
    """
    Standard parametrization of log-normal distribution.

    Parameters
    ----------
    mu : float
        Mean of the logarithm of the variable
    sigma : float
        Standard deviation of the logarithm of the variable
    """

    mu: float
    sigma: float

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        """Check that standard deviation of the logarithm is positive."""
        return self.sigma > 0


@parametrization(name="meanVar")
class MeanVar(Parametrization):
    """
    Parametrization of log-normal distribution by the moments of the variable itself.

    Parameters
    ----------
    mean : float
        Mean of the log-normal variable
    variance : float
        Variance of the log-normal variable
    """

    mean: float
    variance: float

    @constraint(description="mean > 0")
    def check_mean_positive(self) -> bool:
        """Check that the mean is positive."""
        return self.mean > 0

    @constraint(description="variance > 0")
    def check_variance_positive(self) -> bool:
        """Check that the variance is positive."""
        return self.variance > 0

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Transform to Standard parametrization.

        Returns
        -------
        Parametrization
            Standard parametrization instance
        """
        sigma2 = math.log1p(self.variance / self.mean**2)
        mu = math.log(self.mean) - sigma2 / 2.0
        return LogMeanStd(mu=mu, sigma=math.sqrt(sigma2))  # type: ignore[call-arg]


class LognormalDistribution(ContinuousDistribution):
    """
    Log-normal distribution.

    A variable X is log-normal when ln X is normally distributed with mean μ
    and standard deviation σ. Note that μ and σ are *not* the mean and the
    standard deviation of X itself.

    Probability density function:
        f(x) = 1/(xσ√(2π)) * exp(-(ln x - μ)²/(2σ²)),  x > 0

    The log-normal distribution is commonly used as a model of prices: if the
    rate of return of an asset is normal, its price is log-normal.

    Parameters
    ----------
    mu : float, default 0.0
        Mean of the underlying normal distribution.
    sigma : float, default 1.0
        Standard deviation of the underlying normal distribution, must be positive.

    Raises
    ------
    OutOfRangeError
        If ``sigma <= 0``.

    Notes
    -----
    Parameters change only through :meth:`set_parameters`, which rebuilds the
    underlying normal distribution. Concurrent parameter replacement and reads
    must be serialized by the caller.
    """

    __slots__ = ("_parameters", "_normal")

    def __init__(self, mu: float = 0.0, sigma: float = 1.0) -> None:
        parameters = LogMeanStd(mu=float(mu), sigma=float(sigma))  # type: ignore[call-arg]
        parameters.validate()
        self._parameters = cast(LogMeanStd, parameters)
        self._normal = NormalDistribution(self.mu, self.sigma)

    @classmethod
    def standard(cls) -> LognormalDistribution:
        """Standard log-normal distribution, the exponential of a standard normal one."""
        return cls(0.0, 1.0)

    @classmethod
    def from_mean_variance(cls, mean: float, variance: float) -> LognormalDistribution:
        """
        Create the log-normal distribution with the given mean and variance.

        Raises
        ------
        OutOfRangeError
            If ``mean`` or ``variance`` is not positive.
        """
        parameters = MeanVar(mean=float(mean), variance=float(variance))  # type: ignore[call-arg]
        parameters.validate()
        base = cast(LogMeanStd, parameters.transform_to_base_parametrization())
        return cls(base.mu, base.sigma)

    @classmethod
    def fit(cls, sample: Sample | npt.ArrayLike) -> LognormalDistribution:
        """
        Maximum-likelihood estimate from observations.

        The estimate is closed-form: ``mu`` and ``sigma`` are the mean and the
        (biased) standard deviation of the logarithms of the observations.

        Raises
        ------
        OutOfRangeError
            If fewer than two observations are given, any observation is not
            positive, or all observations are equal.
        """
        x = as_array(sample)
        if x.size < 2:
            raise OutOfRangeError("At least two observations are required")
        if np.any(x <= 0.0):
            raise OutOfRangeError("Log-normal observations must be positive")
        logs = np.log(x)
        sigma = float(np.std(logs))
        if sigma == 0.0:
            raise OutOfRangeError("Observations are all equal, sigma cannot be estimated")
        return cls(float(np.mean(logs)), sigma)

    def __repr__(self) -> str:
        return f"LognormalDistribution(mu={self.mu!r}, sigma={self.sigma!r})"

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
    def normal(self) -> NormalDistribution:
        """The distribution of ``ln X``."""
        return self._normal

    @property
    def support(self) -> ContinuousSupport:
        """Support of log-normal distribution, ``[0, +inf)``."""
        return NON_NEGATIVE_HALF_LINE

    def pdf(self, x: Number | NumericArray) -> float | NumericArray:
        """
        Probability density function for log-normal distribution.

        Parameters
        ----------
        x : Number or NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        float or NumericArray
            Probability density values at points x, zero for x <= 0
        """
        arr = np.asarray(x, dtype=np.float64)
        # NaN fails both comparisons and propagates through the formula
        outside = arr <= 0.0
        safe = np.where(outside, 1.0, arr)
        z = (np.log(safe) - self.mu) / self.sigma
        values = np.where(outside, 0.0, np.exp(-z * z / 2.0) / (safe * SQRT_2PI * self.sigma))
        return finalize(values, x)

    def cdf(self, x: Number | NumericArray) -> float | NumericArray:
        """Probabilities ``P(X <= x)``; zero for x <= 0."""
        arr = np.asarray(x, dtype=np.float64)
        outside = arr <= 0.0
        values = np.where(outside, 0.0, self._normal.cdf(np.log(np.where(outside, 1.0, arr))))
        return finalize(values, x)

    def sf(self, x: Number | NumericArray) -> float | NumericArray:
        """Probabilities ``P(X > x)``; one for x <= 0."""
        arr = np.asarray(x, dtype=np.float64)
        outside = arr <= 0.0
        values = np.where(outside, 1.0, self._normal.sf(np.log(np.where(outside, 1.0, arr))))
        return finalize(values, x)

    def ppf(self, p: Number | NumericArray) -> float | NumericArray:
        """
        Percent point function (inverse CDF) for log-normal distribution.

        Raises
        ------
        OutOfRangeError
            If probability is outside [0, 1]
        """
        arr = check_probability(p)
        return finalize(np.exp(self._normal.ppf(arr)), p)

    def isf(self, q: Number | NumericArray) -> float | NumericArray:
        """
        Inverse survival function.

        Raises
        ------
        OutOfRangeError
            If probability is outside [0, 1]
        """
        arr = check_probability(q, "q")
        return finalize(np.exp(self._normal.isf(arr)), q)

    @property
    def mean(self) -> float:
        return float(np.exp(self.mu + self.sigma**2 / 2.0))

    @property
    def median(self) -> float:
        return float(np.exp(self.mu))

    @property
    def variance(self) -> float:
        # expm1 keeps full precision for small sigma
        s2 = self.sigma**2
        return float(np.expm1(s2) * np.exp(2.0 * self.mu + s2))

    @property
    def skewness(self) -> float:
        s2 = self.sigma**2
        return float(np.sqrt(np.expm1(s2)) * (np.exp(s2) + 2.0))

    def kurtosis(self, excess: bool = False) -> float:
        """Raw or excess kurtosis, ``exp(4σ²) + 2exp(3σ²) + 3exp(2σ²) - 3`` raw."""
        s2 = self.sigma**2
        kurt = float(np.exp(4.0 * s2) + 2.0 * np.exp(3.0 * s2) + 3.0 * np.exp(2.0 * s2) - 3.0)
        return kurt - 3.0 if excess else kurt

    def moment(self, n: int) -> float:
        """
        Raw moment ``E[X^n] = exp(n μ + (n σ)² / 2)``.

        Raises
        ------
        OutOfRangeError
            If ``n < 0``.
        """
        n = check_moment_order(n)
        return float(np.exp(n * self.mu + (n * self.sigma) ** 2 / 2.0))

    def central_moment(self, n: int) -> float:
        """
        Moment about the mean ``E[(X - mean)^n]``.

        For ``n >= 3`` uses the expansion of ``(X - mean)^n`` over raw moments::

            exp(n μ) Σ_i (-1)^i C(n, i) exp(((n - i)² + i) σ² / 2)

        The alternating sum cancels heavily for small ``σ`` or large ``n``;
        a :class:`~pysatl_lognormal.errors.PrecisionLossWarning` is emitted
        when most significant digits are lost.

        Raises
        ------
        OutOfRangeError
            If ``n < 0``.
        """
        n = check_moment_order(n)
        if n == 0:
            return 1.0
        if n == 1:
            return 0.0
        if n == 2:
            return self.variance

        i = np.arange(n + 1)
        terms = (-1.0) ** i * comb(n, i) * np.exp(((n - i) ** 2 + i) * (self.sigma**2 / 2.0))
        if np.all(np.isfinite(terms)):
            total = math.fsum(terms)
            largest = float(np.max(np.abs(terms)))
            if abs(total) < PRECISION_LOSS_THRESHOLD * largest:
                warnings.warn(
                    f"Central moment of order {n} lost most significant digits to cancellation "
                    f"(sigma={self.sigma!r})",
                    PrecisionLossWarning,
                    stacklevel=2,
                )
        else:
            total = float(np.sum(terms))
        return float(np.exp(n * self.mu) * total)

    def sample(self, rng: np.random.Generator) -> float:
        """
        Draw one variate as the exponential of a normal variate.

        Raises
        ------
        NullArgumentError
            If ``rng`` is ``None``.
        """
        check_generator(rng)
        return float(np.exp(self._normal.sample(rng)))

    def get_parameters(self) -> NumericArray:
        """Parameter vector ``[mu, sigma]``."""
        return self._parameters.as_vector()

    def set_parameters(self, parameters: Sequence[float] | NumericArray | None) -> None:
        """
        Replace ``mu`` and ``sigma`` and rebuild the underlying normal distribution.

        The distribution is left untouched when validation fails.

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
        candidate = LogMeanStd(mu=float(mu), sigma=float(sigma))  # type: ignore[call-arg]
        candidate.validate()
        self._parameters = cast(LogMeanStd, candidate)
        self._normal = NormalDistribution(self.mu, self.sigma)
