"""
Distribution Interfaces and a Univariate Continuous Base
========================================================

This module defines the public distribution contracts and a base class that
concrete univariate continuous distributions build on:

- :class:`Distribution` protocol: interface used throughout the package.
- :class:`ParameterizedDistribution` protocol: optional capability used by
  generic fitters: a flat parameter vector and a likelihood.
- :class:`ContinuousDistribution`: abstract base supplying default
  implementations (survival function, inverse survival function, median,
  moments about the mean, kurtosis, bulk sampling, log-likelihood).

Notes
-----
- Pointwise characteristics accept scalars or arrays. Scalars yield Python
  floats, arrays yield arrays of the same shape.
- Randomness is always supplied by the caller as a
  :class:`numpy.random.Generator`; distributions never own or seed one.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import operator
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, cast, runtime_checkable

import numpy as np
from scipy.special import comb

from pysatl_lognormal.distributions.fitters import log_likelihood as _log_likelihood
from pysatl_lognormal.distributions.sampling import ArraySample
from pysatl_lognormal.errors import DimensionMismatchError, NullArgumentError, OutOfRangeError
from pysatl_lognormal.types import CharacteristicName, UnivariateContinuous

if TYPE_CHECKING:
    from collections.abc import Sequence

    import numpy.typing as npt

    from pysatl_lognormal.distributions.sampling import Sample
    from pysatl_lognormal.distributions.support import ContinuousSupport
    from pysatl_lognormal.types import EuclideanDistributionType, Number, NumericArray


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by fitters and consumers."""

    @property
    def distribution_type(self) -> EuclideanDistributionType: ...
    @property
    def support(self) -> ContinuousSupport: ...

    def pdf(self, x: Number | NumericArray) -> float | NumericArray: ...
    def cdf(self, x: Number | NumericArray) -> float | NumericArray: ...
    def sf(self, x: Number | NumericArray) -> float | NumericArray: ...
    def ppf(self, p: Number | NumericArray) -> float | NumericArray: ...
    def isf(self, q: Number | NumericArray) -> float | NumericArray: ...

    @property
    def mean(self) -> float: ...
    @property
    def median(self) -> float: ...
    @property
    def variance(self) -> float: ...
    @property
    def skewness(self) -> float: ...

    def moment(self, n: int) -> float: ...
    def central_moment(self, n: int) -> float: ...
    def sample(self, rng: np.random.Generator) -> float: ...


@runtime_checkable
class ParameterizedDistribution(Protocol):
    """
    Capability of distributions described by a flat parameter vector.

    Generic estimation code (see :mod:`pysatl_lognormal.distributions.fitters`)
    relies only on this interface, never on the concrete distribution type.
    """

    def get_parameters(self) -> NumericArray: ...
    def set_parameters(self, parameters: Sequence[float] | NumericArray | None) -> None: ...
    def likelihood(self, x: Number | NumericArray) -> float | NumericArray: ...


def finalize(values: npt.ArrayLike, like: Number | NumericArray) -> float | NumericArray:
    """Return ``values`` as a float when ``like`` is a scalar, as an array otherwise."""
    if np.ndim(like) == 0:
        return float(cast(Any, values))
    return cast("NumericArray", np.asarray(values, dtype=np.float64))


def check_probability(p: Number | NumericArray, name: str = "p") -> NumericArray:
    """
    Validate probability argument(s).

    Raises
    ------
    OutOfRangeError
        If any value is outside ``[0, 1]``.
    """
    arr = np.asarray(p, dtype=np.float64)
    if np.any((arr < 0.0) | (arr > 1.0)):
        raise OutOfRangeError(f"Probability {name} must be in [0, 1]")
    return cast("NumericArray", arr)


def check_moment_order(n: int) -> int:
    """
    Validate a moment order.

    Raises
    ------
    TypeError
        If ``n`` is not an integer.
    OutOfRangeError
        If ``n`` is negative.
    """
    n = operator.index(n)
    if n < 0:
        raise OutOfRangeError(f"Moment order must be non-negative, got {n}")
    return n


def check_generator(rng: np.random.Generator | None) -> np.random.Generator:
    """
    Validate a caller-supplied random generator.

    Raises
    ------
    NullArgumentError
        If ``rng`` is ``None``.
    """
    if rng is None:
        raise NullArgumentError("A random generator (rng) must be supplied")
    return rng


def check_parameter_vector(
    parameters: Sequence[float] | NumericArray | None, expected: int
) -> NumericArray:
    """
    Validate the shape of a parameter vector passed to ``set_parameters``.

    Raises
    ------
    NullArgumentError
        If ``parameters`` is ``None``.
    DimensionMismatchError
        If ``parameters`` is not a flat vector of exactly ``expected`` values.
    """
    if parameters is None:
        raise NullArgumentError("A parameter vector must be supplied")
    arr = np.asarray(parameters, dtype=np.float64)
    if arr.shape != (expected,):
        raise DimensionMismatchError(expected, arr.size)
    return cast("NumericArray", arr)


class ContinuousDistribution(ABC):
    """
    Base class for univariate continuous distributions.

    Subclasses provide ``support``, ``pdf``, ``cdf``, ``ppf``, ``moment``
    and ``sample``; everything else has a default built on those and may be
    overridden with closed forms.
    """

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        """Get the distribution type."""
        return UnivariateContinuous

    @property
    @abstractmethod
    def support(self) -> ContinuousSupport: ...

    @abstractmethod
    def pdf(self, x: Number | NumericArray) -> float | NumericArray: ...

    @abstractmethod
    def cdf(self, x: Number | NumericArray) -> float | NumericArray: ...

    @abstractmethod
    def ppf(self, p: Number | NumericArray) -> float | NumericArray: ...

    @abstractmethod
    def moment(self, n: int) -> float: ...

    @abstractmethod
    def sample(self, rng: np.random.Generator) -> float: ...

    def sf(self, x: Number | NumericArray) -> float | NumericArray:
        """Survival function ``P(X > x)``."""
        return finalize(1.0 - np.asarray(self.cdf(x)), x)

    def isf(self, q: Number | NumericArray) -> float | NumericArray:
        """Inverse survival function."""
        arr = check_probability(q, "q")
        return self.ppf(finalize(1.0 - arr, q))

    @property
    def mean(self) -> float:
        return self.moment(1)

    @property
    def median(self) -> float:
        return float(self.ppf(0.5))

    @property
    def variance(self) -> float:
        return self.moment(2) - self.moment(1) ** 2

    @property
    def standard_deviation(self) -> float:
        return math.sqrt(self.variance)

    @property
    def skewness(self) -> float:
        return self.central_moment(3) / self.variance**1.5

    def kurtosis(self, excess: bool = False) -> float:
        """
        Raw or excess kurtosis.

        Parameters
        ----------
        excess : bool, default False
            Subtract 3 (the kurtosis of the normal distribution).
        """
        kurt = self.central_moment(4) / self.variance**2
        return kurt - 3.0 if excess else kurt

    def central_moment(self, n: int) -> float:
        """
        Moment about the mean ``E[(X - mean)^n]``.

        The default expands ``(X - mean)^n`` binomially over the raw moments,
        which loses precision to cancellation when the spread is small
        relative to the mean.
        """
        n = check_moment_order(n)
        if n == 0:
            return 1.0
        if n == 1:
            return 0.0
        if n == 2:
            return self.variance

        shift = -self.mean
        return math.fsum(
            float(comb(n, k, exact=True)) * self.moment(k) * shift ** (n - k) for k in range(n + 1)
        )

    def sample_many(self, n: int, rng: np.random.Generator) -> ArraySample:
        """
        Draw ``n`` independent variates.

        Returns
        -------
        ArraySample
            A 2D sample of shape ``(n, 1)``.
        """
        if n < 0:
            raise OutOfRangeError(f"Sample size must be non-negative, got {n}")
        check_generator(rng)
        vals = np.array([self.sample(rng) for _ in range(n)], dtype=np.float64).reshape(n, 1)
        return ArraySample(vals)

    def likelihood(self, x: Number | NumericArray) -> float | NumericArray:
        """Likelihood of observation(s), the density."""
        return self.pdf(x)

    def log_likelihood(self, sample: Sample | npt.ArrayLike) -> float:
        """
        Log-likelihood of observations, ``-inf`` if any lies outside the support.
        """
        return _log_likelihood(self, sample)

    def calculate_characteristic(
        self, characteristic_name: str, value: Any = None, **options: Any
    ) -> Any:
        """
        Evaluate a characteristic by name.

        Parameters
        ----------
        characteristic_name : str
            A :class:`~pysatl_lognormal.types.CharacteristicName` value.
        value : Any
            Point, probability or moment order; ignored for summary statistics.
        **options
            Passed through to the characteristic (e.g. ``excess`` for kurtosis).
        """
        match CharacteristicName(characteristic_name):
            case CharacteristicName.PDF:
                return self.pdf(value)
            case CharacteristicName.CDF:
                return self.cdf(value)
            case CharacteristicName.SF:
                return self.sf(value)
            case CharacteristicName.PPF:
                return self.ppf(value)
            case CharacteristicName.ISF:
                return self.isf(value)
            case CharacteristicName.MEAN:
                return self.mean
            case CharacteristicName.MEDIAN:
                return self.median
            case CharacteristicName.VAR:
                return self.variance
            case CharacteristicName.SKEW:
                return self.skewness
            case CharacteristicName.KURT:
                return self.kurtosis(**options)
            case CharacteristicName.MOMENT:
                return self.moment(value)
            case CharacteristicName.CENTRAL_MOMENT:
                return self.central_moment(value)


__all__ = [
    "Distribution",
    "ParameterizedDistribution",
    "ContinuousDistribution",
    "check_generator",
    "check_moment_order",
    "check_parameter_vector",
    "check_probability",
    "finalize",
]
