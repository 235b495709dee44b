"""
Likelihood Fitters
==================

Generic estimation routines working on any
:class:`~pysatl_lognormal.distributions.distribution.ParameterizedDistribution`:

- :func:`log_likelihood`: log-likelihood of observations under the current
  parameters;
- :func:`fit_maximum_likelihood`: numerical maximum-likelihood estimate via
  :func:`scipy.optimize.minimize`.

Notes
-----
- The fitters only use ``get_parameters``, ``set_parameters`` and
  ``likelihood``; they know nothing about the concrete distribution.
- Tolerances are free-form keyword options, passed to the optimizer.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy import optimize as _sp_optimize

from pysatl_lognormal.distributions.sampling import as_array
from pysatl_lognormal.errors import FitConvergenceWarning, OutOfRangeError

if TYPE_CHECKING:
    import numpy.typing as npt

    from pysatl_lognormal.distributions.distribution import ParameterizedDistribution
    from pysatl_lognormal.distributions.sampling import Sample
    from pysatl_lognormal.types import NumericArray


@dataclass(frozen=True, slots=True)
class MaximumLikelihoodFit:
    """
    Outcome of :func:`fit_maximum_likelihood`.

    Parameters
    ----------
    parameters : NumericArray
        Estimated parameter vector (also set on the distribution).
    log_likelihood : float
        Log-likelihood of the sample at ``parameters``.
    converged : bool
        Whether the optimizer reported success.
    n_iterations : int
        Number of optimizer iterations.
    message : str
        Optimizer status message.
    """

    parameters: NumericArray
    log_likelihood: float
    converged: bool
    n_iterations: int
    message: str


def _sum_log(values: npt.ArrayLike) -> float:
    with np.errstate(divide="ignore"):
        return float(np.sum(np.log(np.asarray(values, dtype=np.float64))))


def log_likelihood(
    distribution: ParameterizedDistribution, sample: Sample | npt.ArrayLike
) -> float:
    """
    Log-likelihood of observations under the distribution's current parameters.

    Returns
    -------
    float
        ``sum(log(likelihood(x_i)))``; ``-inf`` when any likelihood is zero.
    """
    x = as_array(sample)
    return _sum_log(distribution.likelihood(x))


def fit_maximum_likelihood(
    distribution: ParameterizedDistribution,
    sample: Sample | npt.ArrayLike,
    *,
    method: str = "Nelder-Mead",
    x_tol: float = 1e-8,
    f_tol: float = 1e-8,
    max_iter: int = 5000,
) -> MaximumLikelihoodFit:
    """
    Numerical maximum-likelihood estimate of the distribution's parameters.

    The negative log-likelihood is minimized starting from the distribution's
    current parameters. Trial vectors the distribution rejects score ``+inf``.
    On return the distribution holds the estimate.

    Parameters
    ----------
    distribution : ParameterizedDistribution
        Distribution to fit; mutated through ``set_parameters``.
    sample : Sample or array_like
        Univariate observations.
    method : str, default "Nelder-Mead"
        Method name for :func:`scipy.optimize.minimize`.
    x_tol, f_tol : float
        Absolute tolerances in the parameters and in the objective
        (Nelder-Mead only; other methods use their own defaults).
    max_iter : int, default 5000
        Maximum number of optimizer iterations.

    Returns
    -------
    MaximumLikelihoodFit
        Estimated parameters and optimizer diagnostics.

    Raises
    ------
    OutOfRangeError
        If the sample is empty.
    """
    x = as_array(sample)
    if x.size == 0:
        raise OutOfRangeError("Cannot fit a distribution to an empty sample")

    initial = np.asarray(distribution.get_parameters(), dtype=np.float64)

    def _negative_log_likelihood(theta: NumericArray) -> float:
        try:
            distribution.set_parameters(theta)
        except OutOfRangeError:
            return float("inf")
        value = -_sum_log(distribution.likelihood(x))
        return value if np.isfinite(value) else float("inf")

    options: dict[str, float | int] = {"maxiter": max_iter}
    if method == "Nelder-Mead":
        options.update(xatol=x_tol, fatol=f_tol)

    try:
        result = _sp_optimize.minimize(
            _negative_log_likelihood, initial, method=method, options=options
        )
    except Exception:
        distribution.set_parameters(initial)
        raise

    if not result.success:
        warnings.warn(
            f"Likelihood maximization did not converge: {result.message}",
            FitConvergenceWarning,
            stacklevel=2,
        )

    estimate = np.asarray(result.x, dtype=np.float64)
    distribution.set_parameters(estimate)
    return MaximumLikelihoodFit(
        parameters=estimate,
        log_likelihood=-float(result.fun),
        converged=bool(result.success),
        n_iterations=int(getattr(result, "nit", 0)),
        message=str(result.message),
    )


__all__ = [
    "MaximumLikelihoodFit",
    "fit_maximum_likelihood",
    "log_likelihood",
]
