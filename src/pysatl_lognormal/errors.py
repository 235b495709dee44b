"""
Exceptions and Warnings
=======================

Error kinds raised by distributions and fitters. Each error also derives from
the builtin exception a caller would naturally catch (``ValueError`` or
``TypeError``), so ``except ValueError`` keeps working for range violations.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DistributionError(Exception):
    """Base class for all errors raised by the package."""


class OutOfRangeError(DistributionError, ValueError):
    """
    An argument lies outside its admissible range.

    Raised for a non-positive scale parameter, a negative moment order or a
    probability outside ``[0, 1]``.
    """


class NullArgumentError(DistributionError, TypeError):
    """A required argument (random generator, parameter vector) is ``None``."""


class DimensionMismatchError(DistributionError, ValueError):
    """A parameter vector does not have the length the distribution expects."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Expected {expected} parameters, got {actual}")
        self.expected = expected
        self.actual = actual


class PrecisionLossWarning(RuntimeWarning):
    """A result is known to have lost most of its significant digits."""


class FitConvergenceWarning(UserWarning):
    """The likelihood optimizer did not report convergence."""


__all__ = [
    "DistributionError",
    "OutOfRangeError",
    "NullArgumentError",
    "DimensionMismatchError",
    "PrecisionLossWarning",
    "FitConvergenceWarning",
]
