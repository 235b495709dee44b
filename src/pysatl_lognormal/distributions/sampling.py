"""
Sampling Interfaces
===================

This module defines protocols and implementations for sample containers
used in distribution sampling and fitting.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt


@runtime_checkable
class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample container.

    This implementation stores samples as a 2D floating-point array
    of shape (n_samples, n_dimensions).

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array of shape (n, d).

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        """Return the number of samples (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
        """Iterate over samples (rows of the array)."""
        yield from self.data

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n, d)."""
        n, d = self.data.shape
        return int(n), int(d)


def as_array(sample: Sample | npt.ArrayLike) -> npt.NDArray[np.float64]:
    """
    Flatten univariate observations to a 1D float array.

    Parameters
    ----------
    sample : Sample or array_like
        An ``(n, 1)`` sample container or any array-like of scalars.

    Returns
    -------
    numpy.ndarray
        1D ``float64`` array of the observations.

    Raises
    ------
    ValueError
        If the sample is multivariate.
    """
    if isinstance(sample, Sample):
        if sample.shape[1] != 1:
            raise ValueError("Univariate observations expected, got a sample of dimension > 1.")
        data = sample.array
    else:
        data = sample
    return np.asarray(data, dtype=np.float64).reshape(-1)
