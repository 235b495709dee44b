from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf
from typing import Protocol, overload, runtime_checkable

from pysatl_lognormal.types import BoolArray, Interval1D, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


REAL_LINE = ContinuousSupport()
"""Support of distributions defined on the whole real line."""

NON_NEGATIVE_HALF_LINE = ContinuousSupport(left=0.0, right=inf, left_closed=True)
"""Support ``[0, +inf)`` of distributions of positive variables."""


__all__ = [
    "Support",
    "ContinuousSupport",
    "REAL_LINE",
    "NON_NEGATIVE_HALF_LINE",
]
