"""
PySATL Core
===========

Core framework for probabilistic distributions providing type definitions,
distribution abstractions, characteristic computation graphs, and parametric
family management.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
