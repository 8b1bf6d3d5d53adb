"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL Pareto.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Sequence
from enum import Enum, StrEnum, auto
from typing import Any

import numpy as np
from numpy.typing import NDArray

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

type NumericSequence = Sequence[Number]
"""Type alias for flat ordered sequences of numbers."""

type NumericGrid = Sequence[Sequence[Number]]
"""Type alias for row-major rectangular grids of numbers."""

type NumericInput = Number | NumericSequence | NumericGrid | NumericArray
"""Type alias for everything the elementwise applicator accepts."""

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""


class InputKind(Enum):
    """
    Shape kinds accepted by the elementwise applicator.

    Attributes
    ----------
    SCALAR
        A single number.
    SEQUENCE
        A flat ordered sequence of numbers.
    GRID
        A 2-D rectangular grid of numbers (row-major).
    """

    SCALAR = auto()
    SEQUENCE = auto()
    GRID = auto()


class CharacteristicName(StrEnum):
    """
    Names of the Pareto distribution characteristics.

    Function-valued characteristics (``PDF``, ``CDF``, ``PPF``, ``MGF``) are
    produced by factories and applied elementwise; the remaining entries are
    closed-form scalars exposed by the distribution handle.
    """

    PDF = "pdf"
    CDF = "cdf"
    PPF = "quantile"
    MGF = "mgf"
    MEAN = "mean"
    VAR = "variance"
    MEDIAN = "median"
    MODE = "mode"
    SKEW = "skewness"
    EXKURT = "ekurtosis"
    ENTROPY = "entropy"


__all__ = [
    "BoolArray",
    "CharacteristicName",
    "InputKind",
    "Number",
    "NumericArray",
    "NumericGrid",
    "NumericInput",
    "NumericSequence",
    "NumPyNumber",
    "ScalarFunc",
]
