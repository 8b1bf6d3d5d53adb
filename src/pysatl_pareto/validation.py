"""
Input predicates shared by the parameter model and the applicator.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections.abc import Mapping
from numbers import Real
from typing import Any

import numpy as np


def is_number(value: Any) -> bool:
    """
    Check whether ``value`` is a real number.

    Python and NumPy integers and floats qualify; ``bool`` and ``numpy.bool_``
    do not.
    """
    if isinstance(value, bool | np.bool_):
        return False
    return isinstance(value, Real | np.integer | np.floating)


def is_positive_number(value: Any) -> bool:
    """Check whether ``value`` is a finite real number strictly greater than zero."""
    if not is_number(value):
        return False
    return bool(math.isfinite(value) and value > 0)


def is_plain_object(value: Any) -> bool:
    """Check whether ``value`` is a key-value mapping usable as an options object."""
    return isinstance(value, Mapping)


__all__ = [
    "is_number",
    "is_positive_number",
    "is_plain_object",
]
