from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import inf
from typing import TYPE_CHECKING, cast, overload

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_pareto.types import BoolArray, Number, NumericArray


@dataclass(frozen=True, slots=True)
class ParetoSupport:
    """
    Support of a Pareto distribution: the closed-open ray ``[scale, +inf)``.

    Parameters
    ----------
    scale : float
        Scale parameter, the included left endpoint.

    Notes
    -----
    Iterating yields ``left`` then ``right`` so the support unpacks as a pair.
    """

    scale: float

    @property
    def left(self) -> float:
        """Included left endpoint, equal to the scale."""
        return self.scale

    @property
    def right(self) -> float:
        """Excluded right endpoint, always ``+inf``."""
        return inf

    @property
    def left_closed(self) -> bool:
        return True

    @property
    def right_closed(self) -> bool:
        return False

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) lie in ``[scale, +inf)``.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for finite points not below the scale, False otherwise.
        """
        arr = np.asarray(x)
        result = (arr >= self.scale) & (arr < inf)

        if np.ndim(arr) == 0:
            return bool(result)
        return cast("BoolArray", result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast("Number", x)))

    def __iter__(self) -> Iterator[float]:
        return iter((self.left, self.right))

    def __str__(self) -> str:
        return f"[{self.scale}, inf)"


__all__ = [
    "ParetoSupport",
]
