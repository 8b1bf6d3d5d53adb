"""
Elementwise Application
=======================

Maps a scalar evaluator over scalars, flat sequences and 2-D grids while
preserving the shape of the input:

- a number yields a ``float``;
- a flat ``list``/``tuple`` of length ``n`` yields a new ``list`` of length ``n``;
- an ``R x C`` grid of rows yields a new ``R x C`` ``list`` of ``list``;
- a 0-d, 1-d or 2-d :class:`numpy.ndarray` yields a ``float`` or a ``float64``
  array of the same shape.

Anything else raises :class:`~pysatl_pareto.errors.InvalidInputError`.
The input is never mutated.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, cast

import numpy as np

from pysatl_pareto.errors import InvalidInputError
from pysatl_pareto.types import InputKind
from pysatl_pareto.validation import is_number

if TYPE_CHECKING:
    from pysatl_pareto.types import NumericArray, NumericInput, ScalarFunc

_NUMERIC_DTYPE_KINDS = "iuf"


def _is_numeric_array(data: np.ndarray[Any, Any]) -> bool:
    return data.dtype.kind in _NUMERIC_DTYPE_KINDS


def _is_flat_sequence(data: Any) -> bool:
    if isinstance(data, np.ndarray):
        return data.ndim == 1 and _is_numeric_array(data)
    if isinstance(data, str | bytes) or not isinstance(data, Sequence):
        return False
    return all(is_number(v) for v in data)


def classify_input(data: Any) -> InputKind:
    """
    Classify ``data`` into one of the supported input shape kinds.

    Parameters
    ----------
    data : Any
        Candidate input.

    Returns
    -------
    InputKind
        Kind of the input.

    Raises
    ------
    InvalidInputError
        If ``data`` is not a number, a flat sequence of numbers or a
        rectangular grid of numbers.
    """
    if is_number(data):
        return InputKind.SCALAR

    if isinstance(data, np.ndarray):
        if not _is_numeric_array(data):
            raise InvalidInputError(
                f"apply: array dtype must be integer or floating. Value: {data.dtype}"
            )
        if data.ndim == 0:
            return InputKind.SCALAR
        if data.ndim == 1:
            return InputKind.SEQUENCE
        if data.ndim == 2:
            return InputKind.GRID
        raise InvalidInputError(f"apply: arrays must have at most 2 dimensions. Value: {data.ndim}")

    if _is_flat_sequence(data):
        return InputKind.SEQUENCE

    if not isinstance(data, str | bytes) and isinstance(data, Sequence):
        if all(_is_flat_sequence(row) for row in data):
            widths = {len(row) for row in data}
            if len(widths) == 1:
                return InputKind.GRID
            raise InvalidInputError(
                f"apply: grid rows must all have the same length. Row lengths: {sorted(widths)}"
            )

    raise InvalidInputError(
        "apply: input must be a number, a sequence of numbers or a rectangular grid "
        f"of numbers. Value: {data!r}"
    )


def apply(
    evaluator: ScalarFunc, data: NumericInput
) -> float | list[float] | list[list[float]] | NumericArray:
    """
    Evaluate ``evaluator`` at every element of ``data``.

    Parameters
    ----------
    evaluator : ScalarFunc
        Scalar function ``float -> float``.
    data : NumericInput
        Number, flat sequence, rectangular grid or numeric array.

    Returns
    -------
    float, list[float], list[list[float]] or NumericArray
        Result with the same shape kind as ``data``.

    Raises
    ------
    InvalidInputError
        If ``data`` cannot be classified.
    """
    kind = classify_input(data)

    if isinstance(data, np.ndarray):
        if kind is InputKind.SCALAR:
            return float(evaluator(data.item()))
        values = data.ravel().tolist()
        out = np.fromiter((evaluator(v) for v in values), dtype=np.float64, count=len(values))
        return cast("NumericArray", out.reshape(data.shape))

    if kind is InputKind.SCALAR:
        return float(evaluator(cast(float, data)))
    if kind is InputKind.SEQUENCE:
        return [float(evaluator(v)) for v in cast("Sequence[float]", data)]
    return [
        [float(evaluator(v)) for v in row] for row in cast("Sequence[Sequence[float]]", data)
    ]


__all__ = [
    "apply",
    "classify_input",
]
