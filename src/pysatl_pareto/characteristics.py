"""
Characteristic Evaluators
=========================

This module defines the scalar evaluators of a Pareto(shape ``a``, scale ``b``)
distribution and the factories producing them:

- :func:`make_pdf`: probability density function;
- :func:`make_cdf`: cumulative distribution function;
- :func:`make_quantile`: quantile (inverse CDF) function;
- :func:`make_mgf`: moment generating function.

Notes
-----
- Every evaluator is a frozen dataclass holding one ``(shape, scale)``
  snapshot. Building one is cheap, so the distribution handle builds a fresh
  evaluator on every call instead of caching.
- All evaluators are intentionally **scalar** (``float -> float``).
  Vectorization over sequences, grids and arrays is handled by
  :func:`pysatl_pareto.apply.apply`.
- Points where a characteristic is mathematically undefined evaluate to
  ``nan`` instead of raising.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from pysatl_pareto.special import upper_incomplete_gamma
from pysatl_pareto.types import CharacteristicName, Number


@dataclass(frozen=True, slots=True)
class ParetoEvaluator(ABC):
    """
    Unary evaluator bound to fixed Pareto parameters.

    Parameters
    ----------
    shape : float
        Shape parameter ``a``.
    scale : float
        Scale parameter ``b``.

    Attributes
    ----------
    target : CharacteristicName
        The characteristic this evaluator computes.
    """

    target: ClassVar[CharacteristicName]

    shape: float
    scale: float

    def __call__(self, x: Number) -> float:
        """Evaluate the characteristic at ``x``."""
        return self.evaluate(x)

    @abstractmethod
    def evaluate(self, x: Number) -> float: ...


@dataclass(frozen=True, slots=True)
class ParetoPDF(ParetoEvaluator):
    """
    Probability density function.

    .. math::

        f(x) = \\frac{a b^a}{x^{a+1}} \\quad x \\ge b, \\qquad f(x) = 0 \\quad x < b
    """

    target: ClassVar[CharacteristicName] = CharacteristicName.PDF

    def evaluate(self, x: Number) -> float:
        a, b = self.shape, self.scale
        if x >= b:
            xf = np.float64(x)
            # b / x <= 1 here, so the power cannot overflow for large shapes
            with np.errstate(under="ignore", divide="ignore", invalid="ignore"):
                return float((a / xf) * np.power(b / xf, a))
        return 0.0


@dataclass(frozen=True, slots=True)
class ParetoCDF(ParetoEvaluator):
    """
    Cumulative distribution function.

    .. math::

        F(x) = 1 - \\left(\\frac{b}{x}\\right)^a \\quad x \\ge b, \\qquad F(x) = 0 \\quad x < b
    """

    target: ClassVar[CharacteristicName] = CharacteristicName.CDF

    def evaluate(self, x: Number) -> float:
        a, b = self.shape, self.scale
        if x >= b:
            with np.errstate(under="ignore", divide="ignore", invalid="ignore"):
                return float(1.0 - np.power(b / np.float64(x), a))
        return 0.0


@dataclass(frozen=True, slots=True)
class ParetoQuantile(ParetoEvaluator):
    """
    Quantile function (inverse CDF).

    The distribution is unbounded, so ``p = 1`` maps to ``nan`` together with
    every other probability outside ``[0, 1)``.
    """

    target: ClassVar[CharacteristicName] = CharacteristicName.PPF

    def evaluate(self, x: Number) -> float:
        a, b = self.shape, self.scale
        if not 0 <= x < 1:
            return math.nan
        with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
            return float(b / np.power(1.0 - np.float64(x), 1.0 / a))


@dataclass(frozen=True, slots=True)
class ParetoMGF(ParetoEvaluator):
    """
    Moment generating function.

    For ``t < 0``:

    .. math::

        M(t) = a (-b t)^a \\, \\Gamma(-a, -b t)

    ``M(0) = 1`` and ``M(t)`` diverges for ``t > 0``, where ``nan`` is returned.
    """

    target: ClassVar[CharacteristicName] = CharacteristicName.MGF

    def evaluate(self, x: Number) -> float:
        a, b = self.shape, self.scale
        if x == 0:
            return 1.0
        if not x < 0:
            return math.nan
        arg = -b * float(x)
        gamma_tail = upper_incomplete_gamma(-a, arg, regularized=False, tail="upper")
        if gamma_tail == 0.0:
            return 0.0
        # combined in log space: arg**a and the tail overflow and underflow together
        with np.errstate(over="ignore", under="ignore"):
            return float(a * np.exp(a * np.log(arg) + np.log(gamma_tail)))


def make_pdf(a: float, b: float) -> ParetoPDF:
    """Build the probability density function for shape ``a`` and scale ``b``."""
    return ParetoPDF(shape=a, scale=b)


def make_cdf(a: float, b: float) -> ParetoCDF:
    """Build the cumulative distribution function for shape ``a`` and scale ``b``."""
    return ParetoCDF(shape=a, scale=b)


def make_quantile(a: float, b: float) -> ParetoQuantile:
    """Build the quantile function for shape ``a`` and scale ``b``."""
    return ParetoQuantile(shape=a, scale=b)


def make_mgf(a: float, b: float) -> ParetoMGF:
    """Build the moment generating function for shape ``a`` and scale ``b``."""
    return ParetoMGF(shape=a, scale=b)


__all__ = [
    "ParetoEvaluator",
    "ParetoPDF",
    "ParetoCDF",
    "ParetoQuantile",
    "ParetoMGF",
    "make_pdf",
    "make_cdf",
    "make_quantile",
    "make_mgf",
]
