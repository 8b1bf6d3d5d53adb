"""
Pareto distribution handle.

This module provides :class:`ParetoDistribution`, a mutable handle owning a
validated ``(shape, scale)`` pair, and the :func:`create_distribution` entry
point.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
import warnings
from typing import TYPE_CHECKING, Self

from pysatl_pareto.apply import apply
from pysatl_pareto.characteristics import make_cdf, make_mgf, make_pdf, make_quantile
from pysatl_pareto.config import DEFAULT_SCALE, DEFAULT_SHAPE, RECOGNIZED_OPTIONS
from pysatl_pareto.errors import InvalidConstructionError, InvalidParameterError
from pysatl_pareto.parameters import DistributionParameters
from pysatl_pareto.support import ParetoSupport
from pysatl_pareto.validation import is_plain_object

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_pareto.characteristics import ParetoCDF, ParetoMGF, ParetoPDF, ParetoQuantile
    from pysatl_pareto.types import NumericArray, NumericInput

    type Applied = float | list[float] | list[list[float]] | NumericArray

logger = logging.getLogger(__name__)


class ParetoDistribution:
    """
    Pareto (type I) distribution with shape ``a`` and scale ``b``.

    The handle holds a frozen :class:`DistributionParameters` snapshot which
    setters replace as a whole. Characteristic accessors build a fresh
    evaluator from the current snapshot on every call, so evaluators returned
    earlier keep the parameters they were built with.

    Parameters
    ----------
    shape : float, default=1.0
        Shape parameter ``a > 0``.
    scale : float, default=1.0
        Scale parameter ``b > 0``.

    Raises
    ------
    InvalidParameterError
        If ``shape`` or ``scale`` is not a positive finite number.

    Notes
    -----
    The handle is not internally synchronized; guard concurrent setter calls
    on a shared instance externally.
    """

    __slots__ = ("_parameters",)

    def __init__(self, shape: float = DEFAULT_SHAPE, scale: float = DEFAULT_SCALE) -> None:
        try:
            self._parameters = DistributionParameters(shape=shape, scale=scale)
        except InvalidParameterError as err:
            raise err.for_operation(type(self).__name__) from None
        logger.debug("Created Pareto distribution: shape=%r, scale=%r", shape, scale)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self.get_shape()!r}, scale={self.get_scale()!r})"

    # ------------------------------------------------------------------ #
    # Parameters
    # ------------------------------------------------------------------ #

    @property
    def parameters(self) -> DistributionParameters:
        """Current parameter snapshot."""
        return self._parameters

    def get_shape(self) -> float:
        """Return the shape parameter."""
        return self._parameters.shape

    def set_shape(self, value: float) -> Self:
        """
        Set the shape parameter.

        Parameters
        ----------
        value : float
            New shape, a positive finite number.

        Returns
        -------
        ParetoDistribution
            This instance, for chaining.

        Raises
        ------
        InvalidParameterError
            If ``value`` is invalid. The stored shape is left unchanged.
        """
        try:
            updated = self._parameters.with_shape(value)
        except InvalidParameterError as err:
            logger.debug("Rejected shape %r, keeping %r", value, self._parameters.shape)
            raise err.for_operation("set_shape") from None
        logger.debug("Shape changed: %r -> %r", self._parameters.shape, value)
        self._parameters = updated
        return self

    def get_scale(self) -> float:
        """Return the scale parameter."""
        return self._parameters.scale

    def set_scale(self, value: float) -> Self:
        """
        Set the scale parameter.

        Parameters
        ----------
        value : float
            New scale, a positive finite number.

        Returns
        -------
        ParetoDistribution
            This instance, for chaining.

        Raises
        ------
        InvalidParameterError
            If ``value`` is invalid. The stored scale is left unchanged.
        """
        try:
            updated = self._parameters.with_scale(value)
        except InvalidParameterError as err:
            logger.debug("Rejected scale %r, keeping %r", value, self._parameters.scale)
            raise err.for_operation("set_scale") from None
        logger.debug("Scale changed: %r -> %r", self._parameters.scale, value)
        self._parameters = updated
        return self

    @property
    def shape(self) -> float:
        """Shape parameter ``a``."""
        return self.get_shape()

    @shape.setter
    def shape(self, value: float) -> None:
        self.set_shape(value)

    @property
    def scale(self) -> float:
        """Scale parameter ``b``."""
        return self.get_scale()

    @scale.setter
    def scale(self, value: float) -> None:
        self.set_scale(value)

    # ------------------------------------------------------------------ #
    # Closed-form characteristics
    # ------------------------------------------------------------------ #

    def support(self) -> ParetoSupport:
        """Support ``[scale, +inf)``."""
        return ParetoSupport(scale=self._parameters.scale)

    def mean(self) -> float:
        """Mean, infinite for ``shape <= 1``."""
        a, b = self._parameters.shape, self._parameters.scale
        if a <= 1:
            return math.inf
        return (a * b) / (a - 1)

    def variance(self) -> float:
        """
        Variance.

        Infinite for ``0.5 < shape <= 2``, undefined (``nan``) for
        ``shape <= 0.5``.
        """
        a, b = self._parameters.shape, self._parameters.scale
        if 0.5 < a <= 2:
            return math.inf
        if a > 2:
            return (b / (a - 1)) ** 2 * (a / (a - 2))
        return math.nan

    def median(self) -> float:
        """Median ``scale * 2 ** (1 / shape)``."""
        a, b = self._parameters.shape, self._parameters.scale
        return b * 2 ** (1 / a)

    def mode(self) -> float:
        """Mode, equal to the scale."""
        return self._parameters.scale

    def skewness(self) -> float:
        """Skewness, defined for ``shape > 3`` only."""
        a = self._parameters.shape
        if a > 3:
            return (2 * (1 + a) / (a - 3)) * math.sqrt((a - 2) / a)
        return math.nan

    def ekurtosis(self) -> float:
        """Excess kurtosis, defined for ``shape > 4`` only."""
        a = self._parameters.shape
        if a > 4:
            num = 6 * (a**3 + a**2 - 6 * a - 2)
            denom = a * (a - 3) * (a - 4)
            return num / denom
        return math.nan

    def entropy(self) -> float:
        """Differential entropy ``ln(scale / shape) + 1 / shape + 1``."""
        a, b = self._parameters.shape, self._parameters.scale
        return math.log(b / a) + 1 / a + 1

    # ------------------------------------------------------------------ #
    # Function-valued characteristics
    # ------------------------------------------------------------------ #

    def pdf(self, x: NumericInput | None = None) -> ParetoPDF | Applied:
        """
        Probability density function.

        Parameters
        ----------
        x : NumericInput, optional
            Points to evaluate at. If omitted the evaluator itself is returned.

        Returns
        -------
        ParetoPDF or evaluated values
            The bound evaluator, or its values shaped like ``x``.
        """
        pdf = make_pdf(self._parameters.shape, self._parameters.scale)
        if x is None:
            return pdf
        return apply(pdf, x)

    def cdf(self, x: NumericInput | None = None) -> ParetoCDF | Applied:
        """
        Cumulative distribution function.

        Parameters
        ----------
        x : NumericInput, optional
            Points to evaluate at. If omitted the evaluator itself is returned.

        Returns
        -------
        ParetoCDF or evaluated values
            The bound evaluator, or its values shaped like ``x``.
        """
        cdf = make_cdf(self._parameters.shape, self._parameters.scale)
        if x is None:
            return cdf
        return apply(cdf, x)

    def quantile(self, p: NumericInput | None = None) -> ParetoQuantile | Applied:
        """
        Quantile function.

        Parameters
        ----------
        p : NumericInput, optional
            Probabilities to evaluate at. If omitted the evaluator itself is
            returned. Probabilities outside ``[0, 1)`` evaluate to ``nan``.

        Returns
        -------
        ParetoQuantile or evaluated values
            The bound evaluator, or its values shaped like ``p``.
        """
        q = make_quantile(self._parameters.shape, self._parameters.scale)
        if p is None:
            return q
        return apply(q, p)

    def mgf(self, t: NumericInput | None = None) -> ParetoMGF | Applied:
        """
        Moment generating function.

        Parameters
        ----------
        t : NumericInput, optional
            Points to evaluate at. If omitted the evaluator itself is returned.
            Positive points evaluate to ``nan``.

        Returns
        -------
        ParetoMGF or evaluated values
            The bound evaluator, or its values shaped like ``t``.
        """
        m = make_mgf(self._parameters.shape, self._parameters.scale)
        if t is None:
            return m
        return apply(m, t)


def create_distribution(options: Mapping[str, Any] | None = None) -> ParetoDistribution:
    """
    Create a Pareto distribution from an options mapping.

    Parameters
    ----------
    options : Mapping[str, Any], optional
        Recognized keys are ``"shape"`` and ``"scale"``, both defaulting to 1.
        Other keys are ignored with a warning.

    Returns
    -------
    ParetoDistribution
        New distribution handle.

    Raises
    ------
    InvalidConstructionError
        If ``options`` is given but is not a mapping.
    InvalidParameterError
        If a recognized option holds an invalid value.
    """
    if options is None:
        return ParetoDistribution()

    if not is_plain_object(options):
        raise InvalidConstructionError(
            f"create_distribution: options must be a mapping. Value: {options!r}"
        )

    unknown = [key for key in options if key not in RECOGNIZED_OPTIONS]
    if unknown:
        warnings.warn(
            f"Unrecognized distribution options {unknown} will be ignored",
            UserWarning,
            stacklevel=2,
        )

    try:
        return ParetoDistribution(
            shape=options.get("shape", DEFAULT_SHAPE),
            scale=options.get("scale", DEFAULT_SCALE),
        )
    except InvalidParameterError as err:
        raise err.for_operation("create_distribution") from None


__all__ = [
    "ParetoDistribution",
    "create_distribution",
]
