"""
Incomplete Gamma Function
=========================

Scalar incomplete gamma function used by the moment generating function.

:func:`scipy.special.gammaincc` only accepts a positive shape argument, while
the Pareto MGF evaluates the upper tail at ``s = -a <= 0``. For non-positive
``s`` and ``x > 1`` the value comes from Legendre's continued fraction. For
``x <= 1`` it is obtained from the shape in ``[0, 1)`` by the downward
recurrence

.. math::

    \\Gamma(s, x) = \\frac{\\Gamma(s + 1, x) - x^{s} e^{-x}}{s},

starting from :math:`\\Gamma(0, x) = E_1(x)` when the shape is an integer.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from typing import Literal

from scipy import special

type Tail = Literal["upper", "lower"]

_CF_THRESHOLD = 1.0
_CF_MAX_ITERATIONS = 10_000
_CF_EPS = 1e-15
_CF_TINY = 1e-300


def _upper_continued_fraction(s: float, x: float) -> float:
    """
    Non-regularized upper incomplete gamma for ``x > 1`` by Legendre's
    continued fraction, evaluated with the modified Lentz method.

    Converges for any real ``s`` and avoids the cancellation the downward
    recurrence suffers when ``x`` is large compared with ``|s|``.
    """
    b = x + 1.0 - s
    c = 1.0 / _CF_TINY
    d = 1.0 / b
    h = d
    for i in range(1, _CF_MAX_ITERATIONS + 1):
        an = -i * (i - s)
        b += 2.0
        d = an * d + b
        if abs(d) < _CF_TINY:
            d = _CF_TINY
        c = b + an / c
        if abs(c) < _CF_TINY:
            c = _CF_TINY
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) < _CF_EPS:
            break
    else:
        warnings.warn(
            f"Continued fraction for Gamma({s}, {x}) did not converge "
            f"in {_CF_MAX_ITERATIONS} iterations",
            RuntimeWarning,
            stacklevel=3,
        )
    return math.exp(s * math.log(x) - x) * h


def _upper_nonpositive_shape(s: float, x: float) -> float:
    """Non-regularized upper incomplete gamma for ``s <= 0`` and ``x > 0``."""
    if x > _CF_THRESHOLD:
        return _upper_continued_fraction(s, x)

    # x <= 1 keeps every recurrence step free of cancellation
    steps = math.ceil(-s)
    s0 = s + steps
    if s0 >= 1.0:
        # -s was within rounding of an integer
        steps -= 1
        s0 = 0.0

    if s0 == 0.0:
        value = float(special.exp1(x))
    else:
        value = float(special.gamma(s0) * special.gammaincc(s0, x))

    decay = math.exp(-x)
    for k in range(1, steps + 1):
        sk = s0 - k
        value = (value - x**sk * decay) / sk
    return value


def upper_incomplete_gamma(
    s: float,
    x: float,
    *,
    regularized: bool = False,
    tail: Tail = "upper",
) -> float:
    """
    Evaluate the incomplete gamma function.

    Parameters
    ----------
    s : float
        Shape argument. Any real value for the upper tail; non-positive
        values are handled by recurrence.
    x : float
        Non-negative integration limit.
    regularized : bool, default=False
        Divide by :math:`\\Gamma(s)`.
    tail : {"upper", "lower"}, default="upper"
        Which tail of the integral to return.

    Returns
    -------
    float
        :math:`\\Gamma(s, x)` for the upper tail or :math:`\\gamma(s, x)`
        for the lower tail, optionally regularized. ``nan`` for ``x < 0``
        or ``nan`` arguments.

    Raises
    ------
    ValueError
        If ``tail`` is not ``"upper"`` or ``"lower"``.
    """
    if tail not in ("upper", "lower"):
        raise ValueError(f'tail must be "upper" or "lower". Value: {tail!r}')

    if math.isnan(s) or math.isnan(x) or x < 0:
        return math.nan

    if s > 0:
        if regularized:
            func = special.gammaincc if tail == "upper" else special.gammainc
            return float(func(s, x))
        if tail == "upper":
            return float(special.gamma(s) * special.gammaincc(s, x))
        return float(special.gamma(s) * special.gammainc(s, x))

    upper = math.inf if x == 0 else _upper_nonpositive_shape(s, x)
    complete = float(special.gamma(s))

    if not math.isfinite(complete):
        # s is a pole of the gamma function
        if regularized:
            return 0.0 if tail == "upper" else 1.0
        return upper if tail == "upper" else math.inf

    if tail == "upper":
        return upper / complete if regularized else upper
    lower = complete - upper
    return lower / complete if regularized else lower


__all__ = [
    "Tail",
    "upper_incomplete_gamma",
]
