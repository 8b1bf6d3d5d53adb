"""
Parameter model for the Pareto distribution.

This module provides the frozen parameter pair held by a distribution handle,
together with the constraint machinery used to validate it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, is_dataclass, replace
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec, Self

from pysatl_pareto.config import DEFAULT_SCALE, DEFAULT_SHAPE
from pysatl_pareto.errors import InvalidParameterError
from pysatl_pareto.validation import is_positive_number

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar


@dataclass(slots=True, frozen=True)
class ParameterConstraint:
    """
    Constraint on a single parameter value.

    Parameters
    ----------
    field : str
        Name of the guarded parameter.
    description : str
        Requirement on the value, completing "<field> must be ...".
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    field: str
    description: str
    check: Callable[[Any], bool]


class Parameters(ABC):
    """
    Abstract base class for validated parameter sets.

    Subclasses are turned into frozen dataclasses by :func:`parameter_set`, which
    also collects the methods marked with :func:`constraint`.
    """

    _constraints: ClassVar[list[ParameterConstraint]] = []

    def validate(self, operation: str | None = None) -> None:
        """
        Validate all constraints for this parameter set.

        Parameters
        ----------
        operation : str, optional
            Operation named in the error message. Defaults to the class name.

        Raises
        ------
        InvalidParameterError
            If any constraint is not satisfied.
        """
        for c in self._constraints:
            if not c.check(self):
                raise InvalidParameterError(
                    operation or type(self).__name__, c.field, c.description, getattr(self, c.field)
                )


P = ParamSpec("P")


def constraint(description: str, *, field: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Requirement on the value, completing "<field> must be ...".
    field : str
        Name of the parameter the constraint guards.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        setattr(wrapper, "__constraint_field", field)
        return wrapper

    return decorator


def parameter_set[T: Parameters](cls: type[T]) -> type[T]:
    """
    Class decorator turning a :class:`Parameters` subclass into a frozen
    dataclass and registering its constraints.
    """
    constraints: list[ParameterConstraint] = []
    for name, attr in cls.__dict__.items():
        if isinstance(attr, staticmethod | classmethod):
            if getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(f"@constraint '{name}' must be an instance method")
            continue
        if not isfunction(attr) or not getattr(attr, "__is_constraint", False):
            continue
        constraints.append(
            ParameterConstraint(
                field=getattr(attr, "__constraint_field"),
                description=getattr(attr, "__constraint_description", name),
                check=attr,
            )
        )

    if not is_dataclass(cls):
        cls = dataclass(slots=True, frozen=True)(cls)
    cls._constraints = constraints
    return cls


@parameter_set
class DistributionParameters(Parameters):
    """
    Shape and scale of a Pareto distribution.

    Parameters
    ----------
    shape : float, default=1.0
        Shape parameter (tail index) ``a > 0``.
    scale : float, default=1.0
        Scale parameter (minimum value) ``b > 0``.

    Raises
    ------
    InvalidParameterError
        If either value is not a positive finite number.
    """

    shape: float = DEFAULT_SHAPE
    scale: float = DEFAULT_SCALE

    def __post_init__(self) -> None:
        self.validate()

    @constraint(description="a positive finite number", field="shape")
    def check_shape_positive(self) -> bool:
        return is_positive_number(self.shape)

    @constraint(description="a positive finite number", field="scale")
    def check_scale_positive(self) -> bool:
        return is_positive_number(self.scale)

    def with_shape(self, shape: float) -> Self:
        """Return a copy with ``shape`` replaced."""
        return replace(self, shape=shape)

    def with_scale(self, scale: float) -> Self:
        """Return a copy with ``scale`` replaced."""
        return replace(self, scale=scale)


__all__ = [
    "DistributionParameters",
    "ParameterConstraint",
    "Parameters",
    "constraint",
    "parameter_set",
]
