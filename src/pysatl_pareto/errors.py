"""
Exception hierarchy
===================

Errors raised by PySATL Pareto. Every exception derives from
:class:`ParetoError` and from the builtin exception that matches its nature,
so callers may catch either.

Mathematically undefined evaluations (quantile at ``p >= 1``, MGF at
``t > 0``, higher moments outside their shape ranges) are not errors: they
return ``nan``.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class ParetoError(Exception):
    """Base class for all PySATL Pareto errors."""


class InvalidConstructionError(ParetoError, TypeError):
    """Options passed to the distribution constructor are not a mapping."""


class InvalidParameterError(ParetoError, ValueError):
    """
    Shape or scale is not a positive finite number.

    Parameters
    ----------
    operation : str
        Operation that rejected the value.
    name : str
        Name of the parameter.
    requirement : str
        What the value must be.
    value : object
        The rejected value.
    """

    def __init__(self, operation: str, name: str, requirement: str, value: object) -> None:
        super().__init__(f"{operation}: {name} must be {requirement}. Value: {value!r}")
        self.operation = operation
        self.name = name
        self.requirement = requirement
        self.value = value

    def __reduce__(self) -> tuple[type, tuple[str, str, str, object]]:
        return (type(self), (self.operation, self.name, self.requirement, self.value))

    def for_operation(self, operation: str) -> "InvalidParameterError":
        """Return the same failure reported under another operation name."""
        return InvalidParameterError(operation, self.name, self.requirement, self.value)


class InvalidInputError(ParetoError, TypeError):
    """Input is neither a scalar, a flat sequence nor a rectangular grid of numbers."""


__all__ = [
    "ParetoError",
    "InvalidConstructionError",
    "InvalidParameterError",
    "InvalidInputError",
]
