"""
Distribution defaults
=====================

Default parameter values and recognized construction options.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Final

DEFAULT_SHAPE: Final[float] = 1.0
"""Shape parameter used when none is given."""

DEFAULT_SCALE: Final[float] = 1.0
"""Scale parameter used when none is given."""

RECOGNIZED_OPTIONS: Final[tuple[str, ...]] = ("shape", "scale")
"""Keys understood by :func:`pysatl_pareto.create_distribution`."""
