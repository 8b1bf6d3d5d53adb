"""
PySATL Pareto
=============

Pareto (type I) distribution for the PySATL project: density, distribution,
quantile and moment generating functions applied over scalars, sequences and
grids, together with closed-form moments.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

from .apply import apply, classify_input
from .characteristics import *
from .characteristics import __all__ as _char_all
from .distribution import ParetoDistribution, create_distribution
from .errors import *
from .errors import __all__ as _errors_all
from .parameters import DistributionParameters
from .special import upper_incomplete_gamma
from .support import ParetoSupport
from .types import *
from .types import __all__ as _types_all
from .validation import is_plain_object, is_positive_number

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("pysatl-pareto")
__all__ = [
    "__version__",
    "ParetoSupport",
    "DistributionParameters",
    "ParetoDistribution",
    "apply",
    "classify_input",
    "create_distribution",
    "is_plain_object",
    "is_positive_number",
    "upper_incomplete_gamma",
    *_char_all,
    *_errors_all,
    *_types_all,
]

del _char_all
del _errors_all
del _types_all
