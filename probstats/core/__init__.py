"""Core module for probstats.

This module contains the distribution base classes, the exception raised
for invalid parameters, and the counting helpers the distributions use.
"""

from .combinatorics import choose, factorial, log_choose, permutations
from .exceptions import InvalidParameter
from .operations import probability
from .types import ContinuousDist, DiscreteDist, Dist

__all__ = [
    "Dist",
    "DiscreteDist",
    "ContinuousDist",
    "InvalidParameter",
    "probability",
    "factorial",
    "permutations",
    "choose",
    "log_choose",
]
