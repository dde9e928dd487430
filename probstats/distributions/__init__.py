"""Distribution implementations for probstats.

This module contains the concrete distributions, discrete and continuous,
plus the :func:`probability` threshold helper.
"""

from ..core.operations import probability
from .continuous import ContinuousUniform, Normal
from .discrete import Bernoulli, Binomial, DiscreteUniform

__all__ = [
    "Bernoulli",
    "Binomial",
    "DiscreteUniform",
    "ContinuousUniform",
    "Normal",
    "probability",
]
