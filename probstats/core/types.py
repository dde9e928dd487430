"""Core types for probstats distributions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple, Union

import numpy as np


ArrayLike = Union[float, np.ndarray]


def _to_output(result: np.ndarray) -> ArrayLike:
    result = np.asarray(result, dtype=float)
    return float(result) if result.ndim == 0 else result


# ---------------------------------------------------------------------------
# Distribution ABCs
# ---------------------------------------------------------------------------

class Dist(ABC):
    """Abstract base class for univariate probability distributions.

    Every distribution exposes its cumulative distribution function, mean,
    variance and support. Queries are pure: they accept a scalar or a numpy
    array and never raise for any real input, returning 0 probability or a
    saturated CDF outside the support instead.
    """

    @abstractmethod
    def pdf(self, x: ArrayLike) -> ArrayLike:
        """Compute the probability density/mass function at x."""

    @abstractmethod
    def cdf(self, x: ArrayLike) -> ArrayLike:
        """Compute P(X <= x)."""

    @abstractmethod
    def mean(self) -> float:
        """Expected value of the distribution."""

    @abstractmethod
    def variance(self) -> float:
        """Variance of the distribution."""

    @property
    @abstractmethod
    def support(self) -> Tuple[float, float]:
        """Closed ``(lower, upper)`` bounds of the support."""

    def std_dev(self) -> float:
        """Standard deviation, ``sqrt(variance())``."""
        return float(np.sqrt(self.variance()))

    def interval_cdf(self, lower: ArrayLike, upper: ArrayLike) -> ArrayLike:
        """Compute P(lower < X <= upper).

        Empty or reversed intervals give 0.
        """
        lower = np.asarray(lower, dtype=float)
        upper = np.asarray(upper, dtype=float)
        return _to_output(np.maximum(np.asarray(self.cdf(upper)) - np.asarray(self.cdf(lower)), 0.0))


class DiscreteDist(Dist):
    """Distribution over the integers, described by a probability mass function."""

    @abstractmethod
    def pmf(self, k: ArrayLike) -> ArrayLike:
        """Compute P(X == k). Non-integer *k* has zero mass."""

    def pdf(self, x: ArrayLike) -> ArrayLike:
        """Alias for pmf() to satisfy Dist ABC interface."""
        return self.pmf(x)


class ContinuousDist(Dist):
    """Distribution over the reals, described by a probability density function."""
