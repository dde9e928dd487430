"""Discrete probability distributions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from scipy import special

from ..core.combinatorics import log_choose
from ..core.types import ArrayLike, DiscreteDist, _to_output
from ..core.validation import (
    require_integer,
    require_non_negative,
    require_ordered,
    require_probability,
    require_real,
)

logger = logging.getLogger(__name__)


def _on_lattice(k: np.ndarray) -> np.ndarray:
    """Mask of entries of *k* that are whole numbers."""
    return np.floor(k) == k


@dataclass(frozen=True)
class Bernoulli(DiscreteDist):
    """Bernoulli distribution for binary outcomes.

    Parameters
    ----------
    p : float
        Probability of success (1), must be in [0, 1].
    """

    p: float = 0.5

    def __post_init__(self) -> None:
        object.__setattr__(self, "p", require_probability("p", self.p))
        logger.debug("Created %r", self)

    @property
    def p_failure(self) -> float:
        return 1.0 - self.p

    @property
    def support(self) -> Tuple[float, float]:
        return (0.0, 1.0)

    def pmf(self, k: ArrayLike) -> ArrayLike:
        """Probability mass function evaluated at k."""
        k = np.asarray(k, dtype=float)
        return _to_output(np.where(k == 1, self.p, np.where(k == 0, self.p_failure, 0.0)))

    def cdf(self, x: ArrayLike) -> ArrayLike:
        """Cumulative distribution function evaluated at x."""
        x = np.asarray(x, dtype=float)
        result = np.where(x < 0, 0.0, np.where(x < 1, self.p_failure, 1.0))
        return _to_output(np.where(np.isnan(x), np.nan, result))

    def mean(self) -> float:
        return self.p

    def variance(self) -> float:
        return self.p * self.p_failure


@dataclass(frozen=True)
class Binomial(DiscreteDist):
    """Number of successes in *n* independent Bernoulli(*p*) trials.

    The mass function is evaluated in log space,
    ``log C(n, k) + k log p + (n - k) log(1 - p)``, so it stays finite for
    large *n* where the factorials themselves would overflow.

    Parameters
    ----------
    n : int
        Number of trials, must be >= 0.
    p : float
        Probability of success of each trial, must be in [0, 1].
    """

    n: int
    p: float = 0.5

    def __post_init__(self) -> None:
        n = require_non_negative("n", require_integer("n", self.n))
        object.__setattr__(self, "n", n)
        object.__setattr__(self, "p", require_probability("p", self.p))
        logger.debug("Created %r", self)

    @property
    def p_failure(self) -> float:
        return 1.0 - self.p

    @property
    def support(self) -> Tuple[float, float]:
        return (0.0, float(self.n))

    @property
    def _trials(self) -> float:
        # numpy would turn ints beyond int64 into object arrays
        return float(self.n)

    def pmf(self, k: ArrayLike) -> ArrayLike:
        """Probability mass function evaluated at k."""
        k = np.asarray(k, dtype=float)
        valid = (k >= 0) & (k <= self._trials) & _on_lattice(k)
        safe_k = np.where(valid, k, 0.0)
        # xlogy / xlog1py treat 0 * log(0) as 0, covering p == 0 and p == 1
        log_pmf = (
            np.asarray(log_choose(self._trials, safe_k))
            + special.xlogy(safe_k, self.p)
            + special.xlog1py(self._trials - safe_k, -self.p)
        )
        return _to_output(np.where(valid, np.exp(log_pmf), 0.0))

    def cdf(self, x: ArrayLike) -> ArrayLike:
        """Cumulative distribution function evaluated at x.

        The lower tail comes from :func:`scipy.special.bdtr`, the regularised
        incomplete beta form of the summed mass, so no per-point array is built.
        """
        x = np.asarray(x, dtype=float)
        k = np.clip(np.floor(x), 0, self._trials)
        result = np.where(
            x < 0, 0.0, np.where(x >= self._trials, 1.0, special.bdtr(k, self._trials, self.p))
        )
        return _to_output(np.where(np.isnan(x), np.nan, result))

    def interval_cdf(self, lower: ArrayLike, upper: ArrayLike) -> ArrayLike:
        """Compute P(lower < X <= upper).

        Intervals starting above the mean are taken as a difference of upper
        tails (``bdtrc``) to avoid cancellation when both lower tails are close to 1.
        """
        lower = np.floor(np.asarray(lower, dtype=float))
        upper = np.floor(np.asarray(upper, dtype=float))
        lo = np.clip(lower, -1, self._trials)
        hi = np.clip(upper, -1, self._trials)
        by_lower_tail = self._lower_tail(hi) - self._lower_tail(lo)
        by_upper_tail = self._upper_tail(lo) - self._upper_tail(hi)
        result = np.where(lo >= self.mean(), by_upper_tail, by_lower_tail)
        result = np.maximum(result, 0.0)
        return _to_output(np.where(np.isnan(lower) | np.isnan(upper), np.nan, result))

    def _lower_tail(self, k: np.ndarray) -> np.ndarray:
        """P(X <= k) for whole *k* in ``[-1, n]``."""
        tail = special.bdtr(np.maximum(k, 0), self._trials, self.p)
        return np.where(k < 0, 0.0, np.where(k >= self._trials, 1.0, tail))

    def _upper_tail(self, k: np.ndarray) -> np.ndarray:
        """P(X > k) for whole *k* in ``[-1, n]``."""
        tail = special.bdtrc(np.maximum(k, 0), self._trials, self.p)
        return np.where(k < 0, 1.0, np.where(k >= self._trials, 0.0, tail))

    def mean(self) -> float:
        return self.n * self.p

    def variance(self) -> float:
        return self.n * self.p * self.p_failure


@dataclass(frozen=True)
class DiscreteUniform(DiscreteDist):
    """Equal mass on every integer in the closed range ``[a, b]``.

    Parameters
    ----------
    a : int
        Lower bound (inclusive).
    b : int
        Upper bound (inclusive), must be >= a.
    """

    a: int
    b: int

    def __post_init__(self) -> None:
        a = require_integer("a", self.a)
        b = require_integer("b", self.b)
        require_ordered("a", a, "b", b)
        # the count of support points must itself fit in a float
        require_real("b - a + 1", b - a + 1)
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        logger.debug("Created %r", self)

    @property
    def range(self) -> int:
        return self.b - self.a

    @property
    def support(self) -> Tuple[float, float]:
        return (float(self.a), float(self.b))

    @property
    def _count(self) -> int:
        return self.b - self.a + 1

    def pmf(self, k: ArrayLike) -> ArrayLike:
        """Probability mass function evaluated at k."""
        k = np.asarray(k, dtype=float)
        lower, upper = self.support
        inside = (k >= lower) & (k <= upper) & _on_lattice(k)
        return _to_output(np.where(inside, 1.0 / float(self._count), 0.0))

    def cdf(self, x: ArrayLike) -> ArrayLike:
        """Cumulative distribution function evaluated at x."""
        x = np.asarray(x, dtype=float)
        lower, _ = self.support
        return _to_output(np.clip((np.floor(x) - lower + 1.0) / float(self._count), 0.0, 1.0))

    def mean(self) -> float:
        return self.a / 2.0 + self.b / 2.0

    def variance(self) -> float:
        count = float(self._count)
        return (count * count - 1.0) / 12.0
