"""Continuous probability distributions with closed-form density and CDF."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from scipy import special

from ..core.types import ArrayLike, ContinuousDist, _to_output
from ..core.validation import require_ordered, require_positive, require_real

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContinuousUniform(ContinuousDist):
    """Constant density on the closed interval ``[a, b]``.

    A zero-width interval has no density, so ``a == b`` is rejected
    along with ``a > b``.
    """

    a: float = 0.0
    b: float = 1.0

    def __post_init__(self) -> None:
        a = require_real("a", self.a)
        b = require_real("b", self.b)
        require_ordered("a", a, "b", b, strict=True)
        require_real("b - a", b - a)
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        logger.debug("Created %r", self)

    @property
    def range(self) -> float:
        return self.b - self.a

    @property
    def support(self) -> Tuple[float, float]:
        return (self.a, self.b)

    def pdf(self, x: ArrayLike) -> ArrayLike:
        x = np.asarray(x, dtype=float)
        return _to_output(np.where((x >= self.a) & (x <= self.b), 1.0 / self.range, 0.0))

    def cdf(self, x: ArrayLike) -> ArrayLike:
        x = np.asarray(x, dtype=float)
        return _to_output(np.clip((x - self.a) / self.range, 0.0, 1.0))

    def mean(self) -> float:
        return self.a / 2.0 + self.b / 2.0

    def variance(self) -> float:
        return self.range * self.range / 12.0


@dataclass(frozen=True)
class Normal(ContinuousDist):
    """Gaussian distribution parameterised by *mu* (mean) and *sigma2* (variance).

    The CDF is ``(1 + erf(z)) / 2`` with ``z = (x - mu) / (sigma * sqrt(2))``,
    evaluated as ``erfc(-z) / 2`` so the lower tail keeps its relative precision;
    see :func:`scipy.special.erfc`.
    """

    mu: float = 0.0
    sigma2: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "mu", require_real("mu", self.mu))
        object.__setattr__(self, "sigma2", require_positive("sigma2", self.sigma2))
        logger.debug("Created %r", self)

    @property
    def std(self) -> float:
        return math.sqrt(self.sigma2)

    @property
    def support(self) -> Tuple[float, float]:
        return (-math.inf, math.inf)

    def pdf(self, x: ArrayLike) -> ArrayLike:
        x = np.asarray(x, dtype=float)
        z2 = (x - self.mu) ** 2 / self.sigma2
        return _to_output(np.exp(-0.5 * z2) / (self.std * math.sqrt(2.0 * math.pi)))

    def cdf(self, x: ArrayLike) -> ArrayLike:
        x = np.asarray(x, dtype=float)
        z = (x - self.mu) / (self.std * math.sqrt(2.0))
        return _to_output(0.5 * special.erfc(-z))

    def mean(self) -> float:
        return self.mu

    def variance(self) -> float:
        return self.sigma2
