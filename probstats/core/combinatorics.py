"""Counting functions used by the discrete distributions.

The exact forms delegate to :mod:`scipy.special` integer arithmetic, so
they never overflow; :func:`log_choose` works in log space through the
log-gamma function and is what :class:`~probstats.Binomial` uses.
"""

from __future__ import annotations

from typing import Union

import numpy as np
from scipy import special


def factorial(n: int) -> int:
    """Exact ``n!``. Negative *n* gives 0."""
    if n < 0:
        return 0
    return int(special.factorial(n, exact=True))


def permutations(n: int, k: int) -> int:
    """Number of ordered selections of *k* items out of *n*.

    Returns 0 when ``k < 0`` or ``k > n``.
    """
    if k < 0 or n < 0 or k > n:
        return 0
    return int(special.perm(n, k, exact=True))


def choose(n: int, k: int) -> int:
    """Binomial coefficient ``C(n, k)``; 0 outside ``0 <= k <= n``."""
    if k < 0 or n < 0 or k > n:
        return 0
    return int(special.comb(n, k, exact=True))


def log_choose(
    n: Union[int, np.ndarray], k: Union[int, float, np.ndarray]
) -> Union[float, np.ndarray]:
    """Natural logarithm of ``C(n, k)``.

    Evaluated as ``lgamma(n+1) - lgamma(k+1) - lgamma(n-k+1)``. Entries
    with ``k`` outside ``[0, n]`` map to ``-inf`` (a coefficient of zero).

    Parameters
    ----------
    n : int or array-like
        Number of items.
    k : int, float or array-like
        Number of items chosen. Broadcast against *n*.

    Returns
    -------
    float or numpy.ndarray
        ``float`` for scalar input, otherwise an array of the broadcast shape.
    """
    n = np.asarray(n, dtype=float)
    k = np.asarray(k, dtype=float)
    in_range = (k >= 0) & (k <= n)
    safe_k = np.where(in_range, k, 0.0)
    result = np.where(
        in_range,
        special.gammaln(n + 1) - special.gammaln(safe_k + 1) - special.gammaln(n - safe_k + 1),
        -np.inf,
    )
    return float(result) if result.ndim == 0 else result
