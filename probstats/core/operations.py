"""Threshold probabilities for any probstats distribution."""

from __future__ import annotations

import numpy as np

from .types import ArrayLike, Dist, DiscreteDist, _to_output


def probability(distribution: Dist, threshold: ArrayLike, comparison: str = "gt") -> ArrayLike:
    """Compute the probability of a distribution exceeding or falling below a threshold.

    Parameters
    ----------
    distribution : Dist
        Any discrete or continuous distribution instance.
    threshold : float or numpy.ndarray
        The threshold value.
    comparison : str
        One of "gt" (P(X > threshold)), "ge" (P(X >= threshold)),
        "lt" (P(X < threshold)), "le" (P(X <= threshold)),
        or "eq" (P(X == threshold)).

    Returns
    -------
    float or numpy.ndarray
        The computed probability.
    """
    if isinstance(distribution, DiscreteDist):
        point_mass = np.asarray(distribution.pmf(threshold))
    else:
        # continuous: no mass on a single point
        point_mass = np.zeros(np.shape(threshold))
    at_or_below = np.asarray(distribution.cdf(threshold))

    if comparison == "gt":
        result = 1.0 - at_or_below
    elif comparison == "ge":
        result = 1.0 - at_or_below + point_mass
    elif comparison == "lt":
        result = at_or_below - point_mass
    elif comparison == "le":
        result = at_or_below
    elif comparison == "eq":
        result = point_mass
    else:
        raise ValueError(
            f"Unknown comparison '{comparison}'. Use 'gt', 'ge', 'lt', 'le', or 'eq'."
        )
    return _to_output(np.clip(result, 0.0, 1.0))
