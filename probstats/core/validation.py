"""Parameter checks shared by the distribution constructors.

Each helper returns the normalised value (``float`` or ``int``) or raises
:class:`~probstats.core.exceptions.InvalidParameter`.
"""

from __future__ import annotations

import logging
import math
import numbers

from .exceptions import InvalidParameter

logger = logging.getLogger(__name__)


def _invalid(message: str) -> InvalidParameter:
    logger.debug("Rejected parameter: %s", message)
    return InvalidParameter(message)


def require_real(name: str, value) -> float:
    """Return *value* as a finite float."""
    try:
        result = float(value)
    except OverflowError:
        raise _invalid(f"{name} must be finite, got {value!r}") from None
    except (TypeError, ValueError):
        raise _invalid(f"{name} must be a real number, got {value!r}") from None
    if not math.isfinite(result):
        raise _invalid(f"{name} must be finite, got {value!r}")
    return result


def require_integer(name: str, value) -> int:
    """Return *value* as an int; integral floats such as ``3.0`` are accepted.

    Integers too large to be represented as a float are rejected.
    """
    result = require_real(name, value)
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return int(value)
    if not result.is_integer():
        raise _invalid(f"{name} must be an integer, got {value!r}")
    return int(result)


def require_probability(name: str, value) -> float:
    result = require_real(name, value)
    if not 0.0 <= result <= 1.0:
        raise _invalid(f"{name} must be in [0, 1], got {value!r}")
    return result


def require_positive(name: str, value) -> float:
    result = require_real(name, value)
    if not result > 0.0:
        raise _invalid(f"{name} must be > 0, got {value!r}")
    return result


def require_ordered(lower_name: str, lower, upper_name: str, upper, *, strict: bool = False) -> None:
    """Check ``lower <= upper`` (``lower < upper`` when *strict*)."""
    if lower > upper or (strict and lower == upper):
        relation = "<" if strict else "<="
        raise _invalid(
            f"{lower_name} must be {relation} {upper_name}, got {lower_name}={lower!r}, "
            f"{upper_name}={upper!r}"
        )


def require_non_negative(name: str, value: int) -> int:
    if value < 0:
        raise _invalid(f"{name} must be >= 0, got {value!r}")
    return value
