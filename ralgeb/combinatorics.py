"""Factorial, permutation and combination counts over non-negative integers.

``permutation`` and ``combinations`` keep the historical fallback of
returning ``1`` whenever ``n <= r``. Enable
``LibraryConfig.strict_combinatorics`` to get exact values for ``r == n``
and an :class:`~ralgeb.errors.InvalidArgumentError` for ``r > n``.
"""

from __future__ import annotations

import logging
import numbers

from .config import get_config
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def _ensure_count(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(f"{name} must be a non-negative integer, got {value!r}")
    count = int(value)
    if count < 0:
        raise InvalidArgumentError(f"{name} must be a non-negative integer, got {count}")
    return count


def factorial(n: int) -> int:
    """Return ``n!``; ``factorial(0) == 1``.

    >>> factorial(3)
    6
    """

    n = _ensure_count(n, "n")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def permutation(n: int, r: int) -> int:
    """Return the number of ordered arrangements of ``r`` out of ``n`` items.

    Three people in a two-seat vehicle: ``permutation(3, 2) == 6``
    (ab, ba, bc, cb, ac, ca).
    """

    n = _ensure_count(n, "n")
    r = _ensure_count(r, "r")
    if n > r:
        return factorial(n) // factorial(n - r)
    if get_config().strict_combinatorics:
        if r > n:
            raise InvalidArgumentError(f"Cannot arrange {n} items into {r} slots")
        return factorial(n)
    logger.debug("permutation(%d, %d): n <= r, falling back to 1", n, r)
    return 1


def combinations(n: int, r: int) -> int:
    """Return the number of unordered selections of ``r`` out of ``n`` items.

    Four people in a three-seat vehicle: ``combinations(4, 3) == 4``
    (abc, bcd, cda, dab).
    """

    n = _ensure_count(n, "n")
    r = _ensure_count(r, "r")
    if n > r:
        return permutation(n, r) // factorial(r)
    if get_config().strict_combinatorics:
        if r > n:
            raise InvalidArgumentError(f"Cannot choose {r} items out of {n}")
        return 1
    logger.debug("combinations(%d, %d): n <= r, falling back to 1", n, r)
    return 1


__all__ = ["factorial", "permutation", "combinations"]
