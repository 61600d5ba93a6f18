"""Small numeric helpers shared by the geometry types."""

from __future__ import annotations


def delta_coord(x2: float, x1: float) -> float:
    """Return the signed difference ``x2 - x1`` between two coordinates.

    ``x2`` is the coordinate of the end point, ``x1`` the one of the start
    point, so ``delta_coord(10, 20) == -10``.
    """

    return x2 - x1


__all__ = ["delta_coord"]
