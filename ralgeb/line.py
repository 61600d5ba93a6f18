from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .point import Point
from .utils import delta_coord


@dataclass(frozen=True)
class Line:
    """Line through two points of the 2D coordinate system."""

    point1: Point
    point2: Point

    def _deltas(self) -> Tuple[float, float]:
        dx = delta_coord(self.point2.x, self.point1.x)
        dy = delta_coord(self.point2.y, self.point1.y)
        return dx, dy

    def length(self) -> float:
        """Return the Euclidean distance between the two end points."""

        dx, dy = self._deltas()
        return math.sqrt(dx ** 2 + dy ** 2)

    def slope(self) -> float:
        """Return ``dy / dx``.

        A vertical line yields ``inf``/``-inf`` (or ``nan`` when both points
        coincide) following IEEE-754 division; no exception is raised.
        """

        dx, dy = self._deltas()
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.divide(np.float64(dy), np.float64(dx)))

    def theta(self) -> float:
        """Return the angle with the x-axis in radians, in ``(-pi, pi]``."""

        dx, dy = self._deltas()
        return math.atan2(dy, dx)

    def __str__(self) -> str:
        return f"[{self.point1} -> {self.point2}]"
