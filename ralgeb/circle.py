from __future__ import annotations

import math
from dataclasses import dataclass, field

from .point import Point


@dataclass
class Circle:
    """Circle given by its radius and centre point.

    The radius is not validated; a negative radius still produces a
    (negative) circumference and a positive area.
    """

    radius: float
    centre: Point = field(default_factory=Point.origin)

    def __post_init__(self) -> None:
        self.radius = float(self.radius)

    def circumference(self) -> float:
        return 2.0 * self.radius * math.pi

    def area(self) -> float:
        return math.pi * self.radius ** 2
