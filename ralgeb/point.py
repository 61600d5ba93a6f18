from __future__ import annotations

from dataclasses import dataclass


def _format_coord(value: float) -> str:
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


@dataclass(frozen=True)
class Point:
    """A position in the 2D coordinate system."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def origin(cls) -> "Point":
        return cls(0.0, 0.0)

    def __str__(self) -> str:
        return f"({_format_coord(self.x)}, {_format_coord(self.y)})"
