from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    """An immutable 2D point in screen coordinates (y grows downwards).

    Attributes:
        x: Horizontal coordinate.
        y: Vertical coordinate.
    """

    x: float
    y: float

    def __add__(self, other: Point2D) -> Point2D:
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        return Point2D(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Point2D:
        return Point2D(self.x * k, self.y * k)

    __rmul__ = __mul__

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_xy(cls, xy: Sequence[float]) -> Point2D:
        """Build a point from any length-2 sequence (e.g. a numpy row)."""
        return cls(float(xy[0]), float(xy[1]))
