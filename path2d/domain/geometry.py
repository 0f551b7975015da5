"""Geometric value objects for path construction and queries."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, Union
import math


@dataclass(frozen=True)
class Point:
    """Immutable 2D point, also used as a 2D vector."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: Point) -> float:
        """Dot product treating points as vectors."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        """Z component of the 3D cross product of two planar vectors."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        """Length when treated as a vector from origin."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Point:
        """Unit vector in same direction, zero vector for zero length."""
        length = self.length()
        if length == 0.0:
            return Point(0.0, 0.0)
        return Point(self.x / length, self.y / length)

    def perpendicular(self) -> Point:
        """Vector rotated by 90 degrees, (-y, x)."""
        return Point(-self.y, self.x)

    def lerp(self, other: Point, ratio: float) -> Point:
        """Linear interpolation towards other."""
        return Point(
            self.x + (other.x - self.x) * ratio,
            self.y + (other.y - self.y) * ratio
        )

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    def to_list(self) -> List[float]:
        """Convert to list for JSON serialization."""
        return [float(self.x), float(self.y)]

    @classmethod
    def from_tuple(cls, t: Sequence[float]) -> Point:
        """Create from tuple."""
        return cls(float(t[0]), float(t[1]))


PointLike = Union[Point, Sequence[float]]


def as_point(value: PointLike) -> Point:
    """Coerce a Point or an (x, y) pair into a Point."""
    if isinstance(value, Point):
        return value
    if len(value) != 2:
        raise ValueError(f"Expected an (x, y) pair, got {len(value)} values")
    return Point.from_tuple(value)
