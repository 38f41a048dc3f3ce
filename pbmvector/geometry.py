"""Points, vectors and segments in the plane."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point with real coordinates."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __mul__(self, factor: float) -> Point:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    def __rmul__(self, factor: float) -> Point:
        return self.__mul__(factor)

    def distance(self, other: Point) -> float:
        """Euclidean distance between this point and ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)


@dataclass(frozen=True)
class Vector:
    """A vector of the plane."""

    x: float
    y: float

    @classmethod
    def from_points(cls, a: Point, b: Point) -> Vector:
        """The vector going from ``a`` to ``b``."""
        return cls(b.x - a.x, b.y - a.y)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __mul__(self, factor: float) -> Vector:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vector(factor * self.x, factor * self.y)

    def __rmul__(self, factor: float) -> Vector:
        return self.__mul__(factor)

    def dot(self, other: Vector) -> float:
        """Scalar product with ``other``."""
        return self.x * other.x + self.y * other.y

    def norm(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)


@dataclass(frozen=True)
class Segment:
    """The segment joining ``a`` and ``b``."""

    a: Point
    b: Point

    def projection_parameter(self, point: Point) -> float:
        """Parameter of the orthogonal projection of ``point`` on the line ab."""
        ap = Vector.from_points(self.a, point)
        ab = Vector.from_points(self.a, self.b)
        return ap.dot(ab) / ab.dot(ab)

    def distance_to(self, point: Point) -> float:
        """Shortest distance between ``point`` and the segment."""
        if self.a == self.b:
            return point.distance(self.a)
        lam = self.projection_parameter(point)
        if lam < 0:
            return self.a.distance(point)
        if lam > 1:
            return self.b.distance(point)
        projection = self.a + (self.b + self.a * -1.0) * lam
        return projection.distance(point)