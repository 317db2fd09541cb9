#!/usr/bin/env python3
"""
Vector and point primitives for 2D operations.

Point2 is a location in universe space (km); Vector2 is a displacement,
velocity or force. Subtracting two points gives a vector; adding a vector to a
point gives a point. Both are immutable tuples, so they can be copied freely.
"""
import math
from typing import Iterable, NamedTuple


class Vector2(NamedTuple):
    x: float
    y: float

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other[0], self.y + other[1])

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other[0], self.y - other[1])

    def __mul__(self, s: float) -> "Vector2":
        return Vector2(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> "Vector2":
        return Vector2(self.x / s, self.y / s)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def norm_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> "Vector2":
        """
        Unit vector in the same direction.

        Raises ZeroDivisionError for the zero vector; callers guard that case.
        """
        l = self.norm()
        if l == 0:
            raise ZeroDivisionError("cannot normalize a zero-length vector")
        return Vector2(self.x / l, self.y / l)


class Point2(NamedTuple):
    x: float
    y: float

    def __add__(self, v: Vector2) -> "Point2":
        return Point2(self.x + v[0], self.y + v[1])

    def __sub__(self, other):
        # point - point is a displacement, point - vector is a point
        if isinstance(other, Point2):
            return Vector2(self.x - other.x, self.y - other.y)
        return Point2(self.x - other[0], self.y - other[1])


ZERO = Vector2(0.0, 0.0)
ORIGIN = Point2(0.0, 0.0)


def distance_squared(a: Point2, b: Point2) -> float:
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return dx * dx + dy * dy


def vec_sum(vectors: Iterable[Vector2]) -> Vector2:
    """Elementwise sum; the zero vector for an empty iterable."""
    sx, sy = 0.0, 0.0
    for v in vectors:
        sx += v[0]
        sy += v[1]
    return Vector2(sx, sy)
