"""Mutable 2D point used by every geometry generator."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple, Union

PointLike = Union["Point", float]


class InvalidGeometryError(ValueError):
    """Raised when a geometric operation has no defined result."""


def _components(point: PointLike, y: Optional[float]) -> Tuple[float, float]:
    if isinstance(point, Point):
        return point.x, point.y
    if y is None:
        raise TypeError("a raw x coordinate requires a matching y coordinate")
    return float(point), float(y)


class Point:
    """Two dimensional point with chainable in-place operations.

    Mutating methods (``set``, ``normalize``, ``scale``, ``add``,
    ``subtract``, ``rotate_about``) change ``self`` and return it, so a
    chain such as ``p.set(a).subtract(b).normalize()`` runs left to right
    against the same object.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    def __repr__(self) -> str:
        return f"Point(x={self.x!r}, y={self.y!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.is_same(other)

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        yield self.x
        yield self.y

    def set(self, x: PointLike, y: Optional[float] = None) -> "Point":
        self.x, self.y = _components(x, y)
        return self

    def copy(self) -> "Point":
        return Point(self.x, self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def magnitude(self) -> float:
        return math.sqrt((self.x * self.x) + (self.y * self.y))

    def normalize(self) -> "Point":
        """Turn ``self`` into a unit vector in place."""

        magnitude = self.magnitude()
        if magnitude == 0.0:
            raise InvalidGeometryError("cannot normalize a zero-length vector")
        self.x /= magnitude
        self.y /= magnitude
        return self

    def scale(self, factor: float) -> "Point":
        self.x *= factor
        self.y *= factor
        return self

    def unit(self) -> "Point":
        """Return a new unit vector pointing the same way as ``self``."""

        return self.copy().normalize()

    def angle(self) -> float:
        """Angle of the vector from the origin, in radians within ``[0, 2π)``."""

        angle = math.atan2(self.y, self.x)
        if angle < 0:
            angle += 2 * math.pi
        return angle

    def distance_from(self, point: PointLike, y: Optional[float] = None) -> float:
        return math.sqrt(self.squared_distance_from(point, y))

    def squared_distance_from(self, point: PointLike, y: Optional[float] = None) -> float:
        px, py = _components(point, y)
        xd = px - self.x
        yd = py - self.y
        return (xd * xd) + (yd * yd)

    def direction(self, point: "Point") -> "Point":
        """Unit vector pointing from ``point`` towards ``self``."""

        distance = self.distance_from(point)
        if distance == 0.0:
            raise InvalidGeometryError("direction between coincident points is undefined")
        return Point(self.x - point.x, self.y - point.y).scale(1 / distance)

    def add(self, point: PointLike, y: Optional[float] = None) -> "Point":
        px, py = _components(point, y)
        self.x += px
        self.y += py
        return self

    def subtract(self, point: PointLike, y: Optional[float] = None) -> "Point":
        px, py = _components(point, y)
        self.x -= px
        self.y -= py
        return self

    def mid_point(self, point: PointLike, y: Optional[float] = None) -> "Point":
        px, py = _components(point, y)
        return Point(self.x + px, self.y + py).scale(1 / 2)

    def rotate_about(self, point: "Point", angle: float) -> "Point":
        """Rotate ``self`` about ``point`` by ``angle`` radians.

        The y axis grows downward in drawing space, so a positive angle turns
        the point clockwise on screen.
        """

        dx = self.x - point.x
        dy = self.y - point.y
        cosx = math.cos(angle)
        sinx = math.sin(angle)
        self.x = point.x + (dx * cosx) + (dy * sinx)
        self.y = point.y + (dy * cosx) - (dx * sinx)
        return self

    def is_same(self, point: "Point") -> bool:
        return self.x == point.x and self.y == point.y

    @staticmethod
    def compute_center(points: Iterable["Point"]) -> "Point":
        """Arithmetic mean of ``points``."""

        x = 0.0
        y = 0.0
        count = 0
        for point in points:
            x += point.x
            y += point.y
            count += 1
        if count == 0:
            raise InvalidGeometryError("cannot compute the center of an empty point set")
        return Point(x, y).scale(1 / count)
