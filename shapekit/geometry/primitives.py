"""
Geometric Primitives
====================

Points and line segments. Pure values, no state.

Design:
- Immutable (frozen dataclass pattern)
- Value equality: equal coordinates are interchangeable
- Segment membership via the triangle inequality
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from shapekit import tolerance


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point.

    Attributes:
        x: Coordinate along the X axis
        y: Coordinate along the Y axis

    Example:
        >>> Point(0, 0).distance_to(Point(3, 4))
        5.0
    """

    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to `other`."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, xy: Sequence[float]) -> "Point":
        """
        Build a point from an (x, y) pair.

        Raises:
            ValueError: If `xy` does not hold exactly two numbers
        """
        if len(xy) != 2:
            raise ValueError(f"Point needs exactly 2 coordinates, got {len(xy)}")
        return cls(x=float(xy[0]), y=float(xy[1]))


@dataclass(frozen=True)
class Segment:
    """
    Immutable line segment between two points.

    Attributes:
        a: First endpoint
        b: Second endpoint
    """

    a: Point
    b: Point

    def boundary_contains(self, p: Point, epsilon: Optional[float] = None) -> bool:
        """
        Check whether `p` lies on this segment.

        A point is on the segment when its distances to both endpoints add
        up to the segment length. Points colinear with a-b but outside the
        segment's extent fail the test.

        Args:
            p: Point to test
            epsilon: Allowed deviation (default: current tolerance).
                The comparison is strict: a deviation of exactly epsilon
                is not contained.

        Returns:
            True if |d(a,p) + d(p,b) - d(a,b)| < epsilon
        """
        epsilon = tolerance.resolve(epsilon)
        deviation = self.a.distance_to(p) + p.distance_to(self.b) - self.length
        return abs(deviation) < epsilon

    @property
    def length(self) -> float:
        return self.a.distance_to(self.b)

    @property
    def midpoint(self) -> Point:
        return Point((self.a.x + self.b.x) / 2, (self.a.y + self.b.y) / 2)
