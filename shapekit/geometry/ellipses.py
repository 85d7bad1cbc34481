"""
Elliptical Shapes
=================

Ellipse and circle, computed from the analytic ellipse equation rather
than from boundary segments.

Design:
- Immutable (read-only properties)
- Positive semi-axes enforced at construction
- General ellipse perimeter is unsupported (no closed form); the circle
  overrides it with 2*pi*r
"""

import math
from typing import Optional

from shapekit import tolerance
from shapekit.errors import DegenerateGeometryError, UnsupportedOperationError
from shapekit.geometry import kernels
from shapekit.geometry.base import ShapeKind
from shapekit.geometry.primitives import Point


class EllipseShape:
    """
    Axis-aligned ellipse.

    Attributes:
        center: Center point
        a: Semi-axis along X
        b: Semi-axis along Y

    Example:
        >>> ellipse = EllipseShape(Point(0, 0), 10, 20)
        >>> ellipse.contains(Point(0, 15))
        True
    """

    kind = ShapeKind.ELLIPSE

    def __init__(self, center: Point, a: float, b: float):
        """
        Raises:
            DegenerateGeometryError: If a or b is not a finite positive number
        """
        for name, value in (("a", a), ("b", b)):
            if not math.isfinite(value) or value <= 0:
                raise DegenerateGeometryError(
                    f"{type(self).__name__} semi-axis {name} must be finite and > 0, got {value}"
                )

        self._center = center
        self._a = a
        self._b = b

    @property
    def center(self) -> Point:
        return self._center

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    @property
    def area(self) -> float:
        return math.pi * self._a * self._b

    @property
    def perimeter(self) -> float:
        """
        Not available for a general ellipse.

        Raises:
            UnsupportedOperationError: Always
        """
        raise UnsupportedOperationError("perimeter", type(self).__name__)

    def equation_for(self, point: Point) -> float:
        """Normalized ellipse equation value at `point` (1.0 on the boundary)."""
        return kernels.ellipse_equation(
            self._center.x, self._center.y, self._a, self._b, point.x, point.y
        )

    def boundary_intersects(self, point: Point, epsilon: Optional[float] = None) -> bool:
        """
        True if |equation_for(point) - 1| <= epsilon.

        Non-strict comparison, unlike Segment.boundary_contains.
        """
        epsilon = tolerance.resolve(epsilon)
        return abs(self.equation_for(point) - 1) <= epsilon

    def contains(self, point: Point) -> bool:
        """Strict interior test; boundary points are excluded."""
        return self.equation_for(point) < 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}(center={self._center}, a={self._a}, b={self._b})"


class CircleShape(EllipseShape):
    """Circle: an ellipse with both semi-axes equal to the radius."""

    kind = ShapeKind.CIRCLE

    def __init__(self, center: Point, radius: float):
        super().__init__(center, radius, radius)

    @property
    def radius(self) -> float:
        return self._a

    @property
    def diameter(self) -> float:
        return self._a * 2

    @property
    def perimeter(self) -> float:
        return 2 * math.pi * self._a

    def __repr__(self) -> str:
        return f"CircleShape(center={self._center}, radius={self._a})"
