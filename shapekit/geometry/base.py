"""
Shape Capability
================

Common interface implemented by every shape, plus the closed set of shape
kinds.
"""

from enum import Enum
from typing import Optional, Protocol

from shapekit.geometry.primitives import Point


class ShapeKind(str, Enum):
    """Shape variant tag."""
    POLYGON = "polygon"
    RECTANGLE = "rectangle"
    SQUARE = "square"
    TRIANGLE = "triangle"
    ELLIPSE = "ellipse"
    CIRCLE = "circle"


class Shape(Protocol):
    """Protocol for closed 2D shapes (interface)."""

    kind: ShapeKind

    @property
    def area(self) -> float:
        """Non-negative area."""
        ...

    @property
    def perimeter(self) -> float:
        """
        Non-negative perimeter.

        Raises:
            UnsupportedOperationError: If the shape has no closed form
        """
        ...

    def boundary_intersects(self, point: Point, epsilon: Optional[float] = None) -> bool:
        """Check if a point lies on the shape's boundary within tolerance."""
        ...

    def contains(self, point: Point) -> bool:
        """Check if a point lies strictly inside the shape."""
        ...
