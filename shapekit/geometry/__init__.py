"""
Geometry Layer
==============

Bounded Context: Pure geometric shapes and point queries.

Responsibilities:
- Primitives (Point, Segment)
- Shape representation (immutable)
- Point-in-shape and on-boundary tests
- NO state, NO I/O

Design Philosophy:
- Pure functions where possible (kernels, locator)
- Immutable data structures
- Fail-fast validation
"""

from shapekit.geometry.primitives import Point, Segment
from shapekit.geometry.base import Shape, ShapeKind
from shapekit.geometry.polygons import (
    SegmentedShape,
    RectangleShape,
    SquareShape,
    TriangleShape,
)
from shapekit.geometry.ellipses import EllipseShape, CircleShape
from shapekit.geometry.locator import (
    PointLocation,
    locate,
    contains_mask,
    boundary_mask,
)

__all__ = [
    "Point",
    "Segment",
    "Shape",
    "ShapeKind",
    "SegmentedShape",
    "RectangleShape",
    "SquareShape",
    "TriangleShape",
    "EllipseShape",
    "CircleShape",
    "PointLocation",
    "locate",
    "contains_mask",
    "boundary_mask",
]
