"""
shapekit
========

Bounded Context: 2D computational geometry.

Points, segments and closed shapes (polygons, rectangles, squares,
triangles, ellipses, circles) with area, perimeter, point-containment and
boundary-intersection queries.

Architecture:

    shapekit/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── primitives.py  # Point, Segment
    │   ├── base.py        # Shape protocol, ShapeKind
    │   ├── kernels.py     # Shoelace, ray casting, ellipse equation
    │   ├── polygons.py    # SegmentedShape, Rectangle/Square/Triangle
    │   ├── ellipses.py    # EllipseShape, CircleShape
    │   └── locator.py     # locate(), contains_mask(), boundary_mask()
    │
    ├── tolerance.py       # Default boundary epsilon
    ├── config.py          # GeometryConfig (YAML)
    ├── errors.py          # GeometryError taxonomy
    └── logging/           # Structured JSON logging

Usage:

    from shapekit import Point, TriangleShape, CircleShape, set_tolerance

    triangle = TriangleShape(Point(0, 0), Point(10, 10), Point(20, 5))
    triangle.area                          # 75.0
    triangle.contains(Point(5, 2))         # True

    circle = CircleShape(Point(0, 0), 10)
    circle.boundary_intersects(Point(10, 0))   # True

    set_tolerance(0.001)                   # stricter boundary tests
"""

from shapekit.errors import (
    ErrorKind,
    GeometryError,
    OutOfRangeError,
    UnsupportedOperationError,
    DegenerateGeometryError,
    InvalidToleranceError,
    ConfigurationError,
)
from shapekit.tolerance import (
    DEFAULT_TOLERANCE,
    get_tolerance,
    set_tolerance,
    tolerance_scope,
)
from shapekit.geometry import (
    Point,
    Segment,
    Shape,
    ShapeKind,
    SegmentedShape,
    RectangleShape,
    SquareShape,
    TriangleShape,
    EllipseShape,
    CircleShape,
    PointLocation,
    locate,
    contains_mask,
    boundary_mask,
)
from shapekit.config import GeometryConfig, ShapeConfig

__all__ = [
    # Errors
    "ErrorKind",
    "GeometryError",
    "OutOfRangeError",
    "UnsupportedOperationError",
    "DegenerateGeometryError",
    "InvalidToleranceError",
    "ConfigurationError",
    # Tolerance
    "DEFAULT_TOLERANCE",
    "get_tolerance",
    "set_tolerance",
    "tolerance_scope",
    # Geometry
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
    # Config
    "GeometryConfig",
    "ShapeConfig",
]

__version__ = "1.0.0"
