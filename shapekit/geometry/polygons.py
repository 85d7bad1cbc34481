"""
Polygon Shapes
==============

Simple polygons built from an ordered ring of points, and the named
rectangle/square/triangle variants.

Design:
- Immutable after construction (tuples + read-only vertex array)
- Geometry computed by shared kernels (ray casting, shoelace)
- Variants only derive their point ring and add named accessors
- Fail-fast on fewer than 3 points; simplicity/winding not verified
"""

from typing import Optional, Sequence, Tuple, TypeVar

import numpy as np

from shapekit.errors import DegenerateGeometryError, OutOfRangeError
from shapekit.geometry import kernels
from shapekit.geometry.base import ShapeKind
from shapekit.geometry.primitives import Point, Segment
from shapekit.logging import LogEvent, create_logger

MIN_POINTS = 3

logger = create_logger("shapes")

T = TypeVar("T")


class SegmentedShape:
    """
    Simple polygon defined by an ordered sequence of points.

    Segment i joins point i to point (i + 1) mod N, so the ring always
    closes and len(segments) == len(points).

    Attributes:
        points: Points in boundary order
        segments: Boundary segments, one per point
        vertices: Nx2 read-only array of the same points

    Example:
        >>> shape = SegmentedShape([Point(0, 50), Point(100, 100),
        ...                         Point(50, 0), Point(0, 0)])
        >>> shape.contains(Point(30, 30))
        True
    """

    kind = ShapeKind.POLYGON

    def __init__(self, points: Sequence[Point]):
        """
        Args:
            points: At least 3 points, in boundary traversal order

        Raises:
            DegenerateGeometryError: If fewer than 3 points are given
        """
        points = tuple(points)
        if len(points) < MIN_POINTS:
            raise DegenerateGeometryError(
                f"Polygon must have at least {MIN_POINTS} points, got {len(points)}"
            )

        count = len(points)
        self._points: Tuple[Point, ...] = points
        self._segments: Tuple[Segment, ...] = tuple(
            Segment(points[i], points[(i + 1) % count])
            for i in range(count)
        )

        vertices = np.array([[p.x, p.y] for p in points], dtype=float)
        vertices.flags.writeable = False
        self._vertices = vertices

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return self._segments

    @property
    def vertices(self) -> np.ndarray:
        return self._vertices

    def boundary_intersects(self, point: Point, epsilon: Optional[float] = None) -> bool:
        """True if any boundary segment contains `point` within tolerance."""
        return any(
            segment.boundary_contains(point, epsilon)
            for segment in self._segments
        )

    def contains(self, point: Point) -> bool:
        """
        Ray-casting interior test (even-odd rule).

        Exact, not tolerance-based: boundary points may be classified
        either way. Use boundary_intersects() for the boundary.
        """
        return kernels.ray_cast_contains(self._vertices, point.x, point.y)

    @property
    def area(self) -> float:
        """Shoelace area, independent of winding direction."""
        return kernels.shoelace_area(self._vertices)

    @property
    def perimeter(self) -> float:
        """Sum of the boundary segment lengths."""
        return kernels.ring_perimeter(self._vertices)

    @staticmethod
    def _safe_at(items: Tuple[T, ...], index: int) -> T:
        # Negative indices are rejected, not wrapped
        if index < 0 or index >= len(items):
            raise OutOfRangeError(index, len(items))
        return items[index]

    def point_at(self, index: int) -> Point:
        """
        Get the point at `index`.

        Raises:
            OutOfRangeError: If index < 0 or index >= len(points)
        """
        return self._safe_at(self._points, index)

    def segment_at(self, index: int) -> Segment:
        """
        Get the segment starting at point `index`.

        Raises:
            OutOfRangeError: If index < 0 or index >= len(segments)
        """
        return self._safe_at(self._segments, index)

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(points={len(self._points)})"


class RectangleShape(SegmentedShape):
    """
    Axis-aligned rectangle from two opposite corners.

    The ring is [top_left, top_right, bottom_right, bottom_left]. Corners
    are not reordered: if bottom_right is not right of and below top_left,
    width or height come out non-positive (a warning is logged).

    Example:
        >>> rectangle = RectangleShape(Point(0, 20), Point(30, 0))
        >>> rectangle.width, rectangle.height
        (30, 20)
    """

    kind = ShapeKind.RECTANGLE

    def __init__(self, top_left: Point, bottom_right: Point):
        super().__init__([
            top_left,
            Point(bottom_right.x, top_left.y),
            bottom_right,
            Point(top_left.x, bottom_right.y),
        ])

        if self.width <= 0 or self.height <= 0:
            logger.warning(
                event=LogEvent.SHAPE_ORIENTATION_UNEXPECTED,
                message=f"{type(self).__name__} has non-positive width or height",
                metadata={'width': self.width, 'height': self.height}
            )

    @property
    def top_left(self) -> Point:
        return self.point_at(0)

    @property
    def top_right(self) -> Point:
        return self.point_at(1)

    @property
    def bottom_right(self) -> Point:
        return self.point_at(2)

    @property
    def bottom_left(self) -> Point:
        return self.point_at(3)

    @property
    def width(self) -> float:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> float:
        return self.top_left.y - self.bottom_right.y


class SquareShape(RectangleShape):
    """Square from its top-left corner and side length."""

    kind = ShapeKind.SQUARE

    def __init__(self, top_left: Point, side: float):
        super().__init__(
            top_left,
            Point(top_left.x + side, top_left.y - side),
        )

    @property
    def side(self) -> float:
        return self.width


class TriangleShape(SegmentedShape):
    """
    Triangle from three named points.

    Sides follow definition order: side_ab = A->B, side_bc = B->C,
    side_ac = C->A (the closing segment).
    """

    kind = ShapeKind.TRIANGLE

    def __init__(self, a: Point, b: Point, c: Point):
        super().__init__([a, b, c])

    @property
    def a(self) -> Point:
        return self.point_at(0)

    @property
    def b(self) -> Point:
        return self.point_at(1)

    @property
    def c(self) -> Point:
        return self.point_at(2)

    @property
    def side_ab(self) -> Segment:
        return self.segment_at(0)

    @property
    def side_bc(self) -> Segment:
        return self.segment_at(1)

    @property
    def side_ac(self) -> Segment:
        return self.segment_at(2)
