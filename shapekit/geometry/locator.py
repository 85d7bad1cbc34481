"""
Point Locator Module
====================

Stateless point classification - applies shapes to points.

Design:
- Pure functions (no state)
- Works with any Shape (polygon or ellipse family)
- Batch queries return numpy boolean masks
"""

from enum import Enum
from typing import Iterable, Optional

import numpy as np

from shapekit.geometry.base import Shape
from shapekit.geometry.primitives import Point


class PointLocation(str, Enum):
    """Where a point sits relative to a shape."""
    INSIDE = "inside"
    BOUNDARY = "boundary"
    OUTSIDE = "outside"


def locate(shape: Shape, point: Point, epsilon: Optional[float] = None) -> PointLocation:
    """
    Classify a point against a shape.

    The boundary test runs first, so points within tolerance of the
    boundary are BOUNDARY even when the interior test would count them.

    Args:
        shape: Any shape
        point: Point to classify
        epsilon: Boundary tolerance (default: current tolerance)

    Returns:
        INSIDE, BOUNDARY or OUTSIDE
    """
    if shape.boundary_intersects(point, epsilon):
        return PointLocation.BOUNDARY
    if shape.contains(point):
        return PointLocation.INSIDE
    return PointLocation.OUTSIDE


def contains_mask(shape: Shape, points: Iterable[Point]) -> np.ndarray:
    """
    Interior test for many points.

    Returns:
        Boolean mask of shape (N,) where True = inside
    """
    return np.array([shape.contains(p) for p in points], dtype=bool)


def boundary_mask(
    shape: Shape,
    points: Iterable[Point],
    epsilon: Optional[float] = None
) -> np.ndarray:
    """
    Boundary test for many points.

    Returns:
        Boolean mask of shape (N,) where True = on the boundary
    """
    return np.array([shape.boundary_intersects(p, epsilon) for p in points], dtype=bool)
