"""
Geometry Kernels
================

Stateless numeric routines shared by the shape classes.

Design:
- Pure functions over Nx2 vertex arrays (no shape objects)
- numpy vectorization, one pass per query
- No tolerance here: kernels are exact, callers apply epsilon
"""

import numpy as np


def shoelace_area(vertices: np.ndarray) -> float:
    """
    Polygon area by the shoelace formula.

    Sums x_i * y_{i+1} - y_i * x_{i+1} over the ring (with wraparound) and
    takes the absolute value once at the end, so winding direction does not
    matter.

    Args:
        vertices: Nx2 array of (x, y) in boundary order

    Returns:
        Non-negative area
    """
    x = vertices[:, 0]
    y = vertices[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    return float(abs(np.sum(x * y_next - y * x_next)) / 2)


def ring_perimeter(vertices: np.ndarray) -> float:
    """Total length of the closed ring through `vertices`."""
    deltas = np.roll(vertices, -1, axis=0) - vertices
    return float(np.sum(np.hypot(deltas[:, 0], deltas[:, 1])))


def ray_cast_contains(vertices: np.ndarray, x: float, y: float) -> bool:
    """
    Even-odd point-in-polygon test.

    Casts a horizontal ray from (x, y) towards +X and counts crossings of
    each edge (vertex i, vertex i-1). An edge counts when it straddles the
    ray's y (one endpoint strictly above, the other not) and its
    x-intersection lies strictly right of the point.

    Horizontal edges never straddle, so they are skipped before the
    division and never divide by zero.

    Exact parity, no tolerance: points exactly on the boundary may go either
    way.

    Args:
        vertices: Nx2 array of (x, y) in boundary order
        x, y: Test point coordinates

    Returns:
        True if the point is inside
    """
    xi = vertices[:, 0]
    yi = vertices[:, 1]
    xj = np.roll(xi, 1)
    yj = np.roll(yi, 1)

    straddles = (yi > y) != (yj > y)

    # Only straddling edges are divided; the rest stay at -inf and never hit
    x_cross = np.full(len(vertices), -np.inf)
    np.divide((xj - xi) * (y - yi), yj - yi, out=x_cross, where=straddles)
    x_cross[straddles] += xi[straddles]

    crossings = np.count_nonzero(straddles & (x < x_cross))
    return bool(crossings % 2)


def ellipse_equation(cx: float, cy: float, a: float, b: float, x: float, y: float) -> float:
    """
    Normalized ellipse equation ((x-cx)/a)^2 + ((y-cy)/b)^2.

    1.0 on the boundary, < 1 inside, > 1 outside.
    """
    return ((x - cx) / a) ** 2 + ((y - cy) / b) ** 2
