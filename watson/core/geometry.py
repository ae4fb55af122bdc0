"""Geometry primitives used by the triangulation core.

Scalar predicates work on plain ``(x, y)`` pairs (tuples, lists or numpy
rows) and stay in Python floats because they sit on the per-insertion hot
path. Array variants at the bottom serve validation and export code.
"""
from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from .constants import EPS_CIRCUMCIRCLE, EPS_SEGMENT
from .errors import CollinearPointsError

Point = Tuple[float, float]

__all__ = [
    'orientation', 'is_counter_clockwise', 'sign', 'point_in_triangle',
    'circumcircle', 'point_in_circumcircle', 'segments_intersect',
    'orient_vectorized', 'circumcircles_vectorized', 'as_point',
]


def as_point(p: Sequence[float]) -> Point:
    """Coerce a 2D point-like into a tuple of Python floats."""
    return (float(p[0]), float(p[1]))


def orientation(p1, p2, p3) -> float:
    """2D orientation (signed area * 2) for points p1, p2, p3.

    Returns a positive value when (p1, p2, p3) are counter-clockwise, negative
    when clockwise, and zero when colinear.
    """
    return (p2[0] - p1[0]) * (p3[1] - p1[1]) - (p3[0] - p1[0]) * (p2[1] - p1[1])


def is_counter_clockwise(p1, p2, p3) -> bool:
    return orientation(p1, p2, p3) > 0


def sign(p1, p2, p3) -> float:
    """Half-plane test of p1 against the directed line p3 -> p2."""
    return (p1[0] - p3[0]) * (p2[1] - p3[1]) - (p2[0] - p3[0]) * (p1[1] - p3[1])


def point_in_triangle(pt, v1, v2, v3) -> bool:
    """Return True if ``pt`` lies inside or on the boundary of triangle v1 v2 v3.

    The three half-plane signs must not mix strictly positive and strictly
    negative values; zeros (boundary, degenerate triangles) count as inside.
    """
    d1 = sign(pt, v1, v2)
    d2 = sign(pt, v2, v3)
    d3 = sign(pt, v3, v1)
    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0
    return not (has_neg and has_pos)


def circumcircle(a, b, c, eps: float = EPS_CIRCUMCIRCLE) -> Tuple[Point, float]:
    """Circumcenter and squared circumradius of triangle a, b, c.

    Raises
    ------
    CollinearPointsError
        If ``|denominator| < eps``; the points do not span a triangle.
    """
    ax, ay = a[0], a[1]
    bx, by = b[0], b[1]
    cx, cy = c[0], c[1]
    d_a = ax * ax + ay * ay
    d_b = bx * bx + by * by
    d_c = cx * cx + cy * cy

    aux1 = d_a * (cy - by) + d_b * (ay - cy) + d_c * (by - ay)
    aux2 = -(d_a * (cx - bx) + d_b * (ax - cx) + d_c * (bx - ax))
    div = 2.0 * (ax * (cy - by) + bx * (ay - cy) + cx * (by - ay))

    if abs(div) < eps:
        raise CollinearPointsError(
            f"colinear points ({ax}, {ay}), ({bx}, {by}), ({cx}, {cy}): |denominator|={abs(div):.3e}")

    ux = aux1 / div
    uy = aux2 / div
    r2 = (ux - ax) * (ux - ax) + (uy - ay) * (uy - ay)
    return (ux, uy), r2


def point_in_circumcircle(point, center, radius_squared: float) -> bool:
    """Strict test: points on the circle are outside."""
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    return dx * dx + dy * dy < radius_squared


def segments_intersect(p1, p2, p3, p4, include_endpoints: bool = False,
                       eps: float = EPS_SEGMENT) -> bool:
    """Return True if segment p1-p2 intersects segment p3-p4.

    Uses the parametric form of both lines. Parallel (and colinear) segments
    never intersect. With ``include_endpoints=False`` both parameters must lie
    strictly inside ``(eps, 1 - eps)`` so segments meeting at (or very near) an
    endpoint are not reported; with ``include_endpoints=True`` the open bounds
    become closed.
    """
    denominator = (p4[1] - p3[1]) * (p2[0] - p1[0]) - (p4[0] - p3[0]) * (p2[1] - p1[1])
    if denominator == 0.0:
        return False

    u_a = ((p4[0] - p3[0]) * (p1[1] - p3[1]) - (p4[1] - p3[1]) * (p1[0] - p3[0])) / denominator
    u_b = ((p2[0] - p1[0]) * (p1[1] - p3[1]) - (p2[1] - p1[1]) * (p1[0] - p3[0])) / denominator

    lo = 0.0 + eps
    hi = 1.0 - eps
    if include_endpoints:
        return lo <= u_a <= hi and lo <= u_b <= hi
    return lo < u_a < hi and lo < u_b < hi


# ---------------------------------------------------------------------------
# Array variants
# ---------------------------------------------------------------------------

def orient_vectorized(a_pts, b_pts, c_pts) -> np.ndarray:
    """Orientation for arrays of triples; all inputs broadcast to shape (M, 2)."""
    a = np.asarray(a_pts, dtype=np.float64)
    b = np.asarray(b_pts, dtype=np.float64)
    c = np.asarray(c_pts, dtype=np.float64)
    return (b[..., 0] - a[..., 0]) * (c[..., 1] - a[..., 1]) - (c[..., 0] - a[..., 0]) * (b[..., 1] - a[..., 1])


def circumcircles_vectorized(a_pts, b_pts, c_pts) -> Tuple[np.ndarray, np.ndarray]:
    """Circumcenters (M, 2) and squared radii (M,) for arrays of triangles.

    Degenerate rows produce non-finite values instead of raising; callers
    filter with ``np.isfinite``.
    """
    a = np.asarray(a_pts, dtype=np.float64)
    b = np.asarray(b_pts, dtype=np.float64)
    c = np.asarray(c_pts, dtype=np.float64)
    d_a = np.einsum('ij,ij->i', a, a)
    d_b = np.einsum('ij,ij->i', b, b)
    d_c = np.einsum('ij,ij->i', c, c)
    aux1 = d_a * (c[:, 1] - b[:, 1]) + d_b * (a[:, 1] - c[:, 1]) + d_c * (b[:, 1] - a[:, 1])
    aux2 = -(d_a * (c[:, 0] - b[:, 0]) + d_b * (a[:, 0] - c[:, 0]) + d_c * (b[:, 0] - a[:, 0]))
    div = 2.0 * (a[:, 0] * (c[:, 1] - b[:, 1]) + b[:, 0] * (a[:, 1] - c[:, 1]) + c[:, 0] * (b[:, 1] - a[:, 1]))
    with np.errstate(divide='ignore', invalid='ignore'):
        centers = np.column_stack([aux1 / div, aux2 / div])
    r2 = np.sum((centers - a) ** 2, axis=1)
    return centers, r2
