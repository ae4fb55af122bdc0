"""Segment-based triangle removal ("cut").

A cut deletes every triangle that has at least one side strictly crossing
the cut segment. Touching at an endpoint does not count. Nothing is
re-triangulated afterwards.
"""
from __future__ import annotations

from typing import List, Sequence

from .edges import Edge
from .geometry import as_point
from .triangle import Triangle

__all__ = ['triangles_crossing', 'cut_along']


def triangles_crossing(triangles: Sequence[Triangle], start, end) -> List[Triangle]:
    """Triangles with a side strictly crossing segment start-end (no mutation)."""
    seg = Edge(as_point(start), as_point(end))
    return [t for t in triangles if seg.intersects(t)]


def cut_along(triangles: List[Triangle], start, end) -> List[Triangle]:
    """Remove crossing triangles from ``triangles`` in place and return them.

    Survivors keep their relative order and are not touched otherwise.
    """
    seg = Edge(as_point(start), as_point(end))
    kept: List[Triangle] = []
    removed: List[Triangle] = []
    for t in triangles:
        (removed if seg.intersects(t) else kept).append(t)
    if removed:
        triangles[:] = kept
    return removed
