"""Triangle adjacency and portal extraction for path-corridor consumers.

Nothing in the triangulation core depends on this module. It exposes the
data a funnel-style corridor search needs: which triangles share a side and,
for a pair of neighbours, the shared side as a directed portal.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .constants import EPS_EDGE_MATCH, PORTAL_INSET
from .edges import edge_key
from .geometry import Point
from .triangle import Triangle

__all__ = ['Portal', 'build_edge_map', 'build_adjacency', 'shared_edge', 'portal']


@dataclass(frozen=True)
class Portal:
    """Shared side between two triangles.

    ``left_short`` and ``right_short`` are the endpoints pulled towards each
    other along the side so a corridor never hugs a vertex.
    """
    right: Point
    left: Point
    right_short: Point
    left_short: Point


def build_edge_map(triangles: Sequence[Triangle]) -> Dict[Tuple[Point, Point], List[Triangle]]:
    """Map each undirected side to the triangles using it."""
    edge_map: Dict[Tuple[Point, Point], List[Triangle]] = {}
    for t in triangles:
        for p, q in t.edges():
            edge_map.setdefault(edge_key(p, q), []).append(t)
    return edge_map


def build_adjacency(triangles: Sequence[Triangle]) -> Dict[Triangle, List[Triangle]]:
    """Neighbour lists keyed by triangle (sides shared by exactly two triangles)."""
    neighbours: Dict[Triangle, List[Triangle]] = {t: [] for t in triangles}
    for tris in build_edge_map(triangles).values():
        if len(tris) == 2:
            t, u = tris
            neighbours[t].append(u)
            neighbours[u].append(t)
    return neighbours


def _midpoint_match(m: Point, n: Point, tol: float) -> bool:
    dx = m[0] - n[0]
    dy = m[1] - n[1]
    return dx * dx + dy * dy <= tol


def shared_edge(t: Triangle, neighbour: Triangle, tol: float = EPS_EDGE_MATCH) -> Optional[Tuple[Point, Point]]:
    """Side of ``neighbour`` (in its winding order) that ``t`` also has, or None.

    Sides are matched on their midpoints within squared distance ``tol``.
    """
    mids = (t.ab, t.bc, t.ca)
    for mid, side in ((neighbour.ab, (neighbour.a, neighbour.b)),
                      (neighbour.bc, (neighbour.b, neighbour.c)),
                      (neighbour.ca, (neighbour.c, neighbour.a))):
        if any(_midpoint_match(mid, m, tol) for m in mids):
            return side
    return None


def portal(t: Triangle, neighbour: Triangle, inset: float = PORTAL_INSET,
           tol: float = EPS_EDGE_MATCH) -> Portal:
    """Directed portal from ``t`` into ``neighbour``.

    Raises
    ------
    ValueError
        If the triangles do not share a side.
    """
    side = shared_edge(t, neighbour, tol)
    if side is None:
        raise ValueError(f"{t!r} and {neighbour!r} are not adjacent")
    right, left = side
    dx = left[0] - right[0]
    dy = left[1] - right[1]
    length = math.hypot(dx, dy)
    ux, uy = (dx / length * inset, dy / length * inset) if length > 0.0 else (0.0, 0.0)
    return Portal(
        right=right,
        left=left,
        right_short=(right[0] + ux, right[1] + uy),
        left_short=(left[0] - ux, left[1] - uy),
    )
