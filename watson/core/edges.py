"""Undirected edges and the per-insertion cavity-boundary registry.

During one Bowyer-Watson insertion every "bad" triangle pushes its three
edges into an :class:`EdgeRegistry`. An edge shared by two bad triangles is
pushed twice and cancels out, so once all bad triangles are processed the
registry holds exactly the boundary of the cavity.

Edges hash on the exact float values of their endpoints (order-independent).
Coordinates are never truncated or quantized: two edges match only when
their endpoints are bit-for-bit the same floats, which holds because every
triangle corner is copied from the same vertex tuple.
"""
from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple

from .geometry import Point, segments_intersect
from .pool import ObjectPool

__all__ = ['Edge', 'EdgeRegistry', 'edge_key']

EdgeKey = Tuple[Point, Point]


def edge_key(p: Point, q: Point) -> EdgeKey:
    """Canonical (order-independent) key of the undirected edge p-q."""
    return (p, q) if p <= q else (q, p)


class Edge:
    __slots__ = ('a', 'b')

    def __init__(self, a=None, b=None):
        self.a = a
        self.b = b

    @classmethod
    def blank(cls) -> 'Edge':
        return cls()

    def init(self, a: Point, b: Point) -> None:
        self.a = a
        self.b = b

    def reset(self) -> None:
        self.a = None
        self.b = None

    def key(self) -> EdgeKey:
        return edge_key(self.a, self.b)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.a == other.a and self.b == other.b) or (self.a == other.b and self.b == other.a)

    def __hash__(self) -> int:
        return hash(self.key())

    def intersects(self, triangle) -> bool:
        """True if this edge strictly crosses any side of ``triangle``."""
        return (segments_intersect(self.a, self.b, triangle.a, triangle.b, False)
                or segments_intersect(self.a, self.b, triangle.b, triangle.c, False)
                or segments_intersect(self.a, self.b, triangle.c, triangle.a, False))

    def intersects_any(self, triangles) -> bool:
        return any(self.intersects(t) for t in triangles)

    def __repr__(self) -> str:
        return f'Edge({self.a}, {self.b})'


class EdgeRegistry:
    """Working set of undirected edges with pairwise cancellation.

    Parameters
    ----------
    pool : ObjectPool of Edge, optional
        Pool edges are acquired from and cancelled edges are released to.
        A private pool is created when omitted.
    """

    def __init__(self, pool: Optional[ObjectPool] = None):
        self.pool = pool if pool is not None else ObjectPool(Edge.blank)
        self._edges: Dict[EdgeKey, Edge] = {}
        self.cancelled = 0

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges.values())

    def __contains__(self, edge) -> bool:
        if isinstance(edge, Edge):
            return edge.key() in self._edges
        p, q = edge
        return edge_key(p, q) in self._edges

    def add(self, edge: Edge) -> bool:
        """Insert ``edge``; return False if it cancelled an equal edge.

        On cancellation both the inbound edge and the stored one are released
        to the pool and the key is dropped.
        """
        key = edge.key()
        existing = self._edges.pop(key, None)
        if existing is None:
            self._edges[key] = edge
            return True
        self.pool.release(existing)
        if existing is not edge:
            self.pool.release(edge)
        self.cancelled += 1
        return False

    def push(self, a: Point, b: Point) -> bool:
        """Acquire an edge a-b from the pool and :meth:`add` it."""
        return self.add(self.pool.acquire(a, b))

    def clear(self) -> None:
        """Release every surviving edge back to the pool."""
        edges = list(self._edges.values())
        self._edges.clear()
        self.pool.release_all(edges)

    def boundary(self):
        """Surviving edges as a list of ``(a, b)`` pairs."""
        return [(e.a, e.b) for e in self._edges.values()]
