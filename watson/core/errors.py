"""Exception types raised by the triangulation core.

All failures are deterministic functions of the geometric input and are
raised where they are detected; nothing in the core retries.
"""
from __future__ import annotations


class TriangulationError(Exception):
    """Base class for every error raised by ``watson``."""


class DegenerateTriangleError(TriangulationError, ValueError):
    """Two or more corners of a triangle coincide."""


class CollinearPointsError(TriangulationError, ZeroDivisionError):
    """Circumcircle denominator vanished: the three points are (nearly) colinear."""


class PoolError(TriangulationError):
    """An instance was released into a pool that already holds it."""


__all__ = [
    'TriangulationError',
    'DegenerateTriangleError',
    'CollinearPointsError',
    'PoolError',
]
