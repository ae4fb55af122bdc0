"""Point location by linear scan."""
from __future__ import annotations

from typing import Iterable, List, Optional

from .geometry import as_point
from .triangle import Triangle

__all__ = ['triangle_containing', 'triangles_containing']


def triangle_containing(triangles: Iterable[Triangle], point) -> Optional[Triangle]:
    """First triangle whose circumcircle and interior both contain ``point``.

    Returns None when no triangle qualifies.
    """
    p = as_point(point)
    for t in triangles:
        if t.is_point_inside_circumcircle(p) and t.contains_point(p):
            return t
    return None


def triangles_containing(triangles: Iterable[Triangle], point) -> List[Triangle]:
    """Every qualifying triangle; more than one only when ``point`` sits on a shared side."""
    p = as_point(point)
    return [t for t in triangles if t.is_point_inside_circumcircle(p) and t.contains_point(p)]
