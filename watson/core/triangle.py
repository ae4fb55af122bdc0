"""Triangle record used by the Bowyer-Watson engine.

A triangle stores its three corners in counter-clockwise order together with
its circumcircle, computed once when the corners are set. Instances are
normally handed out by an :class:`~watson.core.pool.ObjectPool`; direct
construction ``Triangle(a, b, c)`` is available for tests and callers that
work outside an engine.
"""
from __future__ import annotations

from typing import Tuple

from .constants import EPS_CIRCUMCIRCLE
from .errors import DegenerateTriangleError
from .geometry import (
    Point, circumcircle, is_counter_clockwise, point_in_circumcircle, point_in_triangle, as_point,
)

__all__ = ['Triangle']


class Triangle:
    __slots__ = ('a', 'b', 'c', 'circumcenter', 'radius_squared', 'completed')

    def __init__(self, a, b, c, eps: float = EPS_CIRCUMCIRCLE):
        self.completed = False
        self.init(a, b, c, eps)

    @classmethod
    def blank(cls) -> 'Triangle':
        """Uninitialized instance for pool pre-warming."""
        t = cls.__new__(cls)
        t.reset()
        return t

    def init(self, point1, point2, point3, eps: float = EPS_CIRCUMCIRCLE) -> None:
        p1 = as_point(point1)
        p2 = as_point(point2)
        p3 = as_point(point3)
        if p1 == p2 or p1 == p3 or p2 == p3:
            raise DegenerateTriangleError(f"Must be 3 distinct points: {p1}, {p2}, {p3}")

        self.a = p1
        if is_counter_clockwise(p1, p2, p3):
            self.b, self.c = p2, p3
        else:
            self.b, self.c = p3, p2
        self.circumcenter, self.radius_squared = circumcircle(self.a, self.b, self.c, eps)
        self.completed = False

    def reset(self) -> None:
        self.a = self.b = self.c = None
        self.circumcenter = None
        self.radius_squared = 0.0
        self.completed = False

    # -- accessors ---------------------------------------------------------

    @property
    def vertices(self) -> Tuple[Point, Point, Point]:
        return (self.a, self.b, self.c)

    def edges(self) -> Tuple[Tuple[Point, Point], ...]:
        return ((self.a, self.b), (self.b, self.c), (self.c, self.a))

    @property
    def ab(self) -> Point:
        return ((self.a[0] + self.b[0]) * 0.5, (self.a[1] + self.b[1]) * 0.5)

    @property
    def bc(self) -> Point:
        return ((self.b[0] + self.c[0]) * 0.5, (self.b[1] + self.c[1]) * 0.5)

    @property
    def ca(self) -> Point:
        return ((self.c[0] + self.a[0]) * 0.5, (self.c[1] + self.a[1]) * 0.5)

    @property
    def centroid(self) -> Point:
        return ((self.a[0] + self.b[0] + self.c[0]) / 3.0,
                (self.a[1] + self.b[1] + self.c[1]) / 3.0)

    def area(self) -> float:
        return 0.5 * ((self.b[0] - self.a[0]) * (self.c[1] - self.a[1])
                      - (self.c[0] - self.a[0]) * (self.b[1] - self.a[1]))

    def has_vertex(self, point) -> bool:
        p = as_point(point)
        return p == self.a or p == self.b or p == self.c

    # -- predicates --------------------------------------------------------

    def is_point_inside_circumcircle(self, point) -> bool:
        return point_in_circumcircle(point, self.circumcenter, self.radius_squared)

    def contains_point(self, point) -> bool:
        return point_in_triangle(point, self.a, self.b, self.c)

    def __repr__(self) -> str:
        if self.a is None:
            return 'Triangle(<blank>)'
        flag = ', completed' if self.completed else ''
        return f'Triangle({self.a}, {self.b}, {self.c}{flag})'
