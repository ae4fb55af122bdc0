"""Tests for the Triangle record."""
import pytest

from watson.core.errors import CollinearPointsError, DegenerateTriangleError
from watson.core.geometry import orientation
from watson.core.triangle import Triangle


def test_clockwise_input_is_stored_counter_clockwise():
    t = Triangle((0.0, 0.0), (0.0, 1.0), (1.0, 0.0))
    assert t.a == (0.0, 0.0)
    assert (t.b, t.c) == ((1.0, 0.0), (0.0, 1.0))
    assert orientation(t.a, t.b, t.c) > 0


def test_counter_clockwise_input_kept():
    t = Triangle((0.0, 0.0), (1.0, 0.0), (0.0, 1.0))
    assert t.vertices == ((0.0, 0.0), (1.0, 0.0), (0.0, 1.0))
    assert t.area() == pytest.approx(0.5)


def test_circumcircle_computed_on_init():
    t = Triangle((0, 0), (4, 0), (2, 3))
    assert t.circumcenter[0] == pytest.approx(2.0)
    assert t.circumcenter[1] == pytest.approx(0.8333333333)
    assert t.radius_squared == pytest.approx(169.0 / 36.0)
    assert t.is_point_inside_circumcircle((2.0, 1.0))
    assert not t.is_point_inside_circumcircle((2.0, 5.0))
    assert not t.completed


def test_duplicate_corners_rejected():
    with pytest.raises(DegenerateTriangleError, match="3 distinct points"):
        Triangle((1.0, 1.0), (1.0, 1.0), (2.0, 0.0))
    with pytest.raises(ValueError):
        Triangle((1.0, 1.0), (2.0, 0.0), (1.0, 1.0))


def test_colinear_corners_rejected():
    with pytest.raises(CollinearPointsError):
        Triangle((0.0, 0.0), (1.0, 0.0), (2.0, 0.0))


def test_blank_and_reset():
    t = Triangle.blank()
    assert t.a is None and t.radius_squared == 0.0
    assert 'blank' in repr(t)
    t.init((0, 0), (1, 0), (0, 1))
    t.completed = True
    t.reset()
    assert t.a is None and not t.completed


def test_midpoints_and_containment():
    t = Triangle((0, 0), (2, 0), (0, 2))
    assert t.ab == (1.0, 0.0)
    assert t.bc == (1.0, 1.0)
    assert t.ca == (0.0, 1.0)
    assert t.centroid == pytest.approx((2.0 / 3.0, 2.0 / 3.0))
    assert t.contains_point((0.5, 0.5))
    assert not t.contains_point((1.5, 1.5))
    assert t.has_vertex((2, 0))
    assert not t.has_vertex((1, 1))
