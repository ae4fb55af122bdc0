"""Tests for segment cuts."""
import numpy as np

from watson.core.edges import Edge
from watson.core.editing import cut_along, triangles_crossing
from watson.core.triangle import Triangle
from watson.core.triangulation import BowyerWatson


def _snapshot(t):
    return (t.vertices, t.circumcenter, t.radius_squared, t.completed)


def test_cut_removes_exactly_crossing_triangles(random_points):
    engine = BowyerWatson(random_points).build()
    start, end = (2.0, 2.5), (7.5, 6.0)
    seg = Edge(start, end)
    expected = {id(t) for t in engine.triangles if seg.intersects(t)}
    survivors = [(t, _snapshot(t)) for t in engine.triangles if id(t) not in expected]
    expected_triples = {frozenset(t.vertices) for t in engine.triangles if id(t) in expected}
    assert expected

    removed = engine.cut(start, end)

    assert {frozenset(v) for v in removed} == expected_triples
    assert len(engine) == len(survivors)
    for (t, snap), live in zip(survivors, engine.triangles):
        assert live is t
        assert _snapshot(live) == snap
    assert engine.stats.cut_removed == len(expected)


def test_cut_keeps_completed_prefix(random_points):
    engine = BowyerWatson(random_points).build()
    engine.cut((0.5, 0.5), (9.5, 9.0))
    k = engine.completed_count
    assert all(t.completed for t in engine.triangles[:k])
    assert not any(t.completed for t in engine.triangles[k:])


def test_cut_releases_to_pool(random_points):
    engine = BowyerWatson(random_points).build()
    free = len(engine.triangle_pool)
    removed = engine.cut((1.0, 5.0), (9.0, 5.0))
    assert len(engine.triangle_pool) == free + len(removed)


def test_cut_missing_everything_is_a_noop():
    tris = [Triangle((0, 0), (1, 0), (0, 1))]
    assert cut_along(tris, (5.0, 5.0), (6.0, 6.0)) == []
    assert len(tris) == 1


def test_touching_at_a_corner_is_not_a_cut():
    t1 = Triangle((0, 0), (2, 0), (0, 2))
    t2 = Triangle((2, 0), (4, 0), (4, 2))
    tris = [t1, t2]
    # Segment starts exactly at the shared corner and leaves to the right
    removed = cut_along(tris, (2.0, 0.0), (5.0, 1.0))
    assert removed == [t2]
    assert tris == [t1]


def test_triangles_crossing_does_not_mutate():
    t = Triangle((0, 0), (2, 0), (0, 2))
    tris = [t]
    assert triangles_crossing(tris, np.array([-1.0, 0.5]), np.array([3.0, 0.5])) == [t]
    assert tris == [t]
