"""Tests for undirected edges and the cancelling edge registry."""
from collections import Counter

import numpy as np

from watson.core.edges import Edge, EdgeRegistry, edge_key
from watson.core.pool import ObjectPool
from watson.core.triangle import Triangle
from watson.core.triangulation import BowyerWatson


class TestEdge:

    def test_equality_ignores_direction(self):
        assert Edge((0.5, 0.25), (3.0, 2.0)) == Edge((3.0, 2.0), (0.5, 0.25))
        assert hash(Edge((0.5, 0.25), (3.0, 2.0))) == hash(Edge((3.0, 2.0), (0.5, 0.25)))

    def test_fractional_coordinates_are_distinguished(self):
        # Truncating to integers would make these collide
        e1 = Edge((0.2, 0.0), (1.0, 0.0))
        e2 = Edge((0.7, 0.0), (1.0, 0.0))
        assert e1 != e2
        assert e1.key() != e2.key()

    def test_edge_key_is_canonical(self):
        assert edge_key((1.0, 0.0), (0.0, 5.0)) == ((0.0, 5.0), (1.0, 0.0))

    def test_intersects_triangle(self):
        t = Triangle((0, 0), (2, 0), (0, 2))
        assert Edge((-1.0, 0.5), (3.0, 0.5)).intersects(t)
        assert not Edge((3.0, 3.0), (4.0, 4.0)).intersects(t)
        # Passing through a corner only
        assert not Edge((2.0, 0.0), (3.0, 1.0)).intersects(t)
        assert Edge((-1.0, 0.5), (3.0, 0.5)).intersects_any([t])


class TestEdgeRegistry:

    def test_shared_edge_cancels(self):
        reg = EdgeRegistry()
        t1 = Triangle((0, 0), (1, 0), (1, 1))
        t2 = Triangle((0, 0), (1, 1), (0, 1))
        for t in (t1, t2):
            for p, q in t.edges():
                reg.push(p, q)
        assert len(reg) == 4
        assert reg.cancelled == 1
        assert ((0.0, 0.0), (1.0, 1.0)) not in reg
        assert ((1.0, 0.0), (0.0, 0.0)) in reg
        # Both copies of the diagonal went back to the pool and were
        # handed out again for the last two sides of t2
        assert reg.pool.created == 4
        assert reg.pool.hits == 2
        assert len(reg.pool) == 0

    def test_add_reports_cancellation(self):
        pool = ObjectPool(Edge.blank)
        reg = EdgeRegistry(pool)
        assert reg.add(pool.acquire((0, 0), (1, 0)))
        assert not reg.add(pool.acquire((1, 0), (0, 0)))
        assert len(reg) == 0
        assert len(pool) == 2

    def test_clear_releases_survivors(self):
        reg = EdgeRegistry()
        reg.push((0, 0), (1, 0))
        reg.push((1, 0), (1, 1))
        survivors = list(reg)
        reg.clear()
        assert len(reg) == 0
        assert len(reg.pool) == 2
        assert all(e.a is None for e in survivors)

    def test_survivors_equal_boundary_of_bad_union(self, random_points):
        engine = BowyerWatson(random_points).build()
        rng = np.random.default_rng(11)
        for q in rng.uniform(1.0, 9.0, size=(20, 2)):
            bad = [t for t in engine.triangles if t.is_point_inside_circumcircle(q)]
            counts = Counter(edge_key(p, r) for t in bad for p, r in t.edges())
            expected = {k for k, n in counts.items() if n == 1}

            reg = EdgeRegistry()
            for t in bad:
                for p, r in t.edges():
                    reg.push(p, r)
            assert len(reg) == len(expected)
            assert {e.key() for e in reg} == expected
