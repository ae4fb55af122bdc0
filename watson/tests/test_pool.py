"""Tests for the free-list object pool."""
import pytest

from watson.core.edges import Edge
from watson.core.errors import DegenerateTriangleError, PoolError
from watson.core.pool import ObjectPool
from watson.core.triangle import Triangle


def test_prewarm_happens_on_first_acquire():
    pool = ObjectPool(Triangle.blank, prewarm=8)
    assert len(pool) == 0 and pool.created == 0
    t = pool.acquire((0, 0), (1, 0), (0, 1))
    assert pool.created == 8
    assert len(pool) == 7
    assert pool.hits == 1 and pool.misses == 0
    assert t.vertices == ((0.0, 0.0), (1.0, 0.0), (0.0, 1.0))


def test_release_recycles_same_instance():
    pool = ObjectPool(Triangle.blank)
    t = pool.acquire((0, 0), (1, 0), (0, 1))
    assert pool.misses == 1
    t.completed = True
    pool.release(t)
    assert t.a is None and not t.completed
    u = pool.acquire((5, 5), (6, 5), (5, 6))
    assert u is t
    assert pool.hits == 1
    assert u.a == (5.0, 5.0)


def test_grows_past_prewarm():
    pool = ObjectPool(Edge.blank, prewarm=2)
    edges = [pool.acquire((0, i), (1, i)) for i in range(5)]
    assert pool.created == 5
    assert pool.misses == 3
    pool.release_all(edges)
    assert len(pool) == 5


def test_double_release_raises():
    pool = ObjectPool(Edge.blank)
    e = pool.acquire((0, 0), (1, 1))
    pool.release(e)
    with pytest.raises(PoolError):
        pool.release(e)


def test_failed_init_returns_instance_to_pool():
    pool = ObjectPool(Triangle.blank, prewarm=1)
    with pytest.raises(DegenerateTriangleError):
        pool.acquire((0, 0), (0, 0), (1, 1))
    assert len(pool) == 1
    t = pool.acquire((0, 0), (1, 0), (0, 1))
    assert t.a == (0.0, 0.0)


def test_pools_are_independent():
    p1 = ObjectPool(Edge.blank)
    p2 = ObjectPool(Edge.blank)
    e = p1.acquire((0, 0), (1, 1))
    p1.release(e)
    assert len(p1) == 1 and len(p2) == 0
