"""Incremental Bowyer-Watson Delaunay triangulation.

The engine inserts points sorted by x into a mesh seeded with two
super-triangles covering the input extent. For each point every live
triangle whose circumcircle contains it is removed ("bad" triangles), the
boundary of the resulting cavity is extracted through an
:class:`~watson.core.edges.EdgeRegistry`, and the cavity is re-triangulated
as a fan from the new point.

Triangle list layout
--------------------
``triangles[:completed_count]`` holds *completed* triangles: their
circumcircle lies entirely to the left of a point already inserted, so no
later point (x >= that point's x) can fall inside it and they are skipped
by every subsequent scan. ``triangles[completed_count:]`` holds the live
candidates.

Example
-------
    >>> engine = BowyerWatson(points).build()
    >>> pts, tris = engine.to_arrays(strip_super=True)
"""
from __future__ import annotations

import enum
import math
import time
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .config import DelaunayConfig
from .constants import DEFAULT_POOL_SIZE
from .edges import Edge, EdgeRegistry
from .errors import TriangulationError
from .geometry import Point, as_point
from .logging_utils import get_logger
from .pool import ObjectPool
from .stats import BuildStats
from .triangle import Triangle
from . import editing, location, validation

__all__ = ['BowyerWatson', 'BuildState', 'StepResult', 'triangulate']


class BuildState(enum.Enum):
    EMPTY = 'empty'
    SEEDED = 'seeded'
    INSERTING = 'inserting'
    DONE = 'done'


@dataclass(frozen=True)
class StepResult:
    """Outcome of one cooperative insertion step.

    ``point`` is None when the queue was already exhausted.
    """
    index: int
    point: Optional[Point]
    removed: int = 0
    created: int = 0
    done: bool = False


def _validate_points(points) -> np.ndarray:
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"points must be (N, 2), got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError("points contain non-finite coordinates")
    return arr


class BowyerWatson:
    """Owner of one triangulation: vertices, triangles, pools and partition.

    Parameters
    ----------
    points : (N, 2) array-like, optional
        Points queued for the sorted build.
    extent : (min, max), optional
        Square extent for super-triangle seeding. Derived from ``points``
        (padded by ``config.super_margin``) when omitted.
    config : DelaunayConfig, optional
    """

    def __init__(self, points=None, extent: Optional[Tuple[float, float]] = None,
                 config: Optional[DelaunayConfig] = None):
        self.config = config if config is not None else DelaunayConfig()
        self.log = get_logger('watson.triangulation')
        self.stats = BuildStats()

        self._triangles: List[Triangle] = []
        self.completed_count = 0
        self.vertices: List[Point] = []
        self._vertex_set = set()
        self._queue: List[Point] = []
        self._next = 0
        self._high_water = -math.inf
        self.super_vertices: Tuple[Point, ...] = ()
        self.extent: Optional[Tuple[float, float]] = None
        self.state = BuildState.EMPTY
        self._extent_hint = extent

        if points is not None:
            self.set_points(points)

        if self.config.pool_size is None:
            pool_size = 2 * len(self._queue) + 8 if self._queue else DEFAULT_POOL_SIZE
        else:
            pool_size = max(0, int(self.config.pool_size))
        self.triangle_pool: ObjectPool[Triangle] = ObjectPool(Triangle.blank, prewarm=pool_size)
        self.edge_pool: ObjectPool[Edge] = ObjectPool(
            Edge.blank, prewarm=pool_size * max(1, int(self.config.edge_pool_factor)))
        self._registry = EdgeRegistry(self.edge_pool)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def set_points(self, points) -> None:
        """Queue ``points`` for the sorted build (replaces any pending queue)."""
        arr = _validate_points(points)
        if self.config.reject_duplicates and len(arr):
            uniq = np.unique(arr, axis=0)
            if len(uniq) != len(arr):
                self.log.warning("dropped %d duplicate input point(s)", len(arr) - len(uniq))
            arr = uniq
        if len(arr):
            # Sort by x; ties keep their (arbitrary) input order
            arr = arr[np.argsort(arr[:, 0], kind='stable')]
        self._queue = [(float(x), float(y)) for x, y in arr]
        self._next = 0

    def _derive_extent(self) -> Tuple[float, float]:
        if not self._queue:
            raise ValueError("cannot derive a seeding extent without points; pass extent=(min, max)")
        arr = np.asarray(self._queue, dtype=np.float64)
        margin = float(self.config.super_margin)
        lo = float(arr.min()) - margin
        hi = float(arr.max()) + margin
        return lo, hi

    def seed(self, extent: Optional[Tuple[float, float]] = None) -> None:
        """Reset the mesh to the two super-triangles covering ``[min, max]^2``.

        Every queued point must lie strictly inside the extent.
        """
        if extent is None:
            extent = self._extent_hint if self._extent_hint is not None else self._derive_extent()
        lo, hi = float(extent[0]), float(extent[1])
        if not lo < hi:
            raise ValueError(f"invalid extent: min={lo} must be smaller than max={hi}")
        if self._queue:
            arr = np.asarray(self._queue, dtype=np.float64)
            if np.any(arr <= lo) or np.any(arr >= hi):
                raise ValueError(f"points must lie strictly inside the extent ({lo}, {hi})")

        self.triangle_pool.release_all(self._triangles)
        self._triangles = []
        self._registry.clear()
        self.completed_count = 0
        self.vertices = []
        self._vertex_set = set()
        self._next = 0
        self._high_water = -math.inf

        c0, c1, c2, c3 = (lo, lo), (hi, lo), (lo, hi), (hi, hi)
        self.super_vertices = (c0, c1, c2, c3)
        self.extent = (lo, hi)
        eps = self.config.circumcircle_eps
        self._triangles.append(self.triangle_pool.acquire(c0, c1, c2, eps))
        self._triangles.append(self.triangle_pool.acquire(c3, c1, c2, eps))
        self.state = BuildState.SEEDED
        self.log.debug("seeded super quad [%g, %g]^2 with %d queued point(s)", lo, hi, len(self._queue))

    # ------------------------------------------------------------------
    # Driving the build
    # ------------------------------------------------------------------

    @property
    def pending(self) -> int:
        return len(self._queue) - self._next

    def insert_next(self) -> StepResult:
        """Insert the next queued point; a no-op once the queue is exhausted."""
        if self.state is BuildState.EMPTY:
            self.seed()
        if self._next >= len(self._queue):
            self.state = BuildState.DONE
            return StepResult(index=self._next, point=None, done=True)
        idx = self._next
        point = self._queue[idx]
        lo, hi = self.extent
        if not (lo < point[0] < hi and lo < point[1] < hi):
            raise ValueError(f"queued point {point} lies outside the seeded extent ({lo}, {hi})")
        self.state = BuildState.INSERTING
        if self.config.reject_duplicates and point in self._vertex_set:
            self.log.warning("skipping duplicate point %s", point)
            removed, created = 0, 0
        else:
            removed, created = self._insert(point)
        self._next += 1
        done = self._next >= len(self._queue)
        if done:
            self.state = BuildState.DONE
        every = int(self.config.log_every)
        if every > 0 and self._next % every == 0:
            self.log.info("inserted %d/%d points, %d triangles (%d completed)",
                          self._next, len(self._queue), len(self._triangles), self.completed_count)
        return StepResult(index=idx, point=point, removed=removed, created=created, done=done)

    def steps(self) -> Iterator[StepResult]:
        """Yield one :class:`StepResult` per insertion, for external schedulers."""
        while True:
            result = self.insert_next()
            if result.point is None:
                return
            yield result

    def build(self) -> 'BowyerWatson':
        """Seed (if needed) and insert every queued point in one pass."""
        t0 = time.perf_counter()
        n = 0
        for _ in self.steps():
            n += 1
        self.state = BuildState.DONE
        self.log.info("triangulated %d point(s) into %d triangles in %.3fs",
                      n, len(self._triangles), time.perf_counter() - t0)
        return self

    def insert_point(self, point) -> StepResult:
        """Insert a single ad-hoc point into the current mesh.

        Points left of an earlier insertion invalidate the completed prefix,
        which is reopened first. Coincident points are skipped (with a
        warning) when ``config.reject_duplicates`` is set.
        """
        p = as_point(point)
        if not (math.isfinite(p[0]) and math.isfinite(p[1])):
            raise ValueError(f"point has non-finite coordinates: {p}")
        if self.state is BuildState.EMPTY:
            if self._extent_hint is None and not self._queue:
                raise ValueError("seed the engine (or pass extent=) before inserting ad-hoc points")
            self.seed()
        lo, hi = self.extent
        if not (lo < p[0] < hi and lo < p[1] < hi):
            raise ValueError(f"point {p} lies outside the seeded extent ({lo}, {hi})")
        idx = len(self.vertices)
        if self.config.reject_duplicates and p in self._vertex_set:
            self.log.warning("skipping duplicate point %s", p)
            return StepResult(index=idx, point=p, done=self.state is BuildState.DONE)
        removed, created = self._insert(p)
        return StepResult(index=idx, point=p, removed=removed, created=created,
                          done=self.state is BuildState.DONE)

    def reopen(self) -> None:
        """Move every completed triangle back into the live candidate range."""
        for t in self._triangles[:self.completed_count]:
            t.completed = False
        self.log.debug("reopened %d completed triangle(s)", self.completed_count)
        self.completed_count = 0
        self.stats.reopened += 1

    # ------------------------------------------------------------------
    # One Bowyer-Watson step
    # ------------------------------------------------------------------

    def _insert(self, point: Point) -> Tuple[int, int]:
        t0 = time.perf_counter()
        px, py = point
        if px < self._high_water and self.completed_count:
            self.reopen()
        tris = self._triangles
        registry = self._registry
        eps_done = self.config.completed_eps
        registry.clear()
        cancelled0 = registry.cancelled

        # Two-pointer partition over the live range, scanning backwards:
        #   [0, completed_count)  completed
        #   [completed_count, i]  not yet examined
        #   (i, tail)             examined, kept
        #   [tail, len)           bad, to be dropped
        tail = len(tris)
        i = tail - 1
        bad: List[Triangle] = []
        while i >= self.completed_count:
            t = tris[i]
            cx, cy = t.circumcenter
            dx = px - cx
            dx2 = dx * dx
            if dx > 0.0 and dx2 >= t.radius_squared + eps_done:
                # Circle lies left of px; sorted later points cannot reach it
                t.completed = True
                k = self.completed_count
                tris[i] = tris[k]
                tris[k] = t
                self.completed_count = k + 1
                self.stats.triangles_completed += 1
                continue  # slot i now holds an unexamined triangle
            dy = py - cy
            if dx2 + dy * dy >= t.radius_squared:
                i -= 1
                continue
            registry.push(t.a, t.b)
            registry.push(t.b, t.c)
            registry.push(t.c, t.a)
            bad.append(t)
            tail -= 1
            tris[i] = tris[tail]
            tris[tail] = t
            i -= 1
        del tris[tail:]

        created: List[Triangle] = []
        eps = self.config.circumcircle_eps
        try:
            for e in registry:
                created.append(self.triangle_pool.acquire(e.a, e.b, point, eps))
        except Exception:
            # Leave the mesh as it was before this point
            self.triangle_pool.release_all(created)
            tris.extend(bad)
            registry.clear()
            raise
        self.triangle_pool.release_all(bad)
        tris.extend(created)

        self.vertices.append(point)
        self._vertex_set.add(point)
        if px > self._high_water:
            self._high_water = px

        st = self.stats
        st.insertions += 1
        st.bad_triangles += len(bad)
        st.triangles_created += len(created)
        st.edges_cancelled += registry.cancelled - cancelled0
        st.record_time(time.perf_counter() - t0)

        every = int(self.config.validate_every)
        if every > 0 and st.insertions % every == 0:
            self.check()
        return len(bad), len(created)

    # ------------------------------------------------------------------
    # Queries and edits
    # ------------------------------------------------------------------

    @property
    def triangles(self) -> List[Triangle]:
        """Live triangle list. Treat as read-only; use :meth:`cut` to edit."""
        return self._triangles

    def __len__(self) -> int:
        return len(self._triangles)

    def __iter__(self) -> Iterator[Triangle]:
        return iter(self._triangles)

    def cavity_boundary(self) -> List[Tuple[Point, Point]]:
        """Boundary edges of the cavity re-triangulated by the last insertion."""
        return self._registry.boundary()

    def is_super_triangle(self, t: Triangle) -> bool:
        sv = self.super_vertices
        return t.a in sv or t.b in sv or t.c in sv

    def result_triangles(self, strip_super: Optional[bool] = None) -> List[Triangle]:
        """Live triangles, optionally without those touching a super corner."""
        if strip_super is None:
            strip_super = self.config.strip_super
        if not strip_super:
            return list(self._triangles)
        return [t for t in self._triangles if not self.is_super_triangle(t)]

    def to_arrays(self, strip_super: Optional[bool] = None) -> Tuple[np.ndarray, np.ndarray]:
        """Export as ``points (N, 2) float64`` and ``triangles (M, 3) int32``.

        Points are the inserted vertices in insertion order followed by the
        four super corners unless ``strip_super`` drops them.
        """
        if strip_super is None:
            strip_super = self.config.strip_super
        tris = self.result_triangles(strip_super)
        coords = list(self.vertices)
        if not strip_super:
            coords.extend(self.super_vertices)
        index = {p: k for k, p in enumerate(coords)}
        points = np.asarray(coords, dtype=np.float64).reshape(-1, 2)
        out = np.empty((len(tris), 3), dtype=np.int32)
        for k, t in enumerate(tris):
            out[k] = (index[t.a], index[t.b], index[t.c])
        return points, out

    def triangle_at(self, point) -> Optional[Triangle]:
        return location.triangle_containing(self._triangles, point)

    def cut(self, start, end) -> List[Tuple[Point, Point, Point]]:
        """Delete every triangle with an edge crossing segment start-end.

        Returns the corner triples of the removed triangles; the triangle
        objects go back to the pool. No re-triangulation follows.
        """
        removed = editing.cut_along(self._triangles, start, end)
        triples = [t.vertices for t in removed]
        # Stable compaction keeps completed triangles in front
        self.completed_count = sum(1 for t in self._triangles if t.completed)
        self.triangle_pool.release_all(removed)
        self.stats.cut_removed += len(removed)
        self.log.debug("cut %s -> %s removed %d triangle(s)", as_point(start), as_point(end), len(removed))
        return triples

    def check(self) -> None:
        """Raise TriangulationError if the empty-circumcircle property fails."""
        violations = validation.delaunay_violations(self._triangles, self.vertices)
        if violations:
            t, p = violations[0]
            raise TriangulationError(
                f"{len(violations)} Delaunay violation(s) after {self.stats.insertions} insertions; "
                f"first: {p} inside circumcircle of {t!r}")


def triangulate(points, extent: Optional[Tuple[float, float]] = None,
                config: Optional[DelaunayConfig] = None,
                strip_super: Optional[bool] = None) -> Tuple[np.ndarray, np.ndarray]:
    """One-shot helper: build and export as ``(points, triangles)`` arrays."""
    engine = BowyerWatson(points, extent=extent, config=config).build()
    return engine.to_arrays(strip_super=strip_super)
