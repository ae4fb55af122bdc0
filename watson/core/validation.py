"""Invariant checks for a triangle list (vectorized with numpy).

These are diagnostics, not part of the insertion loop: tests call them
directly and the engine runs :func:`delaunay_violations` when
``DelaunayConfig.validate_every`` is set.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from .geometry import orient_vectorized
from .triangle import Triangle

__all__ = ['circle_arrays', 'delaunay_violations', 'is_delaunay', 'orientation_violations']

_CHUNK_CELLS = 1_000_000  # triangle x point pairs per block


def circle_arrays(triangles: Sequence[Triangle]) -> Tuple[np.ndarray, np.ndarray]:
    """Stored circumcenters (M, 2) and squared radii (M,) of ``triangles``."""
    if not triangles:
        return np.zeros((0, 2)), np.zeros((0,))
    centers = np.asarray([t.circumcenter for t in triangles], dtype=np.float64)
    r2 = np.asarray([t.radius_squared for t in triangles], dtype=np.float64)
    return centers, r2


def delaunay_violations(triangles: Sequence[Triangle], points, rel_tol: float = 1e-9
                        ) -> List[Tuple[Triangle, Tuple[float, float]]]:
    """Pairs ``(triangle, point)`` with ``point`` strictly inside the circumcircle.

    ``rel_tol`` scales with the squared radius so corners lying on their own
    circle are not reported.
    """
    tris = list(triangles)
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if not tris or pts.shape[0] == 0:
        return []
    centers, r2 = circle_arrays(tris)
    limit = r2 - rel_tol * np.maximum(1.0, r2)
    out = []
    chunk = max(1, _CHUNK_CELLS // pts.shape[0])
    for s in range(0, len(tris), chunk):
        c = centers[s:s + chunk]
        diff = pts[None, :, :] - c[:, None, :]
        d2 = np.einsum('mnk,mnk->mn', diff, diff)
        ti, pi = np.nonzero(d2 < limit[s:s + chunk, None])
        for a, b in zip(ti, pi):
            out.append((tris[s + int(a)], (float(pts[b, 0]), float(pts[b, 1]))))
    return out


def is_delaunay(triangles: Sequence[Triangle], points, rel_tol: float = 1e-9) -> bool:
    return not delaunay_violations(triangles, points, rel_tol)


def orientation_violations(triangles: Sequence[Triangle]) -> List[Triangle]:
    """Triangles whose stored corners are not strictly counter-clockwise."""
    tris = list(triangles)
    if not tris:
        return []
    a = np.asarray([t.a for t in tris], dtype=np.float64)
    b = np.asarray([t.b for t in tris], dtype=np.float64)
    c = np.asarray([t.c for t in tris], dtype=np.float64)
    bad = orient_vectorized(a, b, c) <= 0
    return [tris[i] for i in np.nonzero(bad)[0]]
