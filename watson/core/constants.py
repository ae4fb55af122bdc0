"""Central numerical tolerances and small geometry constants.

This module centralizes the thresholds used by the predicates and the
insertion loop so they can be tuned consistently and referenced without
scattering literals.
"""
from __future__ import annotations

# Geometry tolerances
EPS_CIRCUMCIRCLE: float = 1e-8    # |denominator| below this => (nearly) colinear triple
EPS_SEGMENT: float = 1e-5         # parametric margin for segment endpoint handling
EPS_COMPLETED: float = 0.05       # added to radius^2 before a triangle is settled
EPS_EDGE_MATCH: float = 1e-6      # squared midpoint distance for shared-edge matching

# Portal extraction
PORTAL_INSET: float = 1.5         # distance each portal end is pulled along the edge

# Super quad / pools
SUPER_MARGIN: float = 1.0         # padding around the input extent
DEFAULT_POOL_SIZE: int = 1024     # triangles pre-warmed when no points are queued
EDGE_POOL_FACTOR: int = 5         # edges pre-warmed per pooled triangle

__all__ = [
    'EPS_CIRCUMCIRCLE',
    'EPS_SEGMENT',
    'EPS_COMPLETED',
    'EPS_EDGE_MATCH',
    'PORTAL_INSET',
    'SUPER_MARGIN',
    'DEFAULT_POOL_SIZE',
    'EDGE_POOL_FACTOR',
]
