"""Public package API for the watson Delaunay toolkit.

This facade provides a stable, flat import surface on top of the internal
implementation package ``watson.core``.

Example
-------
    from watson import BowyerWatson, DelaunayConfig

    engine = BowyerWatson(points, config=DelaunayConfig(strip_super=True)).build()
    pts, tris = engine.to_arrays()

The deeper modules (``watson.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
import logging as _logging

from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound

try:
    __version__ = _pkg_version("watson-mesh")
except _NotFound:  # pragma: no cover - editable / unknown state
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core import geometry, validation, adjacency, io, constants
from .core.config import DelaunayConfig
from .core.errors import (
    TriangulationError, DegenerateTriangleError, CollinearPointsError, PoolError,
)
from .core.geometry import (
    orientation, point_in_triangle, circumcircle, segments_intersect,
)
from .core.pool import ObjectPool
from .core.edges import Edge, EdgeRegistry
from .core.triangle import Triangle
from .core.triangulation import BowyerWatson, BuildState, StepResult, triangulate
from .core.editing import cut_along, triangles_crossing
from .core.location import triangle_containing
from .core.adjacency import Portal, build_adjacency, portal
from .core.logging_utils import configure_logging, get_logger
from .core.stats import BuildStats, format_stats_table

__all__ = [
    '__version__',
    # predicates
    'orientation', 'point_in_triangle', 'circumcircle', 'segments_intersect',
    # data types
    'Triangle', 'Edge', 'EdgeRegistry', 'ObjectPool',
    # engine
    'BowyerWatson', 'BuildState', 'StepResult', 'triangulate', 'DelaunayConfig',
    # editing / queries
    'cut_along', 'triangles_crossing', 'triangle_containing',
    'Portal', 'build_adjacency', 'portal',
    # errors
    'TriangulationError', 'DegenerateTriangleError', 'CollinearPointsError', 'PoolError',
    # ambient
    'configure_logging', 'get_logger', 'BuildStats', 'format_stats_table',
    # namespaces
    'geometry', 'validation', 'adjacency', 'io', 'constants',
]
