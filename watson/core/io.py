"""Persistence helpers for finished triangulations.

All functions use the canonical array format:
    points: (N, 2) float64 array
    triangles: (M, 3) int32 array
"""
from __future__ import annotations

import warnings
from typing import Any, Dict, Optional, Tuple

import numpy as np

__all__ = ['save_npz', 'load_npz', 'write_vtk']


def save_npz(filepath: str, engine, strip_super: Optional[bool] = None) -> None:
    """Write an engine's current mesh (plus seeding extent) to a ``.npz`` archive."""
    points, triangles = engine.to_arrays(strip_super=strip_super)
    extent = np.asarray(engine.extent if engine.extent is not None else (np.nan, np.nan), dtype=np.float64)
    np.savez(filepath, points=points, triangles=triangles, extent=extent)


def load_npz(filepath: str) -> Tuple[np.ndarray, np.ndarray]:
    """Read ``points`` and ``triangles`` written by :func:`save_npz`."""
    with np.load(filepath) as data:
        if 'points' not in data or 'triangles' not in data:
            raise ValueError(f"{filepath}: expected 'points' and 'triangles' arrays")
        points = np.asarray(data['points'], dtype=np.float64)
        triangles = np.asarray(data['triangles'], dtype=np.int32)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"points must be (N, 2), got shape {points.shape}")
    if triangles.size and (triangles.min() < 0 or triangles.max() >= len(points)):
        raise ValueError("triangle indices out of range")
    return points, triangles.reshape(-1, 3)


def write_vtk(filepath: str, points: np.ndarray, triangles: np.ndarray,
              cell_data: Optional[Dict[str, Any]] = None,
              title: str = "watson triangulation") -> None:
    """Export a triangle mesh to legacy ASCII VTK (viewable in ParaView).

    Parameters
    ----------
    filepath : str
        Output path (conventionally ``.vtk``).
    points : (N, 2) array
    triangles : (M, 3) int array
    cell_data : dict, optional
        Per-triangle scalar arrays of shape (M,), e.g. ``{'completed': flags}``.
    title : str
    """
    points = np.asarray(points, dtype=np.float64)
    triangles = np.asarray(triangles)

    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"points must be (N, 2), got shape {points.shape}")
    if triangles.size == 0:
        triangles = triangles.reshape(0, 3)
    if triangles.ndim != 2 or triangles.shape[1] != 3:
        raise ValueError(f"triangles must be (M, 3), got shape {triangles.shape}")

    num_points = len(points)
    num_triangles = len(triangles)

    with open(filepath, 'w') as f:
        f.write("# vtk DataFile Version 2.0\n")
        f.write(f"{title}\n")
        f.write("ASCII\n")
        f.write("DATASET UNSTRUCTURED_GRID\n")

        f.write(f"POINTS {num_points} double\n")
        for x, y in points:
            f.write(f"{x:.16e} {y:.16e} 0.0\n")

        f.write(f"\nCELLS {num_triangles} {num_triangles * 4}\n")
        for tri in triangles:
            f.write(f"3 {tri[0]} {tri[1]} {tri[2]}\n")

        # 5 = VTK_TRIANGLE
        f.write(f"\nCELL_TYPES {num_triangles}\n")
        for _ in range(num_triangles):
            f.write("5\n")

        if cell_data:
            f.write(f"\nCELL_DATA {num_triangles}\n")
            for name, data in cell_data.items():
                data = np.asarray(data, dtype=np.float64)
                if data.shape != (num_triangles,):
                    warnings.warn(f"Skipping cell_data['{name}'] with unsupported shape {data.shape}")
                    continue
                f.write(f"SCALARS {name} double 1\n")
                f.write("LOOKUP_TABLE default\n")
                for val in data:
                    f.write(f"{val:.16e}\n")
