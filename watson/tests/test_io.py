"""Tests for persistence and export."""
import numpy as np
import pytest

from watson.core.io import load_npz, save_npz, write_vtk
from watson.core.triangulation import BowyerWatson


def test_npz_archive(tmp_path, small_points):
    engine = BowyerWatson(small_points).build()
    path = tmp_path / 'mesh.npz'
    save_npz(str(path), engine, strip_super=True)
    points, triangles = load_npz(str(path))
    ref_pts, ref_tris = engine.to_arrays(strip_super=True)
    np.testing.assert_array_equal(points, ref_pts)
    np.testing.assert_array_equal(triangles, ref_tris)
    with np.load(str(path)) as data:
        np.testing.assert_array_equal(data['extent'], np.asarray(engine.extent))


def test_load_rejects_bad_indices(tmp_path):
    path = tmp_path / 'bad.npz'
    np.savez(str(path), points=np.zeros((3, 2)), triangles=np.array([[0, 1, 7]]))
    with pytest.raises(ValueError, match="out of range"):
        load_npz(str(path))


def test_write_vtk(tmp_path):
    path = tmp_path / 'tri.vtk'
    points = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
    triangles = np.array([[0, 1, 2]])
    write_vtk(str(path), points, triangles, cell_data={'completed': [1.0]})
    text = path.read_text()
    assert text.startswith("# vtk DataFile Version 2.0")
    assert "POINTS 3 double" in text
    assert "CELLS 1 4" in text
    assert "3 0 1 2" in text
    assert "SCALARS completed double 1" in text


def test_write_vtk_shape_checks(tmp_path):
    with pytest.raises(ValueError):
        write_vtk(str(tmp_path / 'x.vtk'), np.zeros((3, 3)), np.array([[0, 1, 2]]))
    with pytest.raises(ValueError):
        write_vtk(str(tmp_path / 'x.vtk'), np.zeros((3, 2)), np.array([[0, 1]]))
