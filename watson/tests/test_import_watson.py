"""Smoke test to ensure top-level package import works without triggering
circular import errors in the flat API layer (`watson/__init__.py`).
"""


def test_import_watson_smoke():
    import watson
    assert hasattr(watson, 'BowyerWatson')
    assert hasattr(watson, 'triangulate')
    assert watson.CollinearPointsError.__mro__[1].__name__ == 'TriangulationError'
    pts, tris = watson.triangulate([(0.0, 0.0), (4.0, 0.0), (2.0, 3.0)], strip_super=True)
    assert tris.shape == (1, 3)
