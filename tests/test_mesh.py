import numpy as np
import pytest

from moreshapes import MeshBuffer, MeshBufferError


def unit_square():
    m = MeshBuffer(name="square")
    up = (0.0, 1.0, 0.0)
    a = m.add_vertex((0.0, 0.0, 0.0), up, (0.0, 0.0))
    b = m.add_vertex((1.0, 0.0, 0.0), up, (1.0, 0.0))
    c = m.add_vertex((1.0, 0.0, 1.0), up, (1.0, 1.0))
    d = m.add_vertex((0.0, 0.0, 1.0), up, (0.0, 1.0))
    m.add_triangle(a, d, c)
    m.add_triangle(a, c, b)
    return m


def test_building_and_counts():
    m = unit_square()
    assert m.vertex_count == 4
    assert m.triangle_count == 2
    assert list(m.triangles()) == [(0, 3, 2), (0, 2, 1)]
    assert m.validate() is m


def test_as_arrays_dtypes_and_shapes():
    positions, normals, uvs, indices = unit_square().as_arrays()
    assert positions.shape == (4, 3) and positions.dtype == np.float32
    assert normals.shape == (4, 3) and normals.dtype == np.float32
    assert uvs.shape == (4, 2) and uvs.dtype == np.float32
    assert indices.shape == (6,) and indices.dtype == np.uint32


def test_empty_buffer_arrays_keep_their_shape():
    positions, normals, uvs, indices = MeshBuffer().as_arrays()
    assert positions.shape == (0, 3)
    assert uvs.shape == (0, 2)
    assert indices.shape == (0,)


def test_validate_reports_every_problem():
    m = unit_square()
    m.normals[1] = (0.0, 2.0, 0.0)
    m.uvs.pop()
    m.indices.extend([0, 9])
    with pytest.raises(MeshBufferError) as err:
        m.validate()
    problems = err.value.problems
    assert len(problems) == 4
    assert any("uvs" in p for p in problems)
    assert any("multiple of 3" in p for p in problems)
    assert any("out of range" in p for p in problems)
    assert any("unit length" in p for p in problems)


def test_merge_offsets_indices():
    m = unit_square()
    m.merge(unit_square())
    assert m.vertex_count == 8
    assert m.indices[6:] == [4, 7, 6, 4, 6, 5]
    m.validate()


def test_surface_area_and_bounds():
    m = unit_square()
    assert m.surface_area() == pytest.approx(1.0)
    assert m.bounds() == ((0.0, 0.0, 0.0), (1.0, 0.0, 1.0))


def test_welding_joins_duplicated_vertices():
    m = unit_square()
    # second copy of the shared diagonal, as a seam would produce
    a2 = m.add_vertex((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), (1.0, 0.0))
    c2 = m.add_vertex((1.0, 0.0, 1.0), (0.0, 1.0, 0.0), (0.0, 1.0))
    m.indices[3:6] = [a2, c2, 1]
    counts = m.welded_edge_counts()
    assert counts[(0, 2)] == 2
    assert len(m.boundary_edges()) == 4
    assert not m.is_closed_manifold()
