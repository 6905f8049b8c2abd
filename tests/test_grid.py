import numpy as np
import pytest

from meshcheck import assert_buffer_invariants, assert_faces_follow_normals, boundary_loops, face_normals
from moreshapes import GRID_NORMAL, Grid, InvalidParameterError, mesh_from_grid


def test_single_quad():
    mesh = mesh_from_grid(Grid())
    assert mesh.vertex_count == 4
    assert mesh.triangle_count == 2
    assert all(n == GRID_NORMAL for n in mesh.normals)
    assert mesh.uvs == [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0)]
    assert_buffer_invariants(mesh)


def test_every_face_points_up():
    mesh = mesh_from_grid(Grid(width=3.0, depth=2.0, width_segments=3, depth_segments=2))
    assert mesh.vertex_count == 12
    assert mesh.triangle_count == 12
    fn = face_normals(mesh)
    assert np.all(fn[:, 1] > 0.0)
    assert np.allclose(fn[:, [0, 2]], 0.0)
    assert_faces_follow_normals(mesh)


def test_square_grid_is_centred():
    mesh = mesh_from_grid(Grid.square(2.0, segments=4))
    assert mesh.bounds() == ((-1.0, 0.0, -1.0), (1.0, 0.0, 1.0))
    assert mesh.surface_area() == pytest.approx(4.0)
    assert boundary_loops(mesh) == [16]


@pytest.mark.parametrize("kwargs, parameter", [
    ({"width": 0.0}, "width"),
    ({"depth": -2.0}, "depth"),
    ({"width_segments": 0}, "width_segments"),
    ({"depth_segments": 0}, "depth_segments"),
])
def test_rejects_bad_parameters(kwargs, parameter):
    with pytest.raises(InvalidParameterError) as err:
        mesh_from_grid(Grid(**kwargs))
    assert err.value.parameter == parameter
