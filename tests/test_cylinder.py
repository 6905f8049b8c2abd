import math

import numpy as np
import pytest

from meshcheck import assert_buffer_invariants, assert_faces_follow_normals, boundary_loops
from moreshapes import Cone, Cylinder, InvalidParameterError, mesh_from_cone, mesh_from_cylinder


def test_cylinder_counts_with_caps():
    mesh = mesh_from_cylinder(Cylinder.regular(2.0, 0.5, radial_segments=8))
    # side: 2 rows of 9, caps: centre + 9 rim each
    assert mesh.vertex_count == 18 + 2 * 10
    assert mesh.triangle_count == 16 + 2 * 8
    assert_buffer_invariants(mesh)
    assert_faces_follow_normals(mesh)
    assert mesh.is_closed_manifold()


def test_open_cylinder_has_two_rim_loops():
    mesh = mesh_from_cylinder(Cylinder(radial_segments=8, cap_top=False, cap_bottom=False))
    assert mesh.vertex_count == 18
    assert mesh.triangle_count == 16
    assert boundary_loops(mesh) == [8, 8]


def test_side_normals_are_radial():
    mesh = mesh_from_cylinder(Cylinder.regular(2.0, 0.5, radial_segments=12))
    p = np.asarray(mesh.positions[:26])
    n = np.asarray(mesh.normals[:26])
    assert np.allclose(n[:, 1], 0.0)
    assert np.allclose(n[:, 0], p[:, 0] / 0.5)
    assert np.allclose(n[:, 2], p[:, 2] / 0.5)


def test_seam_vertices_share_position_not_uv():
    mesh = mesh_from_cylinder(Cylinder.regular(1.0, 1.0, radial_segments=6))
    assert mesh.positions[0] == mesh.positions[6]
    assert mesh.uvs[0][0] == 0.0
    assert mesh.uvs[6][0] == 1.0


def test_height_is_centred_on_origin():
    mesh = mesh_from_cylinder(Cylinder.regular(3.0, 0.5, radial_segments=8))
    lo, hi = mesh.bounds()
    assert lo[1] == pytest.approx(-1.5)
    assert hi[1] == pytest.approx(1.5)
    assert hi[0] == pytest.approx(0.5)


def test_frustum_normals_lean_toward_the_narrow_end():
    mesh = mesh_from_cylinder(Cylinder(height=1.0, radius_bottom=1.0, radius_top=0.5, radial_segments=16))
    slope = math.atan2(0.5, 1.0)
    side = np.asarray(mesh.normals[:34])
    assert np.allclose(side[:, 1], math.sin(slope))
    assert np.allclose(np.hypot(side[:, 0], side[:, 2]), math.cos(slope))
    assert_faces_follow_normals(mesh)


def test_height_segments_add_rows():
    mesh = mesh_from_cylinder(Cylinder(radial_segments=8, height_segments=4, cap_top=False, cap_bottom=False))
    assert mesh.vertex_count == 5 * 9
    assert mesh.triangle_count == 2 * 8 * 4


def test_cone_has_a_single_apex_vertex():
    mesh = mesh_from_cone(Cone(radius=0.5, height=1.0, radial_segments=8))
    assert mesh.vertex_count == 20
    assert mesh.triangle_count == 16
    apex = [p for p in mesh.positions if p == (0.0, 0.5, 0.0)]
    assert len(apex) == 1
    assert_buffer_invariants(mesh)
    assert_faces_follow_normals(mesh)
    assert mesh.is_closed_manifold()


def test_cone_side_normals_follow_the_slope():
    mesh = mesh_from_cone(Cone(radius=0.5, height=1.0, radial_segments=8, cap=False))
    slope = math.atan2(0.5, 1.0)
    ring = np.asarray(mesh.normals[:9])
    assert np.allclose(ring[:, 1], math.sin(slope))
    assert boundary_loops(mesh) == [8]


def test_cone_with_height_segments():
    mesh = mesh_from_cone(Cone(radial_segments=8, height_segments=3))
    # two quad bands, one apex band, base cap
    assert mesh.triangle_count == 8 * (2 * 3 - 1) + 8
    assert mesh.is_closed_manifold()


@pytest.mark.parametrize("kwargs, parameter", [
    ({"radial_segments": 2}, "radial_segments"),
    ({"height_segments": 0}, "height_segments"),
    ({"height": 0.0}, "height"),
    ({"radius_top": 0.0}, "radius_top"),
    ({"radius_bottom": -1.0}, "radius_bottom"),
    ({"radial_segments": 8.0}, "radial_segments"),
])
def test_cylinder_rejects_bad_parameters(kwargs, parameter):
    with pytest.raises(InvalidParameterError) as err:
        mesh_from_cylinder(Cylinder(**kwargs))
    assert err.value.parameter == parameter


def test_cone_rejects_bad_parameters():
    with pytest.raises(InvalidParameterError):
        mesh_from_cone(Cone(radius=0.0))
    with pytest.raises(ValueError):
        mesh_from_cone(Cone(radial_segments=1))
