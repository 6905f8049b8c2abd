import math

import numpy as np
import pytest

from moreshapes import (
    DegenerateGeometryError, InvalidParameterError, curve_tangents, rotation_minimizing_frames, sample_curve,
)
from moreshapes.cli import helix, torus_knot
from moreshapes.vecmath import least_parallel_axis, newell_normal, plane_basis, v_cross


def test_least_parallel_axis_ties_prefer_z_then_y():
    assert least_parallel_axis((1.0, 1.0, 1.0)) == (0.0, 0.0, 1.0)
    assert least_parallel_axis((1.0, 0.0, 0.0)) == (0.0, 0.0, 1.0)
    assert least_parallel_axis((0.0, 0.0, 1.0)) == (0.0, 1.0, 0.0)
    assert least_parallel_axis((0.0, 1.0, 1.0)) == (1.0, 0.0, 0.0)


def test_plane_basis_is_right_handed():
    n = (0.0, -math.sqrt(0.5), math.sqrt(0.5))
    u, v = plane_basis(n)
    assert v_cross(u, v) == pytest.approx(n)


def test_newell_normal_of_unit_square():
    assert newell_normal([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]) == pytest.approx((0.0, 0.0, 2.0))


def test_first_frame_is_fixed():
    frames = rotation_minimizing_frames([(0.0, 0.0, 0.0), (0.0, 1.0, 0.0)])
    f = frames[0]
    assert f.tangent == pytest.approx((0.0, 1.0, 0.0))
    assert f.normal == pytest.approx((0.0, 0.0, 1.0))
    assert f.binormal == pytest.approx((1.0, 0.0, 0.0))


def test_straight_line_does_not_twist():
    frames = rotation_minimizing_frames([(0.0, 0.0, 0.0), (1.0, 2.0, 3.0), (2.0, 4.0, 6.0)])
    for f in frames[1:]:
        assert f.normal == pytest.approx(frames[0].normal)
        assert f.binormal == pytest.approx(frames[0].binormal)


def test_planar_curve_keeps_the_plane_normal():
    arc = [(math.cos(a), math.sin(a), 0.0) for a in np.linspace(0.0, math.pi, 9)]
    for f in rotation_minimizing_frames(arc):
        assert f.normal == pytest.approx((0.0, 0.0, 1.0))


def test_frames_are_orthonormal():
    frames = rotation_minimizing_frames(sample_curve(helix, 48))
    assert len(frames) == 49
    for f in frames:
        m = np.array([f.tangent, f.normal, f.binormal])
        assert np.allclose(m @ m.T, np.eye(3), atol=1e-9)
        assert np.linalg.det(m) == pytest.approx(1.0)


def test_closed_curve_frames_meet():
    points = sample_curve(torus_knot(), 96)
    frames = rotation_minimizing_frames(points)
    assert frames[-1].tangent == frames[0].tangent
    assert frames[-1].normal == pytest.approx(frames[0].normal, abs=1e-9)


def test_tangents():
    t = curve_tangents([(0.0, 0.0, 0.0), (2.0, 0.0, 0.0), (2.0, 3.0, 0.0)])
    assert t == [(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 1.0, 0.0)]


def test_regeneration_is_deterministic():
    points = sample_curve(helix, 20)
    assert rotation_minimizing_frames(points) == rotation_minimizing_frames(points)


def test_single_point():
    with pytest.raises(InvalidParameterError):
        rotation_minimizing_frames([(0.0, 0.0, 0.0)])


def test_repeated_point():
    with pytest.raises(DegenerateGeometryError) as err:
        rotation_minimizing_frames([(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 0.0, 0.0), (2.0, 0.0, 0.0)])
    assert err.value.index == 1


def test_sample_curve_endpoints():
    pts = sample_curve(lambda t: (t, 0, 0), 4)
    assert pts == [(0.0, 0.0, 0.0), (0.25, 0.0, 0.0), (0.5, 0.0, 0.0), (0.75, 0.0, 0.0), (1.0, 0.0, 0.0)]
