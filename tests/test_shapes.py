import pytest

from meshcheck import assert_buffer_invariants, assert_faces_follow_normals
from moreshapes import (
    SHAPE_TYPES, Cone, Cylinder, Grid, MeshBuffer, Polygon, Torus, Tube, mesh_from_shape,
)

DEFAULTS = [
    Cone(),
    Cylinder(),
    Grid(),
    Polygon.octagon(1.0),
    Torus(),
    Tube([(0.0, 0.0, 0.0), (0.0, 1.0, 0.0), (1.0, 2.0, 0.0)]),
]


@pytest.mark.parametrize("shape", DEFAULTS, ids=lambda s: type(s).__name__)
def test_every_shape_builds_a_valid_buffer(shape):
    mesh = mesh_from_shape(shape)
    assert isinstance(mesh, MeshBuffer)
    assert mesh.name == type(shape).__name__.lower()
    assert_buffer_invariants(mesh)
    assert_faces_follow_normals(mesh)


def test_catalogue():
    assert set(SHAPE_TYPES) == {Cone, Cylinder, Grid, Polygon, Torus, Tube}


def test_unknown_shape():
    with pytest.raises(TypeError):
        mesh_from_shape(object())
