"""
moreshapes: procedural meshes for a fixed catalogue of parametric shapes.

Every generator is a pure function from a parameter dataclass to a
MeshBuffer (positions, normals, uvs, indices):

    >>> from moreshapes import Cylinder, mesh_from_shape
    >>> mesh = mesh_from_shape(Cylinder.regular(height=2.0, radius=0.5, radial_segments=16))
    >>> positions, normals, uvs, indices = mesh.as_arrays()

Shapes: Cone, Cylinder, Grid, Polygon (with holes), Torus (full or sliced),
Tube (swept along a polyline with rotation-minimizing frames). The polygon
triangulator and the frame propagator are usable on their own.
"""
from .cylinder import Cone, Cylinder, mesh_from_cone, mesh_from_cylinder
from .errors import (
    DegenerateGeometryError, InvalidParameterError, MalformedGeometryError, MeshBufferError, ShapeError,
)
from .frames import Frame, curve_tangents, rotation_minimizing_frames, sample_curve
from .grid import GRID_NORMAL, Grid, mesh_from_grid
from .mesh import MeshBuffer
from .polygon import Polygon, mesh_from_polygon
from .shapes import SHAPE_TYPES, mesh_from_shape
from .torus import Torus, mesh_from_torus
from .triangulate import polygon_area, triangulate, validate_polygon
from .tube import Tube, mesh_from_tube

__version__ = "0.5.0"

__all__ = [
    "Cone", "Cylinder", "Grid", "Polygon", "Torus", "Tube",
    "MeshBuffer", "Frame", "GRID_NORMAL", "SHAPE_TYPES",
    "mesh_from_shape", "mesh_from_cone", "mesh_from_cylinder", "mesh_from_grid",
    "mesh_from_polygon", "mesh_from_torus", "mesh_from_tube",
    "triangulate", "validate_polygon", "polygon_area",
    "rotation_minimizing_frames", "curve_tangents", "sample_curve",
    "ShapeError", "InvalidParameterError", "MalformedGeometryError",
    "DegenerateGeometryError", "MeshBufferError",
]
