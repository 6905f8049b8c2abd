# moreshapes/shapes.py
"""One entry point for the whole catalogue: mesh_from_shape(shape)."""
from __future__ import annotations

from typing import Callable, Dict, Union

from .cylinder import Cone, Cylinder, mesh_from_cone, mesh_from_cylinder
from .grid import Grid, mesh_from_grid
from .mesh import MeshBuffer
from .polygon import Polygon, mesh_from_polygon
from .torus import Torus, mesh_from_torus
from .tube import Tube, mesh_from_tube

Shape = Union[Cone, Cylinder, Grid, Polygon, Torus, Tube]

_GENERATORS: Dict[type, Callable[..., MeshBuffer]] = {
    Cone: mesh_from_cone,
    Cylinder: mesh_from_cylinder,
    Grid: mesh_from_grid,
    Polygon: mesh_from_polygon,
    Torus: mesh_from_torus,
    Tube: mesh_from_tube,
}

SHAPE_TYPES = tuple(_GENERATORS)


def mesh_from_shape(shape: Shape) -> MeshBuffer:
    try:
        generate = _GENERATORS[type(shape)]
    except KeyError:
        raise TypeError(f"not a shape: {type(shape).__name__}") from None
    return generate(shape)
