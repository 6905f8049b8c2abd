# moreshapes/grid.py
"""Flat subdivided plane in XZ, facing +Y. The baseline for winding checks."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import require_positive, require_segments
from .mesh import MeshBuffer
from .vecmath import Vec3

logger = logging.getLogger(__name__)

GRID_NORMAL: Vec3 = (0.0, 1.0, 0.0)


@dataclass
class Grid:
    # length along x
    width: float = 1.0
    # length along z
    depth: float = 1.0
    width_segments: int = 1
    depth_segments: int = 1

    @classmethod
    def square(cls, length: float, segments: int = 1) -> "Grid":
        return cls(length, length, segments, segments)

    def validate(self) -> None:
        require_positive("width", self.width)
        require_positive("depth", self.depth)
        require_segments("width_segments", self.width_segments, 1)
        require_segments("depth_segments", self.depth_segments, 1)


def mesh_from_grid(grid: Grid) -> MeshBuffer:
    grid.validate()
    nx, nz = grid.width_segments, grid.depth_segments
    mesh = MeshBuffer(name="grid")
    for iz in range(nz + 1):
        v = iz / nz
        z = (v - 0.5) * grid.depth
        for ix in range(nx + 1):
            u = ix / nx
            x = (u - 0.5) * grid.width
            mesh.add_vertex((x, 0.0, z), GRID_NORMAL, (u, v))
            if ix < nx and iz < nz:
                a = iz * (nx + 1) + ix
                b = a + 1
                c = (iz + 1) * (nx + 1) + ix
                d = c + 1
                mesh.add_triangle(a, c, b)
                mesh.add_triangle(b, c, d)
    logger.debug("grid: %d vertices, %d triangles", mesh.vertex_count, mesh.triangle_count)
    return mesh
