# moreshapes/polygon.py
"""
Flat polygons (optionally with holes), triangulated with `triangulate`.

2D input lies in the XZ plane, (x, y) -> (x, 0, y), and always faces +Y.
3D input keeps its own plane: the normal comes from Newell's method over the
outer boundary, so it faces the side from which the boundary runs
counter-clockwise.

Non-planar 3D input is rejected unless `project_non_planar` is set, in
which case every point is flattened onto the best-fit plane first.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .errors import InvalidParameterError, MalformedGeometryError, require_positive, require_segments
from .mesh import MeshBuffer
from .triangulate import triangulate
from .vecmath import (
    Vec2, Vec3, Y_AXIS, as_vec3, newell_normal, plane_basis, v_dot, v_len, v_scale, v_sub,
)

logger = logging.getLogger(__name__)

Points = Sequence[Sequence[float]]


@dataclass
class Polygon:
    """Points on a closed path; the last point connects back to the first."""
    points: Points = field(default_factory=list)
    holes: Sequence[Points] = ()
    project_non_planar: bool = False
    # relative to the polygon's extent
    planarity_tolerance: float = 1e-6

    @classmethod
    def regular(cls, radius: float, n: int) -> "Polygon":
        """Regular n-gon whose corners touch a circle of the given radius."""
        require_positive("radius", radius)
        require_segments("n", n, 3)
        step = 2.0 * math.pi / n
        return cls([(radius * math.cos(step * i), radius * math.sin(step * i)) for i in range(n)])

    @classmethod
    def triangle(cls, radius: float) -> "Polygon":
        return cls.regular(radius, 3)

    @classmethod
    def pentagon(cls, radius: float) -> "Polygon":
        return cls.regular(radius, 5)

    @classmethod
    def hexagon(cls, radius: float) -> "Polygon":
        return cls.regular(radius, 6)

    @classmethod
    def octagon(cls, radius: float) -> "Polygon":
        return cls.regular(radius, 8)

    def validate(self) -> int:
        """Check point counts and dimensions; returns the dimension (2 or 3)."""
        if len(self.points) < 3:
            raise InvalidParameterError("points", len(self.points), "at least 3 points")
        for k, hole in enumerate(self.holes):
            if len(hole) < 3:
                raise InvalidParameterError(f"holes[{k}]", len(hole), "at least 3 points")
        dims = {len(p) for loop in (self.points, *self.holes) for p in loop}
        if dims != {2} and dims != {3}:
            raise InvalidParameterError("points", sorted(dims), "all 2D or all 3D")
        require_positive("planarity_tolerance", self.planarity_tolerance)
        return dims.pop()


def _uv_box(coords: Sequence[Vec2]) -> Tuple[float, float, float, float]:
    xs = [c[0] for c in coords]
    ys = [c[1] for c in coords]
    return min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys)


def _plane_frame(polygon: Polygon, positions: List[Vec3], n_outer: int):
    """Fit the plane of 3D input; returns (normal, 2D coordinates, positions)."""
    outer = positions[:n_outer]
    nn = newell_normal(outer)
    length = v_len(nn)
    extent = max(max(axis) - min(axis) for axis in zip(*positions))
    if extent == 0.0 or length <= 1e-12 * extent * extent:
        raise MalformedGeometryError("polygon has zero area: its boundary is collinear")
    normal = v_scale(nn, 1.0 / length)
    origin = v_scale(tuple(map(math.fsum, zip(*outer))), 1.0 / n_outer)

    offsets = [v_dot(v_sub(p, origin), normal) for p in positions]
    worst = max(abs(d) for d in offsets)
    if worst > polygon.planarity_tolerance * extent:
        if not polygon.project_non_planar:
            raise MalformedGeometryError(
                f"polygon is not planar: a point lies {worst:g} off its best-fit plane")
        logger.warning("polygon: projecting %d points onto the best-fit plane (max offset %g)",
                       len(positions), worst)
        positions = [v_sub(p, v_scale(normal, d)) for p, d in zip(positions, offsets)]

    u_axis, v_axis = plane_basis(normal)
    coords = [(v_dot(v_sub(p, origin), u_axis), v_dot(v_sub(p, origin), v_axis)) for p in positions]
    return normal, coords, positions


def mesh_from_polygon(polygon: Polygon) -> MeshBuffer:
    dim = polygon.validate()
    loops = [list(polygon.points)] + [list(h) for h in polygon.holes]
    sizes = [len(loop) for loop in loops]
    positions = [as_vec3(p) for loop in loops for p in loop]

    if dim == 2:
        normal = Y_AXIS
        coords = [(float(p[0]), float(p[1])) for loop in loops for p in loop]
        # (x, y) -> (x, 0, y) mirrors the winding: CCW in 2D faces -Y
        flip = True
    else:
        normal, coords, positions = _plane_frame(polygon, positions, sizes[0])
        flip = False

    split, start = [], 0
    for size in sizes:
        split.append(coords[start:start + size])
        start += size
    tris = triangulate(split[0], split[1:])

    mesh = MeshBuffer(name="polygon")
    x0, y0, w, h = _uv_box(split[0])
    for p, (x, y) in zip(positions, coords):
        mesh.add_vertex(p, normal, ((x - x0) / w, (y - y0) / h))
    for a, b, c in tris:
        if flip:
            mesh.add_triangle(a, c, b)
        else:
            mesh.add_triangle(a, b, c)
    logger.debug("polygon: %d vertices, %d triangles", mesh.vertex_count, mesh.triangle_count)
    return mesh
