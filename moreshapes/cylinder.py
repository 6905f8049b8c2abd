# moreshapes/cylinder.py
"""
Cylinders, frusta and cones around the Y axis, centred on the origin.

Vertex order in the buffer:

    1. lateral rows, bottom to top, `radial_segments + 1` vertices each
       (a zero-radius end is a single apex vertex instead of a row)
    2. top cap: centre, then rim
    3. bottom cap: centre, then rim

On a tapered side the normal leans by the slope angle
atan2(radius_bottom - radius_top, height); it is purely radial only when
both radii match. Cap vertices are never shared with the side.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Tuple

from .errors import require_positive, require_segments
from .mesh import MeshBuffer
from .rings import RingTable, emit_ring, ring_table, stitch_rings, stitch_to_point

logger = logging.getLogger(__name__)


@dataclass
class Cylinder:
    height: float = 1.0
    radius_bottom: float = 0.5
    radius_top: float = 0.5
    radial_segments: int = 32
    height_segments: int = 1
    cap_top: bool = True
    cap_bottom: bool = True

    @classmethod
    def regular(cls, height: float, radius: float, radial_segments: int = 32) -> "Cylinder":
        """Cylinder whose top and bottom discs have the same radius."""
        return cls(height=height, radius_bottom=radius, radius_top=radius,
                   radial_segments=radial_segments, height_segments=1)

    def validate(self) -> None:
        require_positive("height", self.height)
        # a zero radius is a cone, see Cone
        require_positive("radius_bottom", self.radius_bottom)
        require_positive("radius_top", self.radius_top)
        require_segments("radial_segments", self.radial_segments, 3)
        require_segments("height_segments", self.height_segments, 1)


@dataclass
class Cone:
    radius: float = 0.5
    height: float = 1.0
    radial_segments: int = 32
    height_segments: int = 1
    cap: bool = True

    def validate(self) -> None:
        require_positive("height", self.height)
        require_positive("radius", self.radius)
        require_segments("radial_segments", self.radial_segments, 3)
        require_segments("height_segments", self.height_segments, 1)


def _add_lateral(mesh: MeshBuffer, table: RingTable, height: float, radius_bottom: float,
                 radius_top: float, height_segments: int) -> None:
    radial = len(table) - 1
    half = height / 2.0
    slope = math.atan2(radius_bottom - radius_top, height)
    n_xz, n_y = math.cos(slope), math.sin(slope)

    # (first index, is_apex) per row
    rows: List[Tuple[int, bool]] = []
    for j in range(height_segments + 1):
        t = j / height_segments
        y = -half + t * height
        r = radius_bottom + (radius_top - radius_bottom) * t
        if r == 0.0:
            up = 1.0 if j else -1.0
            apex = mesh.add_vertex((0.0, y, 0.0), (0.0, up, 0.0), (0.5, t))
            rows.append((apex, True))
            continue
        start = emit_ring(mesh, table, lambda i, c, s: (
            (r * c, y, r * s),
            (n_xz * c, n_y, n_xz * s),
            (i / radial, t),
        ))
        rows.append((start, False))

    for (lower, lower_apex), (upper, upper_apex) in zip(rows, rows[1:]):
        if upper_apex:
            stitch_to_point(mesh, lower, upper, radial)
        elif lower_apex:
            stitch_to_point(mesh, upper, lower, radial, flip=True)
        else:
            stitch_rings(mesh, lower, upper, radial)


def _add_cap(mesh: MeshBuffer, table: RingTable, y: float, radius: float, top: bool) -> None:
    radial = len(table) - 1
    ny = 1.0 if top else -1.0
    # v runs against z on the top face so the texture is not mirrored
    vs = -0.5 if top else 0.5
    center = mesh.add_vertex((0.0, y, 0.0), (0.0, ny, 0.0), (0.5, 0.5))
    rim = emit_ring(mesh, table, lambda i, c, s: (
        (radius * c, y, radius * s),
        (0.0, ny, 0.0),
        (0.5 + 0.5 * c, 0.5 + vs * s),
    ))
    stitch_to_point(mesh, rim, center, radial, flip=not top)


def _frustum(name: str, height: float, radius_bottom: float, radius_top: float, radial_segments: int,
             height_segments: int, cap_top: bool, cap_bottom: bool) -> MeshBuffer:
    mesh = MeshBuffer(name=name)
    table = ring_table(radial_segments)
    half = height / 2.0
    _add_lateral(mesh, table, height, radius_bottom, radius_top, height_segments)
    # a zero-radius end is a point, it gets no disk
    if cap_top and radius_top > 0.0:
        _add_cap(mesh, table, half, radius_top, top=True)
    if cap_bottom and radius_bottom > 0.0:
        _add_cap(mesh, table, -half, radius_bottom, top=False)
    logger.debug("%s: %d vertices, %d triangles", name, mesh.vertex_count, mesh.triangle_count)
    return mesh


def mesh_from_cylinder(cylinder: Cylinder) -> MeshBuffer:
    cylinder.validate()
    return _frustum("cylinder", cylinder.height, cylinder.radius_bottom, cylinder.radius_top,
                    cylinder.radial_segments, cylinder.height_segments,
                    cylinder.cap_top, cylinder.cap_bottom)


def mesh_from_cone(cone: Cone) -> MeshBuffer:
    cone.validate()
    return _frustum("cone", cone.height, cone.radius, 0.0, cone.radial_segments,
                    cone.height_segments, False, cone.cap)
