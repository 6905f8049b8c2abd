# moreshapes/tube.py
"""
Tubes swept along a 3D polyline.

Each curve point gets a ring of `radial_segments + 1` vertices in the plane
of its rotation-minimizing frame (normal N, binormal B):

    normal   = cos(a) * N + sin(a) * B
    position = point + radius * normal

with a running from `radial_offset` over `radial_sweep`. A sweep below a
full turn leaves the tube open along its length, like a gutter.
UV: u runs along the curve (k / (points - 1)), v around the ring.
The ends are left open.

With `radial_segments` 1 or 2 the tube flattens into a ribbon of half-width
`radius`, lying along  base = -cos(b) * N + sin(b) * B,  b = radial_offset + pi/2.
Its normal is  tangent x base. Two segments add a back face with reversed
winding and normal.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .errors import InvalidParameterError, require_positive, require_range, require_segments
from .frames import Frame, check_curve, rotation_minimizing_frames, sample_curve
from .mesh import MeshBuffer
from .rings import emit_ring, ring_table, stitch_rings
from .vecmath import TAU, Vec3, v_add, v_cross, v_norm, v_scale, v_sub

logger = logging.getLogger(__name__)


@dataclass
class Tube:
    points: Sequence[Vec3]
    radius: float = 0.05
    radial_segments: int = 16
    # one radius per point, overrides `radius` (tapering)
    radii: Optional[Sequence[float]] = None
    radial_sweep: float = TAU
    radial_offset: float = 0.0

    @classmethod
    def from_function(cls, func: Callable[[float], Sequence[float]], segments: int = 64, **kwargs) -> "Tube":
        """Tube along a curve function sampled uniformly on [0, 1]."""
        return cls(sample_curve(func, segments), **kwargs)

    def validate(self) -> None:
        require_positive("radius", self.radius)
        require_segments("radial_segments", self.radial_segments, 1)
        require_range("radial_sweep", self.radial_sweep, 0.0, TAU, lo_open=True)
        require_range("radial_offset", self.radial_offset, 0.0, TAU)
        if self.radii is not None:
            if len(self.radii) != len(self.points):
                raise InvalidParameterError("radii", len(self.radii), f"one per point ({len(self.points)})")
            for k, r in enumerate(self.radii):
                require_positive(f"radii[{k}]", r)
        check_curve(self.points)

    def radius_at(self, k: int) -> float:
        return self.radius if self.radii is None else float(self.radii[k])

    @property
    def is_ribbon(self) -> bool:
        return self.radial_segments < 3


def _add_ribbon(mesh: MeshBuffer, tube: Tube, frames: List[Frame]) -> None:
    b = tube.radial_offset + math.pi / 2.0
    c, s = -math.cos(b), math.sin(b)
    sides = tube.radial_segments
    last = len(frames) - 1
    previous = None
    for k, f in enumerate(frames):
        r = tube.radius_at(k)
        u = k / last
        base = v_norm(v_add(v_scale(f.normal, c), v_scale(f.binormal, s)))
        front = v_cross(f.tangent, base)
        edge_a = v_add(f.origin, v_scale(base, r))
        edge_b = v_sub(f.origin, v_scale(base, r))
        start = mesh.add_vertex(edge_a, front, (u, 0.0))
        mesh.add_vertex(edge_b, front, (u, 1.0))
        if sides == 2:
            back = v_scale(front, -1.0)
            mesh.add_vertex(edge_b, back, (u, 0.0))
            mesh.add_vertex(edge_a, back, (u, 1.0))
        if previous is not None:
            for side in range(sides):
                stitch_rings(mesh, previous + 2 * side, start + 2 * side, 1, flip=True)
        previous = start


def mesh_from_tube(tube: Tube) -> MeshBuffer:
    tube.validate()
    frames = rotation_minimizing_frames(tube.points)
    if tube.is_ribbon:
        mesh = MeshBuffer(name="tube")
        _add_ribbon(mesh, tube, frames)
        logger.debug("tube: %d-sided ribbon, %d vertices, %d triangles",
                     tube.radial_segments, mesh.vertex_count, mesh.triangle_count)
        return mesh
    radial = tube.radial_segments
    table = ring_table(radial, tube.radial_sweep, tube.radial_offset)
    last = len(frames) - 1

    mesh = MeshBuffer(name="tube")
    previous = None
    for k, f in enumerate(frames):
        r = tube.radius_at(k)
        u = k / last

        def vertex(i: int, c: float, s: float):
            n = v_add(v_scale(f.normal, c), v_scale(f.binormal, s))
            return v_add(f.origin, v_scale(n, r)), n, (u, i / radial)

        start = emit_ring(mesh, table, vertex)
        if previous is not None:
            # rings advance along the tangent, samples turn from N toward B
            stitch_rings(mesh, previous, start, radial, flip=True)
        previous = start

    logger.debug("tube: %d rings, %d vertices, %d triangles",
                 len(frames), mesh.vertex_count, mesh.triangle_count)
    return mesh
