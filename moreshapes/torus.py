# moreshapes/torus.py
"""
Tori lying in the XZ plane around the Y axis, full or sliced.

theta runs around the Y axis (the big circle), phi runs around the tube.
A point is  c(theta) + tube_radius * n(theta, phi)  with

    c = radius * d(theta),   d = (cos theta, 0, sin theta)
    n = cos(phi) * d + sin(phi) * Y

and n is also the normal: the tube cross-section is a circle, so no slope
correction is needed.

A partial sweep leaves the surface open. With `cap_ends` the cuts are
closed with flat pieces: a fan around the tube centre at each theta cut,
and a strip reaching from each phi cut in to the centre circle.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import require_positive, require_range, require_segments
from .mesh import MeshBuffer
from .rings import RingTable, emit_ring, is_full_turn, ring_table, stitch_rings, stitch_to_point
from .vecmath import TAU, Vec3

logger = logging.getLogger(__name__)


@dataclass
class Torus:
    # distance from the centre to the middle of the tube
    radius: float = 0.8
    tube_radius: float = 0.2
    radial_segments: int = 32
    tube_segments: int = 16
    radial_sweep: float = TAU
    tube_sweep: float = TAU
    cap_ends: bool = True

    def validate(self) -> None:
        require_positive("radius", self.radius)
        require_positive("tube_radius", self.tube_radius)
        require_segments("radial_segments", self.radial_segments, 3)
        require_segments("tube_segments", self.tube_segments, 3)
        require_range("radial_sweep", self.radial_sweep, 0.0, TAU, lo_open=True)
        require_range("tube_sweep", self.tube_sweep, 0.0, TAU, lo_open=True)

    @property
    def is_closed(self) -> bool:
        return is_full_turn(self.radial_sweep) and is_full_turn(self.tube_sweep)


class _Surface:
    """Position/normal evaluation shared by the tube, caps and strips."""

    def __init__(self, radius: float, tube_radius: float):
        self.R = radius
        self.r = tube_radius

    def center(self, ct: float, st: float) -> Vec3:
        return (self.R * ct, 0.0, self.R * st)

    def point(self, ct: float, st: float, cp: float, sp: float) -> Vec3:
        w = self.R + self.r * cp
        return (w * ct, self.r * sp, w * st)

    @staticmethod
    def normal(ct: float, st: float, cp: float, sp: float) -> Vec3:
        return (cp * ct, sp, cp * st)

    @staticmethod
    def phi_direction(ct: float, st: float, cp: float, sp: float) -> Vec3:
        # d/dphi of n: -sin(phi) * d + cos(phi) * Y
        return (-sp * ct, cp, -sp * st)


def _add_end_cap(mesh: MeshBuffer, surf: _Surface, theta: RingTable, phi: RingTable, last: bool) -> None:
    ct, st = theta[-1] if last else theta[0]
    # outward is +d/dtheta at the far cut, -d/dtheta at the near one
    sign = 1.0 if last else -1.0
    normal = (-st * sign, 0.0, ct * sign)
    tube = len(phi) - 1
    center = mesh.add_vertex(surf.center(ct, st), normal, (0.5, 0.5))
    rim = emit_ring(mesh, phi, lambda j, cp, sp: (
        surf.point(ct, st, cp, sp),
        normal,
        (0.5 + 0.5 * cp, 0.5 + 0.5 * sp),
    ))
    stitch_to_point(mesh, rim, center, tube, flip=last)


def _add_cut_strip(mesh: MeshBuffer, surf: _Surface, theta: RingTable, phi: RingTable, last: bool) -> None:
    cp, sp = phi[-1] if last else phi[0]
    sign = 1.0 if last else -1.0
    radial = len(theta) - 1

    def normal(ct: float, st: float) -> Vec3:
        px, py, pz = surf.phi_direction(ct, st, cp, sp)
        return (px * sign, py * sign, pz * sign)

    inner = emit_ring(mesh, theta, lambda i, ct, st: (
        surf.center(ct, st), normal(ct, st), (i / radial, 0.0)))
    outer = emit_ring(mesh, theta, lambda i, ct, st: (
        surf.point(ct, st, cp, sp), normal(ct, st), (i / radial, 1.0)))
    stitch_rings(mesh, inner, outer, radial, flip=last)


def mesh_from_torus(torus: Torus) -> MeshBuffer:
    torus.validate()
    surf = _Surface(torus.radius, torus.tube_radius)
    radial, tube = torus.radial_segments, torus.tube_segments
    theta = ring_table(radial, torus.radial_sweep)
    phi = ring_table(tube, torus.tube_sweep)

    mesh = MeshBuffer(name="torus")
    previous = None
    for i, (ct, st) in enumerate(theta):
        u = i / radial
        start = emit_ring(mesh, phi, lambda j, cp, sp: (
            surf.point(ct, st, cp, sp),
            surf.normal(ct, st, cp, sp),
            (u, j / tube),
        ))
        if previous is not None:
            # rows advance along theta, samples along phi
            stitch_rings(mesh, previous, start, tube, flip=True)
        previous = start

    if torus.cap_ends:
        if not is_full_turn(torus.radial_sweep):
            _add_end_cap(mesh, surf, theta, phi, last=False)
            _add_end_cap(mesh, surf, theta, phi, last=True)
        if not is_full_turn(torus.tube_sweep):
            _add_cut_strip(mesh, surf, theta, phi, last=False)
            _add_cut_strip(mesh, surf, theta, phi, last=True)

    logger.debug("torus: %d vertices, %d triangles", mesh.vertex_count, mesh.triangle_count)
    return mesh
