# moreshapes/rings.py
"""
Ring emitter shared by the cylinder, cone, torus and tube generators.

A ring is one circular cross-section. It always carries `segments + 1`
samples: for a full turn the last sample sits on the first one's position
but carries u = 1.0, which gives a continuous UV wrap without bending the
normal of a shared vertex.

Rings are stitched into quad strips. For a quad whose lower ring is `a` and
upper ring is `b`, the triangles are (a_i, b_i, b_i+1) and (a_i, b_i+1, a_i+1):
outward-facing when (upper direction) x (ring direction) points outward.
`flip=True` reverses that for rings laid out the other way round.
"""
from __future__ import annotations

import math
from typing import Callable, List, Tuple

from .mesh import MeshBuffer
from .vecmath import TAU, Vec2, Vec3

# (cos, sin) pairs of one ring
RingTable = List[Tuple[float, float]]


def is_full_turn(sweep: float) -> bool:
    return sweep >= TAU - 1e-9


def ring_table(segments: int, sweep: float = TAU, offset: float = 0.0) -> RingTable:
    """cos/sin of `segments + 1` angles from offset to offset + sweep.

    For a full turn the closing sample reuses the first one exactly, so the
    seam vertices end up bit-identical.
    """
    table = []
    for i in range(segments + 1):
        a = offset + sweep * i / segments
        table.append((math.cos(a), math.sin(a)))
    if is_full_turn(sweep):
        table[-1] = table[0]
    return table


def emit_ring(mesh: MeshBuffer, table: RingTable,
              vertex: Callable[[int, float, float], Tuple[Vec3, Vec3, Vec2]]) -> int:
    """Emit one ring; `vertex(i, cos, sin)` returns (position, normal, uv).

    Returns the index of the ring's first vertex.
    """
    start = mesh.vertex_count
    for i, (c, s) in enumerate(table):
        position, normal, uv = vertex(i, c, s)
        mesh.add_vertex(position, normal, uv)
    return start


def stitch_rings(mesh: MeshBuffer, lower: int, upper: int, segments: int, flip: bool = False) -> None:
    """Connect two rings of `segments + 1` vertices with a quad strip."""
    for i in range(segments):
        a0, a1 = lower + i, lower + i + 1
        b0, b1 = upper + i, upper + i + 1
        if flip:
            mesh.add_triangle(a0, a1, b1)
            mesh.add_triangle(a0, b1, b0)
        else:
            mesh.add_triangle(a0, b0, b1)
            mesh.add_triangle(a0, b1, a1)


def stitch_to_point(mesh: MeshBuffer, ring: int, point: int, segments: int, flip: bool = False) -> None:
    """Connect a ring to a single vertex (a fan); one triangle per segment.

    Without flip the point plays the part of the upper ring.
    """
    for i in range(segments):
        if flip:
            mesh.add_triangle(ring + i, ring + i + 1, point)
        else:
            mesh.add_triangle(ring + i, point, ring + i + 1)
