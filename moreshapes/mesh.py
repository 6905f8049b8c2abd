# moreshapes/mesh.py
"""
MeshBuffer: the neutral output of every generator.

Four parallel pieces of data a host renderer can upload as-is:

    positions  vertex positions, index-addressable (vertex 0..N-1)
    normals    one unit normal per vertex
    uvs        one texture coordinate per vertex (not clamped to [0, 1])
    indices    flat triangle list, counter-clockwise seen from the outside

Vertices are duplicated wherever a normal or UV changes (seams, caps), so
each vertex carries exactly one normal and one UV.

The buffer knows nothing about any engine: `as_arrays()` is the hand-off,
returning numpy arrays in the usual GPU-friendly dtypes.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

import numpy as np

from .errors import MeshBufferError
from .vecmath import Tri, Vec2, Vec3, v_cross, v_len, v_sub

Edge = Tuple[int, int]


def triangle_area(a: Vec3, b: Vec3, c: Vec3) -> float:
    return 0.5 * v_len(v_cross(v_sub(b, a), v_sub(c, a)))


# --------------
# Mesh container
# --------------

@dataclass
class MeshBuffer:
    positions: List[Vec3] = field(default_factory=list)
    normals: List[Vec3] = field(default_factory=list)
    uvs: List[Vec2] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)
    name: str = "mesh"

    # ---- building ----
    def add_vertex(self, position: Vec3, normal: Vec3, uv: Vec2) -> int:
        self.positions.append(position)
        self.normals.append(normal)
        self.uvs.append(uv)
        return len(self.positions) - 1

    def add_triangle(self, a: int, b: int, c: int) -> None:
        self.indices.extend((a, b, c))

    def merge(self, other: "MeshBuffer") -> "MeshBuffer":
        offset = len(self.positions)
        self.positions.extend(other.positions)
        self.normals.extend(other.normals)
        self.uvs.extend(other.uvs)
        self.indices.extend(i + offset for i in other.indices)
        return self

    # ---- access ----
    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def triangles(self) -> Iterator[Tri]:
        idx = self.indices
        for k in range(0, len(idx) - len(idx) % 3, 3):
            yield (idx[k], idx[k + 1], idx[k + 2])

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """(positions, normals, uvs, indices) as float32/uint32 numpy arrays."""
        positions = np.asarray(self.positions, dtype=np.float32).reshape(-1, 3)
        normals = np.asarray(self.normals, dtype=np.float32).reshape(-1, 3)
        uvs = np.asarray(self.uvs, dtype=np.float32).reshape(-1, 2)
        indices = np.asarray(self.indices, dtype=np.uint32)
        return positions, normals, uvs, indices

    # ---- checks ----
    def validate(self, tolerance: float = 1e-5) -> "MeshBuffer":
        """Raise MeshBufferError listing every broken invariant."""
        problems: List[str] = []
        n = len(self.positions)
        if len(self.normals) != n:
            problems.append(f"{len(self.normals)} normals for {n} positions")
        if len(self.uvs) != n:
            problems.append(f"{len(self.uvs)} uvs for {n} positions")
        if len(self.indices) % 3 != 0:
            problems.append(f"index count {len(self.indices)} is not a multiple of 3")
        if self.indices:
            idx = np.asarray(self.indices, dtype=np.int64)
            bad = np.count_nonzero((idx < 0) | (idx >= n))
            if bad:
                problems.append(f"{bad} indices out of range [0, {n})")
        if self.normals:
            lengths = np.linalg.norm(np.asarray(self.normals, dtype=np.float64).reshape(-1, 3), axis=1)
            bad = np.count_nonzero(np.abs(lengths - 1.0) > tolerance)
            if bad:
                problems.append(f"{bad} normals are not unit length")
        if problems:
            raise MeshBufferError(problems)
        return self

    # ---- analysis ----
    def bounds(self) -> Tuple[Vec3, Vec3]:
        xs = [v[0] for v in self.positions]
        ys = [v[1] for v in self.positions]
        zs = [v[2] for v in self.positions]
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))

    def surface_area(self) -> float:
        p = self.positions
        return math.fsum(triangle_area(p[a], p[b], p[c]) for a, b, c in self.triangles())

    def weld_map(self, eps: float = 1e-7) -> List[int]:
        """Map each vertex to the first vertex sharing its position (within eps)."""
        key = lambda v: (round(v[0] / eps), round(v[1] / eps), round(v[2] / eps))
        first: Dict[Tuple[int, int, int], int] = {}
        out: List[int] = []
        for i, v in enumerate(self.positions):
            out.append(first.setdefault(key(v), i))
        return out

    def welded_edge_counts(self, eps: float = 1e-7) -> Dict[Edge, int]:
        """How many triangles use each undirected edge once seam vertices are merged.

        Zero-length edges (a triangle touching an apex twice) are dropped.
        """
        remap = self.weld_map(eps)
        counts: Dict[Edge, int] = {}
        for tri in self.triangles():
            a, b, c = (remap[i] for i in tri)
            for u, v in ((a, b), (b, c), (c, a)):
                if u == v:
                    continue
                e = (u, v) if u < v else (v, u)
                counts[e] = counts.get(e, 0) + 1
        return counts

    def boundary_edges(self, eps: float = 1e-7) -> List[Edge]:
        return sorted(e for e, k in self.welded_edge_counts(eps).items() if k == 1)

    def is_closed_manifold(self, eps: float = 1e-7) -> bool:
        counts = self.welded_edge_counts(eps)
        return bool(counts) and all(k == 2 for k in counts.values())
