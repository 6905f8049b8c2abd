# moreshapes/export.py
"""
File exporters for MeshBuffer: Wavefront OBJ, ASCII PLY, binary STL.

These sit outside the generators; a host engine normally takes
`MeshBuffer.as_arrays()` directly.
"""
from __future__ import annotations

import struct

from .mesh import MeshBuffer
from .vecmath import v_cross, v_norm, v_sub


def save_obj(path: str, mesh: MeshBuffer) -> None:
    """Save OBJ with vt/vn aligned 1:1 with the vertices."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"o {mesh.name}\n")
        for x, y, z in mesh.positions:
            f.write(f"v {x:.6f} {y:.6f} {z:.6f}\n")
        for u, v in mesh.uvs:
            f.write(f"vt {u:.6f} {v:.6f}\n")
        for nx, ny, nz in mesh.normals:
            f.write(f"vn {nx:.6f} {ny:.6f} {nz:.6f}\n")
        for a, b, c in mesh.triangles():
            f.write(f"f {a + 1}/{a + 1}/{a + 1} {b + 1}/{b + 1}/{b + 1} {c + 1}/{c + 1}/{c + 1}\n")


def save_stl_binary(path: str, mesh: MeshBuffer) -> None:
    """Write a binary STL. Normals are per face (flat)."""
    header = b"moreshapes STL export"
    with open(path, "wb") as f:
        f.write(header + bytes(80 - len(header)))
        f.write(struct.pack("<I", mesh.triangle_count))
        for a, b, c in mesh.triangles():
            va, vb, vc = mesh.positions[a], mesh.positions[b], mesh.positions[c]
            n = v_norm(v_cross(v_sub(vb, va), v_sub(vc, va)))
            f.write(struct.pack("<3f", *n))
            f.write(struct.pack("<3f", *va))
            f.write(struct.pack("<3f", *vb))
            f.write(struct.pack("<3f", *vc))
            f.write(struct.pack("<H", 0))  # attribute byte count


def save_ply_ascii(path: str, mesh: MeshBuffer) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write("ply\nformat ascii 1.0\n")
        f.write(f"element vertex {mesh.vertex_count}\n")
        f.write("property float x\nproperty float y\nproperty float z\n")
        f.write("property float nx\nproperty float ny\nproperty float nz\n")
        f.write("property float s\nproperty float t\n")
        f.write(f"element face {mesh.triangle_count}\n")
        f.write("property list uchar int vertex_indices\nend_header\n")
        for (x, y, z), (nx, ny, nz), (u, v) in zip(mesh.positions, mesh.normals, mesh.uvs):
            f.write(f"{x:.6f} {y:.6f} {z:.6f} {nx:.6f} {ny:.6f} {nz:.6f} {u:.6f} {v:.6f}\n")
        for a, b, c in mesh.triangles():
            f.write(f"3 {a} {b} {c}\n")


def save_mesh(path: str, mesh: MeshBuffer, fmt: str = "") -> None:
    """Pick the writer from `fmt` ("obj", "ply", "stl") or the file extension."""
    fmt = (fmt or path.rsplit(".", 1)[-1]).lower()
    if fmt == "stl":
        save_stl_binary(path, mesh)
    elif fmt == "ply":
        save_ply_ascii(path, mesh)
    else:
        save_obj(path, mesh)
