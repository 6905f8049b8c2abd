"""Checks shared by the generator tests."""

from typing import Dict, List

import numpy as np


def assert_buffer_invariants(mesh):
    positions, normals, uvs, indices = mesh.as_arrays()
    assert positions.shape[0] == normals.shape[0] == uvs.shape[0]
    assert indices.size % 3 == 0
    assert indices.size > 0
    assert indices.max() < positions.shape[0]
    assert np.allclose(np.linalg.norm(normals, axis=1), 1.0, atol=1e-5)
    mesh.validate()


def face_normals(mesh) -> np.ndarray:
    p = np.asarray(mesh.positions, dtype=float)
    tri = np.asarray(mesh.indices, dtype=int).reshape(-1, 3)
    return np.cross(p[tri[:, 1]] - p[tri[:, 0]], p[tri[:, 2]] - p[tri[:, 0]])


def assert_faces_follow_normals(mesh):
    """Every triangle winds CCW toward the side its vertex normals point to."""
    n = np.asarray(mesh.normals, dtype=float)
    tri = np.asarray(mesh.indices, dtype=int).reshape(-1, 3)
    summed = n[tri[:, 0]] + n[tri[:, 1]] + n[tri[:, 2]]
    dots = np.einsum("ij,ij->i", face_normals(mesh), summed)
    assert np.all(dots > 0.0), f"{np.count_nonzero(dots <= 0.0)} triangles wind inward"


def boundary_loops(mesh) -> List[int]:
    """Edge count of every connected boundary component, sorted."""
    edges = mesh.boundary_edges()
    parent: Dict[int, int] = {}

    def find(v):
        parent.setdefault(v, v)
        while parent[v] != v:
            parent[v] = parent[parent[v]]
            v = parent[v]
        return v

    for a, b in edges:
        parent[find(a)] = find(b)
    sizes: Dict[int, int] = {}
    for a, _ in edges:
        root = find(a)
        sizes[root] = sizes.get(root, 0) + 1
    return sorted(sizes.values())


def triangle_areas_2d(points, tris) -> np.ndarray:
    p = np.asarray(points, dtype=float)
    t = np.asarray(tris, dtype=int).reshape(-1, 3)
    a, b, c = p[t[:, 0]], p[t[:, 1]], p[t[:, 2]]
    return 0.5 * ((b[:, 0] - a[:, 0]) * (c[:, 1] - a[:, 1]) - (b[:, 1] - a[:, 1]) * (c[:, 0] - a[:, 0]))
