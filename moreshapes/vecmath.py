# moreshapes/vecmath.py
"""
Small vector utilities shared by the generators.

Vectors are plain tuples so that generated buffers stay cheap to build and
trivially hashable. Nothing here keeps state.
"""
from __future__ import annotations

import math
from typing import Sequence, Tuple

from .errors import DegenerateGeometryError

Vec3 = Tuple[float, float, float]
Vec2 = Tuple[float, float]
Tri = Tuple[int, int, int]

TAU = 2.0 * math.pi

X_AXIS: Vec3 = (1.0, 0.0, 0.0)
Y_AXIS: Vec3 = (0.0, 1.0, 0.0)
Z_AXIS: Vec3 = (0.0, 0.0, 1.0)


# -----------------------------
# Small vector/matrix utilities
# -----------------------------

def v_add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def v_sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def v_scale(a: Vec3, s: float) -> Vec3:
    return (a[0] * s, a[1] * s, a[2] * s)


def v_dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def v_cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def v_len(a: Vec3) -> float:
    return math.sqrt(v_dot(a, a))


def v_norm(a: Vec3) -> Vec3:
    l = v_len(a)
    if l == 0:
        return (0.0, 0.0, 0.0)
    return (a[0] / l, a[1] / l, a[2] / l)


def v_norm_strict(a: Vec3, what: str = "vector", eps: float = 1e-12) -> Vec3:
    """Like v_norm, but a (near) zero vector is an error instead of (0, 0, 0)."""
    l = v_len(a)
    if l <= eps:
        raise DegenerateGeometryError(f"cannot normalize zero-length {what}")
    return (a[0] / l, a[1] / l, a[2] / l)


def v_is_close(a: Sequence[float], b: Sequence[float], eps: float = 1e-9) -> bool:
    return all(abs(x - y) <= eps for x, y in zip(a, b))


def as_vec3(p: Sequence[float]) -> Vec3:
    """Accept (x, y) or (x, y, z); 2D points are lifted into the XZ plane."""
    if len(p) == 2:
        return (float(p[0]), 0.0, float(p[1]))
    if len(p) == 3:
        return (float(p[0]), float(p[1]), float(p[2]))
    raise ValueError(f"expected a 2D or 3D point, got {len(p)} coordinates")


# ----------------
# Frame helpers
# ----------------

def least_parallel_axis(v: Vec3) -> Vec3:
    """World axis with the smallest absolute component of v.

    Ties resolve toward Z, then Y, then X, so the choice is reproducible.
    """
    ax, ay, az = abs(v[0]), abs(v[1]), abs(v[2])
    if az <= ax and az <= ay:
        return Z_AXIS
    if ay <= ax:
        return Y_AXIS
    return X_AXIS


def orthogonal_unit(v: Vec3, ref: Vec3) -> Vec3:
    """Component of ref orthogonal to unit vector v, normalised."""
    return v_norm_strict(v_sub(ref, v_scale(v, v_dot(v, ref))), "orthogonal component")


def reflect(a: Vec3, n: Vec3, nn: float) -> Vec3:
    """Reflect a across the plane with normal n; nn is n . n."""
    return v_sub(a, v_scale(n, 2.0 * v_dot(n, a) / nn))


def rotate_about(v: Vec3, axis: Vec3, angle: float) -> Vec3:
    """Rodrigues rotation of v about unit axis."""
    c, s = math.cos(angle), math.sin(angle)
    k_cross = v_cross(axis, v)
    k_dot = v_dot(axis, v)
    return (
        v[0] * c + k_cross[0] * s + axis[0] * k_dot * (1.0 - c),
        v[1] * c + k_cross[1] * s + axis[1] * k_dot * (1.0 - c),
        v[2] * c + k_cross[2] * s + axis[2] * k_dot * (1.0 - c),
    )


# -----------------
# Planar polygons
# -----------------

def newell_normal(points: Sequence[Vec3]) -> Vec3:
    """Area-weighted normal of a closed loop (Newell's method).

    Not normalised: the length is twice the projected area, and the
    direction follows the loop's winding (counter-clockwise seen from the
    tip of the returned vector).
    """
    nx = ny = nz = 0.0
    n = len(points)
    for i in range(n):
        x0, y0, z0 = points[i]
        x1, y1, z1 = points[(i + 1) % n]
        nx += (y0 - y1) * (z0 + z1)
        ny += (z0 - z1) * (x0 + x1)
        nz += (x0 - x1) * (y0 + y1)
    return (nx, ny, nz)


def plane_basis(normal: Vec3) -> Tuple[Vec3, Vec3]:
    """Unit axes (u, v) spanning the plane of a unit normal, with u x v = normal."""
    u = v_norm(v_cross(least_parallel_axis(normal), normal))
    v = v_cross(normal, u)
    return u, v
