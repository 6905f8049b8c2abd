# moreshapes/frames.py
"""
Rotation-minimizing frames along a polyline.

Frenet frames are undefined where the curvature vanishes and flip at
inflection points, which twists a swept tube. Instead, each frame here is
the previous one carried over by the smallest rotation that takes the old
tangent onto the new one, computed with the double reflection method
(Wang, Juettler, Zheng, Liu: "Computation of Rotation Minimizing Frames",
ACM TOG 2008):

    reflect across the plane orthogonal to the segment  x[i+1] - x[i]
    reflect across the plane orthogonal to  t[i+1] - t_reflected

The first frame is fixed: tangent toward the second point, normal taken
from the world axis least parallel to that tangent (ties go to Z, then Y,
then X), so regenerating from the same points always gives the same frames.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Sequence

from .errors import DegenerateGeometryError, InvalidParameterError, require_segments
from .vecmath import (
    Vec3, least_parallel_axis, orthogonal_unit, reflect, rotate_about,
    v_cross, v_dot, v_is_close, v_norm, v_sub,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Frame:
    origin: Vec3
    tangent: Vec3
    normal: Vec3
    # tangent x normal
    binormal: Vec3


def check_curve(points: Sequence[Vec3]) -> None:
    if len(points) < 2:
        raise InvalidParameterError("points", len(points), "at least 2 curve points")
    for p in points:
        if len(p) != 3 or not all(math.isfinite(x) for x in p):
            raise InvalidParameterError("points", p, "finite 3D points")
    for i in range(len(points) - 1):
        if v_is_close(points[i], points[i + 1], 1e-12):
            raise DegenerateGeometryError(
                f"curve points {i} and {i + 1} coincide; the tangent is undefined there", index=i)


def is_closed_curve(points: Sequence[Vec3]) -> bool:
    return len(points) > 2 and v_is_close(points[0], points[-1], 1e-9)


def curve_tangents(points: Sequence[Vec3]) -> List[Vec3]:
    """Unit direction to the next point; the last point reuses the incoming one.

    On a closed curve the last point is the first one again, so it gets the
    first point's tangent.
    """
    check_curve(points)
    tangents = [v_norm(v_sub(points[i + 1], points[i])) for i in range(len(points) - 1)]
    tangents.append(tangents[0] if is_closed_curve(points) else tangents[-1])
    return tangents


def initial_frame(origin: Vec3, tangent: Vec3) -> Frame:
    normal = orthogonal_unit(tangent, least_parallel_axis(tangent))
    return Frame(origin, tangent, normal, v_cross(tangent, normal))


def _transport(prev: Frame, origin: Vec3, tangent: Vec3) -> Frame:
    v1 = v_sub(origin, prev.origin)
    c1 = v_dot(v1, v1)
    r_l = reflect(prev.normal, v1, c1)
    t_l = reflect(prev.tangent, v1, c1)
    v2 = v_sub(tangent, t_l)
    c2 = v_dot(v2, v2)
    normal = reflect(r_l, v2, c2) if c2 > 1e-24 else r_l
    # re-orthonormalise against rounding drift
    normal = orthogonal_unit(tangent, normal)
    return Frame(origin, tangent, normal, v_cross(tangent, normal))


def _close_loop(frames: List[Frame]) -> List[Frame]:
    """Spread the twist between the first and last frame evenly along a closed curve."""
    first, last = frames[0], frames[-1]
    # signed angle about the shared tangent taking the last normal onto the first
    angle = math.atan2(v_dot(first.tangent, v_cross(last.normal, first.normal)),
                       v_dot(last.normal, first.normal))
    if angle == 0.0:
        return frames
    logger.debug("closed curve: spreading %.6f rad of twist over %d frames", angle, len(frames))
    step = angle / (len(frames) - 1)
    out = [first]
    for k, f in enumerate(frames[1:], start=1):
        normal = orthogonal_unit(f.tangent, rotate_about(f.normal, f.tangent, step * k))
        out.append(Frame(f.origin, f.tangent, normal, v_cross(f.tangent, normal)))
    return out


def rotation_minimizing_frames(points: Sequence[Vec3]) -> List[Frame]:
    """One frame per curve point.

    Raises InvalidParameterError for fewer than 2 points and
    DegenerateGeometryError when two consecutive points coincide.
    """
    check_curve(points)
    points = [tuple(map(float, p)) for p in points]
    tangents = curve_tangents(points)
    frames = [initial_frame(points[0], tangents[0])]
    for origin, tangent in zip(points[1:], tangents[1:]):
        frames.append(_transport(frames[-1], origin, tangent))
    if is_closed_curve(points):
        frames = _close_loop(frames)
    return frames


def sample_curve(func: Callable[[float], Sequence[float]], segments: int) -> List[Vec3]:
    """Evaluate a curve function on [0, 1] at `segments + 1` evenly spaced parameters."""
    require_segments("segments", segments, 1)
    out: List[Vec3] = []
    for i in range(segments + 1):
        x, y, z = func(i / segments)
        out.append((float(x), float(y), float(z)))
    return out
