# moreshapes/triangulate.py
"""
Constrained triangulation of simple polygons with holes.

    triangulate(outer, holes=()) -> [(i, j, k), ...]

Indices address the concatenation `outer + holes[0] + holes[1] + ...`, so
the caller's own vertex list can be used directly. Only the given points are
used (no Steiner points) and every output triangle is counter-clockwise in
the input plane, whatever the winding of the input loops.

How it works:

1. The input is checked first. Bad input is reported, never guessed at:
   repeated points, zero-area loops, crossing or touching edges, holes
   outside the outer loop or inside each other all raise
   MalformedGeometryError.
2. The outer loop is made counter-clockwise and every hole clockwise.
3. Holes are merged into the outer loop one by one (largest x first)
   through a bridge edge: cast a ray from the hole's rightmost vertex
   toward +x, take the first boundary edge it hits, then the visible vertex
   with the smallest angle to the ray. The bridge is walked twice, so the
   result is one weakly simple ring.
4. Ears are clipped from that ring. A vertex is an ear when it is convex
   and no reflex vertex lies in its triangle.

Everything is deterministic: identical input gives identical triangles.
Runtime is quadratic-ish in the vertex count, fine for outlines and glyphs.
"""
from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from .errors import InvalidParameterError, MalformedGeometryError
from .vecmath import Tri

Vec2f = Tuple[float, float]


# -----------------------------------
# 2D polygon helpers
# -----------------------------------

def _poly_area2(poly: Sequence[Vec2f]) -> float:
    """Signed 2D polygon area * 2. CCW => positive."""
    s = 0.0
    n = len(poly)
    for i in range(n):
        x0, y0 = poly[i]
        x1, y1 = poly[(i + 1) % n]
        s += x0 * y1 - x1 * y0
    return s


def polygon_area(poly: Sequence[Vec2f]) -> float:
    """Signed area of a closed loop, positive when counter-clockwise."""
    return 0.5 * _poly_area2(poly)


def _cross2(a: Vec2f, b: Vec2f, c: Vec2f) -> float:
    """2D cross (b-a)x(c-a) z-component."""
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def _pt_in_ccw_tri(p: Vec2f, a: Vec2f, b: Vec2f, c: Vec2f, eps: float) -> bool:
    """Point in counter-clockwise triangle, boundary included."""
    return _cross2(a, b, p) >= -eps and _cross2(b, c, p) >= -eps and _cross2(c, a, p) >= -eps


def _pt_in_tri(p: Vec2f, a: Vec2f, b: Vec2f, c: Vec2f, eps: float) -> bool:
    if _cross2(a, b, c) < 0.0:
        b, c = c, b
    return _pt_in_ccw_tri(p, a, b, c, eps)


def _pt_in_poly(p: Vec2f, poly: Sequence[Vec2f]) -> bool:
    """Even-odd ray crossing test. Points on the boundary are undefined."""
    x, y = p
    inside = False
    n = len(poly)
    for i in range(n):
        x0, y0 = poly[i]
        x1, y1 = poly[(i + 1) % n]
        if (y0 > y) != (y1 > y):
            xi = x0 + (y - y0) * (x1 - x0) / (y1 - y0)
            if xi > x:
                inside = not inside
    return inside


def _on_segment(a: Vec2f, b: Vec2f, p: Vec2f, eps: float) -> bool:
    """p known to be collinear with a-b: is it within the segment's box?"""
    return (min(a[0], b[0]) - eps <= p[0] <= max(a[0], b[0]) + eps
            and min(a[1], b[1]) - eps <= p[1] <= max(a[1], b[1]) + eps)


def _segments_touch(p1: Vec2f, p2: Vec2f, q1: Vec2f, q2: Vec2f, area_eps: float, len_eps: float) -> bool:
    """True if the closed segments share any point."""
    d1 = _cross2(q1, q2, p1)
    d2 = _cross2(q1, q2, p2)
    d3 = _cross2(p1, p2, q1)
    d4 = _cross2(p1, p2, q2)
    if ((d1 > area_eps and d2 < -area_eps) or (d1 < -area_eps and d2 > area_eps)) and \
            ((d3 > area_eps and d4 < -area_eps) or (d3 < -area_eps and d4 > area_eps)):
        return True
    if abs(d1) <= area_eps and _on_segment(q1, q2, p1, len_eps):
        return True
    if abs(d2) <= area_eps and _on_segment(q1, q2, p2, len_eps):
        return True
    if abs(d3) <= area_eps and _on_segment(p1, p2, q1, len_eps):
        return True
    if abs(d4) <= area_eps and _on_segment(p1, p2, q2, len_eps):
        return True
    return False


def _as_points(name: str, loop: Sequence[Sequence[float]]) -> List[Vec2f]:
    pts: List[Vec2f] = []
    for p in loop:
        if len(p) != 2:
            raise InvalidParameterError(name, p, "a list of 2D points")
        x, y = float(p[0]), float(p[1])
        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidParameterError(name, p, "finite")
        pts.append((x, y))
    if len(pts) < 3:
        raise InvalidParameterError(name, len(pts), "at least 3 points")
    return pts


def _tolerances(loops: Sequence[Sequence[Vec2f]]) -> Tuple[float, float]:
    xs = [p[0] for loop in loops for p in loop]
    ys = [p[1] for loop in loops for p in loop]
    scale = max(max(xs) - min(xs), max(ys) - min(ys))
    if scale == 0.0:
        raise MalformedGeometryError("polygon has zero area: all points coincide")
    # (area tolerance, length tolerance)
    return 1e-12 * scale * scale, 1e-9 * scale


# -----------------------------------
# Validation
# -----------------------------------

def _check_loops(loops: List[List[Vec2f]], names: List[str], area_eps: float, len_eps: float) -> None:
    for pts, name in zip(loops, names):
        n = len(pts)
        for i in range(n):
            a, b = pts[i], pts[(i + 1) % n]
            if abs(a[0] - b[0]) <= len_eps and abs(a[1] - b[1]) <= len_eps:
                raise MalformedGeometryError(f"{name} repeats point {i} ({a[0]:g}, {a[1]:g})")
        if abs(_poly_area2(pts)) <= area_eps * n:
            raise MalformedGeometryError(f"{name} has zero area")

    # all edges against all edges
    edges = []
    for k, pts in enumerate(loops):
        n = len(pts)
        for i in range(n):
            a, b = pts[i], pts[(i + 1) % n]
            box = (min(a[0], b[0]) - len_eps, max(a[0], b[0]) + len_eps,
                   min(a[1], b[1]) - len_eps, max(a[1], b[1]) + len_eps)
            edges.append((k, i, n, a, b, box))
    for e in range(len(edges)):
        k1, i1, n1, a1, b1, box1 = edges[e]
        for f in range(e + 1, len(edges)):
            k2, i2, n2, a2, b2, box2 = edges[f]
            if box1[1] < box2[0] or box2[1] < box1[0] or box1[3] < box2[2] or box2[3] < box1[2]:
                continue
            if k1 == k2 and ((i1 + 1) % n1 == i2 or (i2 + 1) % n2 == i1):
                # neighbours share a vertex; they only fail by folding back
                if (i1 + 1) % n1 == i2:
                    at, shared, p, q = i2, b1, a1, b2
                else:
                    at, shared, p, q = i1, a1, b1, a2
                if abs(_cross2(shared, p, q)) <= area_eps and \
                        (p[0] - shared[0]) * (q[0] - shared[0]) + (p[1] - shared[1]) * (q[1] - shared[1]) > 0.0:
                    raise MalformedGeometryError(f"{names[k1]} folds back on itself at point {at}")
                continue
            if _segments_touch(a1, b1, a2, b2, area_eps, len_eps):
                if k1 == k2:
                    raise MalformedGeometryError(
                        f"{names[k1]} is self-intersecting (edges {i1} and {i2})")
                raise MalformedGeometryError(
                    f"{names[k1]} and {names[k2]} intersect (edges {i1} and {i2})")

    outer = loops[0]
    for hole, name in zip(loops[1:], names[1:]):
        if not _pt_in_poly(hole[0], outer):
            raise MalformedGeometryError(f"{name} is not inside the outer boundary")
    for h1 in range(1, len(loops)):
        for h2 in range(1, len(loops)):
            if h1 != h2 and _pt_in_poly(loops[h1][0], loops[h2]):
                raise MalformedGeometryError(f"{names[h1]} lies inside {names[h2]}")


def _prepare(outer: Sequence[Sequence[float]], holes: Sequence[Sequence[Sequence[float]]]):
    names = ["outer"] + [f"holes[{k}]" for k in range(len(holes))]
    loops = [_as_points(name, loop) for name, loop in zip(names, [outer, *holes])]
    area_eps, len_eps = _tolerances(loops)
    _check_loops(loops, names, area_eps, len_eps)
    return loops, area_eps


def validate_polygon(outer: Sequence[Sequence[float]],
                     holes: Sequence[Sequence[Sequence[float]]] = ()) -> None:
    """Raise if outer/holes do not describe a simple polygon with simple, disjoint holes."""
    _prepare(outer, holes)


# -----------------------------------
# Hole bridging
# -----------------------------------

def _locally_inside(pts: List[Vec2f], ring: List[int], pos: int, b: Vec2f) -> bool:
    """Does the direction from ring[pos] toward b start inside the polygon?"""
    m = len(ring)
    prev, cur, nxt = pts[ring[pos - 1]], pts[ring[pos]], pts[ring[(pos + 1) % m]]
    if _cross2(prev, cur, nxt) >= 0.0:
        return _cross2(cur, nxt, b) >= 0.0 and _cross2(cur, b, prev) >= 0.0
    return _cross2(cur, prev, b) <= 0.0 or _cross2(cur, b, nxt) <= 0.0


def _find_bridge(pts: List[Vec2f], ring: List[int], hole_vertex: int, eps: float) -> int:
    """Ring position of a vertex visible from hole_vertex, to the right of it."""
    mx, my = pts[hole_vertex]
    m = len(ring)

    # nearest crossing of the +x ray with an upward ring edge
    hit_x = math.inf
    hit: Optional[int] = None
    for k in range(m):
        ax, ay = pts[ring[k]]
        bx, by = pts[ring[(k + 1) % m]]
        if ay <= my <= by and ay < by:
            if ay == my:
                x = ax
            elif by == my:
                x = bx
            else:
                x = ax + (my - ay) * (bx - ax) / (by - ay)
            if mx <= x < hit_x:
                hit_x, hit = x, k
    if hit is None:
        raise MalformedGeometryError("hole is not inside the outer boundary")

    a_pos, b_pos = hit, (hit + 1) % m
    a, b = pts[ring[a_pos]], pts[ring[b_pos]]
    if a == (hit_x, my):
        candidate = a_pos
    elif b == (hit_x, my):
        candidate = b_pos
    else:
        candidate = a_pos if a[0] > b[0] else b_pos
    p = pts[ring[candidate]]
    # the ray runs straight into P; only P itself (or a bridge copy of it) will do
    touching = p == (hit_x, my)

    # anything inside (M, I, P) may hide P; take the smallest angle to the ray
    tri = ((mx, my), (hit_x, my), p)
    best, best_key = None, None
    for pos in range(m):
        q = pts[ring[pos]]
        if q[0] <= mx:
            continue
        if touching:
            if q != p:
                continue
        elif pos != candidate and not _pt_in_tri(q, tri[0], tri[1], tri[2], eps):
            continue
        if not _locally_inside(pts, ring, pos, (mx, my)):
            continue
        key = (abs(q[1] - my) / (q[0] - mx), q[0] - mx)
        if best_key is None or key < best_key:
            best, best_key = pos, key
    if best is None:
        raise MalformedGeometryError("could not connect hole to the outer boundary")
    return best


def _merge_holes(pts: List[Vec2f], outer: List[int], holes: List[List[int]], eps: float) -> List[int]:
    ring = list(outer)
    order = sorted(range(len(holes)), key=lambda h: (-max(pts[i][0] for i in holes[h]), h))
    for h in order:
        hole = holes[h]
        # rightmost vertex, lowest y on ties
        mi = min(range(len(hole)), key=lambda k: (-pts[hole[k]][0], pts[hole[k]][1], k))
        pos = _find_bridge(pts, ring, hole[mi], eps)
        loop = hole[mi:] + hole[:mi]
        ring = ring[:pos + 1] + loop + [hole[mi], ring[pos]] + ring[pos + 1:]
    return ring


# -----------------------------------
# Ear clipping
# -----------------------------------

def _is_ear(pts: List[Vec2f], ring: List[int], i: int, eps: float) -> bool:
    m = len(ring)
    ip, ic, inx = ring[i - 1], ring[i], ring[(i + 1) % m]
    a, b, c = pts[ip], pts[ic], pts[inx]
    if _cross2(a, b, c) <= eps:
        return False
    for j in range(m):
        q = ring[j]
        if q == ip or q == ic or q == inx:
            continue
        # only reflex (or flat) vertices can block an ear
        if _cross2(pts[ring[j - 1]], pts[q], pts[ring[(j + 1) % m]]) > 0.0:
            continue
        if _pt_in_ccw_tri(pts[q], a, b, c, eps):
            return False
    return True


def _clip_ears(pts: List[Vec2f], ring: List[int], eps: float) -> List[Tri]:
    ring = list(ring)
    result: List[Tri] = []
    start = 0
    while len(ring) > 3:
        m = len(ring)
        for step in range(m):
            i = (start + step) % m
            if _is_ear(pts, ring, i, eps):
                result.append((ring[i - 1], ring[i], ring[(i + 1) % m]))
                del ring[i]
                start = (i - 1) % len(ring)
                break
        else:
            # no ear: drop a zero-area vertex (bridge spikes, collinear runs)
            for i in range(m):
                if abs(_cross2(pts[ring[i - 1]], pts[ring[i]], pts[ring[(i + 1) % m]])) <= eps:
                    del ring[i]
                    start = (i - 1) % len(ring)
                    break
            else:
                raise MalformedGeometryError(
                    f"triangulation stalled with {m} vertices left; is the polygon simple?")
    if len(ring) == 3 and _cross2(pts[ring[0]], pts[ring[1]], pts[ring[2]]) > eps:
        result.append((ring[0], ring[1], ring[2]))
    return result


def triangulate(outer: Sequence[Sequence[float]],
                holes: Sequence[Sequence[Sequence[float]]] = ()) -> List[Tri]:
    """Triangulate a simple polygon with optional holes.

    outer: boundary loop, at least 3 (x, y) points, either winding.
    holes: loops strictly inside outer, disjoint from each other and from
           the boundary.

    Returns counter-clockwise index triples into outer + holes[0] + ...
    Raises InvalidParameterError on too few points and
    MalformedGeometryError on geometrically unusable input.
    """
    loops, eps = _prepare(outer, holes)

    pts: List[Vec2f] = []
    index_loops: List[List[int]] = []
    for loop in loops:
        index_loops.append(list(range(len(pts), len(pts) + len(loop))))
        pts.extend(loop)

    outer_idx = index_loops[0]
    if _poly_area2(loops[0]) < 0.0:
        outer_idx.reverse()
    hole_idx = []
    for loop, idx in zip(loops[1:], index_loops[1:]):
        if _poly_area2(loop) > 0.0:
            idx.reverse()
        hole_idx.append(idx)

    ring = _merge_holes(pts, outer_idx, hole_idx, eps)
    return _clip_ears(pts, ring, eps)
