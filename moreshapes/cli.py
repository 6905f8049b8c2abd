# moreshapes/cli.py
"""Tiny CLI: generate one shape and write it to OBJ / PLY / STL."""
from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Callable, Dict, List, Optional

from .cylinder import Cone, Cylinder
from .errors import ShapeError
from .export import save_mesh
from .grid import Grid
from .polygon import Polygon
from .shapes import mesh_from_shape
from .torus import Torus
from .tube import Tube
from .vecmath import TAU, Vec3

logger = logging.getLogger(__name__)

_DEF_HELP = """
Examples:
  python -m moreshapes --shape cylinder --radius 0.5 --height 2 --radial 64 --out cyl.obj
  python -m moreshapes --shape cylinder --radius 0.5 --radius-top 0.2 --out frustum.ply
  python -m moreshapes --shape cone --radius 0.5 --height 1 --out cone.stl
  python -m moreshapes --shape torus --R 1.2 --r 0.4 --sweep 270 --out slice.obj
  python -m moreshapes --shape polygon --sides 6 --hole 0.5 --out nut.obj
  python -m moreshapes --shape tube --curve knot --radial 12 --length 256 --out knot.obj
"""


# -------------
# Sample curves
# -------------

def helix(t: float) -> Vec3:
    a = t * 3 * 2 * math.pi
    return (0.5 * math.cos(a), t * 2.0 - 1.0, 0.5 * math.sin(a))


def wave(t: float) -> Vec3:
    s = math.sin(t * math.pi * 2.0) * 0.2
    return (-s, t, s)


def torus_knot(rotation_winds: int = 2, circle_winds: int = 3) -> Callable[[float], Vec3]:
    def knot(t: float) -> Vec3:
        t *= 2 * math.pi * rotation_winds
        quop = circle_winds / rotation_winds * t
        cs = math.cos(quop)
        return ((2.0 + cs) * 0.5 * math.cos(t), (2.0 + cs) * 0.5 * math.sin(t), math.sin(quop) * 0.5)
    return knot


def _turn(degrees: float) -> float:
    # 360 maps to exactly TAU so a full sweep stays a full sweep
    return degrees / 360.0 * TAU


_CURVES: Dict[str, Callable[[float], Vec3]] = {
    "helix": helix,
    "wave": wave,
    "knot": torus_knot(),
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="moreshapes", description="moreshapes: procedural mesh generator",
                                epilog=_DEF_HELP, formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("--shape", required=True, choices=["cylinder", "cone", "torus", "grid", "polygon", "tube"])
    p.add_argument("--out", required=True, help="Output path (.obj/.ply/.stl)")
    p.add_argument("--format", choices=["obj", "ply", "stl"], help="Override the format implied by --out")
    p.add_argument("--log-level", default="WARNING", help="Python logging level (DEBUG, INFO, ...)")
    # Common params
    p.add_argument("--radius", type=float, default=0.5)
    p.add_argument("--radius-top", type=float, help="Cylinder top radius (defaults to --radius)")
    p.add_argument("--height", type=float, default=1.0)
    p.add_argument("--radial", type=int, default=32)
    p.add_argument("--hseg", type=int, default=1)
    p.add_argument("--no-caps", action="store_true")
    # Torus
    p.add_argument("--R", type=float, default=0.8)
    p.add_argument("--r", type=float, default=0.2)
    p.add_argument("--tube-seg", type=int, default=16)
    p.add_argument("--sweep", type=float, default=360.0, help="Torus radial sweep in degrees")
    p.add_argument("--tube-sweep", type=float, default=360.0, help="Torus/tube cross-section sweep in degrees")
    # Grid
    p.add_argument("--width", type=float, default=1.0)
    p.add_argument("--depth", type=float, default=1.0)
    p.add_argument("--gridx", type=int, default=8)
    p.add_argument("--gridz", type=int, default=8)
    # Polygon
    p.add_argument("--sides", type=int, default=6)
    p.add_argument("--hole", type=float, default=0.0, help="Hole radius as a fraction of --radius")
    # Tube
    p.add_argument("--curve", choices=sorted(_CURVES), default="helix")
    p.add_argument("--length", type=int, default=64, help="Curve samples")
    return p


def shape_from_args(args: argparse.Namespace):
    no_caps = args.no_caps
    if args.shape == "cylinder":
        top = args.radius if args.radius_top is None else args.radius_top
        return Cylinder(height=args.height, radius_bottom=args.radius, radius_top=top,
                        radial_segments=args.radial, height_segments=args.hseg,
                        cap_top=not no_caps, cap_bottom=not no_caps)
    if args.shape == "cone":
        return Cone(radius=args.radius, height=args.height, radial_segments=args.radial,
                    height_segments=args.hseg, cap=not no_caps)
    if args.shape == "torus":
        return Torus(radius=args.R, tube_radius=args.r, radial_segments=args.radial,
                     tube_segments=args.tube_seg, radial_sweep=_turn(args.sweep),
                     tube_sweep=_turn(args.tube_sweep), cap_ends=not no_caps)
    if args.shape == "grid":
        return Grid(width=args.width, depth=args.depth, width_segments=args.gridx, depth_segments=args.gridz)
    if args.shape == "polygon":
        polygon = Polygon.regular(args.radius, args.sides)
        if args.hole > 0.0:
            polygon.holes = [Polygon.regular(args.radius * args.hole, args.sides).points]
        return polygon
    if args.shape == "tube":
        return Tube.from_function(_CURVES[args.curve], args.length, radius=args.r,
                                  radial_segments=args.radial, radial_sweep=_turn(args.tube_sweep))
    raise SystemExit("Unknown shape")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    try:
        shape = shape_from_args(args)
        mesh = mesh_from_shape(shape)
    except ShapeError as e:
        print(f"moreshapes: {e}", file=sys.stderr)
        return 2
    save_mesh(args.out, mesh, args.format or "")
    logger.info("wrote %s: %d vertices, %d triangles", args.out, mesh.vertex_count, mesh.triangle_count)
    return 0
