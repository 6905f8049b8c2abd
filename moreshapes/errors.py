# moreshapes/errors.py
"""
Failure kinds raised by the generators.

Every failure is raised to the immediate caller; nothing is clamped or
silently corrected. All kinds derive from ValueError so callers that only
care about "bad input" can catch that.

- InvalidParameterError: a parameter breaks a documented constraint
  (segment minimum, non-positive radius, too few points).
- MalformedGeometryError: the data itself is unusable (self-intersecting
  boundary, hole outside the outer loop, zero-area polygon).
- DegenerateGeometryError: a numerical degeneracy such as a zero-length
  curve segment, where any fallback would silently produce a broken mesh.
- MeshBufferError: a MeshBuffer breaks its own invariants.
"""
from __future__ import annotations

import math
from typing import Any, List, Optional


class ShapeError(Exception):
    """Base class of everything this package raises on bad input."""


class InvalidParameterError(ShapeError, ValueError):
    def __init__(self, parameter: str, value: Any, constraint: str):
        self.parameter = parameter
        self.value = value
        self.constraint = constraint
        super().__init__(f"{parameter} must be {constraint} (got {value!r})")


class MalformedGeometryError(ShapeError, ValueError):
    pass


class DegenerateGeometryError(ShapeError, ValueError):
    def __init__(self, message: str, index: Optional[int] = None):
        self.index = index
        super().__init__(message)


class MeshBufferError(ShapeError, ValueError):
    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("invalid mesh buffer: " + "; ".join(self.problems))


# -------------------------
# Small helpers
# -------------------------

def require_segments(name: str, n: int, minimum: int = 1) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidParameterError(name, n, "an integer")
    if n < minimum:
        raise InvalidParameterError(name, n, f">= {minimum}")


def require_positive(name: str, x: float) -> None:
    if not math.isfinite(x) or x <= 0.0:
        raise InvalidParameterError(name, x, "> 0")


def require_range(name: str, x: float, lo: float, hi: float, lo_open: bool = False) -> None:
    """Check lo <= x <= hi (or lo < x <= hi when lo_open)."""
    ok = math.isfinite(x) and x <= hi and (x > lo if lo_open else x >= lo)
    if not ok:
        left = "(" if lo_open else "["
        raise InvalidParameterError(name, x, f"in {left}{lo:g}, {hi:g}]")
