"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]. When hi < lo the lower bound wins."""
    return max(lo, min(hi, value))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (2.5 → 3, not 2)."""
    return int(math.floor(value + 0.5))


def rect_within(
    rect: tuple[float, float, float, float],
    bounds: tuple[float, float, float, float],
    tol: float = 0.0,
) -> bool:
    """True if rect (xmin, ymin, xmax, ymax) lies fully inside bounds.

    Touching the boundary counts as inside.
    """
    x0, y0, x1, y1 = rect
    bx0, by0, bx1, by1 = bounds
    return x0 >= bx0 - tol and y0 >= by0 - tol and x1 <= bx1 + tol and y1 <= by1 + tol


def rect_area(rect: tuple[float, float, float, float]) -> float:
    x0, y0, x1, y1 = rect
    return max(0.0, x1 - x0) * max(0.0, y1 - y0)
