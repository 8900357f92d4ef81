"""Overlap notes — informational pairwise overlap between placed elements.

Never changes geometry and never counts as a compliance failure.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import combinations

from shapely.geometry import box

from adcanvas.engine.config import LayoutConfig
from adcanvas.engine.nodes import Node
from adcanvas.engine.roles import Role


@dataclass(frozen=True)
class Overlap:
    a: Role
    b: Role
    area: float
    # Intersection over the smaller of the two areas
    ratio: float

    @property
    def message(self) -> str:
        return f"{self.a.value} overlaps {self.b.value} ({self.ratio:.0%})"


def find_overlaps(nodes: Sequence[Node], config: LayoutConfig | None = None) -> list[Overlap]:
    config = config or LayoutConfig()
    shapes = [(n.id, box(*n.bounds)) for n in nodes if n.w > 0 and n.h > 0]

    found: list[Overlap] = []
    for (role_a, rect_a), (role_b, rect_b) in combinations(shapes, 2):
        if not rect_a.intersects(rect_b):
            continue
        inter = rect_a.intersection(rect_b).area
        smaller = min(rect_a.area, rect_b.area)
        if smaller <= 0:
            continue
        ratio = inter / smaller
        if ratio > config.overlap_note_threshold:
            found.append(Overlap(role_a, role_b, round(inter, 2), round(ratio, 3)))
    return found
