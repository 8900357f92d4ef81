"""Auto-fixer — minimal correction of a node set before export.

Two-tier policy:
- required roles are resized to fit and clamped into the safe rectangle;
- every other role is only clamped to the full canvas and may bleed into
  the margin.

Degenerate geometry (w <= 0 or h <= 0) gets the role's default size first.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from adcanvas.engine.config import LayoutConfig
from adcanvas.engine.nodes import CanvasSpec, Node, NodeSet, SafeArea
from adcanvas.engine.roles import Role, get_role_spec, ordered
from adcanvas.utils.geometry import clamp, round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixResult:
    nodes: NodeSet
    touched: frozenset[Role]

    @property
    def touched_count(self) -> int:
        return len(self.touched)


def default_size(role: Role, safe: SafeArea, config: LayoutConfig) -> tuple[float, float]:
    spec = get_role_spec(role)
    w = max(round_half_up(safe.width * spec.default_w_frac), config.min_node_width)
    h = max(round_half_up(safe.height * spec.default_h_frac), config.min_node_height)
    return float(w), float(h)


def fix_node(
    node: Node,
    canvas: CanvasSpec,
    must_be_safe: bool,
    config: LayoutConfig | None = None,
) -> Node:
    config = config or LayoutConfig()
    safe = canvas.safe_area(config)
    x, y, w, h = node.geometry

    if w <= 0 or h <= 0:
        dw, dh = default_size(node.id, safe, config)
        w = dw if w <= 0 else w
        h = dh if h <= 0 else h

    w = max(w, config.min_node_width)
    h = max(h, config.min_node_height)

    if must_be_safe:
        w = min(w, safe.width)
        h = min(h, safe.height)
        x = clamp(x, safe.x, safe.right - w)
        y = clamp(y, safe.y, safe.bottom - h)
    else:
        w = min(w, canvas.width)
        h = min(h, canvas.height)
        x = clamp(x, 0.0, canvas.width - w)
        y = clamp(y, 0.0, canvas.height - h)

    if (x, y, w, h) == node.geometry:
        return node
    return node.with_geometry(x, y, w, h)


def auto_fix(
    nodes: Sequence[Node],
    canvas: CanvasSpec,
    required: Iterable[Role],
    config: LayoutConfig | None = None,
) -> FixResult:
    """Return an export-ready node set plus the required roles whose geometry changed.

    Optional roles are still clamped to the canvas but never count as touched.

    Idempotent: fixing an already fixed set changes nothing and touches nothing.
    """
    config = config or LayoutConfig()
    required = frozenset(required)

    out: list[Node] = []
    touched: set[Role] = set()
    for node in nodes:
        must_be_safe = node.id in required
        fixed = fix_node(node, canvas, must_be_safe, config)
        if must_be_safe and fixed.geometry != node.geometry:
            touched.add(node.id)
        out.append(fixed)

    if touched:
        logger.debug(
            "Auto-fix on %gx%g touched: %s",
            canvas.width,
            canvas.height,
            ", ".join(r.value for r in ordered(touched)),
        )
    return FixResult(nodes=tuple(out), touched=frozenset(touched))
