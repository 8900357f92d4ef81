"""Layout synthesizer — deterministic baseline placement for a layout variant.

Pure function of (variant, canvas, required set, config, type scale). Output
always satisfies the safe-area invariant, so freshly synthesized node sets
never need auto-fixing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import adcanvas.engine.layouts  # noqa: F401  (registers built-in variants)
from adcanvas.engine.config import LayoutConfig
from adcanvas.engine.frame import LayoutFrame
from adcanvas.engine.nodes import CanvasSpec, LayoutVariant, Node, NodeSet, SafeArea
from adcanvas.engine.registry import LayoutRegistry, get_registry
from adcanvas.engine.roles import Role
from adcanvas.engine.typography import TypeScale, font_sizes
from adcanvas.utils.geometry import clamp

logger = logging.getLogger(__name__)


def synthesize(
    variant: LayoutVariant,
    canvas: CanvasSpec,
    required: Iterable[Role],
    config: LayoutConfig | None = None,
    scale: TypeScale | None = None,
    registry: LayoutRegistry | None = None,
) -> NodeSet:
    """Compute baseline positions, sizes and fonts for every element of a variant.

    The CTA node is only produced when the required set contains it (i.e. the
    template allows a call-to-action). Packshot, logo, offer and legal nodes are
    always produced so content can be filled in later.
    """
    config = config or LayoutConfig()
    registry = registry or get_registry()
    safe = canvas.safe_area(config)

    frame = LayoutFrame(
        canvas=canvas,
        safe=safe,
        config=config,
        fonts=font_sizes(variant, canvas, scale),
        include_cta=Role.CTA in set(required),
    )
    spec = registry.get(variant)
    nodes = tuple(_normalize(n, safe, config) for n in spec.fn(frame))

    logger.debug(
        "Synthesized %s on %gx%g: %d nodes (safe margin %d)",
        variant.value,
        canvas.width,
        canvas.height,
        len(nodes),
        safe.margin,
    )
    return nodes


def _normalize(node: Node, safe: SafeArea, config: LayoutConfig) -> Node:
    """Apply the node floor, then cap to the safe rectangle.

    On canvases whose safe area is smaller than the floor, containment wins.
    """
    w = min(max(node.w, config.min_node_width), safe.width)
    h = min(max(node.h, config.min_node_height), safe.height)
    x = clamp(node.x, safe.x, safe.right - w)
    y = clamp(node.y, safe.y, safe.bottom - h)
    return node.with_geometry(x, y, w, h)
