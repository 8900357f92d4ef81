"""Deterministic layout suggestions."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, replace

from adcanvas.engine.config import LayoutConfig
from adcanvas.engine.nodes import CanvasSpec, LayoutVariant, NodeSet, find_node, replace_node
from adcanvas.engine.roles import Role
from adcanvas.engine.synthesizer import synthesize
from adcanvas.engine.typography import TypeScale, style_scale
from adcanvas.utils.geometry import clamp, round_half_up

_CYCLE = [LayoutVariant.LEFT_PACKSHOT, LayoutVariant.RIGHT_PACKSHOT, LayoutVariant.CENTER_PACKSHOT]

PREMIUM_STYLE = "Minimal & premium"


class SuggestionKind(str, enum.Enum):
    PREMIUM = "premium"
    PRODUCT = "product"
    LAYOUT = "layout"


@dataclass(frozen=True)
class Suggestion:
    kind: SuggestionKind
    variant: LayoutVariant
    nodes: NodeSet
    # Visual style the host should switch to, if any
    style: str | None = None


def next_variant(current: LayoutVariant) -> LayoutVariant:
    return _CYCLE[(_CYCLE.index(current) + 1) % len(_CYCLE)]


def suggest(
    kind: SuggestionKind,
    current: LayoutVariant,
    canvas: CanvasSpec,
    required: Iterable[Role],
    config: LayoutConfig | None = None,
    scale: TypeScale | None = None,
) -> Suggestion:
    config = config or LayoutConfig()
    required = frozenset(required)

    if kind is SuggestionKind.PREMIUM:
        variant = LayoutVariant.CENTER_PACKSHOT
        nodes = synthesize(variant, canvas, required, config=config, scale=style_scale(PREMIUM_STYLE))
        return Suggestion(kind, variant, nodes, style=PREMIUM_STYLE)

    if kind is SuggestionKind.PRODUCT:
        variant = (
            LayoutVariant.RIGHT_PACKSHOT
            if current is LayoutVariant.RIGHT_PACKSHOT
            else LayoutVariant.LEFT_PACKSHOT
        )
        nodes = synthesize(variant, canvas, required, config=config, scale=scale)
        return Suggestion(kind, variant, _grow_packshot(nodes, canvas, config))

    variant = next_variant(current)
    return Suggestion(kind, variant, synthesize(variant, canvas, required, config=config, scale=scale))


def _grow_packshot(nodes: NodeSet, canvas: CanvasSpec, config: LayoutConfig) -> NodeSet:
    pack = find_node(nodes, Role.PACKSHOT)
    if pack is None:
        return nodes
    safe = canvas.safe_area(config)
    grow = config.product_grow_factor
    w = clamp(round_half_up(pack.w * grow), config.min_node_width, safe.width)
    h = clamp(round_half_up(pack.h * grow), config.min_node_height, safe.height)
    x = clamp(pack.x, safe.x, safe.right - w)
    y = clamp(pack.y, safe.y, safe.bottom - h)
    return replace_node(nodes, replace(pack, x=x, y=y, w=w, h=h))
