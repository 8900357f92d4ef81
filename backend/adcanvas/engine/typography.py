"""Role font sizes derived from canvas height, plus visual style scales."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from adcanvas.engine.nodes import CanvasSpec, LayoutVariant, Node, NodeSet
from adcanvas.engine.roles import ROLE_SPECS, Role


@dataclass(frozen=True)
class TypeScale:
    """Per-style multipliers applied before clamping. Badge scale applies to the offer."""

    headline: float = 1.0
    subcopy: float = 1.0
    badge: float = 1.0

    def factor(self, role: Role) -> float:
        if role is Role.HEADLINE:
            return self.headline
        if role is Role.SUBCOPY:
            return self.subcopy
        if role is Role.OFFER:
            return self.badge
        return 1.0


STYLE_PRESETS: dict[str, TypeScale] = {
    "Bold & modern": TypeScale(headline=1.02, subcopy=1.0, badge=1.0),
    "Minimal & premium": TypeScale(headline=0.92, subcopy=0.95, badge=0.92),
    "Playful": TypeScale(headline=1.04, subcopy=1.03, badge=1.05),
    "Trustworthy": TypeScale(headline=0.95, subcopy=0.98, badge=0.95),
}

DEFAULT_STYLE = "Bold & modern"


def style_scale(name: str | None) -> TypeScale:
    """Look up a style preset by name; unknown names get the default style."""
    return STYLE_PRESETS.get(name or DEFAULT_STYLE, STYLE_PRESETS[DEFAULT_STYLE])


def font_sizes(
    variant: LayoutVariant,
    canvas: CanvasSpec,
    scale: TypeScale | None = None,
) -> dict[Role, int]:
    """Integer font size per text-bearing role, clamped to the role bounds."""
    scale = scale or TypeScale()
    sizes: dict[Role, int] = {}
    for role, spec in ROLE_SPECS.items():
        if not spec.has_font:
            continue
        frac = spec.font_frac_stacked if variant.is_stacked else spec.font_frac
        sizes[role] = spec.clamp_font(canvas.height * frac * scale.factor(role))
    return sizes


def refresh_auto_fonts(
    nodes: Sequence[Node],
    variant: LayoutVariant,
    canvas: CanvasSpec,
    scale: TypeScale | None = None,
) -> NodeSet:
    """Re-derive font sizes for nodes the engine still owns (auto_font=True).

    Nodes the user resized keep their font.
    """
    sizes = font_sizes(variant, canvas, scale)
    out = []
    for node in nodes:
        if node.auto_font and node.id in sizes:
            node = replace(node, font_size=sizes[node.id])
        out.append(node)
    return tuple(out)
