"""Stacked layout: one centered column, image band near the top."""

from __future__ import annotations

from adcanvas.engine.frame import LayoutFrame
from adcanvas.engine.nodes import LayoutVariant, Node
from adcanvas.engine.registry import layout
from adcanvas.engine.roles import Role
from adcanvas.utils.geometry import round_half_up


@layout(variant=LayoutVariant.CENTER_PACKSHOT, description="Single centered column")
def center_packshot(frame: LayoutFrame) -> list[Node]:
    sx, sy, sw, sh = frame.safe_x, frame.safe_y, frame.safe_w, frame.safe_h

    stack_w = frame.of_w(frame.config.stack_column_frac)
    stack_x = sx + round_half_up((sw - stack_w) / 2)

    nodes = [
        frame.node(Role.PACKSHOT, sx + frame.of_w(0.32), sy + frame.of_h(0.12), frame.of_w(0.36), frame.of_h(0.30)),
        frame.node(Role.LOGO, stack_x, sy, round_half_up(stack_w * 0.28), frame.of_h(0.10)),
        frame.node(Role.BRAND, stack_x, sy, stack_w, frame.tag_height),
        frame.node(Role.OFFER, stack_x, sy + frame.of_h(0.46), stack_w, frame.of_h(0.08)),
        frame.node(Role.HEADLINE, stack_x, sy + frame.of_h(0.54), stack_w, frame.of_h(0.18)),
        frame.node(Role.SUBCOPY, stack_x, sy + frame.of_h(0.72), stack_w, frame.of_h(0.10)),
    ]
    if frame.include_cta:
        nodes.append(
            frame.node(Role.CTA, stack_x, sy + frame.of_h(0.84), round_half_up(stack_w * 0.42), frame.tag_height)
        )
    legal_h = frame.of_h(0.07)
    nodes.append(frame.node(Role.LEGAL, sx, sy + sh - legal_h, sw, legal_h))
    return nodes
