"""Side-by-side layouts — image column on one side, text column on the other.

Image column is image_column_frac of safe width; the text column takes the
rest minus a gutter_frac gutter.
"""

from __future__ import annotations

from adcanvas.engine.frame import LayoutFrame
from adcanvas.engine.nodes import LayoutVariant, Node
from adcanvas.engine.registry import layout
from adcanvas.engine.roles import Role
from adcanvas.utils.geometry import round_half_up


def _split(frame: LayoutFrame, image_left: bool) -> list[Node]:
    cfg = frame.config
    sx, sy, sw, sh = frame.safe_x, frame.safe_y, frame.safe_w, frame.safe_h

    gap = frame.of_w(cfg.gutter_frac)
    pack_w = frame.of_w(cfg.image_column_frac)
    text_w = round_half_up(sw - pack_w - gap)

    pack_x = sx if image_left else sx + sw - pack_w
    text_x = sx + pack_w + gap if image_left else sx

    # Brand tag sits in the top corner opposite the logo
    if image_left:
        brand_x, brand_w = sx + frame.of_w(0.72), frame.of_w(0.26)
    else:
        brand_x, brand_w = sx + frame.of_w(0.10), frame.of_w(0.30)

    nodes = [
        frame.node(Role.PACKSHOT, pack_x, sy + frame.of_h(0.18), pack_w, frame.of_h(0.54)),
        frame.node(Role.LOGO, text_x, sy, round_half_up(text_w * 0.35), frame.of_h(0.10)),
        frame.node(Role.BRAND, brand_x, sy, brand_w, frame.tag_height),
        frame.node(Role.OFFER, text_x, sy + frame.of_h(0.12), text_w, frame.of_h(0.10)),
        frame.node(Role.HEADLINE, text_x, sy + frame.of_h(0.22), text_w, frame.of_h(0.30)),
        frame.node(Role.SUBCOPY, text_x, sy + frame.of_h(0.55), text_w, frame.of_h(0.18)),
    ]
    if frame.include_cta:
        nodes.append(
            frame.node(Role.CTA, text_x, sy + frame.of_h(0.78), round_half_up(text_w * 0.66), frame.tag_height)
        )
    legal_h = frame.of_h(0.07)
    nodes.append(frame.node(Role.LEGAL, sx, sy + sh - legal_h, sw, legal_h))
    return nodes


@layout(variant=LayoutVariant.LEFT_PACKSHOT, description="Packshot column left, copy right")
def left_packshot(frame: LayoutFrame) -> list[Node]:
    return _split(frame, image_left=True)


@layout(variant=LayoutVariant.RIGHT_PACKSHOT, description="Packshot column right, copy left")
def right_packshot(frame: LayoutFrame) -> list[Node]:
    return _split(frame, image_left=False)
