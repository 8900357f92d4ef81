"""Rescale transformer — linear map of a node set from one canvas size to another.

Positions and sizes scale per axis; fonts scale by the mean of the two axis
factors. Rotation is scale-invariant.
Containment is NOT enforced here; audit/auto-fix afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

import numpy as np

from adcanvas.engine.nodes import CanvasSpec, Node, NodeSet
from adcanvas.engine.roles import get_role_spec

logger = logging.getLogger(__name__)


def scale_factors(from_canvas: CanvasSpec, to_canvas: CanvasSpec) -> tuple[float, float]:
    return (to_canvas.width / from_canvas.width, to_canvas.height / from_canvas.height)


def rescale(nodes: Sequence[Node], from_canvas: CanvasSpec, to_canvas: CanvasSpec) -> NodeSet:
    if not nodes:
        return ()

    sx, sy = scale_factors(from_canvas, to_canvas)
    s_font = (sx + sy) / 2

    # Nx4 array of (x, y, w, h)
    geometry = np.array([n.geometry for n in nodes], dtype=np.float64)
    scaled = geometry * np.array([sx, sy, sx, sy])

    out = []
    for node, (x, y, w, h) in zip(nodes, scaled):
        font = node.font_size
        if font is not None:
            font = get_role_spec(node.id).clamp_font(font * s_font)
        out.append(replace(node, x=float(x), y=float(y), w=float(w), h=float(h), font_size=font))

    logger.debug("Rescaled %d nodes by (%.3f, %.3f), font x%.3f", len(out), sx, sy, s_font)
    return tuple(out)
