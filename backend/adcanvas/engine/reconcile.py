"""Variant reconciliation policy — rescale the current arrangement or rebuild it.

A linear rescale only stays legible for moderate aspect-ratio changes. Past
the configured threshold the source arrangement is discarded and a baseline
is resynthesized in the variant closest to what the user had.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from adcanvas.engine.config import LayoutConfig
from adcanvas.engine.nodes import CanvasSpec, LayoutVariant, Node, NodeSet, find_node
from adcanvas.engine.rescale import rescale
from adcanvas.engine.roles import Role
from adcanvas.engine.synthesizer import synthesize
from adcanvas.engine.typography import TypeScale, refresh_auto_fonts

logger = logging.getLogger(__name__)


class Strategy(str, enum.Enum):
    RESCALE = "rescale"
    RESYNTHESIZE = "resynthesize"


@dataclass(frozen=True)
class Reconciliation:
    strategy: Strategy
    aspect_ratio_change: float
    nodes: NodeSet
    # Variant used for resynthesis; None when the arrangement was rescaled
    variant: LayoutVariant | None = None


def aspect_ratio_change(from_canvas: CanvasSpec, to_canvas: CanvasSpec) -> float:
    """(toW/toH) / (fromW/fromH). 1.0 means same shape."""
    return to_canvas.aspect / from_canvas.aspect


def is_significant_change(ratio: float, config: LayoutConfig | None = None) -> bool:
    config = config or LayoutConfig()
    return ratio > config.aspect_change_threshold or ratio < config.aspect_change_lower


def infer_variant(
    nodes: Iterable[Node],
    canvas: CanvasSpec,
    config: LayoutConfig | None = None,
) -> LayoutVariant:
    """Closest layout variant from the packshot's horizontal center.

    Left band → left-packshot, right band → right-packshot, middle → center.
    No packshot → left-packshot.
    """
    config = config or LayoutConfig()
    pack = find_node(nodes, Role.PACKSHOT)
    if pack is None:
        return LayoutVariant.LEFT_PACKSHOT

    band = config.inference_band_frac
    cx = pack.center_x
    if cx < canvas.width * band:
        return LayoutVariant.LEFT_PACKSHOT
    if cx > canvas.width * (1 - band):
        return LayoutVariant.RIGHT_PACKSHOT
    return LayoutVariant.CENTER_PACKSHOT


def reconcile(
    nodes: Sequence[Node],
    from_canvas: CanvasSpec,
    to_canvas: CanvasSpec,
    required: Iterable[Role],
    config: LayoutConfig | None = None,
    variant: LayoutVariant | None = None,
    scale: TypeScale | None = None,
) -> Reconciliation:
    """Decide rescale vs resynthesize for one target canvas and apply it.

    `variant`, when given, overrides the inferred variant for resynthesis.
    On a rescale, geometry and user-owned fonts scale linearly while nodes
    with auto_font get the typography size for the target canvas.
    """
    config = config or LayoutConfig()
    ratio = aspect_ratio_change(from_canvas, to_canvas)

    if not is_significant_change(ratio, config):
        logger.debug("Aspect change %.3f within threshold: rescaling", ratio)
        font_variant = variant or infer_variant(nodes, from_canvas, config)
        scaled = rescale(nodes, from_canvas, to_canvas)
        return Reconciliation(
            strategy=Strategy.RESCALE,
            aspect_ratio_change=ratio,
            nodes=refresh_auto_fonts(scaled, font_variant, to_canvas, scale),
        )

    target_variant = variant or infer_variant(nodes, from_canvas, config)
    logger.debug("Aspect change %.3f too large: resynthesizing as %s", ratio, target_variant.value)
    return Reconciliation(
        strategy=Strategy.RESYNTHESIZE,
        aspect_ratio_change=ratio,
        nodes=synthesize(target_variant, to_canvas, required, config=config, scale=scale),
        variant=target_variant,
    )
