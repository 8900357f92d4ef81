"""POST /api/layout/* — synthesis, rescaling, reconciliation and direct edits."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from adcanvas.dependencies import get_layout_config
from adcanvas.engine.config import LayoutConfig
from adcanvas.engine.manipulation import move_node, resize_node
from adcanvas.engine.reconcile import reconcile
from adcanvas.engine.rescale import rescale
from adcanvas.engine.suggestions import suggest
from adcanvas.engine.synthesizer import synthesize
from adcanvas.engine.typography import style_scale
from adcanvas.models.nodes import from_nodes, to_nodes
from adcanvas.models.requests import (
    MoveRequest,
    ReconcileRequest,
    RescaleRequest,
    ResizeRequest,
    SuggestRequest,
    SynthesizeRequest,
)
from adcanvas.models.responses import NodeSetResponse, ReconcileResponse, SuggestResponse

router = APIRouter(prefix="/layout")


@router.post("/synthesize", response_model=NodeSetResponse)
async def synthesize_layout(
    req: SynthesizeRequest,
    config: LayoutConfig = Depends(get_layout_config),
) -> NodeSetResponse:
    nodes = synthesize(
        req.variant,
        req.canvas.to_spec(),
        req.content.required(),
        config=config,
        scale=style_scale(req.style),
    )
    return NodeSetResponse(nodes=from_nodes(nodes))


@router.post("/rescale", response_model=NodeSetResponse)
async def rescale_layout(req: RescaleRequest) -> NodeSetResponse:
    nodes = rescale(to_nodes(req.nodes), req.from_canvas.to_spec(), req.to_canvas.to_spec())
    return NodeSetResponse(nodes=from_nodes(nodes))


@router.post("/reconcile", response_model=ReconcileResponse)
async def reconcile_layout(
    req: ReconcileRequest,
    config: LayoutConfig = Depends(get_layout_config),
) -> ReconcileResponse:
    result = reconcile(
        to_nodes(req.nodes),
        req.from_canvas.to_spec(),
        req.to_canvas.to_spec(),
        req.content.required(),
        config=config,
        variant=req.variant,
        scale=style_scale(req.style),
    )
    return ReconcileResponse(
        strategy=result.strategy,
        aspect_ratio_change=round(result.aspect_ratio_change, 4),
        variant=result.variant,
        nodes=from_nodes(result.nodes),
    )


@router.post("/move", response_model=NodeSetResponse)
async def move(
    req: MoveRequest,
    config: LayoutConfig = Depends(get_layout_config),
) -> NodeSetResponse:
    nodes = move_node(
        to_nodes(req.nodes), req.role, req.x, req.y, req.canvas.to_spec(), req.content.required(), config
    )
    return NodeSetResponse(nodes=from_nodes(nodes))


@router.post("/resize", response_model=NodeSetResponse)
async def resize(
    req: ResizeRequest,
    config: LayoutConfig = Depends(get_layout_config),
) -> NodeSetResponse:
    nodes = resize_node(
        to_nodes(req.nodes),
        req.role,
        req.scale_x,
        req.scale_y,
        req.canvas.to_spec(),
        req.content.required(),
        x=req.x,
        y=req.y,
        rotation=req.rotation,
        config=config,
    )
    return NodeSetResponse(nodes=from_nodes(nodes))


@router.post("/suggest", response_model=SuggestResponse)
async def suggest_layout(
    req: SuggestRequest,
    config: LayoutConfig = Depends(get_layout_config),
) -> SuggestResponse:
    result = suggest(
        req.kind,
        req.current,
        req.canvas.to_spec(),
        req.content.required(),
        config=config,
        scale=style_scale(req.style),
    )
    return SuggestResponse(
        kind=result.kind.value,
        variant=result.variant,
        style=result.style,
        nodes=from_nodes(result.nodes),
    )
