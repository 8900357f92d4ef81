"""POST /api/variants — export-ready variants across canvas presets."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from adcanvas.api.presets import resolve_platform
from adcanvas.config import Settings
from adcanvas.dependencies import get_layout_config, get_settings
from adcanvas.engine.config import LayoutConfig
from adcanvas.engine.pipeline import build_variants
from adcanvas.engine.presets import find_preset, presets_for_platform
from adcanvas.engine.typography import style_scale
from adcanvas.models.nodes import to_nodes
from adcanvas.models.requests import VariantsRequest
from adcanvas.models.responses import VariantReportModel, VariantsResponse

router = APIRouter()


@router.post("/variants", response_model=VariantsResponse)
async def variants(
    req: VariantsRequest,
    settings: Settings = Depends(get_settings),
    config: LayoutConfig = Depends(get_layout_config),
) -> VariantsResponse:
    platform = resolve_platform(req.platform, settings)

    if req.preset_ids:
        presets = []
        for preset_id in req.preset_ids:
            preset = find_preset(preset_id)
            if preset is None:
                raise HTTPException(status_code=404, detail=f"Unknown preset: {preset_id}")
            presets.append(preset)
    else:
        presets = presets_for_platform(platform)

    reports = build_variants(
        presets,
        req.content.required(),
        source_nodes=to_nodes(req.source_nodes),
        source_canvas=req.source_canvas.to_spec() if req.source_canvas else None,
        variant=req.variant,
        scale=style_scale(req.style),
        cta_allowed=req.content.effective_cta_allowed,
        config=config,
    )
    return VariantsResponse(
        platform=platform,
        variants=[VariantReportModel.from_report(r) for r in reports],
    )
