"""POST /api/text/fit — shrink a font size until text fits its box."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from adcanvas.dependencies import get_layout_config, get_text_measurer
from adcanvas.engine.config import LayoutConfig
from adcanvas.engine.textfit import PillowTextMeasurer, fit_font_size
from adcanvas.models.requests import FitTextRequest
from adcanvas.models.responses import FitTextResponse

router = APIRouter(prefix="/text")


@router.post("/fit", response_model=FitTextResponse)
async def fit_text(
    req: FitTextRequest,
    config: LayoutConfig = Depends(get_layout_config),
    measurer: PillowTextMeasurer = Depends(get_text_measurer),
) -> FitTextResponse:
    size = fit_font_size(
        req.text,
        req.width,
        req.height,
        req.start_size,
        req.min_size,
        line_height=req.line_height,
        measurer=measurer,
        padding=req.padding,
        config=config,
    )
    return FitTextResponse(font_size=size, at_floor=size == req.min_size and size < req.start_size)
