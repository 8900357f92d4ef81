"""GET /api/presets — canvas presets for a platform."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from adcanvas.config import Settings
from adcanvas.dependencies import get_settings
from adcanvas.engine.presets import PLATFORM_PRESETS, layout_for_preset, normalize_platform, presets_for_platform
from adcanvas.models.responses import PresetModel, PresetsResponse

router = APIRouter()


def resolve_platform(platform: str | None, settings: Settings) -> str:
    """Normalized platform key; unknown or missing names fall back to the settings default."""
    key = normalize_platform(platform or settings.default_platform)
    if key not in PLATFORM_PRESETS:
        key = normalize_platform(settings.default_platform)
    return key


@router.get("/presets", response_model=PresetsResponse)
async def presets(
    platform: str | None = None,
    settings: Settings = Depends(get_settings),
) -> PresetsResponse:
    key = resolve_platform(platform, settings)
    return PresetsResponse(
        platform=key,
        presets=[
            PresetModel(
                id=p.id,
                label=p.label,
                width=p.width,
                height=p.height,
                default_layout=layout_for_preset(p.id),
            )
            for p in presets_for_platform(key)
        ],
    )
