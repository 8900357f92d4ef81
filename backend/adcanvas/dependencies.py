"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from adcanvas.config import Settings, settings
from adcanvas.engine.config import LayoutConfig
from adcanvas.engine.textfit import PillowTextMeasurer


def get_settings() -> Settings:
    return settings


def get_layout_config() -> LayoutConfig:
    return settings.layout_config()


@lru_cache(maxsize=1)
def get_text_measurer() -> PillowTextMeasurer:
    return PillowTextMeasurer(settings.font_path)
