"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from adcanvas.engine.config import LayoutConfig


class Settings(BaseSettings):
    adcanvas_env: str = "development"
    adcanvas_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Platform used when a request names none (or an unknown one)
    default_platform: str = "instagram"

    # TrueType font for text measurement; empty = Pillow's bundled font
    font_path: str = ""

    # Tunable layout thresholds
    aspect_change_threshold: float = 1.35
    text_shrink_factor: float = 0.92

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def layout_config(self) -> LayoutConfig:
        return LayoutConfig(
            aspect_change_threshold=self.aspect_change_threshold,
            text_shrink_factor=self.text_shrink_factor,
        )


settings = Settings()
