"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from adcanvas.api import compliance, health, layout, presets, text, variants

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(presets.router)
api_router.include_router(layout.router)
api_router.include_router(compliance.router)
api_router.include_router(variants.router)
api_router.include_router(text.router)
