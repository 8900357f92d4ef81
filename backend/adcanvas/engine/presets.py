"""Canvas presets per platform, template capabilities and default layouts."""

from __future__ import annotations

import re
from dataclasses import dataclass

from adcanvas.engine.nodes import CanvasSpec, LayoutVariant


@dataclass(frozen=True)
class SizePreset:
    id: str
    label: str
    width: int
    height: int

    @property
    def canvas(self) -> CanvasSpec:
        return CanvasSpec(self.width, self.height)


@dataclass(frozen=True)
class Template:
    id: str
    name: str
    has_cta: bool
    description: str = ""


PLATFORM_PRESETS: dict[str, list[SizePreset]] = {
    "instagram": [
        SizePreset("ig_square", "IG Post", 1080, 1080),
        SizePreset("ig_story", "IG Story", 1080, 1920),
        SizePreset("ig_portrait", "IG Portrait", 1080, 1350),
        SizePreset("fb_feed", "FB Feed", 1200, 628),
    ],
    "facebook": [
        SizePreset("fb_feed", "FB Feed", 1200, 628),
        SizePreset("fb_story", "FB Story", 1080, 1920),
        SizePreset("fb_square", "FB Square", 1080, 1080),
        SizePreset("fb_cover", "FB Cover", 820, 312),
    ],
    "tiktok": [
        SizePreset("tt_9x16", "TikTok 9:16", 1080, 1920),
        SizePreset("tt_story", "TikTok Story 9:16", 1080, 1920),
        SizePreset("shorts_9x16", "Shorts 9:16", 1080, 1920),
        SizePreset("reels_9x16", "Reels 9:16", 1080, 1920),
    ],
    "display": [
        SizePreset("d_300x250", "Display 300×250", 300, 250),
        SizePreset("d_336x280", "Display 336×280", 336, 280),
        SizePreset("d_728x90", "Leaderboard 728×90", 728, 90),
        SizePreset("d_160x600", "Skyscraper 160×600", 160, 600),
    ],
}

DEFAULT_PLATFORM = "instagram"

TEMPLATES: list[Template] = [
    Template(
        "tesco_no_cta",
        "Retail banner – NO CTA",
        has_cta=False,
        description="Onsite / retail media banner where only brand + price info is allowed.",
    ),
    Template(
        "tesco_neutral_cta",
        "Hero banner – neutral CTA",
        has_cta=True,
        description="Hero creative where the CTA must be neutral, e.g. “Learn more”.",
    ),
    Template(
        "social_standard_cta",
        "Social ad – standard CTA",
        has_cta=True,
        description="Social ad where standard CTAs like “Shop now” are allowed.",
    ),
]

_STACKED_HINTS = ("story", "portrait", "9x16", "reels", "shorts")


def normalize_platform(platform: str | None) -> str:
    """Map free text ("IG", "Facebook ads", "programmatic banner") to a platform key."""
    cleaned = re.sub(r"[^a-z]", "", (platform or "").lower())
    if "insta" in cleaned or cleaned == "ig":
        return "instagram"
    if "face" in cleaned or cleaned == "fb":
        return "facebook"
    if "tiktok" in cleaned or cleaned == "tt":
        return "tiktok"
    if "display" in cleaned or "banner" in cleaned or "programmatic" in cleaned:
        return "display"
    return cleaned


def presets_for_platform(platform: str | None) -> list[SizePreset]:
    return PLATFORM_PRESETS.get(normalize_platform(platform), PLATFORM_PRESETS[DEFAULT_PLATFORM])


def find_preset(preset_id: str) -> SizePreset | None:
    for presets in PLATFORM_PRESETS.values():
        for preset in presets:
            if preset.id == preset_id:
                return preset
    return None


def find_template(template_id: str | None) -> Template:
    """Unknown template ids fall back to the first template."""
    for template in TEMPLATES:
        if template.id == template_id:
            return template
    return TEMPLATES[0]


def layout_for_preset(preset_id: str) -> LayoutVariant:
    """Tall formats default to the stacked layout, everything else to packshot-left."""
    key = preset_id.lower()
    if any(hint in key for hint in _STACKED_HINTS):
        return LayoutVariant.CENTER_PACKSHOT
    return LayoutVariant.LEFT_PACKSHOT
