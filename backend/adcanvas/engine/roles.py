"""Element roles — a closed enumeration with one dispatch-table entry per role.

Every role the engine knows about has exactly one RoleSpec in ROLE_SPECS.
The table is checked for exhaustiveness at import time, so adding a Role
without its spec fails immediately instead of at the first layout pass.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from adcanvas.utils.geometry import clamp, round_half_up


class Role(str, enum.Enum):
    PACKSHOT = "packshot"
    LOGO = "logo"
    BRAND = "brand"
    OFFER = "offer"
    HEADLINE = "headline"
    SUBCOPY = "subcopy"
    CTA = "cta"
    LEGAL = "legal"


class NodeKind(str, enum.Enum):
    IMAGE = "image"
    TEXT = "text"
    TAG = "tag"
    CTA = "cta"


@dataclass(frozen=True)
class RoleSpec:
    role: Role
    kind: NodeKind
    rotatable: bool = False
    # Font bounds (None for image roles)
    font_min: int | None = None
    font_max: int | None = None
    # Font size as a fraction of canvas height: side-by-side, stacked
    font_frac: float = 0.0
    font_frac_stacked: float = 0.0
    # Substitute size for degenerate geometry, fractions of safe width/height
    default_w_frac: float = 0.5
    default_h_frac: float = 0.1

    @property
    def has_font(self) -> bool:
        return self.font_min is not None

    def clamp_font(self, size: float) -> int:
        """Round to an integer and clamp into this role's font bounds."""
        if not self.has_font:
            return round_half_up(size)
        return int(clamp(round_half_up(size), self.font_min, self.font_max))


ROLE_SPECS: dict[Role, RoleSpec] = {
    Role.PACKSHOT: RoleSpec(
        Role.PACKSHOT, NodeKind.IMAGE, rotatable=True,
        default_w_frac=0.40, default_h_frac=0.54,
    ),
    Role.LOGO: RoleSpec(
        Role.LOGO, NodeKind.IMAGE,
        default_w_frac=0.20, default_h_frac=0.10,
    ),
    Role.BRAND: RoleSpec(
        Role.BRAND, NodeKind.TAG, font_min=16, font_max=56,
        font_frac=0.030, font_frac_stacked=0.036,
        default_w_frac=0.26, default_h_frac=0.07,
    ),
    Role.OFFER: RoleSpec(
        Role.OFFER, NodeKind.TEXT, font_min=14, font_max=60,
        font_frac=0.030, font_frac_stacked=0.032,
        default_w_frac=0.55, default_h_frac=0.10,
    ),
    Role.HEADLINE: RoleSpec(
        Role.HEADLINE, NodeKind.TEXT, font_min=34, font_max=200,
        font_frac=0.085, font_frac_stacked=0.095,
        default_w_frac=0.55, default_h_frac=0.30,
    ),
    Role.SUBCOPY: RoleSpec(
        Role.SUBCOPY, NodeKind.TEXT, font_min=16, font_max=90,
        font_frac=0.034, font_frac_stacked=0.040,
        default_w_frac=0.55, default_h_frac=0.18,
    ),
    Role.CTA: RoleSpec(
        Role.CTA, NodeKind.CTA, font_min=14, font_max=40,
        font_frac=0.028, font_frac_stacked=0.028,
        default_w_frac=0.36, default_h_frac=0.07,
    ),
    Role.LEGAL: RoleSpec(
        Role.LEGAL, NodeKind.TEXT, font_min=12, font_max=30,
        font_frac=0.020, font_frac_stacked=0.020,
        default_w_frac=1.0, default_h_frac=0.07,
    ),
}

_missing = set(Role) - set(ROLE_SPECS)
if _missing:
    raise RuntimeError(f"Roles without a RoleSpec: {sorted(r.value for r in _missing)}")


def get_role_spec(role: Role) -> RoleSpec:
    return ROLE_SPECS[role]


# Roles that are always required, regardless of content or template
ALWAYS_REQUIRED: frozenset[Role] = frozenset({Role.BRAND, Role.HEADLINE, Role.SUBCOPY, Role.LOGO})


def required_roles(
    cta_allowed: bool,
    offer_text: str | None = "",
    legal_text: str | None = "",
) -> frozenset[Role]:
    """Build the required set for a template capability and content state.

    Whitespace-only offer/legal text counts as empty.
    """
    roles = set(ALWAYS_REQUIRED)
    if (offer_text or "").strip():
        roles.add(Role.OFFER)
    if (legal_text or "").strip():
        roles.add(Role.LEGAL)
    if cta_allowed:
        roles.add(Role.CTA)
    return frozenset(roles)


def ordered(roles) -> list[Role]:
    """Roles in declaration order, for deterministic iteration over sets."""
    wanted = set(roles)
    return [r for r in Role if r in wanted]
