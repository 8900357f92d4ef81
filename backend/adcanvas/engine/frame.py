"""Read-only inputs every layout function works from.

Layout functions see only safe-area geometry and fractions of it, never
absolute pixel positions, so the same formulas hold on any canvas size.
"""

from __future__ import annotations

from dataclasses import dataclass

from adcanvas.engine.config import LayoutConfig
from adcanvas.engine.nodes import CanvasSpec, Node, SafeArea
from adcanvas.engine.roles import Role
from adcanvas.utils.geometry import round_half_up


@dataclass(frozen=True)
class LayoutFrame:
    canvas: CanvasSpec
    safe: SafeArea
    config: LayoutConfig
    fonts: dict[Role, int]
    include_cta: bool

    @property
    def safe_x(self) -> float:
        return self.safe.x

    @property
    def safe_y(self) -> float:
        return self.safe.y

    @property
    def safe_w(self) -> float:
        return self.safe.width

    @property
    def safe_h(self) -> float:
        return self.safe.height

    def of_w(self, frac: float) -> int:
        """Fraction of safe width, rounded."""
        return round_half_up(self.safe.width * frac)

    def of_h(self, frac: float) -> int:
        """Fraction of safe height, rounded."""
        return round_half_up(self.safe.height * frac)

    @property
    def tag_height(self) -> int:
        return self.of_h(self.config.tag_height_frac)

    def node(self, role: Role, x: float, y: float, w: float, h: float) -> Node:
        return Node.for_role(role, x=x, y=y, w=w, h=h, font_size=self.fonts.get(role))
