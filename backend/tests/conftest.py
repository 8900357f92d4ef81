"""Shared test fixtures."""

from __future__ import annotations

import pytest

from adcanvas.engine.nodes import CanvasSpec, Node
from adcanvas.engine.roles import Role, required_roles


SQUARE = CanvasSpec(1080, 1080)
STORY = CanvasSpec(1080, 1920)
LANDSCAPE = CanvasSpec(1200, 628)
LEADERBOARD = CanvasSpec(728, 90)

# brand, headline, subcopy, logo
BASE_REQUIRED = required_roles(cta_allowed=False)
# ... plus cta
CTA_REQUIRED = required_roles(cta_allowed=True)


class FixedAdvanceMeasurer:
    """Every character advances `advance * font_size`. Deterministic, font-free."""

    def __init__(self, advance: float = 0.5) -> None:
        self.advance = advance
        self.calls = 0

    def line_width(self, text: str, font_size: int) -> float:
        self.calls += 1
        return len(text) * font_size * self.advance


def make_node(role: Role, x: float = 0, y: float = 0, w: float = 100, h: float = 50, **kwargs) -> Node:
    return Node.for_role(role, x=x, y=y, w=w, h=h, **kwargs)


@pytest.fixture
def measurer() -> FixedAdvanceMeasurer:
    return FixedAdvanceMeasurer()
