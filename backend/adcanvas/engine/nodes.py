"""Core data model — canvas, safe area, layout variants and nodes.

Nodes are frozen: every engine function returns a new node set (a tuple of
Node) instead of mutating the caller's. The host commits the result to its
own state.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from adcanvas.engine.config import LayoutConfig
from adcanvas.engine.roles import NodeKind, Role, get_role_spec
from adcanvas.utils.geometry import round_half_up


class LayoutVariant(str, enum.Enum):
    LEFT_PACKSHOT = "left-packshot"
    RIGHT_PACKSHOT = "right-packshot"
    CENTER_PACKSHOT = "center-packshot"

    @property
    def is_stacked(self) -> bool:
        return self is LayoutVariant.CENTER_PACKSHOT


@dataclass(frozen=True)
class SafeArea:
    """Canvas inset by `margin` on all four sides."""

    margin: int
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.right, self.bottom)


@dataclass(frozen=True)
class CanvasSpec:
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {self.width}x{self.height}")

    @property
    def aspect(self) -> float:
        return self.width / self.height

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return (0.0, 0.0, float(self.width), float(self.height))

    def safe_area(self, config: LayoutConfig | None = None) -> SafeArea:
        """Derived, never stored: recomputed from the canvas every time."""
        config = config or LayoutConfig()
        margin = round_half_up(min(self.width, self.height) * config.safe_margin_frac)
        return SafeArea(
            margin=margin,
            x=float(margin),
            y=float(margin),
            width=self.width - margin * 2,
            height=self.height - margin * 2,
        )


@dataclass(frozen=True)
class Node:
    """One placed element. Only rotatable roles keep a nonzero rotation."""

    id: Role
    kind: NodeKind
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
    rotation: float = 0.0
    font_size: int | None = None
    auto_font: bool = True

    def __post_init__(self) -> None:
        if self.rotation and not get_role_spec(self.id).rotatable:
            object.__setattr__(self, "rotation", 0.0)

    @classmethod
    def for_role(cls, role: Role, **kwargs) -> Node:
        return cls(id=role, kind=get_role_spec(role).kind, **kwargs)

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center_x(self) -> float:
        return self.x + self.w / 2

    @property
    def center_y(self) -> float:
        return self.y + self.h / 2

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.right, self.bottom)

    @property
    def geometry(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.w, self.h)

    def with_geometry(self, x: float, y: float, w: float, h: float) -> Node:
        return replace(self, x=x, y=y, w=w, h=h)


NodeSet = tuple[Node, ...]


def find_node(nodes: Iterable[Node], role: Role) -> Node | None:
    for node in nodes:
        if node.id == role:
            return node
    return None


def replace_node(nodes: Sequence[Node], updated: Node) -> NodeSet:
    """Return a new node set with the node of the same role swapped out."""
    return tuple(updated if n.id == updated.id else n for n in nodes)
