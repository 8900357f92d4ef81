"""Wire models for canvases and nodes, with conversion to engine types."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from adcanvas.engine.nodes import CanvasSpec, Node
from adcanvas.engine.roles import NodeKind, Role, get_role_spec


class CanvasModel(BaseModel):
    width: float = Field(..., gt=0, description="Canvas width in px")
    height: float = Field(..., gt=0, description="Canvas height in px")

    def to_spec(self) -> CanvasSpec:
        return CanvasSpec(self.width, self.height)

    @classmethod
    def from_spec(cls, canvas: CanvasSpec) -> CanvasModel:
        return cls(width=canvas.width, height=canvas.height)


class NodeModel(BaseModel):
    """Renderer-facing node: {id, kind, x, y, w, h, rotation, fontSize, autoFont}."""

    model_config = ConfigDict(populate_by_name=True)

    id: Role
    kind: NodeKind | None = None  # Derived from the role when omitted
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
    rotation: float = 0.0
    font_size: int | None = Field(default=None, alias="fontSize")
    auto_font: bool = Field(default=True, alias="autoFont")

    def to_node(self) -> Node:
        return Node(
            id=self.id,
            kind=self.kind or get_role_spec(self.id).kind,
            x=self.x,
            y=self.y,
            w=self.w,
            h=self.h,
            rotation=self.rotation,
            font_size=self.font_size,
            auto_font=self.auto_font,
        )

    @classmethod
    def from_node(cls, node: Node) -> NodeModel:
        return cls(
            id=node.id,
            kind=node.kind,
            x=node.x,
            y=node.y,
            w=node.w,
            h=node.h,
            rotation=node.rotation,
            font_size=node.font_size,
            auto_font=node.auto_font,
        )


def to_nodes(models: list[NodeModel]) -> tuple[Node, ...]:
    return tuple(m.to_node() for m in models)


def from_nodes(nodes) -> list[NodeModel]:
    return [NodeModel.from_node(n) for n in nodes]
