"""Direct manipulation — drag and resize edits coming from the editor surface.

Both return a new node set. A resize of a text-bearing node hands its font
over to geometric scaling (auto_font=False) so later typography refreshes
leave it alone.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace

from adcanvas.engine.config import LayoutConfig
from adcanvas.engine.nodes import CanvasSpec, Node, NodeSet, find_node, replace_node
from adcanvas.engine.roles import Role, get_role_spec
from adcanvas.utils.geometry import clamp


def clamp_position(
    node: Node,
    x: float,
    y: float,
    canvas: CanvasSpec,
    must_be_safe: bool,
    config: LayoutConfig | None = None,
) -> tuple[float, float]:
    """Clamp a drop position for a node of the node's current size."""
    config = config or LayoutConfig()
    if not must_be_safe:
        margin = config.drag_visible_margin
        return clamp(x, 0.0, canvas.width - margin), clamp(y, 0.0, canvas.height - margin)
    safe = canvas.safe_area(config)
    return clamp(x, safe.x, safe.right - node.w), clamp(y, safe.y, safe.bottom - node.h)


def move_node(
    nodes: Sequence[Node],
    role: Role,
    x: float,
    y: float,
    canvas: CanvasSpec,
    required: Iterable[Role],
    config: LayoutConfig | None = None,
) -> NodeSet:
    node = find_node(nodes, role)
    if node is None:
        return tuple(nodes)
    nx, ny = clamp_position(node, x, y, canvas, role in set(required), config)
    return replace_node(nodes, replace(node, x=nx, y=ny))


def resize_node(
    nodes: Sequence[Node],
    role: Role,
    scale_x: float,
    scale_y: float,
    canvas: CanvasSpec,
    required: Iterable[Role],
    x: float | None = None,
    y: float | None = None,
    rotation: float | None = None,
    config: LayoutConfig | None = None,
) -> NodeSet:
    """Apply a transformer-handle resize (and rotation, for rotatable roles)."""
    config = config or LayoutConfig()
    node = find_node(nodes, role)
    if node is None:
        return tuple(nodes)

    must_be_safe = role in set(required)
    max_w, max_h = canvas.width, canvas.height
    if must_be_safe:
        safe = canvas.safe_area(config)
        max_w, max_h = safe.width, safe.height

    w = clamp(node.w * scale_x, config.min_node_width, max_w)
    h = clamp(node.h * scale_y, config.min_node_height, max_h)

    spec = get_role_spec(role)
    sized = replace(
        node,
        w=w,
        h=h,
        rotation=(rotation if rotation is not None else node.rotation) if spec.rotatable else 0.0,
    )
    nx, ny = clamp_position(
        sized,
        node.x if x is None else x,
        node.y if y is None else y,
        canvas,
        must_be_safe,
        config,
    )
    sized = replace(sized, x=nx, y=ny)

    if spec.has_font and node.font_size is not None:
        sized = replace(
            sized,
            font_size=spec.clamp_font(node.font_size * ((scale_x + scale_y) / 2)),
            auto_font=False,
        )
    return replace_node(nodes, sized)
