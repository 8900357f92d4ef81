"""Compliance auditor — read-only check of required roles against the safe area."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from adcanvas.engine.config import LayoutConfig
from adcanvas.engine.nodes import CanvasSpec, Node, find_node
from adcanvas.engine.roles import Role, ordered
from adcanvas.utils.geometry import rect_within


class IssueKind(str, enum.Enum):
    MISSING = "missing"
    OUTSIDE_SAFE_AREA = "outside safe area"


@dataclass(frozen=True)
class Issue:
    role: Role
    kind: IssueKind

    @property
    def message(self) -> str:
        return f"{self.role.value} {self.kind.value}"

    def __str__(self) -> str:
        return self.message


def inside_safe_area(node: Node, canvas: CanvasSpec, config: LayoutConfig | None = None) -> bool:
    config = config or LayoutConfig()
    safe = canvas.safe_area(config)
    return rect_within(node.bounds, safe.bounds, tol=config.containment_tolerance)


def audit(
    nodes: Sequence[Node],
    canvas: CanvasSpec,
    required: Iterable[Role],
    config: LayoutConfig | None = None,
) -> list[Issue]:
    """One issue per required role that is absent or not fully inside the safe rectangle.

    Issues come out in role declaration order. Roles outside the required set
    are never reported.
    """
    config = config or LayoutConfig()
    issues: list[Issue] = []
    for role in ordered(required):
        node = find_node(nodes, role)
        if node is None:
            issues.append(Issue(role, IssueKind.MISSING))
        elif not inside_safe_area(node, canvas, config):
            issues.append(Issue(role, IssueKind.OUTSIDE_SAFE_AREA))
    return issues
