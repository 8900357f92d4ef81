"""Layout registry — every layout variant is a standalone function registered via decorator.

Usage:
    @layout(variant=LayoutVariant.CENTER_PACKSHOT, description="Stacked column")
    def stacked(frame: LayoutFrame) -> list[Node]:
        ...

Adding a new variant = one enum member plus one decorated function.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from adcanvas.engine.nodes import LayoutVariant

if TYPE_CHECKING:
    from adcanvas.engine.frame import LayoutFrame
    from adcanvas.engine.nodes import Node

logger = logging.getLogger(__name__)


@dataclass
class LayoutSpec:
    variant: LayoutVariant
    fn: Callable[["LayoutFrame"], list["Node"]]
    description: str = ""


class LayoutRegistry:
    """Singleton registry of layout variants."""

    def __init__(self) -> None:
        self._layouts: dict[LayoutVariant, LayoutSpec] = {}

    def register(self, spec: LayoutSpec) -> None:
        if spec.variant in self._layouts:
            raise ValueError(f"Duplicate layout variant: {spec.variant.value}")
        self._layouts[spec.variant] = spec
        logger.debug("Registered layout %s", spec.variant.value)

    def get(self, variant: LayoutVariant) -> LayoutSpec:
        return self._layouts[variant]

    def all(self) -> list[LayoutSpec]:
        order = list(LayoutVariant)
        return sorted(self._layouts.values(), key=lambda s: order.index(s.variant))

    def missing(self) -> set[LayoutVariant]:
        return set(LayoutVariant) - set(self._layouts)

    @property
    def count(self) -> int:
        return len(self._layouts)


# Module-level singleton
_registry = LayoutRegistry()


def get_registry() -> LayoutRegistry:
    return _registry


def layout(*, variant: LayoutVariant, description: str = ""):
    """Decorator to register a layout function."""

    def decorator(fn: Callable[["LayoutFrame"], list["Node"]]):
        _registry.register(LayoutSpec(variant=variant, fn=fn, description=description))
        return fn

    return decorator
