"""Tests for the layout registry."""

from __future__ import annotations

import pytest

import adcanvas.engine.layouts  # noqa: F401
from adcanvas.engine.frame import LayoutFrame
from adcanvas.engine.nodes import LayoutVariant
from adcanvas.engine.registry import LayoutRegistry, LayoutSpec, get_registry


def _noop(frame: LayoutFrame) -> list:
    return []


def test_register_and_get():
    reg = LayoutRegistry()
    spec = LayoutSpec(variant=LayoutVariant.LEFT_PACKSHOT, fn=_noop)
    reg.register(spec)
    assert reg.get(LayoutVariant.LEFT_PACKSHOT) is spec
    assert reg.count == 1


def test_duplicate_rejected():
    reg = LayoutRegistry()
    reg.register(LayoutSpec(variant=LayoutVariant.LEFT_PACKSHOT, fn=_noop))
    with pytest.raises(ValueError):
        reg.register(LayoutSpec(variant=LayoutVariant.LEFT_PACKSHOT, fn=_noop))


def test_unknown_variant_raises_key_error():
    with pytest.raises(KeyError):
        LayoutRegistry().get(LayoutVariant.CENTER_PACKSHOT)


def test_all_in_enum_order():
    reg = LayoutRegistry()
    reg.register(LayoutSpec(variant=LayoutVariant.CENTER_PACKSHOT, fn=_noop))
    reg.register(LayoutSpec(variant=LayoutVariant.LEFT_PACKSHOT, fn=_noop))
    assert [s.variant for s in reg.all()] == [LayoutVariant.LEFT_PACKSHOT, LayoutVariant.CENTER_PACKSHOT]
    assert reg.missing() == {LayoutVariant.RIGHT_PACKSHOT}


def test_builtin_variants_all_registered():
    reg = get_registry()
    assert reg.missing() == set()
    assert reg.count == len(LayoutVariant)
