"""Tests for drag and resize edits."""

from __future__ import annotations

from adcanvas.engine.manipulation import clamp_position, move_node, resize_node
from adcanvas.engine.nodes import find_node
from adcanvas.engine.roles import Role
from tests.conftest import BASE_REQUIRED, SQUARE, make_node


def _nodes():
    return (
        make_node(Role.HEADLINE, x=100, y=100, w=500, h=100, font_size=80),
        make_node(Role.PACKSHOT, x=100, y=300, w=300, h=300),
    )


class TestMove:
    def test_required_clamped_to_safe(self):
        out = move_node(_nodes(), Role.HEADLINE, -50, -50, SQUARE, BASE_REQUIRED)
        headline = find_node(out, Role.HEADLINE)
        assert (headline.x, headline.y) == (65, 65)

    def test_required_far_edge(self):
        out = move_node(_nodes(), Role.HEADLINE, 2000, 2000, SQUARE, BASE_REQUIRED)
        headline = find_node(out, Role.HEADLINE)
        assert headline.right == 1015
        assert headline.bottom == 1015

    def test_optional_keeps_visible_margin(self):
        out = move_node(_nodes(), Role.PACKSHOT, 2000, -5, SQUARE, BASE_REQUIRED)
        pack = find_node(out, Role.PACKSHOT)
        assert (pack.x, pack.y) == (1070, 0)

    def test_missing_role_unchanged(self):
        nodes = _nodes()
        assert move_node(nodes, Role.CTA, 0, 0, SQUARE, BASE_REQUIRED) == nodes

    def test_input_not_mutated(self):
        nodes = _nodes()
        move_node(nodes, Role.HEADLINE, 300, 300, SQUARE, BASE_REQUIRED)
        assert nodes[0].x == 100


class TestResize:
    def test_text_font_follows_geometry(self):
        out = resize_node(_nodes(), Role.HEADLINE, 1.5, 1.5, SQUARE, BASE_REQUIRED)
        headline = find_node(out, Role.HEADLINE)
        assert (headline.w, headline.h) == (750, 150)
        assert headline.font_size == 120
        assert headline.auto_font is False

    def test_required_capped_to_safe(self):
        out = resize_node(_nodes(), Role.HEADLINE, 3, 1, SQUARE, BASE_REQUIRED)
        headline = find_node(out, Role.HEADLINE)
        assert headline.w == 950
        assert headline.x == 65

    def test_floor(self):
        out = resize_node(_nodes(), Role.HEADLINE, 0.01, 0.01, SQUARE, BASE_REQUIRED)
        headline = find_node(out, Role.HEADLINE)
        assert (headline.w, headline.h) == (30, 20)
        assert headline.font_size == 34

    def test_rotation_only_for_packshot(self):
        nodes = resize_node(_nodes(), Role.PACKSHOT, 1, 1, SQUARE, BASE_REQUIRED, rotation=15)
        nodes = resize_node(nodes, Role.HEADLINE, 1, 1, SQUARE, BASE_REQUIRED, rotation=15)
        assert find_node(nodes, Role.PACKSHOT).rotation == 15
        assert find_node(nodes, Role.HEADLINE).rotation == 0

    def test_image_has_no_font(self):
        out = resize_node(_nodes(), Role.PACKSHOT, 2, 2, SQUARE, BASE_REQUIRED)
        pack = find_node(out, Role.PACKSHOT)
        assert pack.font_size is None
        assert pack.w == 600


def test_clamp_position_optional_role():
    node = make_node(Role.OFFER, w=200, h=80)
    assert clamp_position(node, -20, 5000, SQUARE, must_be_safe=False) == (0, 1070)
