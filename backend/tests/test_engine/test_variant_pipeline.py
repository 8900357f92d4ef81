"""Tests for the variant export pipeline."""

from __future__ import annotations

from adcanvas.engine.audit import Issue, IssueKind
from adcanvas.engine.nodes import LayoutVariant, find_node, replace_node
from adcanvas.engine.pipeline import (
    VariantContext,
    VariantPipeline,
    VariantStatus,
    build_variants,
    classify,
)
from adcanvas.engine.presets import PLATFORM_PRESETS, SizePreset, find_preset
from adcanvas.engine.reconcile import Strategy
from adcanvas.engine.roles import Role
from adcanvas.engine.synthesizer import synthesize
from tests.conftest import BASE_REQUIRED, CTA_REQUIRED, SQUARE


def _source():
    return synthesize(LayoutVariant.LEFT_PACKSHOT, SQUARE, CTA_REQUIRED)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

class TestClassify:
    def test_clean(self):
        assert classify([], [], frozenset()) is VariantStatus.COMPLIANT

    def test_fixed(self):
        issue = Issue(Role.HEADLINE, IssueKind.OUTSIDE_SAFE_AREA)
        assert classify([issue], [], frozenset({Role.HEADLINE})) is VariantStatus.COMPLIANT_FIXED

    def test_needs_tweaks(self):
        issue = Issue(Role.SUBCOPY, IssueKind.MISSING)
        assert classify([issue], [issue], frozenset()) is VariantStatus.NEEDS_TWEAKS


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

class TestPipeline:
    def test_stage_timings_recorded(self):
        ctx = VariantContext(target=SQUARE, required=CTA_REQUIRED)
        VariantPipeline().run(ctx)
        assert list(ctx.timings_ms) == ["reconcile", "audit", "fix", "final_audit", "overlaps"]

    def test_baseline_without_source(self):
        reports = build_variants(PLATFORM_PRESETS["instagram"], BASE_REQUIRED)
        assert [r.preset_id for r in reports] == ["ig_square", "ig_story", "ig_portrait", "fb_feed"]
        for report in reports:
            assert report.status is VariantStatus.COMPLIANT
            assert report.strategy is Strategy.RESYNTHESIZE
            assert report.final_issues == []
        by_id = {r.preset_id: r for r in reports}
        assert by_id["ig_story"].variant is LayoutVariant.CENTER_PACKSHOT
        assert by_id["fb_feed"].variant is LayoutVariant.LEFT_PACKSHOT

    def test_reconciles_from_source(self):
        presets = [find_preset("ig_square"), find_preset("ig_portrait"), find_preset("ig_story")]
        reports = build_variants(presets, CTA_REQUIRED, source_nodes=_source(), source_canvas=SQUARE)
        square, portrait, story = reports
        assert square.strategy is Strategy.RESCALE
        assert portrait.strategy is Strategy.RESCALE
        assert story.strategy is Strategy.RESYNTHESIZE
        assert story.variant is LayoutVariant.LEFT_PACKSHOT
        assert all(r.status is VariantStatus.COMPLIANT for r in reports)

    def test_rescaled_variant_refits_auto_fonts(self):
        (report,) = build_variants([find_preset("ig_portrait")], CTA_REQUIRED, _source(), SQUARE)
        assert report.strategy is Strategy.RESCALE
        # 1350 * 0.085
        assert find_node(report.nodes, Role.HEADLINE).font_size == 115

    def test_explicit_variant_used_for_resynthesis(self):
        reports = build_variants(
            [find_preset("fb_feed")],
            CTA_REQUIRED,
            source_nodes=_source(),
            source_canvas=SQUARE,
            variant=LayoutVariant.RIGHT_PACKSHOT,
        )
        assert reports[0].variant is LayoutVariant.RIGHT_PACKSHOT

    def test_fixed_variant(self):
        source = _source()
        headline = find_node(source, Role.HEADLINE)
        source = replace_node(source, headline.with_geometry(-40, headline.y, headline.w, headline.h))
        (report,) = build_variants([find_preset("ig_square")], CTA_REQUIRED, source, SQUARE)
        assert report.status is VariantStatus.COMPLIANT_FIXED
        assert report.was_auto_fixed
        assert report.touched == frozenset({Role.HEADLINE})
        assert report.primary_issue == "headline outside safe area"
        assert "Auto-fix applied (1): headline" in report.notes
        assert find_node(report.nodes, Role.HEADLINE).x == 65

    def test_missing_role_needs_tweaks(self):
        source = tuple(n for n in _source() if n.id is not Role.SUBCOPY)
        (report,) = build_variants([find_preset("ig_square")], CTA_REQUIRED, source, SQUARE)
        assert report.status is VariantStatus.NEEDS_TWEAKS
        assert report.primary_issue == "subcopy missing"

    def test_cta_disabled_note(self):
        (report,) = build_variants([find_preset("ig_square")], BASE_REQUIRED, cta_allowed=False)
        assert "CTA disabled by template" in report.notes
        assert find_node(report.nodes, Role.CTA) is None

    def test_variants_independent(self):
        preset = SizePreset("custom", "Custom", 1080, 1080)
        a, b = build_variants([preset, preset], CTA_REQUIRED, _source(), SQUARE)
        assert a.nodes == b.nodes
