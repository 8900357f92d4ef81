"""Variant pipeline — the export pass for one target canvas.

reconcile → audit (raw) → auto-fix → audit (final) → overlap notes

Both audits are kept: a variant that needed fixing is reported as
"Compliant (fixed)", distinct from one that was compliant all along.
"""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from adcanvas.engine.audit import Issue, audit
from adcanvas.engine.autofix import FixResult, auto_fix
from adcanvas.engine.config import LayoutConfig
from adcanvas.engine.nodes import CanvasSpec, LayoutVariant, Node, NodeSet
from adcanvas.engine.overlap import Overlap, find_overlaps
from adcanvas.engine.presets import SizePreset, layout_for_preset
from adcanvas.engine.reconcile import Reconciliation, Strategy, reconcile
from adcanvas.engine.roles import Role, ordered
from adcanvas.engine.synthesizer import synthesize
from adcanvas.engine.typography import TypeScale

logger = logging.getLogger(__name__)


class VariantStatus(str, enum.Enum):
    COMPLIANT = "Compliant"
    COMPLIANT_FIXED = "Compliant (fixed)"
    NEEDS_TWEAKS = "Needs tweaks"


@dataclass
class VariantContext:
    """State flowing through the stages of one export pass."""

    target: CanvasSpec
    required: frozenset[Role]
    preset_id: str = ""
    # Source arrangement and its canvas; without both a baseline is synthesized
    source_nodes: NodeSet = ()
    source_canvas: CanvasSpec | None = None
    # Explicit layout choice; overrides inference and the preset default
    variant: LayoutVariant | None = None
    scale: TypeScale | None = None
    cta_allowed: bool = True

    # --- Computed by stages ---
    reconciliation: Reconciliation | None = None
    audit_issues: list[Issue] = field(default_factory=list)
    fix: FixResult | None = None
    final_issues: list[Issue] = field(default_factory=list)
    overlaps: list[Overlap] = field(default_factory=list)
    timings_ms: dict[str, float] = field(default_factory=dict)

    @property
    def candidate(self) -> NodeSet:
        return self.reconciliation.nodes if self.reconciliation else ()

    @property
    def final_nodes(self) -> NodeSet:
        return self.fix.nodes if self.fix else self.candidate


@dataclass(frozen=True)
class VariantReport:
    preset_id: str
    canvas: CanvasSpec
    strategy: Strategy
    variant: LayoutVariant | None
    nodes: NodeSet
    audit_issues: list[Issue]
    final_issues: list[Issue]
    touched: frozenset[Role]
    status: VariantStatus
    notes: list[str]
    overlaps: list[Overlap]

    @property
    def was_auto_fixed(self) -> bool:
        return self.status is VariantStatus.COMPLIANT_FIXED

    @property
    def primary_issue(self) -> str:
        """First thing worth telling the user: remaining issues, else what was fixed."""
        issues = self.final_issues or self.audit_issues
        return issues[0].message if issues else ""


Stage = Callable[[VariantContext], None]


class VariantPipeline:
    """Runs the export stages for one target canvas."""

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self.config = config or LayoutConfig()
        self.stages: list[tuple[str, Stage]] = [
            ("reconcile", self._reconcile),
            ("audit", self._audit),
            ("fix", self._fix),
            ("final_audit", self._final_audit),
            ("overlaps", self._overlaps),
        ]

    def run(self, ctx: VariantContext) -> VariantContext:
        start = time.perf_counter()
        for name, stage in self.stages:
            t0 = time.perf_counter()
            stage(ctx)
            ctx.timings_ms[name] = round((time.perf_counter() - t0) * 1000, 3)
            logger.debug("  %s completed in %.2fms", name, ctx.timings_ms[name])

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Variant %s (%gx%g): %d raw issues, %d touched, %d final issues in %.1fms",
            ctx.preset_id or "-",
            ctx.target.width,
            ctx.target.height,
            len(ctx.audit_issues),
            ctx.fix.touched_count if ctx.fix else 0,
            len(ctx.final_issues),
            total,
        )
        return ctx

    def report(self, ctx: VariantContext) -> VariantReport:
        ctx = self.run(ctx)
        touched = ctx.fix.touched if ctx.fix else frozenset()
        return VariantReport(
            preset_id=ctx.preset_id,
            canvas=ctx.target,
            strategy=ctx.reconciliation.strategy,
            variant=ctx.reconciliation.variant,
            nodes=ctx.final_nodes,
            audit_issues=ctx.audit_issues,
            final_issues=ctx.final_issues,
            touched=touched,
            status=classify(ctx.audit_issues, ctx.final_issues, touched),
            notes=_notes(ctx, touched),
            overlaps=ctx.overlaps,
        )

    # --- Stages ---

    def _reconcile(self, ctx: VariantContext) -> None:
        if ctx.source_nodes and ctx.source_canvas is not None:
            ctx.reconciliation = reconcile(
                ctx.source_nodes,
                ctx.source_canvas,
                ctx.target,
                ctx.required,
                config=self.config,
                variant=ctx.variant,
                scale=ctx.scale,
            )
            return

        variant = ctx.variant or (
            layout_for_preset(ctx.preset_id) if ctx.preset_id else LayoutVariant.LEFT_PACKSHOT
        )
        ctx.reconciliation = Reconciliation(
            strategy=Strategy.RESYNTHESIZE,
            aspect_ratio_change=1.0,
            nodes=synthesize(variant, ctx.target, ctx.required, config=self.config, scale=ctx.scale),
            variant=variant,
        )

    def _audit(self, ctx: VariantContext) -> None:
        ctx.audit_issues = audit(ctx.candidate, ctx.target, ctx.required, self.config)

    def _fix(self, ctx: VariantContext) -> None:
        ctx.fix = auto_fix(ctx.candidate, ctx.target, ctx.required, self.config)

    def _final_audit(self, ctx: VariantContext) -> None:
        ctx.final_issues = audit(ctx.final_nodes, ctx.target, ctx.required, self.config)

    def _overlaps(self, ctx: VariantContext) -> None:
        ctx.overlaps = find_overlaps(ctx.final_nodes, self.config)


def classify(
    audit_issues: Sequence[Issue],
    final_issues: Sequence[Issue],
    touched: frozenset[Role],
) -> VariantStatus:
    if final_issues:
        return VariantStatus.NEEDS_TWEAKS
    if audit_issues and touched:
        return VariantStatus.COMPLIANT_FIXED
    return VariantStatus.COMPLIANT


def _notes(ctx: VariantContext, touched: frozenset[Role]) -> list[str]:
    notes = []
    if not ctx.cta_allowed:
        notes.append("CTA disabled by template")
    if touched:
        roles = ", ".join(r.value for r in ordered(touched))
        notes.append(f"Auto-fix applied ({len(touched)}): {roles}")
    return notes


def build_variants(
    presets: Iterable[SizePreset],
    required: Iterable[Role],
    source_nodes: Sequence[Node] = (),
    source_canvas: CanvasSpec | None = None,
    variant: LayoutVariant | None = None,
    scale: TypeScale | None = None,
    cta_allowed: bool = True,
    config: LayoutConfig | None = None,
) -> list[VariantReport]:
    """One report per preset, each computed independently from the same source."""
    pipeline = VariantPipeline(config)
    required = frozenset(required)
    reports = []
    for preset in presets:
        ctx = VariantContext(
            target=preset.canvas,
            required=required,
            preset_id=preset.id,
            source_nodes=tuple(source_nodes),
            source_canvas=source_canvas,
            variant=variant,
            scale=scale,
            cta_allowed=cta_allowed,
        )
        reports.append(pipeline.report(ctx))
    return reports
