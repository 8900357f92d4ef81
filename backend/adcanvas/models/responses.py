"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from adcanvas.engine.audit import Issue
from adcanvas.engine.nodes import LayoutVariant
from adcanvas.engine.pipeline import VariantReport
from adcanvas.engine.reconcile import Strategy
from adcanvas.engine.roles import Role, ordered
from adcanvas.models.nodes import CanvasModel, NodeModel, from_nodes


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    layouts_registered: int = 0


class IssueModel(BaseModel):
    role: Role
    kind: str
    message: str

    @classmethod
    def from_issue(cls, issue: Issue) -> IssueModel:
        return cls(role=issue.role, kind=issue.kind.value, message=issue.message)


def issue_models(issues: list[Issue]) -> list[IssueModel]:
    return [IssueModel.from_issue(i) for i in issues]


class NodeSetResponse(BaseModel):
    nodes: list[NodeModel] = Field(default_factory=list)


class ReconcileResponse(BaseModel):
    strategy: Strategy
    aspect_ratio_change: float
    variant: LayoutVariant | None = None
    nodes: list[NodeModel] = Field(default_factory=list)


class AuditResponse(BaseModel):
    compliant: bool
    issues: list[IssueModel] = Field(default_factory=list)


class FixResponse(BaseModel):
    nodes: list[NodeModel] = Field(default_factory=list)
    touched: list[Role] = Field(default_factory=list)
    issues_before: list[IssueModel] = Field(default_factory=list)
    issues_after: list[IssueModel] = Field(default_factory=list)


class SuggestResponse(BaseModel):
    kind: str
    variant: LayoutVariant
    style: str | None = None
    nodes: list[NodeModel] = Field(default_factory=list)


class VariantReportModel(BaseModel):
    preset_id: str
    canvas: CanvasModel
    status: str
    strategy: Strategy
    variant: LayoutVariant | None = None
    nodes: list[NodeModel] = Field(default_factory=list)
    audit_issues: list[IssueModel] = Field(default_factory=list)
    final_issues: list[IssueModel] = Field(default_factory=list)
    touched: list[Role] = Field(default_factory=list)
    was_auto_fixed: bool = False
    primary_issue: str = ""
    notes: list[str] = Field(default_factory=list)
    overlaps: list[str] = Field(default_factory=list)

    @classmethod
    def from_report(cls, report: VariantReport) -> VariantReportModel:
        return cls(
            preset_id=report.preset_id,
            canvas=CanvasModel.from_spec(report.canvas),
            status=report.status.value,
            strategy=report.strategy,
            variant=report.variant,
            nodes=from_nodes(report.nodes),
            audit_issues=issue_models(report.audit_issues),
            final_issues=issue_models(report.final_issues),
            touched=ordered(report.touched),
            was_auto_fixed=report.was_auto_fixed,
            primary_issue=report.primary_issue,
            notes=report.notes,
            overlaps=[o.message for o in report.overlaps],
        )


class VariantsResponse(BaseModel):
    platform: str
    variants: list[VariantReportModel] = Field(default_factory=list)


class PresetModel(BaseModel):
    id: str
    label: str
    width: int
    height: int
    default_layout: LayoutVariant


class PresetsResponse(BaseModel):
    platform: str
    presets: list[PresetModel] = Field(default_factory=list)


class FitTextResponse(BaseModel):
    font_size: int
    at_floor: bool = False
