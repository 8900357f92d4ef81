"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from adcanvas.engine.nodes import LayoutVariant
from adcanvas.engine.presets import find_template
from adcanvas.engine.roles import Role, required_roles
from adcanvas.engine.suggestions import SuggestionKind
from adcanvas.models.nodes import CanvasModel, NodeModel


class ContentFlags(BaseModel):
    """Host-owned content state that decides the required set."""

    template_id: str | None = Field(
        default=None,
        description="Template whose CTA capability applies; overrides cta_allowed when set",
    )
    cta_allowed: bool = Field(default=True, description="Template allows a call-to-action")
    offer_text: str = Field(default="", description="Offer badge copy (empty = no offer)")
    legal_text: str = Field(default="", description="Legal line copy (empty = no legal)")

    @property
    def effective_cta_allowed(self) -> bool:
        if self.template_id is not None:
            return find_template(self.template_id).has_cta
        return self.cta_allowed

    def required(self) -> frozenset[Role]:
        return required_roles(self.effective_cta_allowed, self.offer_text, self.legal_text)


class SynthesizeRequest(BaseModel):
    variant: LayoutVariant = LayoutVariant.LEFT_PACKSHOT
    canvas: CanvasModel
    content: ContentFlags = Field(default_factory=ContentFlags)
    style: str | None = Field(default=None, description="Visual style preset name")


class RescaleRequest(BaseModel):
    nodes: list[NodeModel]
    from_canvas: CanvasModel
    to_canvas: CanvasModel


class ReconcileRequest(BaseModel):
    nodes: list[NodeModel]
    from_canvas: CanvasModel
    to_canvas: CanvasModel
    content: ContentFlags = Field(default_factory=ContentFlags)
    variant: LayoutVariant | None = Field(
        default=None,
        description="Variant to rebuild with; inferred from the packshot when omitted",
    )
    style: str | None = None


class ComplianceRequest(BaseModel):
    nodes: list[NodeModel]
    canvas: CanvasModel
    content: ContentFlags = Field(default_factory=ContentFlags)


class MoveRequest(BaseModel):
    nodes: list[NodeModel]
    canvas: CanvasModel
    role: Role
    x: float
    y: float
    content: ContentFlags = Field(default_factory=ContentFlags)


class ResizeRequest(BaseModel):
    nodes: list[NodeModel]
    canvas: CanvasModel
    role: Role
    scale_x: float = Field(..., gt=0)
    scale_y: float = Field(..., gt=0)
    x: float | None = None
    y: float | None = None
    rotation: float | None = None
    content: ContentFlags = Field(default_factory=ContentFlags)


class SuggestRequest(BaseModel):
    kind: SuggestionKind
    current: LayoutVariant = LayoutVariant.LEFT_PACKSHOT
    canvas: CanvasModel
    content: ContentFlags = Field(default_factory=ContentFlags)
    style: str | None = None


class VariantsRequest(BaseModel):
    platform: str | None = Field(default=None, description="Platform name; settings default when omitted")
    preset_ids: list[str] = Field(
        default_factory=list,
        description="Explicit preset ids; overrides the platform list when non-empty",
    )
    source_nodes: list[NodeModel] = Field(default_factory=list)
    source_canvas: CanvasModel | None = None
    variant: LayoutVariant | None = None
    content: ContentFlags = Field(default_factory=ContentFlags)
    style: str | None = None

    @model_validator(mode="after")
    def _source_needs_canvas(self) -> VariantsRequest:
        if self.source_nodes and self.source_canvas is None:
            raise ValueError("source_canvas is required when source_nodes are given")
        return self


class FitTextRequest(BaseModel):
    text: str
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)
    start_size: int = Field(..., gt=0)
    min_size: int = Field(default=18, gt=0)
    line_height: float | None = Field(default=None, gt=0)
    padding: float = Field(default=0.0, ge=0)
