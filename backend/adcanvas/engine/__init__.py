"""AdCanvas layout and compliance engine."""

from adcanvas.engine.audit import Issue, IssueKind, audit
from adcanvas.engine.autofix import FixResult, auto_fix
from adcanvas.engine.config import LayoutConfig
from adcanvas.engine.nodes import CanvasSpec, LayoutVariant, Node, NodeSet, SafeArea
from adcanvas.engine.pipeline import VariantPipeline, VariantReport, VariantStatus, build_variants
from adcanvas.engine.reconcile import Strategy, infer_variant, reconcile
from adcanvas.engine.rescale import rescale
from adcanvas.engine.roles import NodeKind, Role, required_roles
from adcanvas.engine.synthesizer import synthesize
from adcanvas.engine.textfit import fit_font_size

__all__ = [
    "Issue",
    "IssueKind",
    "audit",
    "FixResult",
    "auto_fix",
    "LayoutConfig",
    "CanvasSpec",
    "LayoutVariant",
    "Node",
    "NodeSet",
    "SafeArea",
    "VariantPipeline",
    "VariantReport",
    "VariantStatus",
    "build_variants",
    "Strategy",
    "infer_variant",
    "reconcile",
    "rescale",
    "NodeKind",
    "Role",
    "required_roles",
    "synthesize",
    "fit_font_size",
]
