"""POST /api/compliance/* — safe-area audit and auto-fix."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from adcanvas.dependencies import get_layout_config
from adcanvas.engine.audit import audit
from adcanvas.engine.autofix import auto_fix
from adcanvas.engine.config import LayoutConfig
from adcanvas.engine.roles import ordered
from adcanvas.models.nodes import from_nodes, to_nodes
from adcanvas.models.requests import ComplianceRequest
from adcanvas.models.responses import AuditResponse, FixResponse, issue_models

router = APIRouter(prefix="/compliance")


@router.post("/audit", response_model=AuditResponse)
async def audit_nodes(
    req: ComplianceRequest,
    config: LayoutConfig = Depends(get_layout_config),
) -> AuditResponse:
    issues = audit(to_nodes(req.nodes), req.canvas.to_spec(), req.content.required(), config)
    return AuditResponse(compliant=not issues, issues=issue_models(issues))


@router.post("/fix", response_model=FixResponse)
async def fix_nodes(
    req: ComplianceRequest,
    config: LayoutConfig = Depends(get_layout_config),
) -> FixResponse:
    nodes = to_nodes(req.nodes)
    canvas = req.canvas.to_spec()
    required = req.content.required()

    before = audit(nodes, canvas, required, config)
    result = auto_fix(nodes, canvas, required, config)
    after = audit(result.nodes, canvas, required, config)

    return FixResponse(
        nodes=from_nodes(result.nodes),
        touched=ordered(result.touched),
        issues_before=issue_models(before),
        issues_after=issue_models(after),
    )
