"""Template introspection endpoint -- lists the supported frameworks."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from agentforge.api.v1.schemas.template import TemplateInfo, TemplatesListResponse
from agentforge.core.generation.templates import TemplateRegistry
from agentforge.dependencies import get_template_registry

router = APIRouter()


@router.get(
    "/templates",
    response_model=TemplatesListResponse,
    summary="List skill templates",
    description="Return the framework and name of every registered skill template.",
)
async def list_templates(
    registry: TemplateRegistry = Depends(get_template_registry),
) -> TemplatesListResponse:
    templates = [
        TemplateInfo(framework=t.framework.value, name=t.name)
        for t in registry.list_all()
    ]
    return TemplatesListResponse(templates=templates, total=len(templates))
