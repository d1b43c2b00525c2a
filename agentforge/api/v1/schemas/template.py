"""Response schemas for the template introspection endpoint."""

from pydantic import BaseModel


class TemplateInfo(BaseModel):
    framework: str
    name: str


class TemplatesListResponse(BaseModel):
    templates: list[TemplateInfo]
    total: int
