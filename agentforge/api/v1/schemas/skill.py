"""Request/response schemas for the skill generation, validation and
listing endpoints.
"""

from pydantic import BaseModel, Field

from agentforge.core.generation.models import (
    CodeFile,
    GeneratedSkillRecord,
    GenerationRequest,
    ValidationResult,
)
from agentforge.output.manager import SavedSkill


class GenerateSkillRequest(BaseModel):
    """Request body for a skill generation call.

    Emptiness of ``description`` and support for ``framework`` are checked
    by the generator, not here, so both surface as a 400.
    """

    description: str = Field(..., description="What the skill should do")
    framework: str = Field(default="openclaw", description="openclaw, langchain, or autogen")
    features: list[str] = Field(default_factory=list, description="Feature tags, in order")
    integrations: list[str] | None = Field(default=None, description="Integration tags")
    complexity: str | None = Field(default=None, description="simple, intermediate, or advanced")
    save: bool = Field(default=False, description="Write the skill to the output directory")

    def to_generation_request(self) -> GenerationRequest:
        return GenerationRequest(
            description=self.description,
            framework=self.framework,
            features=self.features,
            integrations=self.integrations,
            complexity=self.complexity,
        )


class GenerateSkillResponse(BaseModel):
    skill: GeneratedSkillRecord
    saved: SavedSkill | None = None


class ValidateSkillRequest(BaseModel):
    """Request body for validating an existing skill document."""

    content: str = Field(..., description="Full SKILL.md text")
    code_files: list[CodeFile] = Field(default_factory=list)


class ValidateSkillResponse(BaseModel):
    validation: ValidationResult


class SkillsListResponse(BaseModel):
    skills: list[SavedSkill]
    total: int
