"""Skill endpoints -- generate, validate, and list saved skills."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from agentforge.api.v1.schemas.common import ErrorResponse
from agentforge.api.v1.schemas.skill import (
    GenerateSkillRequest,
    GenerateSkillResponse,
    SkillsListResponse,
    ValidateSkillRequest,
    ValidateSkillResponse,
)
from agentforge.dependencies import (
    get_output_manager,
    get_skill_generator,
    get_skill_validator,
)
from agentforge.engine.pipeline import SkillGenerator
from agentforge.engine.validation import SkillValidator
from agentforge.output.manager import SkillOutputManager

router = APIRouter()


@router.post(
    "/skills/generate",
    response_model=GenerateSkillResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        502: {"model": ErrorResponse, "description": "Generation failed"},
        503: {"model": ErrorResponse, "description": "No LLM provider configured"},
    },
    summary="Generate a skill",
    description=(
        "Generate a skill document, supporting files, dependency list and "
        "validation scores from a natural-language description.  Set "
        "``save`` to also write the skill to the output directory."
    ),
)
async def generate_skill(
    body: GenerateSkillRequest,
    generator: SkillGenerator = Depends(get_skill_generator),
    output_manager: SkillOutputManager = Depends(get_output_manager),
) -> GenerateSkillResponse:
    record = await generator.generate_skill(body.to_generation_request())

    saved = None
    if body.save:
        saved = await output_manager.save(record)

    return GenerateSkillResponse(skill=record, saved=saved)


@router.post(
    "/skills/validate",
    response_model=ValidateSkillResponse,
    summary="Validate a skill document",
    description="Score an existing SKILL.md (and optional code files) without generating anything.",
)
async def validate_skill(
    body: ValidateSkillRequest,
    validator: SkillValidator = Depends(get_skill_validator),
) -> ValidateSkillResponse:
    validation = validator.validate_document(body.content, body.code_files)
    return ValidateSkillResponse(validation=validation)


@router.get(
    "/skills",
    response_model=SkillsListResponse,
    summary="List saved skills",
    description="Return a summary of every skill saved in the output directory.",
)
async def list_skills(
    output_manager: SkillOutputManager = Depends(get_output_manager),
) -> SkillsListResponse:
    skills = await output_manager.list_skills()
    return SkillsListResponse(skills=skills, total=len(skills))
