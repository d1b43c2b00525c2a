"""Render requests and templates into LLM prompts.

All functions here are pure: the same request and template always give the
same prompt text.
"""

from __future__ import annotations

from datetime import datetime

from agentforge.core.generation.models import (
    Framework,
    GenerationRequest,
    SkillMetadata,
    SkillTemplate,
)
from agentforge.core.generation.prompts import (
    BLOCKCHAIN_REQUIREMENTS,
    CODE_USER_TEMPLATE,
    COMPLEXITY_GUIDELINES,
    DOCUMENT_USER_TEMPLATE,
    FRAMEWORK_GUIDANCE,
    MANDATORY_REQUIREMENTS,
    TEST_USER_TEMPLATE,
)

# Integration tags that pull the blockchain requirements into the prompt.
BLOCKCHAIN_PROMPT_TAGS: frozenset[str] = frozenset(
    {"solana", "jupiter", "pyth", "metaplex", "serum", "mango"}
)


def _framework_or_default(request: GenerationRequest) -> Framework:
    try:
        return request.framework_kind
    except ValueError:
        return Framework.OPENCLAW


def needs_blockchain_block(request: GenerationRequest) -> bool:
    return any(tag.lower() in BLOCKCHAIN_PROMPT_TAGS for tag in request.integration_tags)


def compose_prompt(request: GenerationRequest, template: SkillTemplate) -> str:
    """Render the user prompt for the skill document."""
    complexity = request.complexity_level
    integrations = request.integration_tags
    mandatory = "\n".join(
        f"{index}. {line}" for index, line in enumerate(MANDATORY_REQUIREMENTS, start=1)
    )
    return DOCUMENT_USER_TEMPLATE.format(
        framework=request.framework,
        description=request.description,
        features=", ".join(request.features),
        complexity=complexity.value,
        integrations=", ".join(integrations) if integrations else "none",
        complexity_guidelines=COMPLEXITY_GUIDELINES[complexity],
        framework_guidance=FRAMEWORK_GUIDANCE[_framework_or_default(request)],
        mandatory_requirements=mandatory,
        blockchain_requirements=BLOCKCHAIN_REQUIREMENTS if needs_blockchain_block(request) else "",
        template=template.content,
    )


def compose_code_prompt(request: GenerationRequest, metadata: SkillMetadata) -> str:
    return CODE_USER_TEMPLATE.format(
        name=metadata.name,
        description=metadata.description,
        features=", ".join(request.features),
    )


def compose_test_prompt(request: GenerationRequest, metadata: SkillMetadata) -> str:
    return TEST_USER_TEMPLATE.format(
        name=metadata.name,
        description=metadata.description,
        features=", ".join(request.features),
    )


def annotate_document(
    text: str,
    request: GenerationRequest,
    generated_at: datetime,
) -> str:
    """Add generation details to the document's header block.

    The lines go right before the closing ``---``.  A document without a
    header block is returned unchanged.
    """
    lines = text.split("\n")
    opening = next((index for index, line in enumerate(lines) if line.strip()), None)
    if opening is None or lines[opening].strip() != "---":
        return text

    closing = next(
        (
            index
            for index, line in enumerate(lines)
            if index > opening and line.strip() == "---"
        ),
        None,
    )
    if closing is None:
        return text

    features = ", ".join(f'"{feature}"' for feature in request.features)
    lines[closing:closing] = [
        "generated_by: AgentForge",
        f"generation_date: {generated_at.isoformat()}",
        f"complexity: {request.complexity_level.value}",
        f"features: [{features}]",
    ]
    return "\n".join(lines)
