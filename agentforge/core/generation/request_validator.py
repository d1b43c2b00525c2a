"""Structural checks run on every request before any LLM call."""

from __future__ import annotations

from agentforge.core.generation.models import Framework, GenerationRequest
from agentforge.utils.exceptions import InvalidRequestError

SUPPORTED_FRAMEWORKS: tuple[str, ...] = tuple(f.value for f in Framework)


def validate_request(request: GenerationRequest) -> None:
    """Raise :class:`InvalidRequestError` if *request* cannot be generated.

    Only the description and framework are checked.  Complexity, features
    and integrations are accepted as-is.
    """
    if not request.description or not request.description.strip():
        raise InvalidRequestError("Skill description is required")

    if request.framework not in SUPPORTED_FRAMEWORKS:
        raise InvalidRequestError(
            f"Unsupported framework: {request.framework}. "
            f"Supported: {', '.join(SUPPORTED_FRAMEWORKS)}"
        )
