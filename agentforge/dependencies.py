"""FastAPI dependency functions for injection into endpoint handlers.

The template registry is built once during the app lifespan and stored on
``app.state``; everything else is cheap and created per call.
"""

from __future__ import annotations

from fastapi import HTTPException, Request

from agentforge.config import settings
from agentforge.core.generation.templates import TemplateRegistry
from agentforge.core.llm.client import LLMClient
from agentforge.engine.pipeline import SkillGenerator
from agentforge.engine.validation import SkillValidator
from agentforge.output.manager import SkillOutputManager
from agentforge.utils.logging import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Template registry (initialised during app lifespan)
# ---------------------------------------------------------------------------

def get_template_registry(request: Request) -> TemplateRegistry:
    """Return the process-wide template registry stored on ``app.state``."""
    return request.app.state.template_registry


# ---------------------------------------------------------------------------
# LLM client (optional -- returns None when no API key is configured)
# ---------------------------------------------------------------------------

def _resolve_api_key() -> str:
    """Pick the API key for the configured provider.

    Resolution order:
      1. Provider-specific key (``ANTHROPIC_API_KEY``, ``OPENAI_API_KEY``,
         ``DEEPSEEK_API_KEY``)
      2. Generic ``LLM_API_KEY``
      3. Fall back to any non-empty provider-specific key
    """
    provider = settings.llm_provider
    provider_keys: dict[str, str] = {
        "anthropic": settings.anthropic_api_key,
        "openai": settings.openai_api_key,
        "deepseek": settings.deepseek_api_key,
    }

    if provider in provider_keys and provider_keys[provider]:
        return provider_keys[provider]

    if settings.llm_api_key:
        return settings.llm_api_key

    for key in provider_keys.values():
        if key:
            return key

    return ""


def get_llm_client() -> LLMClient | None:
    """Build an LLM client if an API key is available.

    Returns ``None`` when no usable key is found and the provider needs
    one.
    """
    api_key = _resolve_api_key()
    provider = settings.llm_provider

    # Ollama and some local providers don't require a key.
    local_providers = {"ollama"}
    if not api_key and provider not in local_providers:
        return None

    base_url = settings.llm_base_url or None
    return LLMClient(provider, api_key, settings.llm_model, base_url=base_url)


# ---------------------------------------------------------------------------
# Generation and validation
# ---------------------------------------------------------------------------

def get_skill_validator() -> SkillValidator:
    return SkillValidator()


def get_skill_generator(request: Request) -> SkillGenerator:
    """Build a :class:`SkillGenerator` wired to the registry and LLM client.

    Raises HTTP 503 when no LLM provider is configured.
    """
    llm = get_llm_client()
    if llm is None:
        logger.warning("llm_client_unavailable", provider=settings.llm_provider)
        raise HTTPException(
            status_code=503,
            detail="No LLM provider configured. Set an API key in your .env file.",
        )
    return SkillGenerator(
        llm,
        get_template_registry(request),
        validator=get_skill_validator(),
        settings=settings,
    )


# ---------------------------------------------------------------------------
# Output manager
# ---------------------------------------------------------------------------

def get_output_manager() -> SkillOutputManager:
    """Return a :class:`SkillOutputManager` pointed at the configured output dir."""
    return SkillOutputManager(settings.output_dir)
