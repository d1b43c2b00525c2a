"""Generic OpenAI-compatible provider for the LLM client abstraction.

Supports any LLM service that exposes an OpenAI-compatible chat completions
API, including:
  - DeepSeek (``https://api.deepseek.com``)
  - Ollama (``http://localhost:11434/v1``)
  - vLLM (``http://localhost:8000/v1``)
  - Together AI, Groq, Moonshot, SiliconFlow
  - Any other service with a compatible ``/chat/completions`` endpoint
"""

from __future__ import annotations

from agentforge.utils.exceptions import ProviderError
from agentforge.utils.logging import get_logger

logger = get_logger("llm.openai_compatible")


class OpenAICompatibleProvider:
    """Provider for any OpenAI-compatible API endpoint.

    Parameters
    ----------
    api_key:
        API key (pass an empty string for services that do not require
        authentication, e.g. local Ollama).
    model:
        Model identifier.
    base_url:
        Base URL for the API (e.g. ``"http://localhost:11434/v1"``).
    provider_name:
        Human-readable name used in log messages and error reports.
    """

    MAX_TOKENS = 4096

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        provider_name: str = "openai_compatible",
    ):
        try:
            import openai
        except ImportError as exc:
            raise ProviderError(
                provider_name,
                "The 'openai' package is required. "
                "Install it with: pip install openai",
            ) from exc

        if not base_url:
            raise ProviderError(provider_name, "base_url is required but was empty.")

        # Some local services (e.g. Ollama) don't need a key.
        effective_key = api_key if api_key else "none"

        self.client = openai.AsyncOpenAI(api_key=effective_key, base_url=base_url)
        self.model = model
        self.provider_name = provider_name

    async def complete(
        self,
        system: str,
        user: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Call the remote API and return the assistant's text response."""
        kwargs = {}
        if temperature is not None:
            kwargs["temperature"] = temperature
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                max_tokens=max_tokens or self.MAX_TOKENS,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                **kwargs,
            )
        except Exception as exc:
            logger.error(
                "compatible_complete_error",
                provider=self.provider_name,
                error=str(exc),
            )
            raise ProviderError(self.provider_name, str(exc)) from exc

        choice = response.choices[0] if response.choices else None
        if choice and choice.message and choice.message.content:
            return choice.message.content
        return ""
