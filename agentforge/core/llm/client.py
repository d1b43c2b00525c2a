"""High-level LLM client abstraction.

Provides the single text-generation capability the skill generator
consumes, ``complete(system, user, temperature=..., max_tokens=...)``,
through one ``LLMClient`` class.  Supported providers:

  - ``anthropic``: Anthropic Claude
  - ``openai``: OpenAI GPT
  - ``deepseek``, ``ollama``, ``together``, ``groq``, ...: OpenAI-compatible
    endpoints with a well-known base URL
  - ``openai_compatible``: Any OpenAI-compatible API with a custom base_url

The concrete provider is selected at initialisation time based on the
``provider`` string.
"""

from __future__ import annotations

from agentforge.utils.exceptions import ProviderError
from agentforge.utils.logging import get_logger

# Well-known OpenAI-compatible providers and their default base URLs.
_KNOWN_COMPATIBLE_PROVIDERS: dict[str, str] = {
    "deepseek": "https://api.deepseek.com",
    "ollama": "http://localhost:11434/v1",
    "together": "https://api.together.xyz/v1",
    "groq": "https://api.groq.com/openai/v1",
    "moonshot": "https://api.moonshot.cn/v1",
    "siliconflow": "https://api.siliconflow.cn/v1",
}


class LLMClient:
    """Unified LLM client that delegates to a provider-specific backend.

    Parameters
    ----------
    provider:
        Provider name: ``"anthropic"``, ``"openai"``, ``"openai_compatible"``,
        or any key in the well-known providers registry.
    api_key:
        API key for the chosen provider.
    model:
        Model identifier (e.g. ``"gpt-4o"``, ``"claude-sonnet-4-20250514"``).
    base_url:
        Optional base URL.  Required for ``openai_compatible``; ignored for
        ``anthropic`` and ``openai``; overrides the default for well-known
        compatible providers.
    """

    def __init__(
        self,
        provider: str,
        api_key: str,
        model: str,
        base_url: str | None = None,
    ):
        self.provider = provider
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.logger = get_logger("llm")
        self._provider_client = self._init_provider()

    def _init_provider(self):
        """Instantiate the appropriate provider backend."""
        if self.provider == "anthropic":
            from agentforge.core.llm.providers.anthropic_provider import AnthropicProvider

            return AnthropicProvider(self.api_key, self.model)

        if self.provider == "openai":
            from agentforge.core.llm.providers.openai_provider import OpenAIProvider

            return OpenAIProvider(self.api_key, self.model)

        if self.provider in _KNOWN_COMPATIBLE_PROVIDERS or self.provider == "openai_compatible":
            from agentforge.core.llm.providers.openai_compatible_provider import (
                OpenAICompatibleProvider,
            )

            base_url = self.base_url or _KNOWN_COMPATIBLE_PROVIDERS.get(self.provider, "")
            if not base_url:
                raise ProviderError(
                    self.provider,
                    "base_url is required for openai_compatible provider. "
                    "Set LLM_BASE_URL in your .env file.",
                )
            return OpenAICompatibleProvider(
                api_key=self.api_key,
                model=self.model,
                base_url=base_url,
                provider_name=self.provider,
            )

        raise ProviderError(
            self.provider,
            f"Unknown provider: {self.provider}. "
            f"Supported: anthropic, openai, "
            f"{', '.join(_KNOWN_COMPATIBLE_PROVIDERS.keys())}, openai_compatible",
        )

    async def complete(
        self,
        system: str,
        user: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Send a system + user message pair and return the text response.

        Raises :class:`ProviderError` on provider failures.  An empty string
        is returned as-is; deciding whether that is usable is the caller's
        job.
        """
        self.logger.info(
            "llm_complete",
            provider=self.provider,
            model=self.model,
            system_len=len(system),
            user_len=len(user),
            temperature=temperature,
            max_tokens=max_tokens,
        )
        try:
            result = await self._provider_client.complete(
                system,
                user,
                temperature=temperature,
                max_tokens=max_tokens,
            )
            self.logger.info("llm_complete_success", response_len=len(result))
            return result
        except ProviderError:
            raise
        except Exception as exc:
            self.logger.error("llm_complete_error", error=str(exc))
            raise ProviderError(self.provider, str(exc)) from exc
