"""Anthropic Claude provider for the LLM client abstraction.

Wraps the async ``anthropic`` SDK client to expose the ``complete``
interface expected by :class:`~agentforge.core.llm.client.LLMClient`.
"""

from __future__ import annotations

from agentforge.utils.exceptions import ProviderError
from agentforge.utils.logging import get_logger

logger = get_logger("llm.anthropic")


class AnthropicProvider:
    """Provider implementation for Anthropic Claude models.

    Parameters
    ----------
    api_key:
        Anthropic API key.
    model:
        Model identifier, e.g. ``"claude-sonnet-4-20250514"``.
    """

    MAX_TOKENS = 4096

    def __init__(self, api_key: str, model: str):
        try:
            import anthropic
        except ImportError as exc:
            raise ProviderError(
                "anthropic",
                "The 'anthropic' package is not installed. "
                "Install it with: pip install anthropic",
            ) from exc

        if not api_key:
            raise ProviderError("anthropic", "API key is required but was empty.")

        self.client = anthropic.AsyncAnthropic(api_key=api_key)
        self.model = model

    async def complete(
        self,
        system: str,
        user: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Call Claude and return the text of every content block, joined."""
        kwargs = {}
        if temperature is not None:
            kwargs["temperature"] = temperature
        try:
            message = await self.client.messages.create(
                model=self.model,
                max_tokens=max_tokens or self.MAX_TOKENS,
                system=system,
                messages=[{"role": "user", "content": user}],
                **kwargs,
            )
        except Exception as exc:
            logger.error("anthropic_complete_error", error=str(exc))
            raise ProviderError("anthropic", str(exc)) from exc

        return "".join(
            block.text for block in message.content if getattr(block, "type", "") == "text"
        )
