"""OpenAI provider for the LLM client abstraction.

Wraps the async ``openai`` SDK client to expose the ``complete`` interface
expected by :class:`~agentforge.core.llm.client.LLMClient`.
"""

from __future__ import annotations

from agentforge.utils.exceptions import ProviderError
from agentforge.utils.logging import get_logger

logger = get_logger("llm.openai")


class OpenAIProvider:
    """Provider implementation for OpenAI models.

    Parameters
    ----------
    api_key:
        OpenAI API key.
    model:
        Model identifier, e.g. ``"gpt-4o"``.
    """

    MAX_TOKENS = 4096

    def __init__(self, api_key: str, model: str):
        try:
            import openai
        except ImportError as exc:
            raise ProviderError(
                "openai",
                "The 'openai' package is not installed. "
                "Install it with: pip install openai",
            ) from exc

        if not api_key:
            raise ProviderError("openai", "API key is required but was empty.")

        self.client = openai.AsyncOpenAI(api_key=api_key)
        self.model = model

    async def complete(
        self,
        system: str,
        user: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Call the OpenAI chat completions API and return the text response."""
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
            logger.error("openai_complete_error", error=str(exc))
            raise ProviderError("openai", str(exc)) from exc

        choice = response.choices[0] if response.choices else None
        if choice and choice.message and choice.message.content:
            return choice.message.content
        return ""
