"""Skill generation pipeline -- turns one request into one skill record.

The :class:`SkillGenerator` handles a :class:`GenerationRequest` in stages:

1. Validate the request (no LLM call is made for a bad request).
2. In parallel via :func:`gather_or_cancel`: generate the skill document and,
   when blockchain integrations are requested, build the blockchain config.
3. Extract metadata from the document.
4. In parallel: generate supporting code files and test files.
5. Extract dependencies and run the :class:`SkillValidator`.
6. Assemble a frozen :class:`GeneratedSkillRecord`.

Any failing sub-task aborts the whole request and cancels its sibling.
Nothing is retried.
"""

from __future__ import annotations

import asyncio
import re
import time
from datetime import datetime, timezone
from typing import Callable

from agentforge.config import Settings, settings as default_settings
from agentforge.core.extraction.dependencies import extract_dependencies
from agentforge.core.extraction.metadata import extract_metadata
from agentforge.core.generation.blockchain import (
    build_blockchain_config,
    wants_blockchain_config,
)
from agentforge.core.generation.composer import (
    annotate_document,
    compose_code_prompt,
    compose_prompt,
    compose_test_prompt,
)
from agentforge.core.generation.models import (
    BlockchainConfig,
    CodeFile,
    Complexity,
    GeneratedSkillRecord,
    GenerationRequest,
    SkillMetadata,
    TestFile,
)
from agentforge.core.generation.prompts import DOCUMENT_SYSTEM_PROMPT, SUPPORT_SYSTEM_PROMPT
from agentforge.core.generation.request_validator import validate_request
from agentforge.core.generation.templates import TemplateRegistry
from agentforge.engine.validation import SkillValidator
from agentforge.utils.exceptions import GenerationFailedError, ProviderError
from agentforge.utils.logging import get_logger

# Features that call for a standalone implementation file.
CODE_FILE_FEATURES: frozenset[str] = frozenset({"api", "complex-logic"})

_RE_CODE_FENCE = re.compile(r"\A\s*```[\w+-]*[ \t]*\r?\n(.*?)\r?\n```\s*\Z", re.DOTALL)
_RE_WHITESPACE = re.compile(r"\s+")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def strip_code_fence(text: str) -> str:
    """Unwrap *text* if the whole of it is a single fenced code block."""
    match = _RE_CODE_FENCE.match(text)
    return match.group(1) if match else text


def file_stem(name: str) -> str:
    """Lowercase *name* and hyphenate whitespace for use in filenames."""
    return _RE_WHITESPACE.sub("-", name.strip().lower())


async def gather_or_cancel(*coros):
    """Run *coros* concurrently and return their results in order.

    On the first failure every unfinished sibling is cancelled and awaited
    before the exception is re-raised.
    """
    tasks = [asyncio.ensure_future(coro) for coro in coros]
    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    failed = next(
        (t for t in tasks if t in done and not t.cancelled() and t.exception()),
        None,
    )
    if failed is not None:
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        # Collect sibling failures so none is reported as never retrieved.
        for task in done:
            if task is not failed and not task.cancelled():
                task.exception()
        raise failed.exception()
    return [task.result() for task in tasks]


class SkillGenerator:
    """Top-level orchestrator for skill generation.

    Parameters
    ----------
    llm_client:
        Anything with an async ``complete(system, user, *, temperature,
        max_tokens)`` method, normally :class:`~agentforge.core.llm.client.LLMClient`.
    templates:
        The read-only :class:`TemplateRegistry` built at startup.
    validator:
        Optional :class:`SkillValidator`; one with the default scoring
        policy is created when not provided.
    settings:
        Generation options (temperatures, token limits, network).
    clock:
        Returns the timestamp written into the document header.
    """

    def __init__(
        self,
        llm_client,
        templates: TemplateRegistry,
        validator: SkillValidator | None = None,
        settings: Settings | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.llm = llm_client
        self.templates = templates
        self.validator = validator or SkillValidator()
        self.settings = settings or default_settings
        self.clock = clock or _utcnow
        self.logger = get_logger("engine.pipeline")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def generate_skill(self, request: GenerationRequest) -> GeneratedSkillRecord:
        """Generate, score and assemble a skill for *request*.

        Raises
        ------
        InvalidRequestError
            Before any LLM call, when the request is malformed.
        GenerationFailedError
            When a generation sub-task fails or returns empty content.
        """
        start = time.monotonic()
        validate_request(request)
        self.logger.info(
            "skill_generation_start",
            framework=request.framework,
            complexity=request.complexity_level.value,
            features=request.features,
        )

        document, blockchain_config = await gather_or_cancel(
            self._generate_document(request),
            self._generate_blockchain_config(request),
        )

        metadata = extract_metadata(document, request)

        code_files, test_files = await gather_or_cancel(
            self._generate_code_files(request, metadata),
            self._generate_test_files(request, metadata),
        )

        dependencies = extract_dependencies(document, code_files)
        validation = self.validator.validate(document, metadata, code_files)

        record = GeneratedSkillRecord(
            document=document,
            metadata=metadata.with_quality_score(validation.quality_score),
            code_files=code_files,
            test_files=test_files,
            dependencies=dependencies,
            validation=validation,
            blockchain_config=blockchain_config,
        )
        self.logger.info(
            "skill_generation_complete",
            skill=record.metadata.name,
            is_valid=validation.is_valid,
            code_files=len(code_files),
            test_files=len(test_files),
            dependencies=len(dependencies),
            duration=round(time.monotonic() - start, 4),
        )
        return record

    # ------------------------------------------------------------------
    # Sub-tasks
    # ------------------------------------------------------------------

    async def _generate_document(self, request: GenerationRequest) -> str:
        template = self.templates.get(request.framework)
        prompt = compose_prompt(request, template)
        content = await self._complete(
            "skill document",
            DOCUMENT_SYSTEM_PROMPT,
            prompt,
            temperature=self.settings.document_temperature,
            max_tokens=self.settings.document_max_tokens,
        )
        return annotate_document(content, request, self.clock())

    async def _generate_blockchain_config(
        self,
        request: GenerationRequest,
    ) -> BlockchainConfig | None:
        if not wants_blockchain_config(request):
            return None
        config = build_blockchain_config(request, self.settings.blockchain_network)
        self.logger.info(
            "blockchain_config_built",
            network=config.network.value,
            programs=[p.name for p in config.programs],
        )
        return config

    async def _generate_code_files(
        self,
        request: GenerationRequest,
        metadata: SkillMetadata,
    ) -> list[CodeFile]:
        # Simple skills are self-contained in the document.
        if request.complexity_level is Complexity.SIMPLE:
            return []
        if not CODE_FILE_FEATURES.intersection(request.features):
            return []

        content = await self._complete(
            "code files",
            SUPPORT_SYSTEM_PROMPT,
            compose_code_prompt(request, metadata),
            temperature=self.settings.support_temperature,
            max_tokens=self.settings.code_max_tokens,
        )
        return [
            CodeFile(
                filename=f"{file_stem(metadata.name)}.ts",
                content=strip_code_fence(content),
                type="typescript",
                purpose="main",
            )
        ]

    async def _generate_test_files(
        self,
        request: GenerationRequest,
        metadata: SkillMetadata,
    ) -> list[TestFile]:
        content = await self._complete(
            "test files",
            SUPPORT_SYSTEM_PROMPT,
            compose_test_prompt(request, metadata),
            temperature=self.settings.support_temperature,
            max_tokens=self.settings.test_max_tokens,
        )
        return [
            TestFile(
                filename=f"{file_stem(metadata.name)}.test.ts",
                content=strip_code_fence(content),
                type="unit",
            )
        ]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _complete(
        self,
        stage: str,
        system: str,
        user: str,
        *,
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Run one LLM call; errors and empty output fail the request."""
        try:
            content = await self.llm.complete(
                system,
                user,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except ProviderError as exc:
            self.logger.error("generation_call_failed", stage=stage, error=str(exc))
            raise GenerationFailedError(stage, str(exc)) from exc

        if not content or not content.strip():
            self.logger.error("generation_call_empty", stage=stage)
            raise GenerationFailedError(stage, "LLM returned empty response")
        return content
