"""Front-matter metadata extraction.

Generated documents start with a ``---`` delimited header of ``key: value``
lines.  The LLM does not always produce a clean one, so extraction happens
in two stages:

1. :func:`parse_frontmatter` finds the header and pulls ``name``,
   ``description`` and ``version`` out of it, each field independently.
   Anything it cannot find comes back as ``None``.
2. :func:`extract_metadata` fills the gaps from the request.

:func:`extract_metadata` never raises; if anything goes wrong the metadata
is rebuilt from request-derived defaults and the recovery is logged.
"""

from __future__ import annotations

import re

from pydantic import BaseModel

from agentforge.core.generation.models import (
    GenerationRequest,
    SkillMetadata,
    SkillSummary,
)
from agentforge.utils.logging import get_logger

logger = get_logger("extraction.metadata")

SYSTEM_NAME = "agentforge"
SYSTEM_AUTHOR = "AgentForge"
DEFAULT_VERSION = "1.0.0"
MAX_SLUG_LENGTH = 50

# ---------------------------------------------------------------------------
# Regex patterns
# ---------------------------------------------------------------------------

_RE_FRONTMATTER = re.compile(
    r"\A\s*---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*\r?$",
    re.DOTALL | re.MULTILINE,
)
_RE_SLUG_DROP = re.compile(r"[^a-z0-9\s]")
_RE_WHITESPACE = re.compile(r"\s+")


def _field_pattern(label: str) -> re.Pattern[str]:
    return re.compile(
        rf"""^[ \t]*{re.escape(label)}[ \t]*:[ \t]*["']?([^"'\r\n]*)["']?""",
        re.IGNORECASE | re.MULTILINE,
    )


_FIELD_PATTERNS: dict[str, re.Pattern[str]] = {
    label: _field_pattern(label) for label in ("name", "description", "version")
}


class FrontmatterFields(BaseModel):
    """Best-effort values found in a header block; ``None`` means absent."""

    name: str | None = None
    description: str | None = None
    version: str | None = None


def slugify(text: str) -> str:
    """Turn a description into a skill name.

    Lowercase, drop everything but letters, digits and whitespace, join
    words with single hyphens, cut at 50 characters.
    """
    lowered = _RE_SLUG_DROP.sub("", text.lower())
    return _RE_WHITESPACE.sub("-", lowered.strip())[:MAX_SLUG_LENGTH]


def _find_field(header: str, label: str) -> str | None:
    match = _FIELD_PATTERNS[label].search(header)
    if match is None:
        return None
    value = match.group(1).strip()
    return value or None


def parse_frontmatter(text: str) -> FrontmatterFields | None:
    """Return the header fields of *text*, or ``None`` without a header."""
    match = _RE_FRONTMATTER.match(text or "")
    if match is None:
        return None
    header = match.group(1) or ""
    return FrontmatterFields(
        name=_find_field(header, "name"),
        description=_find_field(header, "description"),
        version=_find_field(header, "version"),
    )


def _build(request: GenerationRequest, fields: FrontmatterFields) -> SkillMetadata:
    features = list(request.features)
    return SkillMetadata(
        name=fields.name or slugify(request.description),
        description=fields.description or request.description,
        version=fields.version or DEFAULT_VERSION,
        author=SYSTEM_AUTHOR,
        tags=["generated", SYSTEM_NAME, *features],
        agentforge=SkillSummary(
            generated=True,
            quality_score=0,
            complexity=request.complexity_level,
            features=features,
        ),
    )


def extract_metadata(text: str, request: GenerationRequest) -> SkillMetadata:
    """Build :class:`SkillMetadata` for a generated document."""
    try:
        fields = parse_frontmatter(text)
        if fields is None:
            logger.warning(
                "metadata_extraction_recovered",
                reason="no frontmatter found in generated skill",
            )
            fields = FrontmatterFields()
        return _build(request, fields)
    except Exception as exc:
        logger.warning("metadata_extraction_recovered", reason=str(exc), exc_info=True)
        return _build(request, FrontmatterFields())
