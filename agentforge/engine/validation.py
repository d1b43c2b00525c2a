"""Quality, security and performance scoring for generated skills.

:class:`SkillValidator` runs four passes over a skill and folds them into a
:class:`ValidationResult`:

1. **top-level** -- header block and skill name are present.
2. **security** -- risky constructs from :data:`SECURITY_PATTERNS`, plus
   missing error handling.
3. **performance** -- uncancelled intervals and timeout chains.
4. **documentation** -- bonus points for well-known sections.

Each score starts at 100 and is clamped to ``[0, 100]``.  Findings are
plain data; a low score or ``is_valid=False`` never raises.  Nothing here
depends on time or randomness, so identical inputs give identical results.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Literal

from pydantic import BaseModel

from agentforge.core.extraction.metadata import parse_frontmatter
from agentforge.core.generation.models import CodeFile, SkillMetadata, ValidationResult
from agentforge.utils.logging import get_logger

logger = get_logger("engine.validation")

MAX_SCORE = 100
MIN_SCORE = 0


class ScoringPolicy(BaseModel):
    """Point values used by the validator.

    Higher deductions mean more severe findings; the numbers themselves
    carry no further meaning.
    """

    missing_frontmatter: int = 20
    missing_name: int = 15
    eval_usage: int = 30
    exec_usage: int = 25
    inner_html: int = 15
    unvalidated_env: int = 5
    missing_error_handling: int = 10
    uncleared_interval: int = 10
    timeout_threshold: int = 4
    usage_bonus: int = 5
    installation_bonus: int = 3
    troubleshooting_bonus: int = 5
    code_block_bonus: int = 3


@dataclass(frozen=True)
class SecurityPattern:
    """One row of the security table."""

    pattern: re.Pattern[str]
    message: str
    severity: Literal["error", "warning"]
    policy_field: str


# Order matters: findings are reported in table order.
SECURITY_PATTERNS: tuple[SecurityPattern, ...] = (
    SecurityPattern(
        pattern=re.compile(r"\beval\s*\("),
        message="eval() usage detected - security risk",
        severity="error",
        policy_field="eval_usage",
    ),
    SecurityPattern(
        pattern=re.compile(r"\bexec\s*\("),
        message="exec() usage detected - potential command injection",
        severity="error",
        policy_field="exec_usage",
    ),
    SecurityPattern(
        pattern=re.compile(r"\binnerHTML\s*="),
        message="innerHTML usage - potential XSS risk",
        severity="error",
        policy_field="inner_html",
    ),
    SecurityPattern(
        pattern=re.compile(r"process\.env\.\w+"),
        message="Environment variable usage without validation",
        severity="warning",
        policy_field="unvalidated_env",
    ),
)


@dataclass
class PassResult:
    """Findings and score change from a single validation pass."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    deduction: int = 0
    bonus: int = 0


def _clamp(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def combine_content(document: str, code_files: Iterable[CodeFile]) -> str:
    """Join the document and every code file into one scan target."""
    return "\n".join([document, *(f.content for f in code_files)])


class SkillValidator:
    """Stateless scorer for generated skills.

    Parameters
    ----------
    policy:
        Point values for each finding; defaults to :class:`ScoringPolicy`.
    """

    def __init__(self, policy: ScoringPolicy | None = None) -> None:
        self.policy = policy or ScoringPolicy()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(
        self,
        document: str,
        metadata: SkillMetadata,
        code_files: Iterable[CodeFile] = (),
    ) -> ValidationResult:
        """Score *document* and *code_files* and collect findings."""
        code_files = list(code_files)
        content = combine_content(document, code_files)

        top_level = self._check_structure(document, metadata)
        security = self._check_security(content)
        performance = self._check_performance(content)
        documentation = self._check_documentation(document)

        passes = (top_level, security, performance, documentation)
        errors = [e for p in passes for e in p.errors]
        warnings = [w for p in passes for w in p.warnings]
        suggestions = [s for p in passes for s in p.suggestions]

        result = ValidationResult(
            is_valid=not errors,
            errors=errors,
            warnings=warnings,
            suggestions=suggestions,
            quality_score=_clamp(MAX_SCORE - top_level.deduction + documentation.bonus),
            security_score=_clamp(MAX_SCORE - security.deduction),
            performance_score=_clamp(MAX_SCORE - performance.deduction),
        )
        logger.info(
            "validation_complete",
            skill=metadata.name,
            is_valid=result.is_valid,
            quality=result.quality_score,
            security=result.security_score,
            performance=result.performance_score,
        )
        return result

    def validate_document(
        self,
        document: str,
        code_files: Iterable[CodeFile] = (),
    ) -> ValidationResult:
        """Validate an existing skill file.

        Only what the header block says is used; nothing is filled in from
        defaults, so a missing name is reported.
        """
        fields = parse_frontmatter(document)
        metadata = SkillMetadata(
            name=(fields.name if fields else None) or "",
            description=(fields.description if fields else None) or "",
            version=(fields.version if fields else None) or "1.0.0",
        )
        return self.validate(document, metadata, code_files)

    # ------------------------------------------------------------------
    # Passes
    # ------------------------------------------------------------------

    def _check_structure(self, document: str, metadata: SkillMetadata) -> PassResult:
        result = PassResult()
        if "---" not in document:
            result.errors.append("Missing YAML frontmatter")
            result.deduction += self.policy.missing_frontmatter
        if not metadata.name:
            result.errors.append("Missing skill name")
            result.deduction += self.policy.missing_name
        return result

    def _check_security(self, content: str) -> PassResult:
        result = PassResult()
        for row in SECURITY_PATTERNS:
            if not row.pattern.search(content):
                continue
            if row.severity == "error":
                result.errors.append(row.message)
            else:
                result.warnings.append(row.message)
            result.deduction += getattr(self.policy, row.policy_field)

        if "try" not in content and "catch" not in content:
            result.warnings.append("No error handling detected")
            result.deduction += self.policy.missing_error_handling
        return result

    def _check_performance(self, content: str) -> PassResult:
        result = PassResult()
        if "setInterval" in content and "clearInterval" not in content:
            result.warnings.append("setInterval without clearInterval - potential memory leak")
            result.deduction += self.policy.uncleared_interval

        if content.count("setTimeout") > self.policy.timeout_threshold:
            result.suggestions.append(
                "Consider using async/await instead of multiple setTimeout calls"
            )
        return result

    def _check_documentation(self, document: str) -> PassResult:
        result = PassResult()
        if "## Usage" in document or "## Example" in document:
            result.bonus += self.policy.usage_bonus
        if "## Installation" in document:
            result.bonus += self.policy.installation_bonus
        if "## Troubleshooting" in document or "## FAQ" in document:
            result.bonus += self.policy.troubleshooting_bonus
        if "```" in document:
            result.bonus += self.policy.code_block_bonus

        if "##" not in document:
            result.suggestions.append("Consider adding section headers for better organization")
        return result
