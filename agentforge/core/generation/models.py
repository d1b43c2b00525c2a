"""Data models for skill generation.

Requests come in as :class:`GenerationRequest`; everything the generator
produces ends up inside one frozen :class:`GeneratedSkillRecord`.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Framework(str, Enum):
    """Agent frameworks a skill can be generated for."""

    OPENCLAW = "openclaw"
    LANGCHAIN = "langchain"
    AUTOGEN = "autogen"


class Complexity(str, Enum):
    """Complexity levels; they only change prompt guidance."""

    SIMPLE = "simple"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @classmethod
    def coerce(cls, value: str | None) -> Complexity:
        """Return the matching level, or ``INTERMEDIATE`` for anything else."""
        if value is None:
            return cls.INTERMEDIATE
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.INTERMEDIATE


class BlockchainNetwork(str, Enum):
    MAINNET_BETA = "mainnet-beta"
    DEVNET = "devnet"
    TESTNET = "testnet"


class GenerationRequest(BaseModel):
    """A natural-language request for a skill.

    ``framework`` and ``complexity`` are kept as plain strings here; the
    request validator decides whether the framework is supported and
    unknown complexity values fall back to ``intermediate``.
    """

    model_config = ConfigDict(frozen=True)

    description: str
    framework: str = Framework.OPENCLAW.value
    features: list[str] = Field(default_factory=list)
    integrations: list[str] | None = None
    complexity: str | None = None

    @property
    def framework_kind(self) -> Framework:
        """The framework as a :class:`Framework`.

        Raises ``ValueError`` for unsupported values.
        """
        return Framework(self.framework)

    @property
    def complexity_level(self) -> Complexity:
        return Complexity.coerce(self.complexity)

    @property
    def integration_tags(self) -> list[str]:
        return list(self.integrations or [])


class SkillTemplate(BaseModel):
    """Prompt template for one framework."""

    model_config = ConfigDict(frozen=True)

    framework: Framework
    name: str
    content: str


class CodeFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str
    content: str
    type: Literal["typescript", "javascript", "python", "rust", "markdown"] = "typescript"
    purpose: Literal["main", "util", "test", "config", "type"] = "main"


class TestFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Not a pytest test class.
    __test__ = False

    filename: str
    content: str
    type: Literal["unit", "integration", "e2e"] = "unit"
    coverage: float | None = None


class SkillSummary(BaseModel):
    """Generation summary embedded in :class:`SkillMetadata`."""

    model_config = ConfigDict(frozen=True)

    generated: bool = True
    quality_score: int = 0
    complexity: Complexity = Complexity.INTERMEDIATE
    features: list[str] = Field(default_factory=list)


class SkillMetadata(BaseModel):
    """Identity and tags of a generated skill.

    Attributes:
        name: Slug used as the skill's directory name.
        description: Human-readable summary.
        version: Semantic version, ``1.0.0`` unless the document says otherwise.
        author: Always the system identity.
        tags: ``generated``, the system name, then the request's features.
        agentforge: Generation summary; its quality score is filled in
            once, after validation.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    version: str = "1.0.0"
    author: str = "AgentForge"
    tags: list[str] = Field(default_factory=list)
    homepage: str | None = None
    dependencies: dict[str, str] | None = None
    agentforge: SkillSummary = Field(default_factory=SkillSummary)

    def with_quality_score(self, score: int) -> SkillMetadata:
        summary = self.agentforge.model_copy(update={"quality_score": score})
        return self.model_copy(update={"agentforge": summary})


class ValidationResult(BaseModel):
    """Findings and scores for one generated skill."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    quality_score: int = Field(ge=0, le=100)
    security_score: int = Field(ge=0, le=100)
    performance_score: int = Field(ge=0, le=100)

    @model_validator(mode="after")
    def _validity_matches_errors(self) -> ValidationResult:
        if self.is_valid != (len(self.errors) == 0):
            raise ValueError("is_valid must be true exactly when errors is empty")
        return self


class ProgramReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    address: str


class TokenConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbol: str
    mint: str
    decimals: int


class BlockchainConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    network: BlockchainNetwork = BlockchainNetwork.DEVNET
    programs: list[ProgramReference] = Field(default_factory=list)
    tokens: list[TokenConfig] = Field(default_factory=list)


class GeneratedSkillRecord(BaseModel):
    """Everything produced for one request; never mutated after assembly."""

    model_config = ConfigDict(frozen=True)

    document: str
    metadata: SkillMetadata
    code_files: list[CodeFile] = Field(default_factory=list)
    test_files: list[TestFile] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
    validation: ValidationResult
    blockchain_config: BlockchainConfig | None = None
