"""Prompt text for skill generation.

These templates are consumed by :mod:`agentforge.core.generation.composer`
to build the exact messages sent to the LLM.  Every mapping here is keyed
by an enum and covers all of its members.
"""

from agentforge.core.generation.models import Complexity, Framework

DOCUMENT_SYSTEM_PROMPT: str = """You are an expert AI agent developer and OpenClaw specialist. Your skills are:
- Deep knowledge of OpenClaw architecture and best practices
- Expertise in TypeScript, Node.js, and modern development patterns
- Understanding of AI agent patterns and frameworks
- Knowledge of Solana blockchain development when applicable
- Security-first coding practices
- Performance optimization techniques

Generate production-ready, well-documented, and secure skills that follow all best practices."""

SUPPORT_SYSTEM_PROMPT: str = (
    "You are an expert TypeScript developer writing supporting files for an "
    "AI agent skill. Return only the file contents."
)

COMPLEXITY_GUIDELINES: dict[Complexity, str] = {
    Complexity.SIMPLE: "Focus on single responsibility, minimal dependencies, easy to understand",
    Complexity.INTERMEDIATE: "Include error handling, configuration options, moderate complexity",
    Complexity.ADVANCED: "Full feature set, comprehensive error handling, extensible architecture",
}

FRAMEWORK_GUIDANCE: dict[Framework, str] = {
    Framework.OPENCLAW: "Use OpenClaw conventions, leverage available tools, integrate with OpenClaw ecosystem",
    Framework.LANGCHAIN: "Follow LangChain patterns, use chains and agents appropriately",
    Framework.AUTOGEN: "Implement multi-agent conversation patterns, use AutoGen framework",
}

MANDATORY_REQUIREMENTS: list[str] = [
    "Include complete YAML frontmatter with all metadata",
    "Provide comprehensive documentation with examples",
    "Include proper error handling and edge cases",
    "Add security considerations and best practices",
    "Include performance considerations",
    "Provide clear installation and usage instructions",
    "Include troubleshooting section",
    "Add links to relevant documentation",
]

BLOCKCHAIN_REQUIREMENTS: str = """SOLANA REQUIREMENTS:
- Include proper wallet connection handling
- Use recommended RPC providers
- Include transaction error handling
- Add slippage and fee considerations
- Include network selection (mainnet/devnet)
"""

DOCUMENT_USER_TEMPLATE: str = """Generate a production-ready {framework} skill for: "{description}"

REQUIREMENTS:
- Framework: {framework}
- Features: {features}
- Complexity: {complexity}
- Integrations: {integrations}

COMPLEXITY GUIDELINES:
{complexity_guidelines}

FRAMEWORK SPECIFICS:
{framework_guidance}

MANDATORY REQUIREMENTS:
{mandatory_requirements}

{blockchain_requirements}
TEMPLATE STRUCTURE:
{template}

Generate the complete, production-ready skill.md file:"""

CODE_USER_TEMPLATE: str = """Generate a TypeScript implementation file for the {name} skill.

Description: {description}
Features: {features}

Create a well-structured, documented TypeScript file with:
- Clear interface definitions
- Error handling
- Type safety
- Modular design
- Best practices

Generate the implementation:"""

TEST_USER_TEMPLATE: str = """Generate comprehensive test cases for the {name} skill.

Description: {description}
Features: {features}

Create Jest/TypeScript test file with:
- Unit tests for core functionality
- Edge case testing
- Error condition testing
- Integration tests if applicable
- Clear test descriptions

Generate the test file:"""
