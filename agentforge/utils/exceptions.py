class AgentForgeError(Exception):
    """Base exception for the skill generation system."""


class InvalidRequestError(AgentForgeError):
    """A generation request failed a structural precondition."""


class ProviderError(AgentForgeError):
    def __init__(self, provider: str, detail: str):
        self.provider = provider
        super().__init__(f"LLM error ({provider}): {detail}")


class GenerationFailedError(AgentForgeError):
    def __init__(self, stage: str, detail: str):
        self.stage = stage
        super().__init__(f"Skill generation failed during {stage}: {detail}")


class TemplateNotFoundError(GenerationFailedError):
    def __init__(self, framework: str):
        self.framework = framework
        super().__init__("template lookup", f"Template not found for framework: {framework}")


class SkillStorageError(AgentForgeError):
    pass
