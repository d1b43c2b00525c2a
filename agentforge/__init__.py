"""AgentForge -- generate scored agent skills from natural-language requests."""

__version__ = "0.1.0"
