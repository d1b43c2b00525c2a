"""Generation engine -- orchestrates skill generation and scoring.

Public API::

    from agentforge.engine import (
        ScoringPolicy,
        SkillGenerator,
        SkillValidator,
    )
"""

from agentforge.engine.pipeline import SkillGenerator
from agentforge.engine.validation import ScoringPolicy, SkillValidator

__all__ = [
    "ScoringPolicy",
    "SkillGenerator",
    "SkillValidator",
]
