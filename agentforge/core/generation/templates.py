"""Per-framework skill templates.

A :class:`TemplateRegistry` is built once at startup and handed to the
generator; it is read-only afterwards, so concurrent requests can share it
without locking.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from agentforge.core.generation.models import Framework, SkillTemplate
from agentforge.utils.exceptions import TemplateNotFoundError
from agentforge.utils.logging import get_logger

logger = get_logger("generation.templates")

OPENCLAW_TEMPLATE = """---
name: skill-name
description: Brief description of what this skill does
version: 1.0.0
author: AgentForge
category: "general"
tags: ["tag1", "tag2"]
complexity: intermediate
requirements:
  node: ">=18.0.0"
  openclaw: ">=2.0.0"
dependencies: {}
---

# Skill Name

Brief description of the skill and its purpose.

## Features

- Feature 1
- Feature 2
- Feature 3

## Installation

```bash
# Installation instructions
```

## Usage

```javascript
// Basic usage example
```

## Configuration

| Option | Type | Default | Description |
|--------|------|---------|-------------|
| option1 | string | "default" | Description |

## API Reference

### Functions

#### functionName(param)

Description of the function.

**Parameters:**
- `param` (type): Description

**Returns:** Return type and description

**Example:**
```javascript
// Example usage
```

## Error Handling

Common errors and how to handle them.

## Performance Considerations

Tips for optimal performance.

## Security Notes

Security considerations and best practices.

## Troubleshooting

Common issues and solutions.

## Contributing

How to contribute to this skill.

## License

License information.
"""

# Frameworks without a full template still get an entry so generation is
# never blocked on missing template content.
_DEFAULT_TEMPLATES: dict[Framework, tuple[str, str]] = {
    Framework.OPENCLAW: ("OpenClaw Skill Template", OPENCLAW_TEMPLATE),
    Framework.LANGCHAIN: ("LangChain Skill Template", "<!-- LangChain skill template -->"),
    Framework.AUTOGEN: ("AutoGen Skill Template", "<!-- AutoGen skill template -->"),
}


class TemplateRegistry:
    """Immutable framework -> template lookup.

    Typical lifecycle::

        templates = TemplateRegistry.default()
        generator = SkillGenerator(llm_client, templates)
    """

    def __init__(self, templates: Iterable[SkillTemplate]) -> None:
        entries: dict[Framework, SkillTemplate] = {}
        for template in templates:
            if template.framework in entries:
                logger.warning("template_overwritten", framework=template.framework.value)
            entries[template.framework] = template
        self._templates: Mapping[Framework, SkillTemplate] = MappingProxyType(entries)

    @classmethod
    def default(cls) -> TemplateRegistry:
        """Build the registry with one entry per supported framework."""
        registry = cls(
            SkillTemplate(framework=framework, name=name, content=content)
            for framework, (name, content) in _DEFAULT_TEMPLATES.items()
        )
        logger.info("templates_initialized", count=len(registry))
        return registry

    def get(self, framework: Framework | str) -> SkillTemplate:
        """Return the template for *framework*.

        Raises :class:`TemplateNotFoundError` if no such template exists.
        """
        try:
            key = Framework(framework)
        except ValueError:
            raise TemplateNotFoundError(str(framework)) from None
        template = self._templates.get(key)
        if template is None:
            raise TemplateNotFoundError(key.value)
        return template

    def frameworks(self) -> list[Framework]:
        return list(self._templates)

    def list_all(self) -> list[SkillTemplate]:
        return list(self._templates.values())

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, framework: object) -> bool:
        try:
            return Framework(framework) in self._templates
        except ValueError:
            return False
