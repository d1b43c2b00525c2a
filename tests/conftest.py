import asyncio
from datetime import datetime, timezone

import pytest

from agentforge.core.generation.models import GenerationRequest
from agentforge.core.generation.templates import TemplateRegistry
from agentforge.engine.pipeline import SkillGenerator
from agentforge.utils.exceptions import ProviderError

FIXED_TIME = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


class FakeLLMClient:
    """Scripted stand-in for :class:`LLMClient`.

    Responses are chosen by which kind of prompt arrives: the skill
    document, the implementation file, or the test file.
    """

    def __init__(self, document="", code="", tests="", fail_on=(), delay=0.0, delays=None):
        self.responses = {"document": document, "code": code, "tests": tests}
        self.fail_on = set(fail_on)
        self.delay = delay
        self.delays = delays or {}
        self.finished: list[str] = []
        self.calls: list[dict] = []
        self.in_flight = 0
        self.max_in_flight = 0

    @staticmethod
    def _kind(user: str) -> str:
        if "Generate the implementation:" in user:
            return "code"
        if "Generate the test file:" in user:
            return "tests"
        return "document"

    def count(self, kind: str) -> int:
        return sum(1 for call in self.calls if call["kind"] == kind)

    async def complete(self, system, user, *, temperature=None, max_tokens=None):
        kind = self._kind(user)
        self.calls.append(
            {
                "kind": kind,
                "system": system,
                "user": user,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(kind, self.delay))
            if kind in self.fail_on:
                raise ProviderError("fake", f"{kind} call failed")
            self.finished.append(kind)
            return self.responses[kind]
        finally:
            self.in_flight -= 1


@pytest.fixture
def sample_skill_md():
    return """---
name: weather-pro
description: "Professional weather forecasting"
version: 2.1.0
author: Someone Else
---

# Weather Pro

## Installation

```bash
npm install weather-pro
```

## Usage

```javascript
import axios from 'axios';
const { format } = require('date-fns');

try {
  await forecast('Berlin');
} catch (err) {
  console.error(err);
}
```

## Troubleshooting

Check your API key.
"""


@pytest.fixture
def nameless_skill_md():
    return """---
description: Forecasts the weather
version: 1.2.0
---

# Weather

## Usage

```javascript
import axios from 'axios';
try { run(); } catch (e) { report(e); }
```
"""


@pytest.fixture
def code_response():
    return "```typescript\nimport axios from 'axios';\nexport async function run() {\n  try { return await axios.get('/'); } catch (e) { throw e; }\n}\n```"


@pytest.fixture
def test_response():
    return "import { run } from './weather-forecasting-skill';\ntest('runs', async () => { await run(); });"


@pytest.fixture
def weather_request():
    return GenerationRequest(
        description="weather forecasting skill",
        framework="openclaw",
        features=["api"],
    )


@pytest.fixture
def templates():
    return TemplateRegistry.default()


@pytest.fixture
def fake_llm(nameless_skill_md, code_response, test_response):
    return FakeLLMClient(
        document=nameless_skill_md,
        code=code_response,
        tests=test_response,
    )


@pytest.fixture
def generator(fake_llm, templates):
    return SkillGenerator(fake_llm, templates, clock=lambda: FIXED_TIME)


@pytest.fixture
def output_dir(tmp_path):
    out = tmp_path / "generated-skills"
    out.mkdir()
    return out


@pytest.fixture
def llm_factory():
    return FakeLLMClient
