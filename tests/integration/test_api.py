"""Integration tests for API endpoints."""
import pytest
from httpx import AsyncClient, ASGITransport

from agentforge import dependencies
from agentforge.core.generation.templates import TemplateRegistry
from agentforge.dependencies import get_output_manager, get_skill_generator
from agentforge.engine.pipeline import SkillGenerator
from agentforge.main import create_app
from agentforge.output.manager import SkillOutputManager


@pytest.fixture
def app(fake_llm, output_dir):
    application = create_app()
    # Manually initialize the template registry since lifespan doesn't run in test
    registry = TemplateRegistry.default()
    application.state.template_registry = registry
    application.state.llm = fake_llm
    application.dependency_overrides[get_skill_generator] = lambda: SkillGenerator(
        application.state.llm, registry
    )
    application.dependency_overrides[get_output_manager] = lambda: SkillOutputManager(output_dir)
    return application


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "agentforge"


@pytest.mark.asyncio
async def test_list_templates(client):
    response = await client.get("/api/v1/templates")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert {t["framework"] for t in data["templates"]} == {"openclaw", "langchain", "autogen"}


@pytest.mark.asyncio
async def test_generate_skill(client, fake_llm):
    response = await client.post(
        "/api/v1/skills/generate",
        json={"description": "weather forecasting skill", "features": ["api"]},
    )
    assert response.status_code == 200
    data = response.json()
    skill = data["skill"]
    assert skill["metadata"]["name"] == "weather-forecasting-skill"
    assert skill["dependencies"] == ["axios"]
    assert skill["validation"]["is_valid"] is True
    assert len(skill["code_files"]) == 1
    assert data["saved"] is None
    assert len(fake_llm.calls) == 3


@pytest.mark.asyncio
async def test_generate_empty_description(client, fake_llm):
    response = await client.post("/api/v1/skills/generate", json={"description": ""})
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "InvalidRequestError"
    assert "description is required" in data["detail"]
    assert fake_llm.calls == []


@pytest.mark.asyncio
async def test_generate_unsupported_framework(client):
    response = await client.post(
        "/api/v1/skills/generate",
        json={"description": "weather", "framework": "crewai"},
    )
    assert response.status_code == 400
    assert "Unsupported framework: crewai" in response.json()["detail"]


@pytest.mark.asyncio
async def test_generate_provider_failure(app, client, llm_factory):
    app.state.llm = llm_factory(fail_on={"document"})
    response = await client.post("/api/v1/skills/generate", json={"description": "weather"})
    assert response.status_code == 502
    data = response.json()
    assert data["error"] == "GenerationFailedError"
    assert "skill document" in data["detail"]


@pytest.mark.asyncio
async def test_generate_without_llm_configured(app, client, monkeypatch):
    app.dependency_overrides.pop(get_skill_generator)
    monkeypatch.setattr(dependencies, "get_llm_client", lambda: None)
    response = await client.post("/api/v1/skills/generate", json={"description": "weather"})
    assert response.status_code == 503
    assert "No LLM provider configured" in response.json()["detail"]


@pytest.mark.asyncio
async def test_generate_and_list_saved(client, output_dir):
    response = await client.post(
        "/api/v1/skills/generate",
        json={"description": "weather forecasting skill", "features": ["api"], "save": True},
    )
    assert response.status_code == 200
    saved = response.json()["saved"]
    assert saved["name"] == "weather-forecasting-skill"
    assert (output_dir / "weather-forecasting-skill" / "SKILL.md").is_file()

    response = await client.get("/api/v1/skills")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["skills"][0]["name"] == "weather-forecasting-skill"


@pytest.mark.asyncio
async def test_list_skills_empty(client):
    response = await client.get("/api/v1/skills")
    assert response.status_code == 200
    assert response.json() == {"skills": [], "total": 0}


@pytest.mark.asyncio
async def test_validate_skill(client, sample_skill_md):
    response = await client.post(
        "/api/v1/skills/validate",
        json={
            "content": sample_skill_md,
            "code_files": [{"filename": "weather.ts", "content": "eval(input);"}],
        },
    )
    assert response.status_code == 200
    validation = response.json()["validation"]
    assert validation["is_valid"] is False
    assert validation["errors"] == ["eval() usage detected - security risk"]
    assert validation["security_score"] == 70
