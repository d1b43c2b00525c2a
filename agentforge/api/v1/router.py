from fastapi import APIRouter

from agentforge.api.v1.endpoints import health, skills, templates

v1_router = APIRouter()
v1_router.include_router(health.router, tags=["health"])
v1_router.include_router(templates.router, tags=["templates"])
v1_router.include_router(skills.router, tags=["skills"])
