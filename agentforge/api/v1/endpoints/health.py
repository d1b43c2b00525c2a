from fastapi import APIRouter

from agentforge import __version__

router = APIRouter()


@router.get("/health")
async def health_check():
    return {"status": "healthy", "service": "agentforge", "version": __version__}
