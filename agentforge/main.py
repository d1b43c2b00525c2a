from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agentforge import __version__
from agentforge.api.v1.middleware.error_handler import ErrorHandlerMiddleware
from agentforge.api.v1.middleware.logging_middleware import LoggingMiddleware
from agentforge.api.v1.router import v1_router
from agentforge.config import settings
from agentforge.core.generation.templates import TemplateRegistry
from agentforge.utils.logging import get_logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(debug=settings.debug)
    logger = get_logger("startup")
    logger.info("Starting AgentForge", version=__version__)

    app.state.template_registry = TemplateRegistry.default()
    logger.info("Template registry initialized", frameworks=len(app.state.template_registry))

    yield

    logger.info("Shutting down")


def create_app() -> FastAPI:
    app = FastAPI(
        title="AgentForge",
        description="AI-powered skill generation for agent frameworks",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware is applied in reverse order -- outermost first.
    # 1. CORS (outermost -- handles preflight before anything else)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # 2. Error handler (catches exceptions from inner layers)
    app.add_middleware(ErrorHandlerMiddleware)
    # 3. Request/response logger (innermost -- logs timing around handler)
    app.add_middleware(LoggingMiddleware)

    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()
