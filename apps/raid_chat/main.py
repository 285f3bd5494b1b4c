"""RAID Chat Service Main Application.

FastAPI app factory and lifecycle management.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from raid_chat.presentation.http.controllers import chat_sessions_router
from raid_chat.presentation.http.errors import register_exception_handlers
from raid_chat.setup.config import get_settings
from raid_chat.setup.dependencies import get_container
from raid_chat.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """App lifecycle.

    Shutdown:
      - close the RAID API client
    """
    settings = get_settings()
    logger.info("RAID chat service starting...")
    logger.info(
        "Environment: %s, RAID API: %s",
        settings.environment,
        settings.api_base_url,
    )

    yield

    logger.info("RAID chat service shutting down...")
    await get_container().close()


def create_app() -> FastAPI:
    """FastAPI app factory.

    Returns:
        Configured FastAPI app
    """
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="RAID Chat API",
        description="Conversational RAID register assistant",
        version="1.0.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(chat_sessions_router, prefix="/api/v1")

    @app.get("/health")
    async def root_health():
        return {
            "status": "healthy",
            "service": settings.service_name,
            "environment": settings.environment,
        }

    return app


# App instance (uvicorn)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "raid_chat.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
