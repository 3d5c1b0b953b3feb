"""FastAPI application for SpriteLab."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from spritelab import __version__
from spritelab.api.routers import sprites_router
from spritelab.api.services import SpriteService
from spritelab.config import Settings, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    for problem in app.state.settings.validate():
        logger.warning(f"Configuration problem: {problem}")
    logger.info("SpriteLab API starting up...")
    yield
    # Shutdown
    logger.info("SpriteLab API shutting down...")
    await app.state.sprite_service.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="SpriteLab API",
        description="Prompt-to-sprite-atlas generation",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.sprite_service = SpriteService(settings)

    # Configure CORS for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(sprites_router, prefix="/api")

    @app.get("/")
    async def root() -> dict:
        """Root endpoint - API info."""
        return {
            "name": "SpriteLab API",
            "version": __version__,
            "description": "Prompt-to-sprite-atlas generation",
            "docs": "/docs",
        }

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "api_key_configured": bool(app.state.settings.openai_api_key),
            "detector": app.state.settings.detector,
        }

    return app


# Create app instance
app = create_app()


def run_api(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Run the API server."""
    uvicorn.run(
        "spritelab.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    run_api(reload=True)
