"""API routers for different resource types."""

from spritelab.api.routers.sprites import router as sprites_router

__all__ = [
    "sprites_router",
]
