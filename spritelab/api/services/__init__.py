"""API services for sprite generation."""

from spritelab.api.services.sprite_service import SpriteService

__all__ = ["SpriteService"]
