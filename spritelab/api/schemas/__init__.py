"""Pydantic schemas for the SpriteLab API."""

from spritelab.api.schemas.sprites import (
    CharacterName,
    ConceptResponse,
    ErrorResponse,
    GenerateRequest,
    SheetResponse,
)

__all__ = [
    "CharacterName",
    "ConceptResponse",
    "ErrorResponse",
    "GenerateRequest",
    "SheetResponse",
]
