"""Schemas for the sprite generation API."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

CharacterName = Literal["doux", "mort", "targ", "vita"]


class GenerateRequest(BaseModel):
    """Request to generate a concept preview or a sprite sheet."""
    # Checked in the route so bad values get the same {error} body as other failures
    name: Optional[str] = None
    prompt: Optional[str] = None
    mode: Optional[str] = "sheet"  # anything but "concept" generates a sheet

    class Config:
        json_schema_extra = {
            "example": {
                "name": "mort",
                "prompt": "a tiny green dinosaur with a red scarf",
                "mode": "sheet",
            }
        }


class ConceptResponse(BaseModel):
    """Single upscaled preview image."""
    mode: Literal["concept"] = "concept"
    png_base64: str = Field(..., alias="pngBase64")

    class Config:
        populate_by_name = True


class SheetResponse(BaseModel):
    """576x24 sprite strip plus its atlas descriptor."""
    mode: Literal["sheet"] = "sheet"
    name: Optional[CharacterName] = None
    png_base64: str = Field(..., alias="pngBase64")
    metadata: dict = Field(default_factory=dict)

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    """Error body returned for 400/500 responses."""
    error: str
