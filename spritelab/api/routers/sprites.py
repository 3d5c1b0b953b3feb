"""Sprite API router - concept previews and sprite sheet generation."""

import logging
from typing import Union

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from spritelab.api.schemas.sprites import (
    ConceptResponse,
    ErrorResponse,
    GenerateRequest,
    SheetResponse,
)
from spritelab.api.services.sprite_service import SpriteService
from spritelab.sprites.atlas import CHARACTER_NAMES
from spritelab.sprites.bitmap import png_to_base64

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sprite", tags=["sprites"])


def get_sprite_service(request: Request) -> SpriteService:
    """Shared service created by create_app()."""
    return request.app.state.sprite_service


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/generate",
    response_model=Union[SheetResponse, ConceptResponse],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_sprite(
    body: GenerateRequest,
    service: SpriteService = Depends(get_sprite_service),
):
    """
    Generate a concept preview or a 576x24 sprite strip.

    Sheet responses include the atlas descriptor when a name is given.
    """
    if not body.prompt or not body.prompt.strip():
        return error_response(400, "Missing prompt")
    if body.name is not None and body.name not in CHARACTER_NAMES:
        return error_response(400, f"Unknown name: {body.name}")

    mode = "concept" if body.mode == "concept" else "sheet"

    try:
        if mode == "concept":
            preview = await service.generate_concept(body.prompt)
            return ConceptResponse(png_base64=png_to_base64(preview))

        strip, metadata = await service.generate_sheet(body.prompt, body.name)
        return SheetResponse(
            name=body.name,
            png_base64=png_to_base64(strip),
            metadata=metadata,
        )
    except Exception as e:
        logger.exception(f"Sprite generation failed ({mode})")
        return error_response(500, str(e) or "Internal error")
