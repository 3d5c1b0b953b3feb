"""
Sprite service - generation with transparency retries, then post-processing.

One instance is created per application and shared by requests; it holds
no per-request state.
"""

import asyncio
import logging
from typing import Optional

from spritelab.ai.client import OpenAIImageClient
from spritelab.ai.prompts import GenerationMode
from spritelab.config import Settings
from spritelab.errors import TransparencyUnmet
from spritelab.sprites import build_atlas, get_detector, has_any_transparency, resize_preview, slice_sheet

logger = logging.getLogger(__name__)


class SpriteService:
    """Turns prompts into concept previews and sprite strips."""

    def __init__(self, settings: Settings, client: Optional[OpenAIImageClient] = None):
        self.settings = settings
        self.detector = get_detector(settings.detector)
        self._client = client

    @property
    def client(self) -> OpenAIImageClient:
        """Image client, created on first use so a missing key fails per request."""
        if self._client is None:
            self._client = OpenAIImageClient(
                api_key=self.settings.openai_api_key,
                model=self.settings.model,
                size=self.settings.image_size,
                base_url=self.settings.openai_base_url,
                max_retries=self.settings.max_retries,
                retry_delay=self.settings.retry_delay,
                timeout=self.settings.request_timeout,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()

    async def generate_raw(self, prompt: str, mode: GenerationMode, strict: bool = False) -> bytes:
        """
        Generate an image, retrying while the result is fully opaque.

        The generator sometimes ignores the transparent-background request.
        After transparency_attempts opaque results the last one is returned
        anyway, unless strict is set.

        Raises:
            TransparencyUnmet: Only when strict=True and every attempt was opaque.
        """
        attempts = max(1, self.settings.transparency_attempts)
        image: Optional[bytes] = None

        for attempt in range(1, attempts + 1):
            result = await self.client.generate(prompt, mode)
            image = result.png
            if await asyncio.to_thread(has_any_transparency, image):
                return image
            logger.warning(f"Generated image is fully opaque (attempt {attempt}/{attempts})")

        error = TransparencyUnmet(f"All {attempts} attempts returned a fully opaque image", attempts)
        if strict:
            raise error
        logger.warning(f"{error}; using the last attempt")
        return image

    async def generate_concept(self, prompt: str) -> bytes:
        """Generate a single character and return a 128x128 preview PNG."""
        raw = await self.generate_raw(prompt, "concept")
        return await asyncio.to_thread(resize_preview, raw)

    async def generate_sheet(self, prompt: str, name: Optional[str] = None) -> tuple[bytes, dict]:
        """
        Generate a sheet and slice it into the strip.

        Returns:
            (strip PNG bytes, atlas metadata or {} when no name is given)
        """
        raw = await self.generate_raw(prompt, "sheet")
        strip = await asyncio.to_thread(slice_sheet, raw, self.detector)
        metadata = build_atlas(name) if name else {}
        return strip, metadata
