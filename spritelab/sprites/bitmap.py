"""
Bitmap helpers - decoding, alpha checks and PNG encoding.
"""

import base64
import io
from typing import Union

import numpy as np
from PIL import Image

from spritelab.errors import InvalidInput
from spritelab.sprites.constants import PREVIEW_SIZE

BitmapSource = Union[bytes, Image.Image, np.ndarray]


def open_image(data: bytes) -> Image.Image:
    """Decode encoded image bytes into an RGBA Pillow image."""
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (OSError, ValueError) as e:
        raise InvalidInput(f"Could not decode image: {e}") from e
    return image.convert("RGBA")


def to_rgba_array(source: BitmapSource) -> np.ndarray:
    """
    Convert a bitmap into an H x W x 4 uint8 array.

    Images without an alpha channel are treated as fully opaque.

    Raises:
        InvalidInput: If the array has an unsupported channel count or is empty.
    """
    if isinstance(source, (bytes, bytearray)):
        source = open_image(bytes(source))

    if isinstance(source, Image.Image):
        if source.mode != "RGBA":
            source = source.convert("RGBA")
        pixels = np.array(source, dtype=np.uint8)
    else:
        pixels = np.asarray(source)
        if pixels.ndim == 2:
            pixels = pixels[:, :, np.newaxis].repeat(3, axis=2)
        if pixels.ndim != 3:
            raise InvalidInput(f"Expected a 2-D or 3-D pixel array, got {pixels.ndim} dimensions")

        channels = pixels.shape[2]
        if channels == 3:
            alpha = np.full(pixels.shape[:2] + (1,), 255, dtype=np.uint8)
            pixels = np.concatenate([pixels.astype(np.uint8), alpha], axis=2)
        elif channels != 4:
            raise InvalidInput(f"Image must have 4 channels (RGBA), got {channels}")
        pixels = pixels.astype(np.uint8, copy=False)

    if pixels.shape[0] == 0 or pixels.shape[1] == 0:
        raise InvalidInput("Image has zero width or height")
    return pixels


def has_any_transparency(source: BitmapSource) -> bool:
    """Check whether any pixel is less than fully opaque."""
    pixels = to_rgba_array(source)
    return bool(np.any(pixels[:, :, 3] < 255))


def encode_png(image: Image.Image) -> bytes:
    """Encode an image as PNG (lossless, alpha preserved)."""
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def png_to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def resize_preview(source: BitmapSource, size: int = PREVIEW_SIZE) -> bytes:
    """Scale an image to a square preview using nearest-neighbor sampling."""
    image = Image.fromarray(to_rgba_array(source))
    preview = image.resize((size, size), Image.Resampling.NEAREST)
    return encode_png(preview)
