"""
Strip compositor - stitch 24 frames into the final 576x24 sheet.
"""

import io
from typing import Sequence

from PIL import Image

from spritelab.errors import AssemblyError
from spritelab.sprites.bitmap import encode_png
from spritelab.sprites.constants import (
    FRAME_COUNT,
    FRAME_SIZE,
    STRIP_HEIGHT,
    STRIP_WIDTH,
    TRANSPARENT,
)


def compose_strip_image(frames: Sequence[Image.Image]) -> Image.Image:
    """
    Paste frames left to right onto a transparent strip.

    Frames replace the canvas pixels (no alpha blending).

    Raises:
        AssemblyError: If the frame count or any frame size is wrong.
    """
    if len(frames) != FRAME_COUNT:
        raise AssemblyError(f"Expected {FRAME_COUNT} frames, got {len(frames)}")

    strip = Image.new("RGBA", (STRIP_WIDTH, STRIP_HEIGHT), TRANSPARENT)
    for i, frame in enumerate(frames):
        if frame.size != (FRAME_SIZE, FRAME_SIZE):
            raise AssemblyError(f"Frame {i} is {frame.size[0]}x{frame.size[1]}, expected {FRAME_SIZE}x{FRAME_SIZE}")
        if frame.mode != "RGBA":
            frame = frame.convert("RGBA")
        strip.paste(frame, (i * FRAME_SIZE, 0))
    return strip


def compose_strip(frames: Sequence[Image.Image]) -> bytes:
    """
    Build the strip and encode it as PNG.

    The encoded result is re-opened and checked against the fixed
    576x24 RGBA layout.
    """
    png = encode_png(compose_strip_image(frames))

    with Image.open(io.BytesIO(png)) as check:
        if check.size != (STRIP_WIDTH, STRIP_HEIGHT) or check.mode != "RGBA":
            raise AssemblyError(
                f"Strip is {check.size[0]}x{check.size[1]} {check.mode}, "
                f"expected {STRIP_WIDTH}x{STRIP_HEIGHT} RGBA"
            )
    return png
