"""
Normalize - fit detected regions into 24x24 pixel art frames.
"""

import logging
from typing import List, Optional, Sequence

from PIL import Image

from spritelab.sprites.constants import FRAME_SIZE, TRANSPARENT
from spritelab.sprites.detection import BoundingBox

logger = logging.getLogger(__name__)


def blank_frame() -> Image.Image:
    """Create a fully transparent frame."""
    return Image.new("RGBA", (FRAME_SIZE, FRAME_SIZE), TRANSPARENT)


def normalize_frame(image: Image.Image, box: BoundingBox) -> Image.Image:
    """
    Extract a box from the sheet and contain-fit it into a single frame.

    The region is scaled so its longer side becomes FRAME_SIZE, using
    nearest-neighbor sampling, and centred on a transparent canvas. The
    shorter side never drops below one pixel.
    A box that clamps to nothing yields a blank frame.

    Args:
        image: Source sheet (RGBA)
        box: Region to extract, in sheet coordinates

    Returns:
        FRAME_SIZE x FRAME_SIZE RGBA image
    """
    safe = box.clamp(image.width, image.height)
    if safe is None:
        logger.warning(f"Box {box} lies outside the {image.width}x{image.height} sheet, using blank frame")
        return blank_frame()

    try:
        region = image.crop(safe.as_crop())
        scale = FRAME_SIZE / max(region.width, region.height)
        size = (
            max(1, round(region.width * scale)),
            max(1, round(region.height * scale)),
        )
        fitted = region.resize(size, Image.Resampling.NEAREST)

        frame = blank_frame()
        frame.paste(fitted, ((FRAME_SIZE - size[0]) // 2, (FRAME_SIZE - size[1]) // 2))
        return frame
    except (OSError, ValueError) as e:
        logger.warning(f"Error processing sprite box {box}: {e}")
        return blank_frame()


def render_slots(image: Image.Image, slots: Sequence[Optional[BoundingBox]]) -> List[Image.Image]:
    """Normalize every slot; empty slots become blank frames."""
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return [blank_frame() if box is None else normalize_frame(image, box) for box in slots]
