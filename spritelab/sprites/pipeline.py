"""
Slice & stitch - turn a generated sheet into the canonical sprite strip.

Steps:
1. Detect cells (projection profiles by default)
2. Sort them into row-major animation order (grid cells keep their index order)
3. Map them onto the fixed idle/walk slots
4. Normalize each slot to 24x24
5. Composite the 576x24 strip
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from PIL import Image

from spritelab.sprites.bitmap import BitmapSource, to_rgba_array
from spritelab.sprites.compositor import compose_strip
from spritelab.sprites.detection import BoundingBox, ContentDetector, ProjectionDetector
from spritelab.sprites.layout import map_slots, sort_boxes
from spritelab.sprites.normalize import render_slots

logger = logging.getLogger(__name__)


@dataclass
class SliceResult:
    """Output of a slice run, with the intermediate detection data."""
    png: bytes
    detected: List[BoundingBox] = field(default_factory=list)
    ordered: List[BoundingBox] = field(default_factory=list)
    slots: List[Optional[BoundingBox]] = field(default_factory=list)

    @property
    def filled_slots(self) -> int:
        return sum(1 for box in self.slots if box is not None)


def slice_sheet_detailed(source: BitmapSource, detector: Optional[ContentDetector] = None) -> SliceResult:
    """Run the full pipeline and keep the intermediate boxes."""
    detector = detector or ProjectionDetector()
    pixels = to_rgba_array(source)

    detected = detector.detect(pixels)
    if not detected:
        logger.warning("No content detected in sheet, returning blank strip")
    else:
        logger.info(f"Detected {len(detected)} sprite boxes ({type(detector).__name__})")

    ordered = list(detected) if detector.ordered else sort_boxes(detected)
    slots = map_slots(ordered)
    frames = render_slots(Image.fromarray(pixels), slots)

    return SliceResult(
        png=compose_strip(frames),
        detected=detected,
        ordered=ordered,
        slots=slots,
    )


def slice_sheet(source: BitmapSource, detector: Optional[ContentDetector] = None) -> bytes:
    """
    Slice a generated sheet into the 576x24 strip.

    Args:
        source: PNG bytes, Pillow image or RGBA array
        detector: Cell detection strategy (default: ProjectionDetector)

    Returns:
        PNG bytes of the strip
    """
    return slice_sheet_detailed(source, detector).png
