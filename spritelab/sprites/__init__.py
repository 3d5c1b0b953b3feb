"""
Sprite pipeline - detection, slot mapping, normalization and compositing.
"""

from .atlas import CHARACTER_NAMES, FrameData, build_atlas
from .bitmap import has_any_transparency, resize_preview, to_rgba_array
from .compositor import compose_strip
from .detection import (
    BoundingBox,
    ContentDetector,
    GridDetector,
    ProjectionDetector,
    get_detector,
)
from .layout import map_slots, sort_boxes
from .normalize import blank_frame, normalize_frame, render_slots
from .pipeline import SliceResult, slice_sheet, slice_sheet_detailed

__all__ = [
    # Atlas
    "CHARACTER_NAMES",
    "FrameData",
    "build_atlas",
    # Bitmap
    "has_any_transparency",
    "resize_preview",
    "to_rgba_array",
    # Detection
    "BoundingBox",
    "ContentDetector",
    "GridDetector",
    "ProjectionDetector",
    "get_detector",
    # Layout
    "map_slots",
    "sort_boxes",
    # Frames
    "blank_frame",
    "normalize_frame",
    "render_slots",
    "compose_strip",
    # Pipeline
    "SliceResult",
    "slice_sheet",
    "slice_sheet_detailed",
]
