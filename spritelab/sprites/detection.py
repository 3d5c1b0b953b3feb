"""
Content detection - locate sprite cells inside a generated sheet.

Two strategies share the ContentDetector interface:
1. ProjectionDetector - finds islands of non-transparent pixels using
   row/column projection profiles of the alpha channel
2. GridDetector - slices the sheet into a fixed rows x cols grid
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from spritelab.sprites.bitmap import BitmapSource, to_rgba_array
from spritelab.sprites.constants import ALPHA_THRESHOLD, GRID_COLS, GRID_ROWS, MIN_RUN


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle in source pixel coordinates."""

    x: int
    y: int
    w: int
    h: int

    def __post_init__(self):
        if self.w <= 0 or self.h <= 0:
            raise ValueError(f"BoundingBox must have positive size, got {self.w}x{self.h}")

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def center_y(self) -> float:
        return self.y + self.h / 2

    def clamp(self, width: int, height: int) -> Optional["BoundingBox"]:
        """Clip the box to a width x height bitmap. Returns None if nothing is left."""
        left = max(0, self.x)
        top = max(0, self.y)
        right = min(width, self.right)
        bottom = min(height, self.bottom)
        if right <= left or bottom <= top:
            return None
        return BoundingBox(left, top, right - left, bottom - top)

    def as_crop(self) -> Tuple[int, int, int, int]:
        """Pillow crop tuple (left, top, right, bottom)."""
        return (self.x, self.y, self.right, self.bottom)


def find_runs(mask: np.ndarray, min_run: int = MIN_RUN) -> List[Tuple[int, int]]:
    """
    Collapse a boolean profile into (start, end) runs of True values.

    Runs of min_run pixels or fewer are treated as noise and dropped.
    End indices are exclusive.
    """
    padded = np.concatenate(([0], mask.astype(np.int8), [0]))
    edges = np.diff(padded)
    starts = np.flatnonzero(edges == 1)
    ends = np.flatnonzero(edges == -1)
    return [(int(s), int(e)) for s, e in zip(starts, ends) if e - s > min_run]


class ContentDetector(ABC):
    """
    Strategy for locating sprite cells in a sheet.

    Implementations receive RGBA pixels and return bounding boxes. Unless
    `ordered` is set, the frame sorter puts them into row-major order.
    """

    ordered = False

    @abstractmethod
    def detect(self, source: BitmapSource) -> List[BoundingBox]:
        """Return the bounding boxes of detected cells."""
        ...


class ProjectionDetector(ContentDetector):
    """Detect content islands via alpha projection profiles."""

    def __init__(self, alpha_threshold: int = ALPHA_THRESHOLD, min_run: int = MIN_RUN):
        self.alpha_threshold = alpha_threshold
        self.min_run = min_run

    def detect(self, source: BitmapSource) -> List[BoundingBox]:
        pixels = to_rgba_array(source)
        content = pixels[:, :, 3] > self.alpha_threshold

        boxes = []
        # Row projection, then column projection within each row strip
        for top, bottom in find_runs(content.any(axis=1), self.min_run):
            strip = content[top:bottom, :]
            for left, right in find_runs(strip.any(axis=0), self.min_run):
                boxes.append(BoundingBox(left, top, right - left, bottom - top))
        return boxes


class GridDetector(ContentDetector):
    """Slice the sheet into equal rows x cols cells, row-major."""

    # Cells already come out in grid index order
    ordered = True

    def __init__(self, rows: int = GRID_ROWS, cols: int = GRID_COLS):
        self.rows = rows
        self.cols = cols

    def detect(self, source: BitmapSource) -> List[BoundingBox]:
        pixels = to_rgba_array(source)
        height, width = pixels.shape[:2]
        cell_w = width // self.cols
        cell_h = height // self.rows
        if cell_w == 0 or cell_h == 0:
            return []

        return [
            BoundingBox(col * cell_w, row * cell_h, cell_w, cell_h)
            for row in range(self.rows)
            for col in range(self.cols)
        ]


DETECTORS = {
    "projection": ProjectionDetector,
    "grid": GridDetector,
}


def get_detector(name: str = "projection") -> ContentDetector:
    """Create a detector by strategy name."""
    try:
        return DETECTORS[name]()
    except KeyError:
        raise ValueError(f"Unknown detector '{name}'. Choose from: {', '.join(DETECTORS)}")
