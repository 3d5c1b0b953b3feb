"""
Frame ordering and slot mapping.

Detected boxes are put into row-major animation order, then assigned to the
fixed 24-slot strip layout:

    slots 0-3   idle   <- sorted boxes 0-3
    slots 4-9   walk   <- sorted boxes 5-10
    slots 10-23 blank
"""

from typing import Iterable, List, Optional

from spritelab.sprites.constants import (
    FRAME_COUNT,
    IDLE_SLOTS,
    ROW_TOLERANCE,
    WALK_SLOTS,
    WALK_SOURCE_OFFSET,
)
from spritelab.sprites.detection import BoundingBox


def group_rows(boxes: Iterable[BoundingBox], row_tolerance: float = ROW_TOLERANCE) -> List[List[BoundingBox]]:
    """
    Group boxes into visual rows by vertical centre.

    A box joins the current row while its centre is less than row_tolerance
    below the centre of the row's first box.
    """
    rows: List[List[BoundingBox]] = []
    for box in sorted(boxes, key=lambda b: (b.center_y, b.x)):
        if rows and box.center_y - rows[-1][0].center_y < row_tolerance:
            rows[-1].append(box)
        else:
            rows.append([box])
    return rows


def sort_boxes(boxes: Iterable[BoundingBox], row_tolerance: float = ROW_TOLERANCE) -> List[BoundingBox]:
    """Order boxes top-to-bottom by visual row, left-to-right within a row."""
    ordered = []
    for row in group_rows(boxes, row_tolerance):
        ordered.extend(sorted(row, key=lambda b: (b.x, b.y)))
    return ordered


def _pick(boxes: List[BoundingBox], index: int) -> Optional[BoundingBox]:
    return boxes[index] if index < len(boxes) else None


def map_slots(sorted_boxes: List[BoundingBox]) -> List[Optional[BoundingBox]]:
    """
    Assign sorted boxes to the 24 strip slots.

    Returns exactly FRAME_COUNT entries; None marks a blank frame.
    """
    slots: List[Optional[BoundingBox]] = [None] * FRAME_COUNT

    for i, slot in enumerate(IDLE_SLOTS):
        slots[slot] = _pick(sorted_boxes, i)

    # Sorted index 4 is never used: the sheet prompt asks for five idle
    # frames in the first row and only four are kept. This assumes a
    # five-column layout that detection does not guarantee.
    for i, slot in enumerate(WALK_SLOTS):
        slots[slot] = _pick(sorted_boxes, WALK_SOURCE_OFFSET + i)

    return slots
