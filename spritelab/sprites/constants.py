"""
Layout constants for the sprite strip.
"""

# Output strip: 24 frames of 24x24 in a single row
FRAME_SIZE = 24
FRAME_COUNT = 24
STRIP_WIDTH = FRAME_SIZE * FRAME_COUNT  # 576
STRIP_HEIGHT = FRAME_SIZE

# Slot ranges in the output strip
IDLE_SLOTS = range(0, 4)
WALK_SLOTS = range(4, 10)

# Sorted detection index that feeds the first walk slot
WALK_SOURCE_OFFSET = 5

# Content detection
ALPHA_THRESHOLD = 10  # alpha > threshold counts as content
MIN_RUN = 5  # runs must be longer than this many pixels
ROW_TOLERANCE = FRAME_SIZE  # max vertical-centre distance (exclusive) within a row

# Fixed-grid fallback layout
GRID_ROWS = 5
GRID_COLS = 5

# Concept preview
PREVIEW_SIZE = 128

TRANSPARENT = (0, 0, 0, 0)
