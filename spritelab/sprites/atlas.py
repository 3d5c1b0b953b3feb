"""
Atlas metadata - PixiJS-style frame and animation descriptor for the strip.
"""

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional

from spritelab.sprites.constants import (
    FRAME_COUNT,
    FRAME_SIZE,
    IDLE_SLOTS,
    STRIP_HEIGHT,
    STRIP_WIDTH,
    WALK_SLOTS,
)

CHARACTER_NAMES = ("doux", "mort", "targ", "vita")


@dataclass
class FrameData:
    """Single frame metadata."""

    frame: Dict[str, int]  # {x, y, w, h}
    sourceSize: Dict[str, int] = field(default_factory=dict)  # {w, h}
    spriteSourceSize: Dict[str, int] = field(default_factory=dict)  # {x, y, w, h}

    def __post_init__(self):
        if not self.sourceSize:
            self.sourceSize = {"w": self.frame["w"], "h": self.frame["h"]}
        if not self.spriteSourceSize:
            self.spriteSourceSize = {
                "x": 0,
                "y": 0,
                "w": self.frame["w"],
                "h": self.frame["h"],
            }


def frame_key(slot: int, name: str) -> str:
    return f"{slot}_{name}"


def build_atlas(name: str, image_path: Optional[str] = None) -> dict:
    """
    Build the atlas descriptor for a character strip.

    Args:
        name: Character name used in frame keys
        image_path: Image URL recorded in meta (default /characters/<name>.png)

    Returns:
        Dict with frames, meta and animations
    """
    frames = {}
    for col in range(FRAME_COUNT):
        frames[frame_key(col, name)] = asdict(
            FrameData(frame={"x": col * FRAME_SIZE, "y": 0, "w": FRAME_SIZE, "h": FRAME_SIZE})
        )

    animations: Dict[str, List[str]] = {
        "walk": [frame_key(slot, name) for slot in WALK_SLOTS],
        "idle": [frame_key(slot, name) for slot in IDLE_SLOTS],
    }

    return {
        "frames": frames,
        "meta": {
            "image": image_path or f"/characters/{name}.png",
            "format": "RGBA8888",
            "size": {"w": STRIP_WIDTH, "h": STRIP_HEIGHT},
            "scale": "1",
        },
        "animations": animations,
    }
