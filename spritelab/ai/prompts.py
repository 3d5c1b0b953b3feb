"""
Prompt templates for sprite generation.

Concept mode asks for one character preview; sheet mode asks for a 5x5
grid whose first two rows hold the idle and walk animations.
"""

from typing import Literal

GenerationMode = Literal["concept", "sheet"]


CONCEPT_SYSTEM = """
You are a pixel art concept artist.
Generate ONE single 24x24 pixel art character on a transparent background.
- Style: Retro, NES/SNES, clean lines, readable silhouette.
- View: Front-facing or 3/4 view (idle stance).
- Dimensions: The character must fit within a 24x24 pixel box.
- Output: A single transparent PNG (approx 256x256 or 512x512, will be downscaled).
""".strip()


SHEET_SYSTEM = """
You are a pixel art generator.
Generate a valid 5x5 GRID of sprites.
- The output image is square (e.g. 1024x1024).
- Divide it visually into 5 rows (Row 1 to Row 5) and 5 columns.
- Place ONE character sprite in each cell.

STRICT ROW CONTENTS:
- Row 1 (Top): 5 frames of IDLE animation (breathing, subtle movement).
- Row 2 (2nd down): 5 frames of WALK cycle (Side view walking).
- Row 3 (3rd down): 5 frames continuing the walk cycle or running.
- Row 4/5: Variations.

- Background MUST be transparent.
- Characters should be small, centered in their grid cells.
- Consistency: MATCH the concept prompt exactly.
""".strip()


def build_prompt(user_prompt: str, mode: GenerationMode = "sheet") -> str:
    """Combine the mode's system instructions with the user's concept."""
    system = CONCEPT_SYSTEM if mode == "concept" else SHEET_SYSTEM
    return f"{system}\n\nUser Concept: {user_prompt}"
