"""
Image generation - OpenAI Images client and sprite prompts.
"""

from .client import ImageResult, OpenAIImageClient
from .prompts import CONCEPT_SYSTEM, SHEET_SYSTEM, GenerationMode, build_prompt

__all__ = [
    "ImageResult",
    "OpenAIImageClient",
    "CONCEPT_SYSTEM",
    "SHEET_SYSTEM",
    "GenerationMode",
    "build_prompt",
]
