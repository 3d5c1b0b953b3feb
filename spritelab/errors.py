"""Exception types shared across the generation client and the slicer."""

from typing import Optional


class SpriteLabError(Exception):
    """Base exception for SpriteLab errors."""
    pass


class ConfigurationError(SpriteLabError):
    """Raised when a required setting (e.g. the API key) is missing."""
    pass


class UpstreamError(SpriteLabError):
    """Raised when the image-generation service fails or returns no image."""
    def __init__(self, message: str, status_code: Optional[int] = None, response_body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class TransparencyUnmet(SpriteLabError):
    """Raised when every generation attempt came back fully opaque."""
    def __init__(self, message: str, attempts: int):
        super().__init__(message)
        self.attempts = attempts


class InvalidInput(SpriteLabError):
    """Raised when a bitmap cannot be interpreted as RGBA pixels."""
    pass


class AssemblyError(SpriteLabError):
    """Raised when the composited strip violates its fixed layout."""
    pass
