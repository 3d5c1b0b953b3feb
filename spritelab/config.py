"""
SpriteLab configuration.

Settings are read from the environment once, at process start, and passed
explicitly into the generation client and the API service.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",  # Next.js dev server
    "http://localhost:5173",  # Vite dev server
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
)


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value else default


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    return float(value) if value else default


def _env_origins() -> list[str]:
    value = os.getenv("SPRITELAB_CORS_ORIGINS")
    if not value:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class Settings:
    """Runtime settings for the generation client and sprite pipeline."""

    # Image generation service
    openai_api_key: str = field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))
    openai_base_url: str = field(
        default_factory=lambda: os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
    )
    model: str = field(default_factory=lambda: os.getenv("SPRITELAB_MODEL", "gpt-image-1"))
    image_size: str = field(default_factory=lambda: os.getenv("SPRITELAB_IMAGE_SIZE", "1024x1024"))

    # HTTP behaviour
    request_timeout: float = field(default_factory=lambda: _env_float("SPRITELAB_TIMEOUT", 120.0))
    max_retries: int = field(default_factory=lambda: _env_int("SPRITELAB_MAX_RETRIES", 2))
    retry_delay: float = 1.0

    # Number of generation calls made while waiting for a transparent result
    transparency_attempts: int = field(
        default_factory=lambda: _env_int("SPRITELAB_TRANSPARENCY_ATTEMPTS", 3)
    )

    # Slicing strategy: "projection" or "grid"
    detector: str = field(default_factory=lambda: os.getenv("SPRITELAB_DETECTOR", "projection"))

    cors_origins: list[str] = field(default_factory=_env_origins)

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate settings, return list of errors."""
        errors = []
        if not self.openai_api_key:
            errors.append("OPENAI_API_KEY is required")
        if self.max_retries < 1:
            errors.append("SPRITELAB_MAX_RETRIES must be at least 1")
        if self.transparency_attempts < 1:
            errors.append("SPRITELAB_TRANSPARENCY_ATTEMPTS must be at least 1")
        if self.detector not in ("projection", "grid"):
            errors.append(f"Unknown SPRITELAB_DETECTOR: {self.detector}")
        return errors


# Singleton settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """
    Drop the cached settings so the next call re-reads the environment.

    Useful for testing.
    """
    global _settings
    _settings = None
