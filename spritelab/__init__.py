"""SpriteLab - prompt-to-sprite-atlas generation service."""

__version__ = "0.1.0"
