"""SpriteLab HTTP API."""
