"""Tests for Settings."""

import pytest

from spritelab.config import Settings, get_settings, reset_settings


@pytest.fixture(autouse=True)
def clean_settings():
    reset_settings()
    yield
    reset_settings()


class TestSettingsFromEnv:
    def test_defaults(self, monkeypatch):
        for var in ("OPENAI_API_KEY", "SPRITELAB_MODEL", "SPRITELAB_TRANSPARENCY_ATTEMPTS",
                    "SPRITELAB_DETECTOR", "SPRITELAB_CORS_ORIGINS", "SPRITELAB_MAX_RETRIES",
                    "SPRITELAB_IMAGE_SIZE"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings.from_env()

        assert settings.openai_api_key == ""
        assert settings.model == "gpt-image-1"
        assert settings.image_size == "1024x1024"
        assert settings.transparency_attempts == 3
        assert settings.max_retries == 2
        assert settings.detector == "projection"
        assert "http://localhost:3000" in settings.cors_origins

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("SPRITELAB_TRANSPARENCY_ATTEMPTS", "2")
        monkeypatch.setenv("SPRITELAB_DETECTOR", "grid")
        monkeypatch.setenv("SPRITELAB_TIMEOUT", "30.5")
        monkeypatch.setenv("SPRITELAB_CORS_ORIGINS", "https://a.example, https://b.example")
        settings = Settings.from_env()

        assert settings.openai_api_key == "sk-test"
        assert settings.transparency_attempts == 2
        assert settings.detector == "grid"
        assert settings.request_timeout == 30.5
        assert settings.cors_origins == ["https://a.example", "https://b.example"]

    def test_singleton(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "first")
        first = get_settings()
        monkeypatch.setenv("OPENAI_API_KEY", "second")

        assert get_settings() is first
        reset_settings()
        assert get_settings().openai_api_key == "second"


class TestValidate:
    def test_valid(self):
        assert Settings(openai_api_key="k", detector="projection").validate() == []

    def test_reports_problems(self):
        errors = Settings(openai_api_key="", transparency_attempts=0, detector="magic").validate()

        assert "OPENAI_API_KEY is required" in errors
        assert any("TRANSPARENCY_ATTEMPTS" in e for e in errors)
        assert any("magic" in e for e in errors)
