"""Tests for configuration helpers."""

import re

import pytest

from src.core.config import PLACEHOLDER_API_KEY, Settings, sanitize_filename


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)

        settings = Settings(_env_file=None)

        assert settings.AI_MODELS == ["gemini-pro", "gemini-1.0-pro", "gemini-1.5-flash-latest"]
        assert settings.REQUEST_TIMEOUT_SECONDS == 10.0
        assert settings.MAX_IDEA_LENGTH == 2000
        assert settings.MAX_PROPOSAL_IDEA_LENGTH == 4000
        assert settings.ai_configured is False

    def test_models_from_environment(self, monkeypatch):
        monkeypatch.setenv("AI_MODELS", '["gemini-1.5-pro", "gemini-1.5-flash"]')

        settings = Settings(_env_file=None)

        assert settings.AI_MODELS == ["gemini-1.5-pro", "gemini-1.5-flash"]

    @pytest.mark.parametrize("key,configured", [
        ("", False),
        ("   ", False),
        (PLACEHOLDER_API_KEY, False),
        ("AIzaSyExample", True),
    ])
    def test_ai_configured(self, key, configured):
        assert Settings(GOOGLE_API_KEY=key, _env_file=None).ai_configured is configured


class TestSanitizeFilename:
    def test_symbols_replaced(self):
        assert sanitize_filename("A/B: Test!") == "A_B__Test_"

    def test_alphanumerics_kept(self):
        assert sanitize_filename("Project2024") == "Project2024"

    @pytest.mark.parametrize("title", [
        "Café Finder",
        'Quote "marks" and \\ slashes',
        "../../etc/passwd",
        "Émoji 🚀 launch",
    ])
    def test_only_safe_characters(self, title):
        assert re.fullmatch(r"[A-Za-z0-9_]+", sanitize_filename(title))

    def test_empty_title(self):
        assert sanitize_filename("") == "proposal"
