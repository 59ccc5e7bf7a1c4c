"""
Tests for environment configuration loading.
"""

import pytest

from zeta.infra.config import (
    DEFAULT_GEMINI_BASE_URL,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_TIMEOUT_SECONDS,
    load_environment,
)

SETTING_KEYS = (
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "GEMINI_BASE_URL",
    "GEMINI_TIMEOUT",
    "PROMPT_TEMPLATE_PATH",
    "LOG_LEVEL",
)


@pytest.fixture
def empty_dotenv(tmp_path, monkeypatch):
    for key in SETTING_KEYS:
        monkeypatch.delenv(key, raising=False)
    path = tmp_path / ".env"
    path.write_text("", encoding="utf-8")
    return str(path)


class TestLoadEnvironment:
    """Tests for load_environment function."""

    def test_defaults(self, empty_dotenv):
        config = load_environment(empty_dotenv)

        assert config["api_key"] is None
        assert config["model"] == DEFAULT_GEMINI_MODEL
        assert config["base_url"] == DEFAULT_GEMINI_BASE_URL
        assert config["timeout"] == DEFAULT_TIMEOUT_SECONDS
        assert config["template_path"] is None
        assert config["log_level"] == "INFO"

    def test_reads_dotenv_file(self, tmp_path, empty_dotenv):
        path = tmp_path / "custom.env"
        path.write_text(
            "GEMINI_API_KEY=from-file\nGEMINI_MODEL=gemini-pro\nGEMINI_TIMEOUT=15\n",
            encoding="utf-8",
        )

        config = load_environment(str(path))

        assert config["api_key"] == "from-file"
        assert config["model"] == "gemini-pro"
        assert config["timeout"] == 15.0

    def test_process_environment_wins(self, tmp_path, empty_dotenv, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "from-env")
        path = tmp_path / "custom.env"
        path.write_text("GEMINI_API_KEY=from-file\n", encoding="utf-8")

        assert load_environment(str(path))["api_key"] == "from-env"

    def test_blank_key_is_missing(self, empty_dotenv, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "   ")

        assert load_environment(empty_dotenv)["api_key"] is None

    def test_invalid_timeout_uses_default(self, empty_dotenv, monkeypatch):
        monkeypatch.setenv("GEMINI_TIMEOUT", "soon")

        assert load_environment(empty_dotenv)["timeout"] == DEFAULT_TIMEOUT_SECONDS

    def test_base_url_trailing_slash_removed(self, empty_dotenv, monkeypatch):
        monkeypatch.setenv("GEMINI_BASE_URL", "https://proxy.example.com/v1beta/")

        assert load_environment(empty_dotenv)["base_url"] == "https://proxy.example.com/v1beta"
