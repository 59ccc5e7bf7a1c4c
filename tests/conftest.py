"""
Pytest configuration and shared fixtures.
"""

import asyncio
import os
from typing import Optional

import pytest

from zeta.story.errors import ConfigurationError
from zeta.story.models import AnswerSet, GenerationResult

ENV_KEYS = (
    "API_AUTH_ENABLED",
    "API_KEY",
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "GEMINI_BASE_URL",
    "GEMINI_TIMEOUT",
    "PROMPT_TEMPLATE_PATH",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True, scope="function")
def reset_environment():
    """
    Restore environment variables and module caches after each test.

    Tests run with API_AUTH_ENABLED=false unless they set it otherwise.
    """
    original = {key: os.environ.get(key) for key in ENV_KEYS}
    os.environ["API_AUTH_ENABLED"] = "false"

    yield

    for key, value in original.items():
        if value is not None:
            os.environ[key] = value
        elif key in os.environ:
            del os.environ[key]

    from zeta.story.template_loader import clear_template_cache
    from zeta.api.dependencies.generation import _settings

    clear_template_cache()
    _settings.cache_clear()


class FakeGenerationClient:
    """
    Stand-in for GeminiClient.

    Counts generate() calls. When a gate is given, each call waits for it,
    which keeps a request in flight for as long as a test needs.
    """

    def __init__(
        self,
        result: Optional[GenerationResult] = None,
        configured: bool = True,
        gate: Optional[asyncio.Event] = None,
    ):
        self.result = result or GenerationResult.ok("Once upon a time...", model="fake-model")
        self.configured = configured
        self.gate = gate
        self.calls = 0
        self.prompts = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    def ensure_configured(self) -> None:
        if not self.configured:
            raise ConfigurationError("API key not found.")

    async def generate(self, prompt: str) -> GenerationResult:
        self.calls += 1
        self.prompts.append(prompt)
        if self.gate is not None:
            await self.gate.wait()
        return self.result


@pytest.fixture
def fake_client():
    return FakeGenerationClient()


@pytest.fixture
def full_answers():
    """The reference answer set used across tests."""
    return AnswerSet(
        main_character_id="animal",
        setting_id="forest",
        helper_id="fairy_godparent",
        challenge_id="finding_something_lost",
        magical_element_id="flying",
        ending_id="peaceful_sleep",
    )


@pytest.fixture
def client_factory():
    """Build FakeGenerationClient instances with custom behavior."""
    return FakeGenerationClient
