"""
Shared generation dependencies.

The Gemini client and prompt template are built once from the environment
and reused by every request. Tests replace them through
app.dependency_overrides.
"""

from functools import lru_cache
from typing import Any, Dict

from zeta.infra.config import load_environment
from zeta.story.api_client import GeminiClient
from zeta.story.template_loader import load_prompt_template


@lru_cache(maxsize=1)
def _settings() -> Dict[str, Any]:
    return load_environment()


def get_generation_client() -> GeminiClient:
    return GeminiClient.from_config(_settings())


def get_prompt_template() -> Dict[str, Any]:
    return load_prompt_template(_settings()["template_path"])
