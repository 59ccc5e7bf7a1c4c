"""
API Dependencies package.

Cross-cutting concerns: authentication and the shared generation client.
"""

from .auth import verify_api_key, is_auth_enabled
from .generation import get_generation_client, get_prompt_template

__all__ = [
    "verify_api_key",
    "is_auth_enabled",
    "get_generation_client",
    "get_prompt_template",
]
