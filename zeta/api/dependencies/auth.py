"""
API Key authentication dependency.

Optional authentication controlled by the API_AUTH_ENABLED environment
variable. When enabled, requires an X-API-Key header matching API_KEY.
Both variables are read per request.
"""

import os
import secrets
from typing import Optional

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

# Header definition
api_key_header = APIKeyHeader(
    name="X-API-Key",
    auto_error=False,  # We handle the error ourselves for optional auth
    description="API key for authentication (required when API_AUTH_ENABLED=true)",
)


def is_auth_enabled() -> bool:
    return os.getenv("API_AUTH_ENABLED", "false").lower() == "true"


async def verify_api_key(
    api_key: Optional[str] = Security(api_key_header),
) -> Optional[str]:
    """
    Verify API key from X-API-Key header.

    Behavior:
    - When API_AUTH_ENABLED=false: Always passes (returns None)
    - When API_AUTH_ENABLED=true: Requires valid API key

    Raises:
        HTTPException: 401 if auth enabled and key is missing/invalid

    Returns:
        The API key if valid, None if auth disabled
    """
    if not is_auth_enabled():
        return None

    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key. Provide X-API-Key header.",
            headers={"WWW-Authenticate": "ApiKey"},
        )

    expected = os.getenv("API_KEY", "")
    if not expected or not secrets.compare_digest(api_key, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key",
            headers={"WWW-Authenticate": "ApiKey"},
        )

    return api_key
