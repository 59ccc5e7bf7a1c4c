"""
Gemini API client module.

Sends an assembled story prompt to the Gemini generateContent endpoint and
returns the generated text. One request per call: no retry, no caching.

Request body:   {"contents": [{"parts": [{"text": <prompt>}]}]}
Response text:  candidates[0].content.parts[0].text
"""

import logging
from typing import Any, Dict, Optional

import httpx

from zeta.infra.config import (
    DEFAULT_GEMINI_BASE_URL,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_TIMEOUT_SECONDS,
)

from .errors import (
    ConfigurationError,
    GenerationError,
    ResponseParseError,
    TransportError,
)
from .models import GenerationResult

logger = logging.getLogger(__name__)

MISSING_KEY_REASON = (
    "API key not found. Set GEMINI_API_KEY in the environment or a .env file."
)
INVALID_KEY_REASON = "API key contains characters that cannot be sent in a request header."


def build_request_body(prompt: str) -> Dict[str, Any]:
    """Wrap a prompt in the generateContent request shape."""
    return {"contents": [{"parts": [{"text": prompt}]}]}


def extract_story_text(payload: Any) -> str:
    """
    Pull the generated text out of a generateContent response body.

    Raises:
        ResponseParseError: If the text is not at candidates[0].content.parts[0].text
    """
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        text = None

    if not isinstance(text, str):
        api_error = None
        if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
            api_error = payload["error"].get("message")
        if api_error:
            raise ResponseParseError(f"Response did not contain story text: {api_error}")
        raise ResponseParseError("Response did not contain story text at candidates[0].content.parts[0].text")

    return text


def extract_usage(payload: Dict[str, Any]) -> Optional[Dict[str, int]]:
    """Token usage from usageMetadata, or None when absent or malformed."""
    metadata = payload.get("usageMetadata")
    if not isinstance(metadata, dict):
        return None
    try:
        return {
            "input_tokens": int(metadata.get("promptTokenCount", 0)),
            "output_tokens": int(metadata.get("candidatesTokenCount", 0)),
            "total_tokens": int(metadata.get("totalTokenCount", 0)),
        }
    except (TypeError, ValueError) as e:
        logger.warning(f"[Gemini] Could not read usage metadata: {e}")
        return None


class GeminiClient:
    """
    Async client for Gemini text generation.

    Args:
        api_key: Gemini API key; None or empty makes every call fail with
            ConfigurationError before any request is made
        model: Model name used in the endpoint path
        base_url: Generative Language API base URL
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_GEMINI_MODEL,
        base_url: str = DEFAULT_GEMINI_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.api_key = api_key.strip() if api_key else None
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "GeminiClient":
        """Build a client from load_environment() output."""
        return cls(
            api_key=config.get("api_key"),
            model=config.get("model", DEFAULT_GEMINI_MODEL),
            base_url=config.get("base_url", DEFAULT_GEMINI_BASE_URL),
            timeout=float(config.get("timeout", DEFAULT_TIMEOUT_SECONDS)),
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def ensure_configured(self) -> None:
        """
        Raises:
            ConfigurationError: If no API key is available, or it is not ASCII
        """
        if not self.is_configured:
            raise ConfigurationError(MISSING_KEY_REASON)
        try:
            self.api_key.encode("ascii")
        except UnicodeEncodeError:
            raise ConfigurationError(INVALID_KEY_REASON)

    async def generate_text(self, prompt: str) -> GenerationResult:
        """
        Request a story for ``prompt``.

        Returns:
            GenerationResult: Successful result with the generated text

        Raises:
            ConfigurationError: No API key (no request is made)
            TransportError: Network failure, timeout, or malformed URL
            ResponseParseError: Response body without story text
        """
        self.ensure_configured()

        logger.info(f"[Gemini] Requesting story from {self.model}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.endpoint,
                    json=build_request_body(prompt),
                    headers={
                        "Content-Type": "application/json",
                        "x-goog-api-key": self.api_key,
                    },
                )
        except httpx.TimeoutException:
            raise TransportError(f"Request timed out after {self.timeout}s")
        except httpx.InvalidURL as e:
            raise TransportError(f"Invalid endpoint URL: {e}")
        except httpx.RequestError as e:
            raise TransportError(f"Request error: {e}")
        except Exception as e:
            raise TransportError(f"Unexpected error: {e}")

        if response.status_code >= 400:
            logger.warning(f"[Gemini] HTTP {response.status_code} from generateContent")

        try:
            payload = response.json()
        except ValueError:
            raise ResponseParseError(
                f"Response was not valid JSON (HTTP {response.status_code})"
            )

        text = extract_story_text(payload)
        usage = extract_usage(payload)

        logger.info(f"[Gemini] Story generated - {len(text)} chars")
        if usage:
            logger.info(
                f"[Gemini] Token usage - Input: {usage['input_tokens']}, "
                f"Output: {usage['output_tokens']}, Total: {usage['total_tokens']}"
            )

        return GenerationResult.ok(text, model=self.model, usage=usage)

    async def generate(self, prompt: str) -> GenerationResult:
        """
        Request a story, reporting any generation failure as a result.

        Returns:
            GenerationResult: Success with text, or failure with the reason
            and its error_kind ("configuration", "transport", "response_parse")
        """
        try:
            return await self.generate_text(prompt)
        except GenerationError as e:
            logger.error(f"[Gemini] Generation failed ({e.kind}): {e.reason}")
            return GenerationResult.failed(e, model=self.model)
