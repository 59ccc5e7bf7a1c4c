"""
Environment configuration.

Loads the Gemini credential and generation settings from the process
environment (optionally seeded from a .env file).
"""

import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT_SECONDS = 60.0


def load_environment(dotenv_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load environment variables and return the generation settings.

    A missing GEMINI_API_KEY is not an error here: the client reports it as
    a configuration failure when a story is requested, so the questionnaire
    stays usable without a key.

    Args:
        dotenv_path: Optional explicit .env path (default: search upwards)

    Returns:
        Dict[str, Any]: Settings
            - api_key (Optional[str]): Gemini API key
            - model (str): Gemini model name
            - base_url (str): Generative Language API base URL
            - timeout (float): Request timeout in seconds
            - template_path (Optional[str]): Prompt template override
            - log_level (str): Logging level

    Example:
        >>> config = load_environment()
        >>> config["model"]
        'gemini-2.5-flash'
    """
    load_dotenv(dotenv_path)

    api_key = os.getenv("GEMINI_API_KEY", "").strip() or None
    if api_key is None:
        logger.warning("GEMINI_API_KEY is not set; story generation will be unavailable.")

    raw_timeout = os.getenv("GEMINI_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))
    try:
        timeout = float(raw_timeout)
    except ValueError:
        logger.warning(f"Invalid GEMINI_TIMEOUT={raw_timeout!r}, using {DEFAULT_TIMEOUT_SECONDS}s")
        timeout = DEFAULT_TIMEOUT_SECONDS

    config = {
        "api_key": api_key,
        "model": os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        "base_url": os.getenv("GEMINI_BASE_URL", DEFAULT_GEMINI_BASE_URL).rstrip("/"),
        "timeout": timeout,
        "template_path": os.getenv("PROMPT_TEMPLATE_PATH") or None,
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
    }

    logger.info(f"Environment loaded - model: {config['model']}, timeout: {config['timeout']}s")
    return config
