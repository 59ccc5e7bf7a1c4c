"""
Prompt template loading.

The story prompt is a versioned JSON resource: a list of template lines with
named placeholders plus the list of placeholders it expects. The prompt
builder only fills the placeholders in.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_PATH = Path(__file__).parent / "templates" / "bedtime_prompt_v1.json"

REQUIRED_KEYS = ("template_id", "placeholders", "template")


def load_prompt_template(template_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load and validate a prompt template.

    Results are cached per path; templates are read once per process.

    Args:
        template_path: Path to a template JSON file (default: bundled v1)

    Returns:
        Dict[str, Any]: Template data
            - template_id (str): Stable template identifier
            - placeholders (List[str]): Placeholder names used by the lines
            - template (List[str]): Template lines

    Raises:
        FileNotFoundError: If the template file doesn't exist
        ValueError: If the template is missing required keys or placeholders
    """
    path = Path(template_path) if template_path else DEFAULT_TEMPLATE_PATH
    return _load_cached(str(path.resolve()))


@lru_cache(maxsize=8)
def _load_cached(resolved_path: str) -> Dict[str, Any]:
    path = Path(resolved_path)
    if not path.exists():
        logger.error(f"Prompt template not found: {path}")
        raise FileNotFoundError(f"Prompt template not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        template = json.load(f)

    missing = [key for key in REQUIRED_KEYS if key not in template]
    if missing:
        raise ValueError(f"Prompt template {path.name} is missing keys: {missing}")

    body = "\n".join(template["template"])
    for name in template["placeholders"]:
        if "{" + name + "}" not in body:
            raise ValueError(f"Prompt template {path.name} does not use placeholder '{name}'")

    logger.debug(f"Prompt template loaded: {template['template_id']} ({path})")
    return template


def render_template(template: Dict[str, Any], values: Dict[str, str]) -> str:
    """
    Fill a template's placeholders.

    Raises:
        KeyError: If a placeholder has no value
    """
    missing = [name for name in template["placeholders"] if name not in values]
    if missing:
        raise KeyError(f"No value for placeholders: {missing}")

    return "\n".join(template["template"]).format_map(values)


def clear_template_cache() -> None:
    """Forget loaded templates. Useful for testing."""
    _load_cached.cache_clear()
