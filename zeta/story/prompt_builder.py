"""
Prompt Builder - story prompt and preview summary construction.

Turns an AnswerSet into the natural-language prompt sent to the model.
Stored identifiers are replaced by catalog labels; anything missing or
unknown falls back to a generic phrase, so building a prompt never fails.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from .catalogs import (
    CHALLENGES,
    CHARACTERS,
    ENDINGS,
    HELPERS,
    LOCATIONS,
    MAGICAL_ELEMENTS,
    lookup_label,
)
from .models import AnswerSet
from .template_loader import load_prompt_template, render_template

logger = logging.getLogger(__name__)

DEFAULT_PHRASES = {
    "hero": "A brave hero",
    "setting": "A magical land",
    "helper": "A kind friend",
    "challenge": "An interesting challenge",
    "magical_element": "A wondrous magic",
    "ending": "A happy ending",
}

# Preview summary fallbacks
SUMMARY_MISSING = "N/A"
SUMMARY_NAMELESS_HERO = "A Hero"


def _clean_name(name: Optional[str]) -> Optional[str]:
    if name is None:
        return None
    stripped = name.strip()
    return stripped or None


def describe_hero(answers: AnswerSet) -> str:
    """
    Hero phrase for the prompt.

    "<name> the <lowercased label>" when a name is given, otherwise the bare
    character label. Without a known character the noun is "hero".

    Example:
        >>> describe_hero(AnswerSet(main_character_id="child", character_name="Mira"))
        'Mira the a child'
    """
    label = lookup_label(CHARACTERS, answers.main_character_id)
    name = _clean_name(answers.character_name)

    if name:
        noun = label.lower() if label else "hero"
        return f"{name} the {noun}"
    return label or DEFAULT_PHRASES["hero"]


def resolve_phrases(answers: AnswerSet) -> Dict[str, str]:
    """Map every template placeholder to its label or default phrase."""
    return {
        "hero": describe_hero(answers),
        "setting": lookup_label(LOCATIONS, answers.setting_id) or DEFAULT_PHRASES["setting"],
        "helper": lookup_label(HELPERS, answers.helper_id) or DEFAULT_PHRASES["helper"],
        "challenge": lookup_label(CHALLENGES, answers.challenge_id) or DEFAULT_PHRASES["challenge"],
        "magical_element": (
            lookup_label(MAGICAL_ELEMENTS, answers.magical_element_id)
            or DEFAULT_PHRASES["magical_element"]
        ),
        "ending": lookup_label(ENDINGS, answers.ending_id) or DEFAULT_PHRASES["ending"],
    }


def build_story_prompt(
    answers: AnswerSet,
    template: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Build the story prompt for an AnswerSet.

    Args:
        answers (AnswerSet): Selections collected by the questionnaire
        template (Optional[Dict[str, Any]]): Loaded prompt template
            (default: the bundled bedtime template)

    Returns:
        str: Completed prompt

    Example:
        >>> prompt = build_story_prompt(AnswerSet(setting_id="forest"))
        >>> "Setting: Enchanted Forest" in prompt
        True
    """
    if template is None:
        template = load_prompt_template()

    prompt = render_template(template, resolve_phrases(answers))
    logger.debug(f"[PromptBuilder] Built prompt from template {template['template_id']} ({len(prompt)} chars)")
    return prompt


def summarize_answers(answers: AnswerSet) -> List[Tuple[str, str]]:
    """
    Rows for the preview screen, in display order.

    Unlike the prompt, unknown values show "N/A" rather than a made-up phrase.
    """
    character_label = lookup_label(CHARACTERS, answers.main_character_id)
    name = _clean_name(answers.character_name)

    if character_label is None:
        hero = name or SUMMARY_NAMELESS_HERO
    elif name:
        hero = f"{name} the {character_label.lower()}"
    else:
        hero = character_label

    return [
        ("Hero", hero),
        ("Setting", lookup_label(LOCATIONS, answers.setting_id) or SUMMARY_MISSING),
        ("Friend", lookup_label(HELPERS, answers.helper_id) or SUMMARY_MISSING),
        ("Challenge", lookup_label(CHALLENGES, answers.challenge_id) or SUMMARY_MISSING),
        ("Magic", lookup_label(MAGICAL_ELEMENTS, answers.magical_element_id) or SUMMARY_MISSING),
        ("Ending", lookup_label(ENDINGS, answers.ending_id) or SUMMARY_MISSING),
    ]
