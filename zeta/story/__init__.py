"""
Story module - guided bedtime story creation.

This module provides the complete story flow:
- Option catalogs and the questionnaire step sequence
- Prompt building from a versioned template
- Gemini API integration
- The coordinator state machine tying them together
"""

from .catalogs import (
    CatalogEntry,
    CHARACTERS,
    LOCATIONS,
    HELPERS,
    CHALLENGES,
    MAGICAL_ELEMENTS,
    ENDINGS,
)

from .models import (
    AnswerSet,
    GenerationResult,
)

from .steps import (
    Step,
    STEP_COPY,
    next_step,
    previous_step,
    catalog_for_step,
)

from .prompt_builder import (
    build_story_prompt,
    summarize_answers,
)

from .api_client import GeminiClient

from .coordinator import (
    CoordinatorState,
    StoryCoordinator,
)

from .errors import (
    StoryError,
    GenerationError,
    ConfigurationError,
    TransportError,
    ResponseParseError,
    WizardError,
    InvalidTransitionError,
    MissingSelectionError,
    UnknownOptionError,
)

__all__ = [
    # catalogs
    "CatalogEntry",
    "CHARACTERS",
    "LOCATIONS",
    "HELPERS",
    "CHALLENGES",
    "MAGICAL_ELEMENTS",
    "ENDINGS",
    # models
    "AnswerSet",
    "GenerationResult",
    # steps
    "Step",
    "STEP_COPY",
    "next_step",
    "previous_step",
    "catalog_for_step",
    # prompt_builder
    "build_story_prompt",
    "summarize_answers",
    # api_client
    "GeminiClient",
    # coordinator
    "CoordinatorState",
    "StoryCoordinator",
    # errors
    "StoryError",
    "GenerationError",
    "ConfigurationError",
    "TransportError",
    "ResponseParseError",
    "WizardError",
    "InvalidTransitionError",
    "MissingSelectionError",
    "UnknownOptionError",
]
