"""
Questionnaire steps and sequencing.

Steps are totally ordered: CHARACTER is the entry point and DISPLAY the
terminal step. next_step/previous_step are plain table lookups; going back
from CHARACTER leaves the flow (previous_step returns None).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .catalogs import (
    CHALLENGES,
    CHARACTERS,
    ENDINGS,
    HELPERS,
    LOCATIONS,
    MAGICAL_ELEMENTS,
    Catalog,
)
from .errors import InvalidTransitionError


class Step(str, Enum):
    """Questionnaire steps, in flow order."""

    CHARACTER = "character"
    LOCATION = "location"
    HELPER = "helper"
    CHALLENGE = "challenge"
    MAGICAL_ELEMENT = "magical_element"
    ENDING = "ending"
    PREVIEW = "preview"
    DISPLAY = "display"


STEP_ORDER = tuple(Step)
INITIAL_STEP = Step.CHARACTER
TERMINAL_STEP = Step.DISPLAY

_NEXT: Dict[Step, Step] = {
    step: STEP_ORDER[index + 1] for index, step in enumerate(STEP_ORDER[:-1])
}
_PREVIOUS: Dict[Step, Step] = {nxt: prev for prev, nxt in _NEXT.items()}

# Question steps: catalog to choose from and the AnswerSet field it fills
QUESTION_CATALOGS: Dict[Step, Catalog] = {
    Step.CHARACTER: CHARACTERS,
    Step.LOCATION: LOCATIONS,
    Step.HELPER: HELPERS,
    Step.CHALLENGE: CHALLENGES,
    Step.MAGICAL_ELEMENT: MAGICAL_ELEMENTS,
    Step.ENDING: ENDINGS,
}

ANSWER_FIELDS: Dict[Step, str] = {
    Step.CHARACTER: "main_character_id",
    Step.LOCATION: "setting_id",
    Step.HELPER: "helper_id",
    Step.CHALLENGE: "challenge_id",
    Step.MAGICAL_ELEMENT: "magical_element_id",
    Step.ENDING: "ending_id",
}


@dataclass(frozen=True)
class StepCopy:
    """Screen text shown for a step."""

    heading: str
    action: str
    loading: Optional[str] = None


STEP_COPY: Dict[Step, StepCopy] = {
    Step.CHARACTER: StepCopy("Who is the story about?", "Continue"),
    Step.LOCATION: StepCopy("Where does the story take place?", "Continue"),
    Step.HELPER: StepCopy("Who helps along the way?", "Continue"),
    Step.CHALLENGE: StepCopy("What challenge does our hero overcome?", "Continue"),
    Step.MAGICAL_ELEMENT: StepCopy("What magic happens?", "Continue"),
    Step.ENDING: StepCopy("How should the story end?", "Finish Story"),
    Step.PREVIEW: StepCopy("Ready for Magic?", "Create My Story!"),
    Step.DISPLAY: StepCopy("Your Story Awaits...", "All Done!", loading="Dreaming up your tale..."),
}


def next_step(step: Step) -> Step:
    """
    Return the step following ``step``.

    Raises:
        InvalidTransitionError: if ``step`` is the terminal step
    """
    try:
        return _NEXT[step]
    except KeyError:
        raise InvalidTransitionError(f"'{step.value}' is the terminal step and has no successor")


def previous_step(step: Step) -> Optional[Step]:
    """Return the step before ``step``, or None when going back exits the flow."""
    return _PREVIOUS.get(step)


def is_question_step(step: Step) -> bool:
    return step in QUESTION_CATALOGS


def catalog_for_step(step: Step) -> Catalog:
    """
    Return the option catalog of a question step.

    Raises:
        InvalidTransitionError: if ``step`` is not a question step
    """
    if step not in QUESTION_CATALOGS:
        raise InvalidTransitionError(f"Step '{step.value}' has no option catalog")
    return QUESTION_CATALOGS[step]


def answer_field_for_step(step: Step) -> str:
    if step not in ANSWER_FIELDS:
        raise InvalidTransitionError(f"Step '{step.value}' does not record an answer")
    return ANSWER_FIELDS[step]
