"""
Tests for steps module.

Table-driven checks of the step sequence.
"""

import pytest

from zeta.story.catalogs import CHARACTERS, ENDINGS
from zeta.story.errors import InvalidTransitionError
from zeta.story.steps import (
    INITIAL_STEP,
    STEP_COPY,
    TERMINAL_STEP,
    Step,
    answer_field_for_step,
    catalog_for_step,
    is_question_step,
    next_step,
    previous_step,
)

EXPECTED_NEXT = [
    (Step.CHARACTER, Step.LOCATION),
    (Step.LOCATION, Step.HELPER),
    (Step.HELPER, Step.CHALLENGE),
    (Step.CHALLENGE, Step.MAGICAL_ELEMENT),
    (Step.MAGICAL_ELEMENT, Step.ENDING),
    (Step.ENDING, Step.PREVIEW),
    (Step.PREVIEW, Step.DISPLAY),
]

EXPECTED_PREVIOUS = [
    (Step.CHARACTER, None),
    (Step.LOCATION, Step.CHARACTER),
    (Step.HELPER, Step.LOCATION),
    (Step.CHALLENGE, Step.HELPER),
    (Step.MAGICAL_ELEMENT, Step.CHALLENGE),
    (Step.ENDING, Step.MAGICAL_ELEMENT),
    (Step.PREVIEW, Step.ENDING),
    (Step.DISPLAY, Step.PREVIEW),
]


class TestNextStep:
    """Tests for next_step function."""

    @pytest.mark.parametrize("step,expected", EXPECTED_NEXT)
    def test_successor(self, step, expected):
        assert next_step(step) == expected

    def test_terminal_step_has_no_successor(self):
        with pytest.raises(InvalidTransitionError):
            next_step(Step.DISPLAY)

    def test_six_steps_from_character_reach_preview(self):
        step = INITIAL_STEP
        for _ in range(6):
            step = next_step(step)

        assert step == Step.PREVIEW


class TestPreviousStep:
    """Tests for previous_step function."""

    @pytest.mark.parametrize("step,expected", EXPECTED_PREVIOUS)
    def test_predecessor(self, step, expected):
        assert previous_step(step) == expected

    def test_first_step_signals_exit(self):
        assert previous_step(Step.CHARACTER) is None

    @pytest.mark.parametrize("step", [s for s in Step if s != TERMINAL_STEP])
    def test_round_trip(self, step):
        assert previous_step(next_step(step)) == step


class TestStepBindings:
    """Tests for step -> catalog / answer field bindings."""

    def test_question_steps(self):
        questions = [s for s in Step if is_question_step(s)]

        assert questions == [
            Step.CHARACTER,
            Step.LOCATION,
            Step.HELPER,
            Step.CHALLENGE,
            Step.MAGICAL_ELEMENT,
            Step.ENDING,
        ]

    def test_catalog_for_step(self):
        assert catalog_for_step(Step.CHARACTER) is CHARACTERS
        assert catalog_for_step(Step.ENDING) is ENDINGS

    def test_catalog_for_non_question_step_raises(self):
        with pytest.raises(InvalidTransitionError):
            catalog_for_step(Step.PREVIEW)

    def test_answer_fields(self):
        assert answer_field_for_step(Step.CHARACTER) == "main_character_id"
        assert answer_field_for_step(Step.MAGICAL_ELEMENT) == "magical_element_id"

    def test_every_step_has_copy(self):
        assert set(STEP_COPY) == set(Step)
        assert STEP_COPY[Step.ENDING].action == "Finish Story"
        assert STEP_COPY[Step.DISPLAY].loading == "Dreaming up your tale..."
