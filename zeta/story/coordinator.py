"""
Story creation coordinator.

Drives one pass through the questionnaire:

    CHARACTER -> LOCATION -> HELPER -> CHALLENGE -> MAGICAL_ELEMENT -> ENDING
        -> PREVIEW -> (generate) -> DISPLAY -> (done) -> exited

The coordinator owns the AnswerSet, the current step, the loading flag and
the generation result. Presentation layers subscribe to immutable
CoordinatorState snapshots published after every change.

All mutations happen on the thread running the event loop that called
generate(); the request task applies its result there as well. At most one
request is in flight per coordinator.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from .api_client import GeminiClient
from .catalogs import Catalog
from .errors import (
    ConfigurationError,
    GenerationError,
    InvalidTransitionError,
    MissingSelectionError,
    UnknownOptionError,
)
from .models import AnswerSet, GenerationResult
from .prompt_builder import build_story_prompt
from .steps import (
    INITIAL_STEP,
    Step,
    answer_field_for_step,
    catalog_for_step,
    is_question_step,
    next_step,
    previous_step,
)

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Oh no! The story magic fizzled. Please try again."


def format_failure(reason: str) -> str:
    """User-facing text for a failed generation."""
    return f"{FAILURE_MESSAGE}\n\n(Error: {reason})"


@dataclass(frozen=True)
class CoordinatorState:
    """Snapshot of the coordinator published to subscribers."""

    step: Step
    answers: AnswerSet
    is_loading: bool = False
    result: Optional[GenerationResult] = None
    exited: bool = False

    @property
    def display_text(self) -> str:
        if self.result is None:
            return ""
        if self.result.success:
            return self.result.text
        return format_failure(self.result.error)


StateListener = Callable[[CoordinatorState], None]


class StoryCoordinator:
    """
    State machine for one story creation flow.

    Args:
        client: Generation client used when the user asks for the story
        template: Optional loaded prompt template (default: bundled template)
    """

    def __init__(self, client: GeminiClient, template: Optional[dict] = None):
        self._client = client
        self._template = template
        self._step = INITIAL_STEP
        self._answers = AnswerSet()
        self._is_loading = False
        self._result: Optional[GenerationResult] = None
        self._exited = False
        self._task: Optional[asyncio.Task] = None
        self._listeners: List[StateListener] = []
        self.request_count = 0

    @classmethod
    def for_answers(
        cls,
        answers: AnswerSet,
        client: GeminiClient,
        template: Optional[dict] = None,
    ) -> "StoryCoordinator":
        """
        Replay a complete AnswerSet through the questionnaire.

        Every answer goes through advance(), so the same validation applies.
        The returned coordinator sits on PREVIEW.

        Raises:
            MissingSelectionError: If an answer is missing
            UnknownOptionError: If an answer is not in its catalog
        """
        coordinator = cls(client, template=template)
        while is_question_step(coordinator.step):
            field_name = answer_field_for_step(coordinator.step)
            coordinator.advance(
                getattr(answers, field_name),
                character_name=answers.character_name if coordinator.step == Step.CHARACTER else None,
            )
        return coordinator

    # --- observable state ---

    @property
    def step(self) -> Step:
        return self._step

    @property
    def answers(self) -> AnswerSet:
        return self._answers.copy()

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def result(self) -> Optional[GenerationResult]:
        return self._result

    @property
    def exited(self) -> bool:
        return self._exited

    @property
    def state(self) -> CoordinatorState:
        return CoordinatorState(
            step=self._step,
            answers=self._answers.copy(),
            is_loading=self._is_loading,
            result=self._result,
            exited=self._exited,
        )

    @property
    def display_text(self) -> str:
        return self.state.display_text

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener for state snapshots.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self) -> None:
        snapshot = self.state
        for listener in list(self._listeners):
            listener(snapshot)

    # --- questionnaire ---

    def catalog(self) -> Catalog:
        """Option catalog for the current step."""
        return catalog_for_step(self._step)

    def answer_for(self, step: Step) -> Optional[str]:
        """Previously recorded answer for a question step (for pre-population)."""
        return getattr(self._answers, answer_field_for_step(step))

    def _ensure_active(self) -> None:
        if self._exited:
            raise InvalidTransitionError("The story flow has already exited")

    def advance(self, selection: Optional[str], character_name: Optional[str] = None) -> Step:
        """
        Record the answer for the current question step and move forward.

        Args:
            selection: Catalog identifier chosen on the current step
            character_name: Optional hero name (CHARACTER step only)

        Returns:
            Step: The new current step

        Raises:
            InvalidTransitionError: Current step is not a question step
            MissingSelectionError: No selection given
            UnknownOptionError: Selection not in the step's catalog
        """
        self._ensure_active()
        step = self._step
        if not is_question_step(step):
            raise InvalidTransitionError(f"Cannot advance from step '{step.value}'")

        if not selection:
            raise MissingSelectionError(step.value)
        if selection not in catalog_for_step(step):
            raise UnknownOptionError(step.value, selection)

        setattr(self._answers, answer_field_for_step(step), selection)
        if step == Step.CHARACTER:
            name = character_name.strip() if character_name else ""
            self._answers.character_name = name or None

        self._step = next_step(step)
        logger.debug(f"[Coordinator] {step.value} = {selection} -> {self._step.value}")
        self._publish()
        return self._step

    def retreat(self) -> Optional[Step]:
        """
        Go back one step, keeping every recorded answer.

        From CHARACTER this exits the flow and returns None.

        Raises:
            InvalidTransitionError: On DISPLAY (use done()) or after exit
        """
        self._ensure_active()
        if self._step == Step.DISPLAY:
            raise InvalidTransitionError("Cannot go back from the story display; use done()")

        previous = previous_step(self._step)
        if previous is None:
            logger.info("[Coordinator] Back from first step - leaving the flow")
            self._exit()
            return None

        self._step = previous
        self._publish()
        return previous

    # --- generation ---

    def generate(self) -> Optional[asyncio.Task]:
        """
        Start story generation from the preview step.

        Must be called from a running event loop. Moves to DISPLAY with
        is_loading set, builds the prompt, and schedules the request. While a
        request is in flight further calls are ignored and return the same
        task. A missing API key ends immediately in a failure result without
        any request.

        Returns:
            Optional[asyncio.Task]: The request task, or None when the
            configuration check failed

        Raises:
            InvalidTransitionError: Not on PREVIEW (and not loading)
        """
        if self._is_loading:
            logger.info("[Coordinator] Generation already in progress - ignoring")
            return self._task

        self._ensure_active()
        if self._step != Step.PREVIEW:
            raise InvalidTransitionError(f"Cannot generate from step '{self._step.value}'")

        try:
            self._client.ensure_configured()
        except ConfigurationError as e:
            logger.error(f"[Coordinator] {e.reason}")
            self._step = Step.DISPLAY
            self._result = GenerationResult.failed(e)
            self._publish()
            return None

        prompt = build_story_prompt(self._answers, template=self._template)
        logger.debug(f"[Coordinator] Prompt:\n{prompt}")

        self._step = Step.DISPLAY
        self._is_loading = True
        self._result = None
        self.request_count += 1
        self._task = asyncio.get_running_loop().create_task(self._run_generation(prompt))
        self._publish()
        return self._task

    async def _run_generation(self, prompt: str) -> GenerationResult:
        try:
            result = await self._client.generate(prompt)
        except Exception as e:
            logger.error(f"[Coordinator] Unexpected generation error: {e}")
            result = GenerationResult.failed(GenerationError(f"Unexpected error: {e}"))
        self._apply_result(result)
        return result

    def _apply_result(self, result: GenerationResult) -> None:
        self._is_loading = False
        self._task = None
        if self._exited:
            return
        self._result = result
        if result.success:
            logger.info(f"[Coordinator] Story ready ({len(result.text)} chars)")
        else:
            logger.warning(f"[Coordinator] Story generation failed ({result.error_kind}): {result.error}")
        self._publish()

    # --- exit ---

    def done(self) -> None:
        """
        Leave the flow from the story display, discarding all answers and
        the result.

        Raises:
            InvalidTransitionError: Not on DISPLAY, or still loading
        """
        self._ensure_active()
        if self._step != Step.DISPLAY:
            raise InvalidTransitionError(f"Cannot finish from step '{self._step.value}'")
        if self._is_loading:
            raise InvalidTransitionError("Story generation is still in progress")
        self._exit()

    def _exit(self) -> None:
        self._answers = AnswerSet()
        self._result = None
        self._step = INITIAL_STEP
        self._exited = True
        self._publish()
