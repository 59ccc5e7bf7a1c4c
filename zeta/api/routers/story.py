"""
Story router.

Endpoints:
- GET /story/catalogs - Questions and their options
- POST /story/preview - Summary rows and assembled prompt for answers
- POST /story/generate - Generate a story for answers (blocking)

Every request runs its own coordinator; nothing is kept between requests.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from zeta.story.api_client import GeminiClient
from zeta.story.coordinator import FAILURE_MESSAGE, StoryCoordinator
from zeta.story.errors import WizardError
from zeta.story.prompt_builder import build_story_prompt, summarize_answers
from zeta.story.steps import STEP_COPY, Step, catalog_for_step, is_question_step

from ..dependencies.generation import get_generation_client, get_prompt_template
from ..schemas.story import (
    CatalogListResponse,
    CatalogOption,
    CatalogStep,
    StoryAnswersRequest,
    StoryGenerateResponse,
    StoryPreviewResponse,
    SummaryRow,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _coordinator_for(
    request: StoryAnswersRequest,
    client: GeminiClient,
    template: Dict[str, Any],
) -> StoryCoordinator:
    try:
        return StoryCoordinator.for_answers(request.to_answer_set(), client, template=template)
    except WizardError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/catalogs", response_model=CatalogListResponse)
async def list_catalogs():
    """List every question step with its options, in flow order."""
    steps = []
    for step in Step:
        if not is_question_step(step):
            continue
        copy = STEP_COPY[step]
        steps.append(CatalogStep(
            step=step.value,
            heading=copy.heading,
            action=copy.action,
            options=[
                CatalogOption(id=entry.id, label=entry.label, description=entry.description)
                for entry in catalog_for_step(step).values()
            ],
        ))
    return CatalogListResponse(steps=steps)


@router.post("/preview", response_model=StoryPreviewResponse)
async def preview_story(
    request: StoryAnswersRequest,
    client: GeminiClient = Depends(get_generation_client),
    template: Dict[str, Any] = Depends(get_prompt_template),
):
    """
    Validate answers and show what would be sent.

    Returns 422 when an answer is missing or not a known option.
    """
    coordinator = _coordinator_for(request, client, template)
    answers = coordinator.answers

    return StoryPreviewResponse(
        heading=STEP_COPY[Step.PREVIEW].heading,
        summary=[SummaryRow(label=label, value=value) for label, value in summarize_answers(answers)],
        prompt=build_story_prompt(answers, template=template),
    )


@router.post("/generate", response_model=StoryGenerateResponse)
async def generate_story(
    request: StoryAnswersRequest,
    client: GeminiClient = Depends(get_generation_client),
    template: Dict[str, Any] = Depends(get_prompt_template),
):
    """
    Generate a story (blocking).

    Generation failures are reported in the body with success=false and an
    error_kind; they are not HTTP errors.
    """
    coordinator = _coordinator_for(request, client, template)

    task = coordinator.generate()
    if task is not None:
        await task

    result = coordinator.result
    if result is None or not result.success:
        logger.warning(f"[StoryAPI] Generation failed: {result.error if result else 'no result'}")
        return StoryGenerateResponse(
            success=False,
            message=FAILURE_MESSAGE,
            error=result.error if result else None,
            error_kind=result.error_kind if result else None,
            model=result.model if result else None,
        )

    return StoryGenerateResponse(
        success=True,
        story=result.text,
        message=STEP_COPY[Step.DISPLAY].heading,
        model=result.model,
        usage=result.usage,
    )
