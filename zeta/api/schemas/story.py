"""
Story operation schemas.

Request/response models for catalog listing, preview, and generation.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from zeta.story.models import AnswerSet


class StoryAnswersRequest(BaseModel):
    """Questionnaire answers, one catalog id per question."""

    character: Optional[str] = Field(
        default=None,
        description="Main character id",
        json_schema_extra={"examples": ["animal", "child"]}
    )
    name: Optional[str] = Field(
        default=None,
        max_length=60,
        description="Optional hero name",
        json_schema_extra={"examples": ["Mira"]}
    )
    setting: Optional[str] = Field(
        default=None,
        description="Setting id",
        json_schema_extra={"examples": ["forest", "under_the_sea"]}
    )
    helper: Optional[str] = Field(
        default=None,
        description="Helper id",
        json_schema_extra={"examples": ["fairy_godparent"]}
    )
    challenge: Optional[str] = Field(
        default=None,
        description="Challenge id",
        json_schema_extra={"examples": ["finding_something_lost"]}
    )
    magic: Optional[str] = Field(
        default=None,
        description="Magical element id",
        json_schema_extra={"examples": ["flying"]}
    )
    ending: Optional[str] = Field(
        default=None,
        description="Ending id",
        json_schema_extra={"examples": ["peaceful_sleep"]}
    )

    def to_answer_set(self) -> AnswerSet:
        return AnswerSet(
            main_character_id=self.character,
            character_name=self.name,
            setting_id=self.setting,
            helper_id=self.helper,
            challenge_id=self.challenge,
            magical_element_id=self.magic,
            ending_id=self.ending,
        )


class CatalogOption(BaseModel):
    """Single selectable option."""

    id: str
    label: str
    description: Optional[str] = None


class CatalogStep(BaseModel):
    """A question step with its options."""

    step: str
    heading: str
    action: str
    options: List[CatalogOption] = Field(default=[])


class CatalogListResponse(BaseModel):
    """Response from catalog listing."""

    steps: List[CatalogStep] = Field(default=[])


class SummaryRow(BaseModel):
    """One preview row."""

    label: str
    value: str


class StoryPreviewResponse(BaseModel):
    """Response from preview: summary rows and the prompt that would be sent."""

    heading: str
    summary: List[SummaryRow] = Field(default=[])
    prompt: str


class StoryGenerateResponse(BaseModel):
    """Response from story generation."""

    success: bool
    story: Optional[str] = None
    message: str = ""
    error: Optional[str] = None
    error_kind: Optional[str] = Field(
        default=None,
        description="Failure class: 'configuration', 'transport' or 'response_parse'"
    )
    model: Optional[str] = None
    usage: Optional[Dict[str, Any]] = None
