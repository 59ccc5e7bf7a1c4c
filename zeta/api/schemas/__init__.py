"""
API Schemas package.

Pydantic models for request/response validation.
"""

from .story import (
    StoryAnswersRequest,
    CatalogOption,
    CatalogStep,
    CatalogListResponse,
    SummaryRow,
    StoryPreviewResponse,
    StoryGenerateResponse,
)

__all__ = [
    "StoryAnswersRequest",
    "CatalogOption",
    "CatalogStep",
    "CatalogListResponse",
    "SummaryRow",
    "StoryPreviewResponse",
    "StoryGenerateResponse",
]
