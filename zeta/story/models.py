"""
Story flow data model.

- AnswerSet: the user's selections for one questionnaire pass
- GenerationResult: outcome of one story request
"""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional

from .errors import GenerationError


@dataclass
class AnswerSet:
    """
    Accumulated selections for one pass through the questionnaire.

    Every *_id holds a catalog identifier. Created empty when a flow starts
    and discarded when it exits.
    """

    main_character_id: Optional[str] = None
    character_name: Optional[str] = None
    setting_id: Optional[str] = None
    helper_id: Optional[str] = None
    challenge_id: Optional[str] = None
    magical_element_id: Optional[str] = None
    ending_id: Optional[str] = None

    def copy(self) -> "AnswerSet":
        return replace(self)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


@dataclass(frozen=True)
class GenerationResult:
    """Result from one story generation request."""

    text: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    model: Optional[str] = None
    usage: Optional[Dict[str, int]] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def ok(
        cls,
        text: str,
        model: Optional[str] = None,
        usage: Optional[Dict[str, int]] = None,
    ) -> "GenerationResult":
        return cls(text=text, model=model, usage=usage)

    @classmethod
    def failed(cls, exc: GenerationError, model: Optional[str] = None) -> "GenerationResult":
        return cls(error=exc.reason, error_kind=exc.kind, model=model)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["success"] = self.success
        return data
