"""Wire models and the tagged analysis result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

GENERIC_ERROR_MESSAGE = "An error occurred while processing your request."


class WordAnalysis(BaseModel):
    """A single token and its grammatical role description."""

    model_config = ConfigDict(frozen=True)

    word: StrictStr
    irab: StrictStr

    def to_dict(self) -> dict[str, str]:
        return {"word": self.word, "irab": self.irab}


class AnalysisResponse(BaseModel):
    """Body returned by the Analysis Service."""

    success: StrictBool
    output: Optional[list[WordAnalysis]] = Field(None, description="Per-word analysis on success.")
    error: Optional[StrictStr] = Field(None, description="Human-readable reason on failure.")


@dataclass(frozen=True)
class Empty:
    kind = "empty"


@dataclass(frozen=True)
class Pending:
    kind = "pending"


@dataclass(frozen=True)
class Success:
    items: tuple[WordAnalysis, ...] = ()

    kind = "success"


@dataclass(frozen=True)
class Failure:
    message: str = GENERIC_ERROR_MESSAGE

    kind = "failure"


AnalysisResult = Union[Empty, Pending, Success, Failure]

EMPTY = Empty()
PENDING = Pending()


def can_submit(text: str, result: AnalysisResult) -> bool:
    """Return ``True`` when the submission control should be enabled."""

    return bool(text.strip()) and not isinstance(result, Pending)


def to_view(result: AnalysisResult) -> dict[str, Any]:
    """Flatten *result* into the fields the UI state renders from."""

    words: list[dict[str, str]] = []
    error_message = ""
    if isinstance(result, Success):
        words = [item.to_dict() for item in result.items]
    elif isinstance(result, Failure):
        error_message = result.message
    return {"status": result.kind, "words": words, "error_message": error_message}


def from_view(status: str, words: list[dict[str, str]], error_message: str) -> AnalysisResult:
    """Rebuild the tagged result from its flattened UI projection."""

    if status == Pending.kind:
        return PENDING
    if status == Success.kind:
        return Success(tuple(WordAnalysis(**word) for word in words))
    if status == Failure.kind:
        return Failure(error_message)
    return EMPTY
