"""Placeholder i'rab analysis used by the stub service."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

ARABIC_ONLY = re.compile(r"^[\u0600-\u06FF\s]+$")

NON_ARABIC_ERROR = "Input contains non-Arabic characters."
EMPTY_SENTENCE_ERROR = "Sentence must not be empty."

# Positional placeholders; the stub does not parse the sentence.
PLACEHOLDER_IRAB: Sequence[str] = (
    "فعل ماضٍ مبني على الفتح",
    "فاعل مرفوع وعلامة رفعه الضمة الظاهرة",
)
UNANALYZED_IRAB = "لم يتم تحليل هذه الكلمة"


@dataclass(frozen=True)
class StubAnalysis:
    success: bool
    words: tuple[tuple[str, str], ...] = ()
    error: str | None = None

    def to_dict(self) -> dict:
        if not self.success:
            return {"success": False, "error": self.error}
        return {
            "success": True,
            "output": [{"word": word, "irab": irab} for word, irab in self.words],
        }


def is_arabic(text: str) -> bool:
    return bool(ARABIC_ONLY.match(text))


def placeholder_irab(position: int) -> str:
    if 0 <= position < len(PLACEHOLDER_IRAB):
        return PLACEHOLDER_IRAB[position]
    return UNANALYZED_IRAB


def analyze_sentence(sentence: str) -> StubAnalysis:
    """Split *sentence* on whitespace and label each word by position."""

    text = sentence.strip()
    if not text:
        return StubAnalysis(success=False, error=EMPTY_SENTENCE_ERROR)
    if not is_arabic(text):
        return StubAnalysis(success=False, error=NON_ARABIC_ERROR)
    words = tuple((word, placeholder_irab(index)) for index, word in enumerate(text.split()))
    return StubAnalysis(success=True, words=words)
