from .client import AnalysisClient, parse_response
from .flow import AnalysisFlow, SubmissionRejected
from .models import (
    EMPTY,
    GENERIC_ERROR_MESSAGE,
    PENDING,
    AnalysisResult,
    Empty,
    Failure,
    Pending,
    Success,
    WordAnalysis,
    can_submit,
)

__all__ = [
    "AnalysisClient",
    "AnalysisFlow",
    "AnalysisResult",
    "EMPTY",
    "Empty",
    "Failure",
    "GENERIC_ERROR_MESSAGE",
    "PENDING",
    "Pending",
    "SubmissionRejected",
    "Success",
    "WordAnalysis",
    "can_submit",
    "parse_response",
]
