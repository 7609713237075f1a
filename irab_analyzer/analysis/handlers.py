"""Event-handler bodies for the analysis page, independent of Reflex.

``AnalysisState`` passes itself as the *view*: any object with ``sentence``,
``status``, ``words`` and ``error_message`` attributes works.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Union

from ..settings import Settings
from .client import AnalysisClient
from .flow import AnalysisFlow, SubmissionRejected
from .models import EMPTY, AnalysisResult, Failure, Pending, Success, can_submit, from_view, to_view

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], AnalysisClient]


def default_client() -> AnalysisClient:
    return AnalysisClient.from_settings(Settings.from_env())


def current_result(view: Any) -> AnalysisResult:
    return from_view(view.status, view.words, view.error_message)


def apply_result(view: Any, result: AnalysisResult) -> None:
    """Overwrite all result fields of *view* from a single variant."""

    flat = to_view(result)
    view.status = flat["status"]
    view.words = flat["words"]
    view.error_message = flat["error_message"]


def submit_enabled(sentence: str, status: str) -> bool:
    pending = status == Pending.kind
    return can_submit(sentence, Pending() if pending else EMPTY)


def has_result(status: str) -> bool:
    return status in (Success.kind, Failure.kind)


def clear(view: Any) -> bool:
    """Reset the input and result; refused while a request is pending."""

    if view.status == Pending.kind:
        return False
    view.sentence = ""
    apply_result(view, EMPTY)
    return True


def begin_submission(view: Any, make_client: ClientFactory = default_client) -> Optional[AnalysisFlow]:
    """Switch *view* to ``Pending`` and return the flow to finish, if any.

    An unusable configuration settles the view to the generic failure at once.
    """

    try:
        flow = AnalysisFlow(make_client(), current_result(view))
    except ValueError as exc:
        logger.error("Analysis service is not configured: %s", exc)
        apply_result(view, Failure())
        return None
    try:
        apply_result(view, flow.begin(view.sentence))
    except SubmissionRejected as exc:
        logger.debug("Ignoring submission: %s", exc)
        return None
    return flow


async def settle_submission(flow: AnalysisFlow) -> Union[Success, Failure]:
    """Await the flow; unexpected errors are logged and settle as failures."""

    try:
        return await flow.finish()
    except Exception:
        logger.exception("Unexpected error while analyzing sentence")
        result = flow.result
        return result if isinstance(result, Failure) else Failure()
