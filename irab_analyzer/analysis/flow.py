"""Single-request analysis flow: Empty -> Pending -> Success | Failure."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from .client import AnalysisClient
from .models import EMPTY, PENDING, AnalysisResult, Failure, Pending, Success, can_submit

logger = logging.getLogger(__name__)

Listener = Callable[[AnalysisResult], None]


class SubmissionRejected(RuntimeError):
    """Raised when a submission is attempted while the control is disabled."""


class AnalysisFlow:
    """Own the current analysis result and drive one request at a time."""

    def __init__(self, client: AnalysisClient, result: AnalysisResult = EMPTY) -> None:
        self._client = client
        self._result: AnalysisResult = result
        self._sentence: Optional[str] = None
        self._listeners: list[Listener] = []

    @property
    def result(self) -> AnalysisResult:
        return self._result

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Observe every transition; returns the unsubscribe callable.

        The Reflex page reads transitions from the state it applies them to;
        this hook serves callers that drive a flow directly.
        """

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, result: AnalysisResult) -> AnalysisResult:
        self._result = result
        for listener in list(self._listeners):
            listener(result)
        return result

    def can_submit(self, text: str) -> bool:
        return can_submit(text, self._result)

    def begin(self, text: str) -> AnalysisResult:
        """Check the precondition and switch to ``Pending`` synchronously."""

        if not self.can_submit(text):
            raise SubmissionRejected(
                "A submission is already pending."
                if isinstance(self._result, Pending)
                else "Cannot submit an empty sentence."
            )
        self._sentence = text.strip()
        return self._set(PENDING)

    async def finish(self) -> Union[Success, Failure]:
        """Await the service for the sentence passed to :meth:`begin`."""

        if self._sentence is None:
            raise SubmissionRejected("No submission has been started.")
        sentence, self._sentence = self._sentence, None
        logger.debug("Submitting sentence of %d characters for analysis", len(sentence))
        try:
            result = await self._client.analyze(sentence)
        except Exception:
            self._set(Failure())
            raise
        self._set(result)
        return result

    async def submit(self, text: str) -> Union[Success, Failure]:
        self.begin(text)
        return await self.finish()
