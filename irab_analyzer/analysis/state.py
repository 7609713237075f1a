from __future__ import annotations

from typing import Any, Optional

import reflex as rx

from . import handlers
from .models import EMPTY, Failure, Pending, Success


class AnalysisState(rx.State):
    """Sentence input and the latest analysis result, flattened for rendering."""

    sentence: str = ""
    status: str = EMPTY.kind
    words: list[dict[str, str]] = []
    error_message: str = ""

    @rx.var
    def is_pending(self) -> bool:
        return self.status == Pending.kind

    @rx.var
    def submit_enabled(self) -> bool:
        return handlers.submit_enabled(self.sentence, self.status)

    @rx.var
    def succeeded(self) -> bool:
        return self.status == Success.kind

    @rx.var
    def failed(self) -> bool:
        return self.status == Failure.kind

    @rx.var
    def has_result(self) -> bool:
        return handlers.has_result(self.status)

    @rx.event
    def set_sentence(self, value: str):
        self.sentence = value

    @rx.event
    def clear(self):
        handlers.clear(self)

    @rx.event(background=True)
    async def submit(self, form_data: Optional[dict[str, Any]] = None):
        """Analyze the current sentence; the control stays disabled until settled."""

        async with self:
            flow = handlers.begin_submission(self)
        if flow is None:
            return

        result = await handlers.settle_submission(flow)

        async with self:
            handlers.apply_result(self, result)
