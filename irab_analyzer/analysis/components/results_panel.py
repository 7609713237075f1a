from __future__ import annotations

import reflex as rx

from ...core.layout import FADE_SLIDE_IN
from ...core.state import AppState
from ..state import AnalysisState


def _word_card(item: rx.Var) -> rx.Component:
    return rx.box(
        rx.text(item["word"], size="5", weight="bold", margin_bottom="0.5em"),
        rx.text(
            item["irab"],
            color=rx.cond(AppState.dark_mode, "#d1d5db", "#4b5563"),
        ),
        background=rx.cond(AppState.dark_mode, "#374151", "#f3f4f6"),
        border_radius="0.5em",
        padding="1em",
        width="100%",
    )


def _success_body() -> rx.Component:
    return rx.vstack(
        rx.heading(
            "نتيجة التحليل",
            size="6",
            color=rx.cond(AppState.dark_mode, "#4ade80", "#22c55e"),
        ),
        rx.foreach(AnalysisState.words, _word_card),
        spacing="4",
        width="100%",
    )


def _failure_body() -> rx.Component:
    return rx.callout(
        AnalysisState.error_message,
        icon="circle_alert",
        color_scheme="red",
        size="2",
        width="100%",
    )


def results_panel() -> rx.Component:
    """Render the settled result; nothing while empty or pending."""

    return rx.cond(
        AnalysisState.has_result,
        rx.card(
            rx.cond(AnalysisState.succeeded, _success_body(), _failure_body()),
            size="3",
            width="100%",
            border="2px solid",
            border_color=rx.cond(AnalysisState.succeeded, "#22c55e", "#ef4444"),
            background=rx.cond(AppState.dark_mode, "#1f2937", "white"),
            animation=FADE_SLIDE_IN,
        ),
    )
