from __future__ import annotations

import reflex as rx

from ...core.layout import FADE_SLIDE_IN
from ...core.state import AppState
from ..state import AnalysisState


def _submit_button() -> rx.Component:
    return rx.button(
        rx.cond(
            AnalysisState.is_pending,
            rx.spinner(size="2"),
            rx.hstack(
                rx.text("تحليل"),
                rx.icon("send", size=18),
                spacing="2",
                align="center",
            ),
        ),
        type="submit",
        disabled=~AnalysisState.submit_enabled,
        color_scheme="blue",
        size="3",
    )


def sentence_form() -> rx.Component:
    """Textarea and submit control for a single sentence."""

    return rx.card(
        rx.form(
            rx.vstack(
                rx.el.label(
                    "أدخل جملتك هنا:",
                    html_for="sentence",
                    font_size="1.125em",
                    font_weight="500",
                ),
                rx.text_area(
                    id="sentence",
                    value=AnalysisState.sentence,
                    on_change=AnalysisState.set_sentence,
                    placeholder="اكتب جملتك هنا...",
                    dir="rtl",
                    rows="4",
                    resize="none",
                    width="100%",
                    disabled=AnalysisState.is_pending,
                ),
                rx.hstack(
                    _submit_button(),
                    rx.cond(
                        AnalysisState.has_result,
                        rx.button(
                            "مسح",
                            type="button",
                            variant="soft",
                            color_scheme="gray",
                            size="3",
                            on_click=AnalysisState.clear,
                        ),
                    ),
                    spacing="3",
                ),
                spacing="3",
                align="start",
                width="100%",
            ),
            on_submit=AnalysisState.submit,
            reset_on_submit=False,
            width="100%",
        ),
        size="3",
        width="100%",
        animation=FADE_SLIDE_IN,
        background=rx.cond(AppState.dark_mode, "#1f2937", "white"),
    )
