from __future__ import annotations

import reflex as rx

from .components import app_header, scheme_listener
from .state import AppState

FONT_STYLESHEET = "https://fonts.googleapis.com/css2?family=Amiri:wght@400;700&display=swap"
ANIMATION_STYLESHEET = "/animations.css"

# Keyframes live in assets/animations.css.
FADE_SLIDE_IN = "fade-slide-in 0.5s ease-out both"
FADE_IN = "fade-in 0.5s ease-out 0.5s both"


def app_shell(*children: rx.Component, size: str | None = "3") -> rx.Component:
    """Wrap pages in the common right-to-left application shell."""

    content = rx.box(
        *children,
        width="100%",
        padding_x="1em",
        padding_y="2em",
    )

    if size is not None:
        content = rx.container(content, size=size)

    return rx.box(
        scheme_listener(),
        app_header(),
        content,
        lang="ar",
        dir="rtl",
        width="100%",
        min_height="100vh",
        font_family="Amiri, serif",
        transition="background-color 0.3s, color 0.3s",
        background=rx.cond(
            AppState.dark_mode,
            "#111827",
            "white",
        ),
        color=rx.cond(
            AppState.dark_mode,
            "#f9fafb",
            "#1f2937",
        ),
    )
