from __future__ import annotations

import reflex as rx

from ..state import AppState

APP_TITLE = "محلل الجمل العربية"


def app_header() -> rx.Component:
    """Render the persistent application header."""

    theme_icon = rx.cond(
        AppState.dark_mode,
        rx.icon("sun", color="#facc15"),
        rx.icon("moon", color="#374151"),
    )

    return rx.box(
        rx.container(
            rx.hstack(
                rx.heading(
                    APP_TITLE,
                    size="8",
                    weight="bold",
                    color=rx.cond(AppState.dark_mode, "white", "#1f2937"),
                ),
                rx.spacer(),
                rx.icon_button(
                    theme_icon,
                    custom_attrs={"aria-label": "Toggle theme"},
                    on_click=AppState.toggle_theme,
                    radius="full",
                    variant="soft",
                    color_scheme="gray",
                ),
                spacing="4",
                align="center",
                width="100%",
            ),
            size="3",
        ),
        width="100%",
        padding_y="1em",
        border_bottom="1px solid",
        border_color=rx.cond(AppState.dark_mode, "#374151", "#e5e7eb"),
        background=rx.cond(AppState.dark_mode, "#111827", "white"),
        position="sticky",
        top="0",
        z_index="1000",
    )
