from __future__ import annotations

import logging

import reflex as rx

from .analysis.pages.analyzer import analyzer
from .core import ANIMATION_STYLESHEET, FONT_STYLESHEET, AppState
from .core.components.header import APP_TITLE
from .settings import Settings, configure_logging

logger = logging.getLogger(__name__)

APP_DESCRIPTION = "تطبيق لتحليل وإعراب الجمل العربية"


def _create_app() -> rx.App:
    """Instantiate the Reflex app; states register themselves on use."""

    settings = Settings.from_env()
    configure_logging(settings.log_level)
    logger.info("Analysis requests go to %s", settings.analysis_api_url)

    return rx.App(
        stylesheets=[FONT_STYLESHEET, ANIMATION_STYLESHEET],
        theme=rx.theme(radius="large", accent_color="blue"),
    )


app = _create_app()

app.add_page(
    analyzer,
    route="/",
    title=APP_TITLE,
    description=APP_DESCRIPTION,
    on_load=AppState.load_preference,
)
