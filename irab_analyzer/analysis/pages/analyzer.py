from __future__ import annotations

import reflex as rx

from ...core.layout import FADE_IN, app_shell
from ..components import results_panel, sentence_form


def analyzer() -> rx.Component:
    """Sentence analysis page."""

    content = rx.vstack(
        sentence_form(),
        results_panel(),
        rx.vstack(
            rx.text("هذا التطبيق يحلل الجمل العربية التي تكتبها ويعرض إعرابها"),
            rx.text("تأكد من إدخال نص عربي صحيح للحصول على أفضل النتائج"),
            spacing="1",
            align="center",
            width="100%",
            color="gray",
            text_align="center",
            animation=FADE_IN,
        ),
        spacing="6",
        width="100%",
    )

    return app_shell(content)
