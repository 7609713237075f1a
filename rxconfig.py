from __future__ import annotations

import reflex as rx


class IrabAnalyzerConfig(rx.Config):
    pass


# The analysis endpoint itself is read from ANALYSIS_API_URL by
# ``irab_analyzer.settings``; this file only carries Reflex's own settings.
config = IrabAnalyzerConfig(
    app_name="irab_analyzer",
)
