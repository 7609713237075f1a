from __future__ import annotations

import reflex as rx

from .preferences import STORAGE_KEY, seed_from_system, system_changed, toggle_view

SYSTEM_DARK_QUERY = "window.matchMedia('(prefers-color-scheme: dark)').matches"


class AppState(rx.State):
    """Application-wide state shared across all features."""

    dark_mode: bool = False
    system_dark: bool = False
    preference_loaded: bool = False
    stored_preference: str = rx.LocalStorage("", name=STORAGE_KEY, sync=True)

    @rx.event
    def load_preference(self):
        """Ask the browser for the OS color scheme, then resolve the preference."""

        return rx.call_script(SYSTEM_DARK_QUERY, callback=AppState.set_system_preference)

    @rx.event
    def set_system_preference(self, dark: bool):
        seed_from_system(self, dark)

    @rx.event
    def toggle_theme(self):
        """Toggle between light and dark color schemes."""

        toggle_view(self)

    @rx.event
    def handle_system_change(self, dark: bool):
        system_changed(self, dark)
