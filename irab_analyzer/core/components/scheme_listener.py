from __future__ import annotations

import reflex as rx

from ..state import AppState

DARK_TRIGGER_ID = "system-scheme-dark"
LIGHT_TRIGGER_ID = "system-scheme-light"

# The change listener forwards OS scheme changes to the hidden triggers below.
SUBSCRIBE_SCRIPT = f"""
(() => {{
  if (window.__irabSchemeUnsubscribe) return;
  const query = window.matchMedia('(prefers-color-scheme: dark)');
  const listener = (event) => {{
    const id = event.matches ? '{DARK_TRIGGER_ID}' : '{LIGHT_TRIGGER_ID}';
    const trigger = document.getElementById(id);
    if (trigger) trigger.click();
  }};
  query.addEventListener('change', listener);
  window.__irabSchemeUnsubscribe = () => query.removeEventListener('change', listener);
}})()
"""

UNSUBSCRIBE_SCRIPT = """
(() => {
  if (!window.__irabSchemeUnsubscribe) return;
  window.__irabSchemeUnsubscribe();
  delete window.__irabSchemeUnsubscribe;
})()
"""


def scheme_listener() -> rx.Component:
    """Follow OS color-scheme changes while the page is mounted."""

    return rx.box(
        rx.el.button(
            id=DARK_TRIGGER_ID,
            type="button",
            on_click=AppState.handle_system_change(True),
        ),
        rx.el.button(
            id=LIGHT_TRIGGER_ID,
            type="button",
            on_click=AppState.handle_system_change(False),
        ),
        display="none",
        custom_attrs={"aria-hidden": "true"},
        on_mount=rx.call_script(SUBSCRIBE_SCRIPT),
        on_unmount=rx.call_script(UNSUBSCRIBE_SCRIPT),
    )
