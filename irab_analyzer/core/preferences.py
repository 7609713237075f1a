"""Dark-mode preference: stored value, OS seed, and OS change tracking."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Protocol

logger = logging.getLogger(__name__)

STORAGE_KEY = "darkMode"

_TRUE = "true"
_FALSE = "false"


class PreferenceStorage(Protocol):
    """A single persisted key-value slot holding the encoded preference."""

    def load(self) -> Optional[str]: ...

    def save(self, value: str) -> None: ...


class SystemSchemeMonitor(Protocol):
    """Source of the OS color-scheme preference.

    In the web app this role is played by the browser: the script in
    ``core.components.scheme_listener`` subscribes to ``matchMedia`` on mount
    and unsubscribes on unmount. Python callers use this
    protocol to drive the same transitions without a browser.
    """

    def is_dark(self) -> bool: ...

    def subscribe(self, callback: Callable[[bool], None]) -> Callable[[], None]: ...


def encode_preference(dark: bool) -> str:
    return _TRUE if dark else _FALSE


def decode_preference(raw: Optional[str]) -> Optional[bool]:
    """Return the stored boolean, or ``None`` when nothing usable is stored."""

    if raw is None:
        return None
    value = raw.strip().lower()
    if value == _TRUE:
        return True
    if value == _FALSE:
        return False
    if value:
        logger.debug("Ignoring unrecognised stored preference %r", raw)
    return None


def resolve_initial(stored: Optional[str], system_dark: bool) -> bool:
    """Stored preference wins over the OS preference."""

    decoded = decode_preference(stored)
    return system_dark if decoded is None else decoded


class PreferenceStore:
    """Own the dark-mode flag and write every change through to storage.

    The current value is seeded lazily from :meth:`get_initial` unless one is
    passed in, which lets short-lived owners (such as a UI event handler)
    rebuild the store around state they already hold.
    """

    def __init__(
        self,
        storage: PreferenceStorage,
        system_is_dark: Callable[[], bool],
        current: Optional[bool] = None,
    ) -> None:
        self._storage = storage
        self._system_is_dark = system_is_dark
        self._current = current

    @property
    def dark_mode(self) -> bool:
        if self._current is None:
            self._current = self.get_initial()
        return self._current

    def get_initial(self) -> bool:
        return resolve_initial(self._storage.load(), self._system_is_dark())

    def _set(self, dark: bool) -> bool:
        self._current = dark
        self._storage.save(encode_preference(dark))
        return dark

    def toggle(self) -> bool:
        return self._set(not self.dark_mode)

    def apply_system_change(self, dark: bool) -> bool:
        """An OS scheme change overrides any earlier manual toggle."""

        logger.debug("System color scheme changed to %s", "dark" if dark else "light")
        return self._set(dark)

    def on_system_change(
        self,
        monitor: SystemSchemeMonitor,
        handler: Optional[Callable[[bool], None]] = None,
    ) -> Callable[[], None]:
        """Follow *monitor*; returns the unsubscribe callable."""

        def _changed(dark: bool) -> None:
            value = self.apply_system_change(dark)
            if handler is not None:
                handler(value)

        return monitor.subscribe(_changed)

    @contextmanager
    def watch_system(
        self,
        monitor: SystemSchemeMonitor,
        handler: Optional[Callable[[bool], None]] = None,
    ) -> Iterator["PreferenceStore"]:
        """Scope an OS subscription: released on every exit path, like the
        page listener released on unmount.
        """

        unsubscribe = self.on_system_change(monitor, handler)
        try:
            yield self
        finally:
            unsubscribe()


class _ViewSlot:
    """Expose a view's ``stored_preference`` attribute as a storage slot."""

    def __init__(self, view) -> None:
        self._view = view

    def load(self) -> Optional[str]:
        return self._view.stored_preference or None

    def save(self, value: str) -> None:
        self._view.stored_preference = value


# The functions below are the bodies of ``AppState``'s event handlers. A view
# is any object with ``dark_mode``, ``system_dark``, ``preference_loaded`` and
# ``stored_preference`` attributes.


def store_for(view) -> PreferenceStore:
    """Rebuild the store around *view*; unseeded views resolve from storage."""

    return PreferenceStore(
        _ViewSlot(view),
        lambda: view.system_dark,
        current=view.dark_mode if view.preference_loaded else None,
    )


def seed_from_system(view, dark: bool) -> bool:
    view.system_dark = bool(dark)
    view.dark_mode = store_for(view).get_initial()
    view.preference_loaded = True
    return view.dark_mode


def toggle_view(view) -> bool:
    view.dark_mode = store_for(view).toggle()
    view.preference_loaded = True
    return view.dark_mode


def system_changed(view, dark: bool) -> bool:
    view.system_dark = bool(dark)
    view.dark_mode = store_for(view).apply_system_change(view.system_dark)
    view.preference_loaded = True
    return view.dark_mode
