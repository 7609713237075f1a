from .layout import ANIMATION_STYLESHEET, FONT_STYLESHEET, app_shell
from .state import AppState

__all__ = ["ANIMATION_STYLESHEET", "AppState", "FONT_STYLESHEET", "app_shell"]
