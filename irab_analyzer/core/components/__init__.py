from .header import app_header
from .scheme_listener import scheme_listener

__all__ = ["app_header", "scheme_listener"]
