"""Environment-driven settings shared by the web app and the stub service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_ANALYSIS_API_URL = "http://localhost:8000/analyze"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_timeout(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    try:
        timeout = float(value)
    except ValueError as exc:
        raise ValueError(f"ANALYSIS_API_TIMEOUT must be a number, got {value!r}.") from exc
    if timeout <= 0:
        raise ValueError("ANALYSIS_API_TIMEOUT must be greater than zero.")
    return timeout


@dataclass(frozen=True)
class Settings:
    """Runtime configuration read from environment-style values.

    ``request_timeout`` is ``None`` unless explicitly configured, in which case
    the HTTP client's own default timeout applies.
    """

    analysis_api_url: str = DEFAULT_ANALYSIS_API_URL
    request_timeout: Optional[float] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        url = env.get("ANALYSIS_API_URL", DEFAULT_ANALYSIS_API_URL).strip()
        if not url:
            raise ValueError("Analysis API URL is not configured.")
        return cls(
            analysis_api_url=url,
            request_timeout=_parse_timeout(env.get("ANALYSIS_API_TIMEOUT")),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    """Install a root handler once; later calls only adjust the level."""

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_LOG_FORMAT)
    root.setLevel(level)
