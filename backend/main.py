"""ASGI entry point for launching the stub Analysis Service."""

from __future__ import annotations

import os

import uvicorn

from irab_analyzer.settings import configure_logging


def main() -> None:
    """Run the stub service using uvicorn."""

    configure_logging(os.environ.get("LOG_LEVEL", "INFO").upper())
    host = os.environ.get("HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", "8000"))
    reload = os.environ.get("UVICORN_RELOAD", "0") == "1"
    uvicorn.run("backend.api:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    main()
