"""Helpers to launch the report API server."""

from __future__ import annotations

import logging
from typing import Optional

import uvicorn

from .config import ReportSettings
from .webapp import create_app


def run_server(
    *,
    host: str = "127.0.0.1",
    port: int = 8765,
    settings: Optional[ReportSettings] = None,
    log_level: str = "info",
) -> None:
    """Start the FastAPI report server."""
    app = create_app(settings=settings or ReportSettings())
    logging.getLogger("uvicorn.error").setLevel(log_level.upper())
    uvicorn.run(app, host=host, port=port, log_level=log_level)
