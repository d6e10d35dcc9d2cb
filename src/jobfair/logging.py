"""Logging utilities for the job fair repository."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog

APP_NAME = "jobfair"


def configure_logging(level: str = "INFO", *, data_dir: Path | str | None = None) -> None:
    """Configure structlog JSON output on stderr.

    Every event carries ``app`` and, when given, the ``data_dir`` the
    repository was loaded from, along with the emitting module's name.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format="%(message)s", stream=sys.stderr)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.clear_contextvars()
    context: dict[str, str] = {"app": APP_NAME}
    if data_dir is not None:
        context["data_dir"] = str(data_dir)
    structlog.contextvars.bind_contextvars(**context)
