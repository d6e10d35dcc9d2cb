from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import structlog

from jobfair.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


def test_configure_logging_binds_repository_context(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO)
    configure_logging("INFO", data_dir=tmp_path / "database")

    structlog.get_logger("jobfair.sample").info("repository.loaded", jobs=3)

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["event"] == "repository.loaded"
    assert payload["app"] == "jobfair"
    assert payload["data_dir"] == str(tmp_path / "database")
    assert payload["logger"] == "jobfair.sample"
    assert payload["level"] == "info"
    assert payload["jobs"] == 3


def test_configure_logging_filters_below_level(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG)
    configure_logging("warning")

    logger = structlog.get_logger("jobfair.sample")
    logger.info("applications.appended")
    logger.warning("applications.grade_miss")

    events = [json.loads(record.getMessage())["event"] for record in caplog.records]
    assert events == ["applications.grade_miss"]
    assert structlog.contextvars.get_contextvars() == {"app": "jobfair"}
