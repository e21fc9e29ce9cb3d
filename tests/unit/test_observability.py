"""Unit tests for the structured logging helpers in ``observability``."""

from __future__ import annotations

import logging

import pytest

from excuz import get_logger
from excuz.observability import log_info, make_event


def test_null_handler_present() -> None:
    """Package logger should always include a NullHandler to stay silent by default."""

    logger = get_logger()
    assert logger.name == "excuz"
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_structured_fields_in_log(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="excuz")
    log_info("dataset_loaded", language="en", records=3)
    record = caplog.records[-1]
    assert record.getMessage() == "dataset_loaded"
    assert getattr(record, "context") == {"language": "en", "records": 3}


def test_make_event_merges_optional_payload() -> None:
    assert make_event("bn", "bn.json", {"size": 10}) == {"language": "bn", "resource": "bn.json", "size": 10}
    assert make_event("en", None, {}) == {"language": "en", "resource": None}
