"""Structured logging helpers shared by every layer of ``excuz``.

Purpose
    Keep diagnostic output predictable and contextual without forcing the CLI
    or library consumers to adopt a specific logging backend.

Contents
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``log_debug`` / ``log_info`` / ``log_error``: emit structured entries via a
      single private emitter.
    - ``make_event``: convenience builder for dataset event payloads.

System Integration
    The dataset adapter, the store, and the CLI boundary log through these
    helpers. User-facing output never goes through logging; it is written with
    ``click.echo``.
"""

from __future__ import annotations

import logging
from typing import Any, Final, Mapping

_LOGGER: Final[logging.Logger] = logging.getLogger("excuz")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers."""

    return _LOGGER


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug log entry."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info log entry."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Emit a structured error log entry."""

    _emit(logging.ERROR, message, fields)


def make_event(
    language: str,
    resource: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a structured payload for dataset lifecycle events.

    Examples
    --------
    >>> make_event('bn', 'bn.json', {'records': 3})
    {'language': 'bn', 'resource': 'bn.json', 'records': 3}
    >>> make_event('en', None)
    {'language': 'en', 'resource': None}
    """

    event: dict[str, Any] = {"language": language, "resource": resource}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a log entry through the shared logger with contextual metadata."""

    _LOGGER.log(level, message, extra={"context": dict(fields)})
