"""User-facing text shared by the command dispatcher and the interactive session.

Purpose
    Keep every fixed message and output format in one place so the direct
    commands and the interactive wizard print identical text.

Contents
    - Message templates (``INVALID_LANGUAGE_MESSAGE``, ``GENERIC_ERROR_MESSAGE``,
      hints, interactive intro/farewell).
    - ``render_listing`` / ``render_count``: plain-text formatters.
    - ``echo_excuse`` / ``echo_warning``: styled writers. Click strips the ANSI
      codes automatically when stdout is not a terminal.
"""

from __future__ import annotations

from typing import Final, Iterable

import rich_click as click

PROG_NAME: Final[str] = "excuz"

INVALID_LANGUAGE_MESSAGE: Final[str] = 'Oops! Invalid language: {code}. Use "bn" for Bengali or "en" for English.'
GENERIC_ERROR_MESSAGE: Final[str] = f'Oops! Something went wrong. Please try again or use "{PROG_NAME} --help" for help.'
LANGUAGE_HINT: Final[str] = f'💡 Tip: Use "{PROG_NAME} -l {{code}}" or "{PROG_NAME} --lang {{code}}" instead.'
GENERIC_HINT: Final[str] = f'💡 Tip: Use "{PROG_NAME} -l <language>" where language is "bn" or "en".'

INTRO: Final[str] = "Welcome to Excuz - Interactive Mode 🎉"
FAREWELL: Final[str] = "Thanks for using Excuz! 🎉"

_EXCUSE_COLOR: Final[str] = "green"
_WARNING_COLOR: Final[str] = "yellow"


def render_listing(excuses: Iterable[str]) -> str:
    """Number *excuses* from 1, one per line.

    Examples
    --------
    >>> print(render_listing(["Cache", "DNS"]))
    1. Cache
    2. DNS
    """

    return "\n".join(f"{index}. {text}" for index, text in enumerate(excuses, start=1))


def render_count(count: int) -> str:
    """
    >>> render_count(3)
    'Number of excuses: 3'
    """

    return f"Number of excuses: {count}"


def invalid_language_message(code: str | None) -> str:
    """Return the fixed invalid-language warning naming *code*."""

    return INVALID_LANGUAGE_MESSAGE.format(code=code or "unknown")


def echo_excuse(text: str) -> None:
    click.echo(click.style(text, fg=_EXCUSE_COLOR))


def echo_warning(text: str) -> None:
    click.echo(click.style(text, fg=_WARNING_COLOR))
