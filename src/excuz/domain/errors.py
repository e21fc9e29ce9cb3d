"""Domain-level exception hierarchy.

Purpose
-------
Expose the error taxonomy shared by the dataset adapter, the store, and the
command dispatcher. The hierarchy lives in the domain layer so outer layers can
depend on it without the reverse ever being true.

Contents
--------
* :class:`ExcuzError` – umbrella base class for all package errors.
* :class:`DataLoadError` – a bundled dataset is missing, malformed, or empty.
* :class:`InvalidLanguageError` – a user supplied an unsupported language code.

System Role
-----------
The dataset adapter raises :class:`DataLoadError`; the CLI boundary raises
:class:`InvalidLanguageError` while validating input. Both are caught at the
command boundary and rendered as one of two fixed user-facing messages.
"""

from __future__ import annotations


class ExcuzError(Exception):
    """Base type for all exceptions emitted by ``excuz``."""


class DataLoadError(ExcuzError):
    """Raised when the excuse collection for a language cannot be materialised.

    Why
    ----
    Every operation needs a non-empty collection for its language; a broken
    resource is fatal for that language only.

    Attributes
    ----------
    language:
        The language code whose resource failed.
    cause:
        The underlying exception or a short description of the defect.
    """

    def __init__(self, language: str, cause: BaseException | str) -> None:
        self.language = language
        self.cause = cause
        super().__init__(f"Failed to load excuse data for language {language!r}: {cause}")


class InvalidLanguageError(ExcuzError):
    """Raised when a language code is outside the supported set."""

    def __init__(self, code: str | None) -> None:
        self.code = code
        super().__init__(f"Invalid language: {code}. Use \"bn\" or \"en\"")
