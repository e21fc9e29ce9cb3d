"""Excuse value objects and the closed set of supported languages.

Purpose
-------
Give the rest of the package a small, immutable vocabulary: a
:class:`Language` enumeration that makes unsupported codes unrepresentable past
the CLI boundary, and :class:`ExcuseRecord` for individual entries.

Contents
--------
* :class:`Language` – supported language codes with display labels.
* :class:`ExcuseRecord` – frozen ``{id, text}`` entry.
* :data:`DEFAULT_LANGUAGE` / :data:`SUPPORTED_LANGUAGES` – public constants.
* :func:`is_valid_language` / :func:`parse_language` – the single validation
  point used by the dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from .errors import InvalidLanguageError


class Language(str, Enum):
    """Supported language codes.

    Examples
    --------
    >>> Language("bn").label
    'Bengali (বাংলা)'
    >>> Language.EN.value
    'en'
    """

    EN = "en"
    BN = "bn"

    @property
    def label(self) -> str:
        """Human readable name shown in the interactive language menu."""

        return _LABELS[self]


_LABELS: Final[dict[Language, str]] = {
    Language.EN: "English",
    Language.BN: "Bengali (বাংলা)",
}

DEFAULT_LANGUAGE: Final[Language] = Language.EN
SUPPORTED_LANGUAGES: Final[tuple[Language, ...]] = (Language.BN, Language.EN)


@dataclass(frozen=True)
class ExcuseRecord:
    """One entry of a language collection."""

    id: int
    text: str


ExcuseCollection = tuple[ExcuseRecord, ...]


def is_valid_language(code: object) -> bool:
    """Return ``True`` when *code* names a supported language.

    Examples
    --------
    >>> is_valid_language("bn"), is_valid_language("fr"), is_valid_language(None)
    (True, False, False)
    """

    return isinstance(code, str) and code in {language.value for language in SUPPORTED_LANGUAGES}


def parse_language(code: str | None) -> Language:
    """Resolve a user-supplied code into a :class:`Language`.

    ``None`` and the empty string fall back to :data:`DEFAULT_LANGUAGE`;
    anything else outside the supported set raises
    :class:`~excuz.domain.errors.InvalidLanguageError`.

    Examples
    --------
    >>> parse_language(None) is DEFAULT_LANGUAGE
    True
    >>> parse_language("bn")
    <Language.BN: 'bn'>
    >>> parse_language("xx")
    Traceback (most recent call last):
    ...
    excuz.domain.errors.InvalidLanguageError: Invalid language: xx. Use "bn" or "en"
    """

    if not code:
        return DEFAULT_LANGUAGE
    if not is_valid_language(code):
        raise InvalidLanguageError(code)
    return Language(code)
