"""Random humorous developer excuses in English and Bengali.

The package doubles as a small library: the same service functions that back
the ``excuz`` command are exported here, together with the language
vocabulary needed to call them.
"""

from __future__ import annotations

from .core import default_store, get_all_excuses, get_excuse_count, get_random_excuse
from .domain.errors import DataLoadError, ExcuzError, InvalidLanguageError
from .domain.excuse import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    ExcuseRecord,
    Language,
    is_valid_language,
    parse_language,
)
from .observability import get_logger

__all__ = [
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "DataLoadError",
    "ExcuseRecord",
    "ExcuzError",
    "InvalidLanguageError",
    "Language",
    "default_store",
    "get_all_excuses",
    "get_excuse_count",
    "get_logger",
    "get_random_excuse",
    "is_valid_language",
    "parse_language",
]
