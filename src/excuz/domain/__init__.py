"""Domain layer: excuse value objects, languages, and the error taxonomy."""

from .errors import DataLoadError, ExcuzError, InvalidLanguageError
from .excuse import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    ExcuseCollection,
    ExcuseRecord,
    Language,
    is_valid_language,
    parse_language,
)

__all__ = [
    "DataLoadError",
    "ExcuzError",
    "InvalidLanguageError",
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "ExcuseCollection",
    "ExcuseRecord",
    "Language",
    "is_valid_language",
    "parse_language",
]
