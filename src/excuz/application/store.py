"""Initialize-once cache of excuse collections.

Purpose
-------
Read each language's resource at most once per process and hand out the same
immutable tuple on every later request. The store owns the cache; the loader
behind it owns parsing and validation.

Contents
--------
* :class:`DatasetStore` – lazy per-language cache over a
  :class:`~excuz.application.ports.DatasetLoader`.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..domain.excuse import SUPPORTED_LANGUAGES, ExcuseCollection, Language
from ..observability import log_debug, log_info, make_event
from .ports import DatasetLoader


class DatasetStore:
    """Lazily load and cache excuse collections per language.

    Failures are not cached: a :class:`~excuz.domain.errors.DataLoadError`
    propagates to the caller and the next request retries the loader.

    Examples
    --------
    >>> from excuz.domain.excuse import ExcuseRecord
    >>> class _Fixed:
    ...     calls = 0
    ...     def load(self, language):
    ...         _Fixed.calls += 1
    ...         return (ExcuseRecord(1, f"{language.value} excuse"),)
    >>> store = DatasetStore(_Fixed())
    >>> store.collection(Language.BN)[0].text
    'bn excuse'
    >>> store.collection(Language.BN) is store.collection(Language.BN)
    True
    >>> _Fixed.calls
    1
    """

    def __init__(self, loader: DatasetLoader) -> None:
        self._loader = loader
        self._collections: dict[Language, ExcuseCollection] = {}
        self._view: Mapping[Language, ExcuseCollection] | None = None

    def collection(self, language: Language) -> ExcuseCollection:
        """Return the cached collection for *language*, loading it on first use."""

        cached = self._collections.get(language)
        if cached is not None:
            log_debug("dataset_cached", **make_event(language.value, None, {"records": len(cached)}))
            return cached
        records = self._loader.load(language)
        self._collections[language] = records
        log_info("dataset_ready", **make_event(language.value, None, {"records": len(records)}))
        return records

    def load(self) -> Mapping[Language, ExcuseCollection]:
        """Load every supported language and return a read-only mapping.

        The same mapping object is returned on subsequent calls.
        """

        if self._view is None:
            for language in SUPPORTED_LANGUAGES:
                self.collection(language)
            self._view = MappingProxyType(self._collections)
        return self._view
