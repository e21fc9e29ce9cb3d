"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contract the dataset store relies on so the bundled JSON
resources can be swapped for fixtures in tests without touching the store.

Contents
--------
* :class:`DatasetLoader` – reads the excuse collection for one language.
"""

from __future__ import annotations

from typing import Protocol

from ..domain.excuse import ExcuseCollection, Language


class DatasetLoader(Protocol):
    """Materialise the ordered excuse collection for a language.

    Implementations raise :class:`~excuz.domain.errors.DataLoadError` when the
    backing resource is missing, malformed, or empty; they never return an
    empty collection.
    """

    def load(self, language: Language) -> ExcuseCollection:
        """Return the records for *language* in source order."""
