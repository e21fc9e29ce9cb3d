"""Bundled JSON dataset loader.

Purpose
-------
Convert the read-only ``data/<code>.json`` resources shipped with the package
into immutable :class:`~excuz.domain.excuse.ExcuseRecord` tuples. Error
handling and observability for the resources live here so the store only deals
with caching.

Contents
--------
* :data:`DATA_PACKAGE` / :data:`DATA_DIRECTORY` – where the resources live.
* :class:`BundledDatasetLoader` – implementation of the
  :class:`~excuz.application.ports.DatasetLoader` port.

System Role
-----------
Instantiated by :func:`excuz.core.default_store`; tests pass an explicit
``root`` directory to exercise failure paths with temporary files.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Final

from ..domain.errors import DataLoadError
from ..domain.excuse import ExcuseCollection, ExcuseRecord, Language
from ..observability import log_debug, log_error, make_event

DATA_PACKAGE: Final[str] = "excuz"
DATA_DIRECTORY: Final[str] = "data"


class BundledDatasetLoader:
    """Read excuse collections from JSON arrays of ``{"_id", "text"}`` objects.

    Parameters
    ----------
    root:
        Directory holding ``<code>.json`` files. ``None`` selects the resources
        bundled inside the installed package.
    """

    def __init__(self, root: str | Path | None = None) -> None:
        self._root = Path(root) if root is not None else None

    def load(self, language: Language) -> ExcuseCollection:
        """Return the records for *language* or raise :class:`DataLoadError`.

        Examples
        --------
        >>> records = BundledDatasetLoader().load(Language.EN)
        >>> records[0].id
        1
        """

        resource = f"{language.value}.json"
        raw = self._read(language, resource)
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            log_error("dataset_invalid", **make_event(language.value, resource, {"error": str(exc)}))
            raise DataLoadError(language.value, exc) from exc
        records = self._to_records(data, language=language, resource=resource)
        log_debug("dataset_loaded", **make_event(language.value, resource, {"records": len(records)}))
        return records

    def _read(self, language: Language, resource: str) -> bytes:
        """Return the raw bytes of *resource*, wrapping I/O failures."""

        try:
            if self._root is not None:
                payload = (self._root / resource).read_bytes()
            else:
                payload = (resources.files(DATA_PACKAGE) / DATA_DIRECTORY / resource).read_bytes()
        except OSError as exc:
            log_error("dataset_invalid", **make_event(language.value, resource, {"error": str(exc)}))
            raise DataLoadError(language.value, exc) from exc
        log_debug("dataset_read", **make_event(language.value, resource, {"size": len(payload)}))
        return payload

    @staticmethod
    def _to_records(data: object, *, language: Language, resource: str) -> ExcuseCollection:
        """Validate the parsed document and freeze it into records.

        Examples
        --------
        >>> BundledDatasetLoader._to_records([{"_id": 7, "text": "It works on my machine"}],
        ...                                  language=Language.EN, resource="demo")
        (ExcuseRecord(id=7, text='It works on my machine'),)
        >>> BundledDatasetLoader._to_records([], language=Language.EN, resource="demo")
        Traceback (most recent call last):
        ...
        excuz.domain.errors.DataLoadError: Failed to load excuse data for language 'en': demo contains no excuses
        """

        if not isinstance(data, list):
            raise _invalid(language, resource, f"{resource} did not produce a list")
        if not data:
            raise _invalid(language, resource, f"{resource} contains no excuses")
        records = []
        seen: set[int] = set()
        for position, item in enumerate(data):
            if not isinstance(item, dict):
                raise _invalid(language, resource, f"entry {position} in {resource} is not an object")
            identifier = item.get("_id")
            text = item.get("text")
            if not isinstance(identifier, int) or isinstance(identifier, bool):
                raise _invalid(language, resource, f"entry {position} in {resource} has no integer _id")
            if not isinstance(text, str) or not text.strip():
                raise _invalid(language, resource, f"entry {position} in {resource} has no text")
            if identifier in seen:
                raise _invalid(language, resource, f"duplicate _id {identifier} in {resource}")
            seen.add(identifier)
            records.append(ExcuseRecord(id=identifier, text=text))
        return tuple(records)


def _invalid(language: Language, resource: str, reason: str) -> DataLoadError:
    log_error("dataset_invalid", **make_event(language.value, resource, {"error": reason}))
    return DataLoadError(language.value, reason)
