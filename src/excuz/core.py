"""Composition root and excuse service for ``excuz``.

Purpose
-------
Wire the bundled dataset loader into a process-wide :class:`DatasetStore` and
expose the three read operations the CLI and library consumers need.

Contents
--------
* :func:`default_store` – lazily created store shared by the whole process.
* :func:`get_random_excuse` – one uniformly chosen excuse text.
* :func:`get_all_excuses` – every excuse text in collection order.
* :func:`get_excuse_count` – size of a language collection.

System Role
-----------
The service functions accept only a validated :class:`Language`; validation of
user input happens once in :mod:`excuz.cli`. Every function propagates
:class:`~excuz.domain.errors.DataLoadError` unchanged.
"""

from __future__ import annotations

import random

from .adapters.bundled import BundledDatasetLoader
from .application.store import DatasetStore
from .domain.excuse import DEFAULT_LANGUAGE, ExcuseCollection, Language

_DEFAULT_STORE: DatasetStore | None = None


def default_store() -> DatasetStore:
    """Return the process-wide store backed by the bundled resources."""

    global _DEFAULT_STORE
    if _DEFAULT_STORE is None:
        _DEFAULT_STORE = DatasetStore(BundledDatasetLoader())
    return _DEFAULT_STORE


def get_random_excuse(
    lang: Language = DEFAULT_LANGUAGE,
    *,
    store: DatasetStore | None = None,
    rng: random.Random | None = None,
) -> str:
    """Return the text of one excuse chosen uniformly at random.

    Consecutive calls may repeat an excuse. Pass *rng* to make the choice
    reproducible.

    Examples
    --------
    >>> get_random_excuse(Language.EN) in get_all_excuses(Language.EN)
    True
    """

    records = _records(lang, store)
    chooser = rng if rng is not None else random
    return records[chooser.randrange(len(records))].text


def get_all_excuses(lang: Language = DEFAULT_LANGUAGE, *, store: DatasetStore | None = None) -> list[str]:
    """Return every excuse text for *lang* in source order."""

    return [record.text for record in _records(lang, store)]


def get_excuse_count(lang: Language = DEFAULT_LANGUAGE, *, store: DatasetStore | None = None) -> int:
    """Return the number of excuses available for *lang*.

    Examples
    --------
    >>> get_excuse_count(Language.BN) == len(get_all_excuses(Language.BN))
    True
    """

    return len(_records(lang, store))


def _records(lang: Language, store: DatasetStore | None) -> ExcuseCollection:
    return (store if store is not None else default_store()).collection(lang)
