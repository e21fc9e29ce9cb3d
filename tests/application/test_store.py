"""Tests for the initialize-once dataset store."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from excuz.adapters.bundled import BundledDatasetLoader
from excuz.application.store import DatasetStore
from excuz.domain.errors import DataLoadError
from excuz.domain.excuse import SUPPORTED_LANGUAGES, ExcuseCollection, Language
from tests.support import EN_FIXTURE, write_dataset


class CountingLoader:
    """Delegate to a real loader while counting reads per language."""

    def __init__(self, root: Path) -> None:
        self.inner = BundledDatasetLoader(root)
        self.calls: dict[Language, int] = {}

    def load(self, language: Language) -> ExcuseCollection:
        self.calls[language] = self.calls.get(language, 0) + 1
        return self.inner.load(language)


def test_collection_is_read_once_and_shared(dataset_dir: Path) -> None:
    loader = CountingLoader(dataset_dir)
    store = DatasetStore(loader)
    first = store.collection(Language.EN)
    second = store.collection(Language.EN)
    assert first is second
    assert loader.calls == {Language.EN: 1}


def test_load_returns_read_only_mapping_for_every_language(dataset_dir: Path) -> None:
    loader = CountingLoader(dataset_dir)
    store = DatasetStore(loader)
    mapping = store.load()
    assert set(mapping) == set(SUPPORTED_LANGUAGES)
    assert [record.text for record in mapping[Language.EN]] == EN_FIXTURE
    assert store.load() is mapping
    assert loader.calls == {Language.EN: 1, Language.BN: 1}
    with pytest.raises(TypeError):
        mapping[Language.EN] = ()  # type: ignore[index]


def test_load_reuses_collections_fetched_earlier(dataset_dir: Path) -> None:
    loader = CountingLoader(dataset_dir)
    store = DatasetStore(loader)
    early = store.collection(Language.BN)
    assert store.load()[Language.BN] is early
    assert loader.calls[Language.BN] == 1


def test_failure_is_scoped_to_one_language(tmp_path: Path) -> None:
    write_dataset(tmp_path, "en", EN_FIXTURE)
    store = DatasetStore(BundledDatasetLoader(tmp_path))
    assert len(store.collection(Language.EN)) == len(EN_FIXTURE)
    with pytest.raises(DataLoadError) as info:
        store.collection(Language.BN)
    assert info.value.language == "bn"
    with pytest.raises(DataLoadError):
        store.load()


def test_failures_are_not_cached(tmp_path: Path) -> None:
    store = DatasetStore(BundledDatasetLoader(tmp_path))
    with pytest.raises(DataLoadError):
        store.collection(Language.EN)
    write_dataset(tmp_path, "en", EN_FIXTURE)
    assert [record.text for record in store.collection(Language.EN)] == EN_FIXTURE


def test_first_load_is_reported_once_at_info(dataset_dir: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="excuz")
    store = DatasetStore(BundledDatasetLoader(dataset_dir))
    store.collection(Language.EN)
    store.collection(Language.EN)
    ready = [record for record in caplog.records if record.getMessage() == "dataset_ready"]
    assert len(ready) == 1
    assert ready[0].levelno == logging.INFO
    assert getattr(ready[0], "context") == {"language": "en", "resource": None, "records": len(EN_FIXTURE)}
