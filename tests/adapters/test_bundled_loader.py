"""Adapter tests for the bundled JSON dataset loader.

Covers the shipped resources and every way a resource can be broken: missing,
malformed, empty, or made of records with the wrong shape.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from excuz.adapters.bundled import BundledDatasetLoader
from excuz.application import ports
from excuz.domain.errors import DataLoadError
from excuz.domain.excuse import SUPPORTED_LANGUAGES, ExcuseRecord, Language
from tests.support import EN_FIXTURE, write_dataset


@pytest.mark.parametrize("language", SUPPORTED_LANGUAGES)
def test_bundled_resources_are_valid(language: Language) -> None:
    """Every shipped collection must be non-empty with unique ids and real text."""

    records = BundledDatasetLoader().load(language)
    assert records
    assert all(isinstance(record, ExcuseRecord) for record in records)
    assert len({record.id for record in records}) == len(records)
    assert all(record.text.strip() for record in records)


def test_loader_satisfies_port() -> None:
    loader: ports.DatasetLoader = BundledDatasetLoader()
    assert callable(loader.load)


def test_loader_preserves_source_order(dataset_dir: Path) -> None:
    records = BundledDatasetLoader(dataset_dir).load(Language.EN)
    assert [record.text for record in records] == EN_FIXTURE
    assert [record.id for record in records] == list(range(1, len(EN_FIXTURE) + 1))


def test_missing_resource_raises_data_load_error(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError) as info:
        BundledDatasetLoader(tmp_path).load(Language.BN)
    assert info.value.language == "bn"
    assert isinstance(info.value.cause, FileNotFoundError)


def test_malformed_json_raises_data_load_error(tmp_path: Path) -> None:
    (tmp_path / "en.json").write_text("[{invalid}", encoding="utf-8")
    with pytest.raises(DataLoadError) as info:
        BundledDatasetLoader(tmp_path).load(Language.EN)
    assert isinstance(info.value.cause, json.JSONDecodeError)


def test_empty_collection_raises_data_load_error(tmp_path: Path) -> None:
    write_dataset(tmp_path, "en", [])
    with pytest.raises(DataLoadError, match="contains no excuses"):
        BundledDatasetLoader(tmp_path).load(Language.EN)


@pytest.mark.parametrize(
    "payload, reason",
    [
        ({"_id": 1, "text": "not a list"}, "did not produce a list"),
        (["just a string"], "is not an object"),
        ([{"text": "no id"}], "no integer _id"),
        ([{"_id": True, "text": "bool id"}], "no integer _id"),
        ([{"_id": 1}], "has no text"),
        ([{"_id": 1, "text": "   "}], "has no text"),
        ([{"_id": 1, "text": "a"}, {"_id": 1, "text": "b"}], "duplicate _id 1"),
    ],
)
def test_wrongly_shaped_records_are_rejected(tmp_path: Path, payload: object, reason: str) -> None:
    (tmp_path / "en.json").write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(DataLoadError, match=reason):
        BundledDatasetLoader(tmp_path).load(Language.EN)


def test_loader_emits_structured_events(dataset_dir: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="excuz")
    BundledDatasetLoader(dataset_dir).load(Language.EN)
    events = {record.getMessage(): getattr(record, "context") for record in caplog.records}
    assert events["dataset_read"]["resource"] == "en.json"
    assert events["dataset_loaded"] == {"language": "en", "resource": "en.json", "records": len(EN_FIXTURE)}


def test_loader_logs_invalid_resources(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger="excuz")
    with pytest.raises(DataLoadError):
        BundledDatasetLoader(tmp_path).load(Language.EN)
    assert [record.getMessage() for record in caplog.records] == ["dataset_invalid"]
