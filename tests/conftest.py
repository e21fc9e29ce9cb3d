"""Shared fixtures for dataset-backed tests.

Tests that need failure paths build their own dataset directories under
``tmp_path`` instead of touching the bundled resources.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from excuz.adapters.bundled import BundledDatasetLoader
from excuz.application.store import DatasetStore
from tests.support import BN_FIXTURE, EN_FIXTURE, write_dataset


@pytest.fixture()
def dataset_dir(tmp_path: Path) -> Path:
    """Directory holding small English and Bengali fixture collections."""

    write_dataset(tmp_path, "en", EN_FIXTURE)
    write_dataset(tmp_path, "bn", BN_FIXTURE)
    return tmp_path


@pytest.fixture()
def fixture_store(dataset_dir: Path) -> DatasetStore:
    """Store over the fixture collections, isolated from the process-wide cache."""

    return DatasetStore(BundledDatasetLoader(dataset_dir))
