"""Helpers for building throwaway excuse datasets in tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

EN_FIXTURE = ["Cache", "DNS", "Cosmic rays", "Leap year", "Friday deploy"]
BN_FIXTURE = ["ক্যাশ", "ডিএনএস", "বিদ্যুৎ"]


def write_dataset(root: Path, language: str, texts: Iterable[str]) -> Path:
    """Write ``<language>.json`` in the published ``{"_id", "text"}`` format."""

    path = root / f"{language}.json"
    entries = [{"_id": index, "text": text} for index, text in enumerate(texts, start=1)]
    path.write_text(json.dumps(entries, ensure_ascii=False), encoding="utf-8")
    return path
