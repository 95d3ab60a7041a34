"""Raw record reader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from field_decoder.record_ingestion.record_reader import RecordReadError, load_raw_record


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_reads_json_record(tmp_path: Path) -> None:
    record_path = _write_file(tmp_path / "record.json", '{"count": "3", "tags": ["a"]}')

    assert load_raw_record(record_path) == {"count": "3", "tags": ["a"]}


def test_reads_yaml_record_by_suffix(tmp_path: Path) -> None:
    record_path = _write_file(tmp_path / "record.yml", "count: 3\nhosts: a, b\n")

    assert load_raw_record(record_path) == {"count": 3, "hosts": "a, b"}


@pytest.mark.parametrize(
    ("filename", "contents"),
    [
        ("record.json", "[1, 2]"),
        ("record.json", "{not json"),
        ("record.yaml", "- a\n- b\n"),
    ],
)
def test_rejects_unreadable_or_non_mapping_records(
    tmp_path: Path, filename: str, contents: str
) -> None:
    record_path = _write_file(tmp_path / filename, contents)

    with pytest.raises(RecordReadError):
        load_raw_record(record_path)


def test_missing_record_file_raises(tmp_path: Path) -> None:
    with pytest.raises(RecordReadError, match="not found"):
        load_raw_record(tmp_path / "missing.json")
