"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from field_decoder.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["validate", "--input", "/tmp/record.json"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--schema" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["decode", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option" in captured.err
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_schema_file_is_reported_without_traceback(tmp_path: Path, capsys) -> None:
    record_path = tmp_path / "record.json"
    record_path.write_text("{}", encoding="utf-8")

    exit_code = main(
        ["validate", "--schema", str(tmp_path / "missing.yaml"), "--input", str(record_path)]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Schema file not found" in captured.err
    assert "Traceback" not in captured.err
