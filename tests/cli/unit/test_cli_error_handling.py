"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from objectid_schema.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["validate", "--input", "/tmp/doc.json"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--schema" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["paths", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option" in captured.err
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_schema_file_returns_error(tmp_path: Path, capsys) -> None:
    exit_code = main(["paths", "--schema", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Schema definition file not found" in captured.err


def test_unreadable_document_returns_error(tmp_path: Path, capsys) -> None:
    schema_path = tmp_path / "schema.yaml"
    schema_path.write_text("type: objectid\n", encoding="utf-8")
    input_path = tmp_path / "doc.json"
    input_path.write_text("{not json", encoding="utf-8")

    exit_code = main(["validate", "--schema", str(schema_path), "--input", str(input_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to read document" in captured.err
