import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from statement_ingest.cli import _resolve_row_limit, app

_SAMPLE = Path(__file__).resolve().parent / "data" / "statement_sample.csv"

runner = CliRunner()


def _invoke(*args: str):
    # WARNING keeps the INFO summary line out of the captured output.
    return runner.invoke(app, ["--log-level", "WARNING", *args])


def test_parse_json_output():
    result = _invoke("parse", "--csv-path", str(_SAMPLE))
    assert result.exit_code == 0, result.output
    doc = json.loads(result.output)
    assert list(doc) == ["12345", "98765"]
    assert doc["12345"][0]["payee"] == "Acme Corp"
    assert doc["98765"][0]["amount"] == "45.10"


def test_parse_with_limit():
    result = _invoke("parse", "--csv-path", str(_SAMPLE), "--limit", "1")
    assert result.exit_code == 0, result.output
    assert list(json.loads(result.output)) == ["12345"]


def test_limit_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("STATEMENT_INGEST_ROW_LIMIT", "2")
    result = _invoke("parse", "--csv-path", str(_SAMPLE))
    assert result.exit_code == 0, result.output
    doc = json.loads(result.output)
    assert [len(v) for v in doc.values()] == [1, 1]


def test_summary_output():
    result = _invoke("parse", "--csv-path", str(_SAMPLE), "--format", "summary")
    assert result.exit_code == 0, result.output
    assert "12345" in result.output
    assert "2512.50" in result.output
    assert "Skipped records: 0" in result.output


def test_missing_file_reports_error(tmp_path: Path):
    result = _invoke("parse", "--csv-path", str(tmp_path / "missing.csv"))
    assert result.exit_code == 1
    assert "File not found" in result.output


def test_statement_error_reports_error(tmp_path: Path):
    bad = tmp_path / "bad.csv"
    bad.write_text("Date,Account,Description,Debit\n2024-03-05,12345,Acme,1.00\n")
    result = _invoke("parse", "--csv-path", str(bad))
    assert result.exit_code == 1
    assert "Failed to parse statement: line 2: invalid DD/MM/YYYY date" in result.output


def test_invalid_utf8_record_is_skipped(tmp_path: Path):
    path = tmp_path / "mixed.csv"
    path.write_bytes(
        b"Date,Account,Description,Debit\n"
        b"05/03/2024,12345,Caf\xe9 - x,1.00\n"
        b"06/03/2024,12345,Shop,2.00\n"
    )
    result = _invoke("parse", "--csv-path", str(path))
    assert result.exit_code == 0, result.output
    doc = json.loads(result.output)
    assert [tx["payee"] for tx in doc["12345"]] == ["Shop"]


@pytest.mark.parametrize(
    ("explicit", "env", "expected"),
    [
        (5, "10", 5),
        (None, "10", 10),
        (None, "0", None),
        (None, "-3", None),
        (None, "abc", None),
        (None, None, None),
    ],
)
def test_resolve_row_limit(monkeypatch: pytest.MonkeyPatch, explicit, env, expected):
    if env is not None:
        monkeypatch.setenv("STATEMENT_INGEST_ROW_LIMIT", env)
    assert _resolve_row_limit(explicit) == expected
