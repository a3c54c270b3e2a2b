"""Tests for the quickpalette CLI."""

import json

import pytest
from typer.testing import CliRunner

from quickpalette import __version__
from quickpalette.main import app

runner = CliRunner()


@pytest.fixture
def transactions_file(tmp_path, transactions):
    path = tmp_path / "recent.json"
    path.write_text(json.dumps(transactions))
    return path


class TestSearchCommand:
    def test_json_output_for_join(self, transactions_file) -> None:
        result = runner.invoke(app, ["search", "join", "--json", "-t", str(transactions_file)])
        assert result.exit_code == 0
        rows = json.loads(result.stdout)
        assert [(r["index"], r["id"]) for r in rows] == [
            (0, "action-join-transaction"),
            (1, "transaction-3"),
        ]
        assert rows[1]["category"] == "transactions"

    def test_empty_query_lists_everything(self, transactions_file) -> None:
        result = runner.invoke(app, ["search", "--json", "-t", str(transactions_file)])
        assert result.exit_code == 0
        assert len(json.loads(result.stdout)) == 10

    def test_no_results(self) -> None:
        result = runner.invoke(app, ["search", "zzz"])
        assert result.exit_code == 0
        assert "No results found" in result.stdout

    def test_table_output(self) -> None:
        result = runner.invoke(app, ["search", "dash"])
        assert result.exit_code == 0
        assert "Dashboard" in result.stdout

    def test_bad_transactions_file(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"id": 1}')
        result = runner.invoke(app, ["search", "x", "-t", str(path)])
        assert result.exit_code == 1
        assert "JSON list" in result.stdout

    def test_missing_transactions_file(self, tmp_path) -> None:
        result = runner.invoke(app, ["search", "x", "-t", str(tmp_path / "nope.json")])
        assert result.exit_code == 1


class TestVersionCommand:
    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout
