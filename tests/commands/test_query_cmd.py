"""Tests for the query CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from famgraph.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestTrace:
    def test_trace_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "query", "trace", "2"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert [i["name"] for i in data["data"]["items"]] == [
            "Robert Smith",
            "John Smith",
            "Leo Smith",
            "Maria Smith",
        ]

    def test_trace_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["query", "trace", "2"])
        assert result.exit_code == 0
        assert " -> John Smith" in result.output

    def test_trace_stop_at(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "query", "trace", "2", "--stop-at", "4"])
        assert result.exit_code == 0
        assert result.output.split() == ["2", "4"]

    def test_trace_not_found(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "query", "trace", "nonexistent"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "NOT_FOUND"


@pytest.mark.usefixtures("_isolated_cwd")
class TestSweep:
    def test_sweep(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "query", "sweep", "1"])
        assert result.exit_code == 0
        assert result.output.split() == ["1", "3"]

    def test_by_generation(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "query", "sweep", "2", "--by-generation"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["generations"] == [["2"], ["4", "5"], ["6"]]


@pytest.mark.usefixtures("_isolated_cwd")
class TestRootsLeaves:
    def test_roots(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "query", "roots"])
        assert result.exit_code == 0
        assert result.output.split() == ["1", "2"]

    def test_leaves(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "query", "leaves"])
        assert result.exit_code == 0
        assert result.output.split() == ["3", "5", "6"]

    def test_custom_dataset(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        data = tmp_path / "family.json"
        data.write_text(
            json.dumps(
                [
                    {"id": "a", "name": "Ann"},
                    {"id": "b", "name": "Bob", "parent_name": "Ann"},
                    {"id": "c", "name": "Cy"},
                ]
            )
        )
        result = cli_runner.invoke(cli, ["-q", "--data", str(data), "query", "roots"])
        assert result.exit_code == 0
        assert result.output.split() == ["a", "c"]

    def test_bad_dataset(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        data = tmp_path / "family.json"
        data.write_text("not json")
        result = cli_runner.invoke(cli, ["--data", str(data), "query", "roots"])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_bad_dataset_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        data = tmp_path / "family.json"
        data.write_text(json.dumps([{"id": "1"}]))
        result = cli_runner.invoke(cli, ["--json", "--data", str(data), "query", "leaves"])
        assert result.exit_code == 1
        error = json.loads(result.output)["error"]
        assert error["code"] == "INVALID_DATASET"
        assert error["detail"]["path"] == str(data)


@pytest.mark.usefixtures("_isolated_cwd")
class TestExamples:
    def test_group_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["query", "--examples"])
        assert result.exit_code == 0
        assert "famgraph query trace 2" in result.output

    def test_command_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["query", "sweep", "--examples"])
        assert result.exit_code == 0
        assert "--by-generation" in result.output

    def test_group_examples_include_subcommands(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["query", "--examples"])
        assert "famgraph query sweep 2 --by-generation" in result.output
        assert "famgraph -q query leaves" in result.output
        assert "famgraph render" not in result.output

    def test_root_examples_cover_every_command(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--examples"])
        assert result.exit_code == 0
        assert result.output.startswith("Examples for '")
        for line in ("famgraph build", "famgraph render --describe", "famgraph query roots"):
            assert f"  {line}\n" in result.output
        assert result.output.count("  famgraph query roots\n") == 1
