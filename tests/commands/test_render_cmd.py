"""Tests for the render command."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from famgraph.cli import cli

_RUN = "famgraph.infrastructure.renderer.subprocess.run"


@pytest.mark.usefixtures("_isolated_cwd")
class TestRenderCommand:
    def test_default_output(self, cli_runner: CliRunner) -> None:
        with patch(_RUN) as run:
            result = cli_runner.invoke(cli, ["--json", "render"])
        assert result.exit_code == 0
        expected = str(Path.cwd() / "family_tree.png")
        assert run.call_args.args[0] == ["dot", "-Tpng", "-o", expected]
        assert run.call_args.kwargs["input"].startswith("digraph G {")
        assert json.loads(result.output)["data"]["output_file"] == expected

    def test_output_option(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        out = tmp_path / "tree.png"
        with patch(_RUN) as run:
            result = cli_runner.invoke(cli, ["render", "-o", str(out)])
        assert result.exit_code == 0
        assert run.call_args.args[0][-1] == str(out)
        assert "output_file:" in result.output

    def test_render_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "famgraph.toml").write_text(
            '[render]\ncommand = "/opt/dot"\nformat = "svg"\noutput = "t.svg"\n'
        )
        with patch(_RUN) as run:
            result = cli_runner.invoke(cli, ["render"])
        assert result.exit_code == 0
        assert run.call_args.args[0] == ["/opt/dot", "-Tsvg", "-o", str(tmp_path / "t.svg")]

    def test_output_resolves_against_config_dir(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "famgraph.toml").write_text('[render]\noutput = "out/tree.png"\n')
        nested = tmp_path / "docs" / "notes"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        with patch(_RUN) as run:
            result = cli_runner.invoke(cli, ["render"])
        assert result.exit_code == 0
        assert run.call_args.args[0][-1] == str(tmp_path / "out" / "tree.png")

    def test_render_unavailable(self, cli_runner: CliRunner) -> None:
        with patch(_RUN, side_effect=FileNotFoundError(2, "No such file", "dot")):
            result = cli_runner.invoke(cli, ["render"])
        assert result.exit_code == 1
        assert "Is Graphviz installed?" in result.output

    def test_render_failure_json(self, cli_runner: CliRunner) -> None:
        failure = subprocess.CalledProcessError(1, ["dot"], stderr="bad")
        with patch(_RUN, side_effect=failure):
            result = cli_runner.invoke(cli, ["--json", "render"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "RENDER_UNAVAILABLE"

    def test_describe_prints_dot(self, cli_runner: CliRunner) -> None:
        with patch(_RUN) as run:
            result = cli_runner.invoke(cli, ["render", "--describe"])
        assert result.exit_code == 0
        run.assert_not_called()
        assert result.output.startswith("digraph G {\n  rankdir=TB;")
        assert '"4" -> "6";' in result.output
