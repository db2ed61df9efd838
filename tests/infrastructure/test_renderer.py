"""Tests for GraphvizRenderer — subprocess invocation and error mapping."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from famgraph.domain.errors import RenderUnavailable
from famgraph.infrastructure.renderer import GraphvizRenderer

_DOT = "digraph G {\n}\n"


class TestGraphvizRenderer:
    def test_invocation_contract(self, tmp_path: Path) -> None:
        out = tmp_path / "family_tree.png"
        with patch("famgraph.infrastructure.renderer.subprocess.run") as run:
            GraphvizRenderer().render(_DOT, out)
        run.assert_called_once()
        args, kwargs = run.call_args
        assert args[0] == ["dot", "-Tpng", "-o", str(out)]
        assert kwargs["input"] == _DOT
        assert kwargs["check"] is True
        assert kwargs["text"] is True

    def test_custom_command_and_format(self, tmp_path: Path) -> None:
        renderer = GraphvizRenderer(command="/opt/graphviz/bin/dot", fmt="svg")
        assert renderer.args(tmp_path / "t.svg") == [
            "/opt/graphviz/bin/dot",
            "-Tsvg",
            "-o",
            str(tmp_path / "t.svg"),
        ]

    def test_missing_executable(self, tmp_path: Path) -> None:
        renderer = GraphvizRenderer(command="definitely-not-a-graphviz-binary")
        with pytest.raises(RenderUnavailable) as info:
            renderer.render(_DOT, tmp_path / "out.png")
        assert isinstance(info.value.cause, OSError)
        assert info.value.command == "definitely-not-a-graphviz-binary"

    def test_non_zero_exit(self, tmp_path: Path) -> None:
        failure = subprocess.CalledProcessError(1, ["dot"], output="", stderr="syntax error\n")
        with (
            patch("famgraph.infrastructure.renderer.subprocess.run", side_effect=failure),
            pytest.raises(RenderUnavailable) as info,
        ):
            GraphvizRenderer().render("not dot", tmp_path / "out.png")
        assert info.value.cause is failure
        assert info.value.stderr == "syntax error"
        assert "syntax error" in str(info.value)

    def test_no_output_written_on_failure(self, tmp_path: Path) -> None:
        out = tmp_path / "out.png"
        with pytest.raises(RenderUnavailable):
            GraphvizRenderer(command="definitely-not-a-graphviz-binary").render(_DOT, out)
        assert not out.exists()
