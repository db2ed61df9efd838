"""Tests for RenderService with an injected renderer."""

from __future__ import annotations

from pathlib import Path

from famgraph.config.models import RenderConfig
from famgraph.infrastructure.graph import FamilyGraph
from famgraph.infrastructure.graph.dot import to_dot
from famgraph.services.render import RenderService


class TestDescribe:
    def test_content_is_dot(self, family: FamilyGraph, recording_renderer) -> None:
        result = RenderService(family, recording_renderer).describe()
        assert result.ok
        assert result.data["content"] == to_dot(family)
        assert result.data["node_count"] == 6
        assert result.data["edge_count"] == 4
        assert recording_renderer.calls == []

    def test_layout_from_config(self, family: FamilyGraph, recording_renderer) -> None:
        cfg = RenderConfig(rankdir="LR")
        result = RenderService(family, recording_renderer, cfg).describe()
        assert "rankdir=LR;" in result.data["content"]


class TestRender:
    def test_passes_description_and_path(
        self, family: FamilyGraph, recording_renderer, tmp_path: Path
    ) -> None:
        out = tmp_path / "tree.png"
        result = RenderService(family, recording_renderer).render(out)
        assert result.ok
        assert result.data["output_file"] == str(out)
        assert result.data["format"] == "png"
        assert recording_renderer.calls == [(to_dot(family), out)]

    def test_default_output_from_config(self, family: FamilyGraph, recording_renderer) -> None:
        RenderService(family, recording_renderer, RenderConfig(output="x.png")).render()
        assert recording_renderer.calls[0][1] == Path.cwd() / "x.png"

    def test_default_output_under_root(
        self, family: FamilyGraph, recording_renderer, tmp_path: Path
    ) -> None:
        svc = RenderService(family, recording_renderer, RenderConfig(output="img/x.png"), tmp_path)
        assert svc.render().data["output_file"] == str(tmp_path / "img" / "x.png")

    def test_absolute_output_ignores_root(
        self, family: FamilyGraph, recording_renderer, tmp_path: Path
    ) -> None:
        out = tmp_path / "abs.png"
        cfg = RenderConfig(output=str(out))
        RenderService(family, recording_renderer, cfg, Path("/elsewhere")).render()
        assert recording_renderer.calls[0][1] == out

    def test_render_unavailable(self, family: FamilyGraph, failing_renderer) -> None:
        result = RenderService(family, failing_renderer).render(Path("out.png"))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "RENDER_UNAVAILABLE"
        assert result.error.detail["command"] == "dot"
        assert "Is Graphviz installed?" in result.error.message
