"""Shared pytest fixtures for famgraph tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from famgraph.domain.entities import Entity
from famgraph.domain.errors import RenderUnavailable
from famgraph.domain.sample import SAMPLE_FAMILY
from famgraph.infrastructure.graph import FamilyGraph, build_family_graph


class RecordingRenderer:
    """Renderer double that records calls instead of spawning ``dot``."""

    def __init__(self, error: BaseException | None = None) -> None:
        self.calls: list[tuple[str, Path]] = []
        self._error = error

    def render(self, description: str, out_path: Path) -> None:
        self.calls.append((description, out_path))
        if self._error is not None:
            raise RenderUnavailable("dot", self._error)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def entities() -> list[Entity]:
    """The six-member sample dataset."""
    return list(SAMPLE_FAMILY)


@pytest.fixture
def family(entities: list[Entity]) -> FamilyGraph:
    """Family graph built from the sample dataset."""
    return build_family_graph(entities)


@pytest.fixture
def recording_renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def failing_renderer() -> RecordingRenderer:
    return RecordingRenderer(error=FileNotFoundError(2, "No such file or directory", "dot"))


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run in an empty temp directory with no famgraph env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on CLI test classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FAMGRAPH_CONFIG", raising=False)
    monkeypatch.delenv("FAMGRAPH_DATA_PATH", raising=False)
    yield
