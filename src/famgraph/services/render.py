"""RenderService — DOT description and image rendering.

The renderer is injected so the service never needs a real ``dot``
binary in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from famgraph.config.models import RenderConfig
from famgraph.domain.errors import RenderUnavailable
from famgraph.infrastructure.graph.dot import to_dot
from famgraph.services.base import BaseService
from famgraph.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from famgraph.infrastructure.graph import FamilyGraph
    from famgraph.infrastructure.renderer import Renderer


class RenderService(BaseService):
    """Serialize the family graph and hand it to a renderer."""

    def __init__(
        self,
        family: FamilyGraph,
        renderer: Renderer,
        config: RenderConfig | None = None,
        root: Path | None = None,
    ) -> None:
        super().__init__(family)
        self._renderer = renderer
        self._config = config or RenderConfig()
        self._root = root or Path.cwd()

    def _description(self) -> str:
        cfg = self._config
        return to_dot(self._family, rankdir=cfg.rankdir, shape=cfg.shape, style=cfg.style)

    def describe(self) -> ServiceResult:
        """Return the DOT description in ``data["content"]``."""
        return ServiceResult(
            ok=True,
            op="describe",
            data={
                "format": "dot",
                "content": self._description(),
                "node_count": len(self._family),
                "edge_count": len(self._family.edges),
            },
        )

    def render(self, out_path: Path | None = None) -> ServiceResult:
        """Render the graph image to *out_path*.

        Without *out_path*, ``[render] output`` is used, relative to the
        project root like ``[dataset] path``.
        """
        target = out_path or self._root / self._config.output
        try:
            self._renderer.render(self._description(), target)
        except RenderUnavailable as exc:
            return ServiceResult.failure(
                "render",
                ErrorCode.RENDER_UNAVAILABLE,
                str(exc),
                command=exc.command,
                output_file=str(target),
            )
        return ServiceResult(
            ok=True,
            op="render",
            data={
                "output_file": str(target),
                "format": self._config.format,
                "node_count": len(self._family),
                "edge_count": len(self._family.edges),
            },
            warnings=self._family.report.warnings(),
        )
