"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy graph construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NoReturn

import click

from famgraph.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from famgraph.config.settings import FamSettings
    from famgraph.domain.entities import Entity
    from famgraph.infrastructure.graph import FamilyGraph
    from famgraph.infrastructure.renderer import Renderer
    from famgraph.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The graph is built on first use so ``--help`` and ``--version``
    never load a dataset.
    """

    def __init__(self, settings: FamSettings, renderer: Renderer | None = None) -> None:
        self.settings = settings
        self._family: FamilyGraph | None = None
        self._renderer = renderer

        from famgraph.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            dataset=settings.dataset_file,
        )

    def load_entities(self) -> list[Entity]:
        """Entities from the configured dataset file, or the built-in sample."""
        path = self.settings.dataset_file
        if path is None:
            from famgraph.domain.sample import SAMPLE_FAMILY

            return list(SAMPLE_FAMILY)

        from famgraph.domain.errors import DatasetError
        from famgraph.infrastructure.dataset import load_entities
        from famgraph.services.result import ErrorCode, ServiceResult

        try:
            return load_entities(path)
        except DatasetError as exc:
            self.fail(
                ServiceResult.failure("load", ErrorCode.INVALID_DATASET, str(exc), path=str(path))
            )

    @property
    def family(self) -> FamilyGraph:
        """The family graph (built lazily on first access)."""
        if self._family is None:
            from famgraph.infrastructure.graph import build_family_graph

            self._family = build_family_graph(self.load_entities())
        return self._family

    @property
    def renderer(self) -> Renderer:
        """The image renderer (Graphviz unless one was injected)."""
        if self._renderer is None:
            from famgraph.infrastructure.renderer import GraphvizRenderer

            cfg = self.settings.render
            self._renderer = GraphvizRenderer(command=cfg.command, fmt=cfg.format)
        return self._renderer

    def _format(self, result: ServiceResult) -> str:
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        return format_result(result, settings=settings)

    def emit(self, result: ServiceResult) -> None:
        """Print *result* to stdout, or hand a failure to :meth:`fail`.

        Warnings go to stderr so they don't pollute piped output.
        """
        if not result.ok:
            self.fail(result)
        click.echo(self._format(result))
        # In JSON mode, warnings are already in the serialized payload.
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def fail(self, result: ServiceResult) -> NoReturn:
        """Print a failed *result* to stderr and exit 1."""
        logger.debug("%s failed: %s", result.op, result.error)
        click.echo(self._format(result), err=True)
        raise SystemExit(1)
