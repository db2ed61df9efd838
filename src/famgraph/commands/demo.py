"""Command: build, render, then run all four queries."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from famgraph.commands._base import FamCommand
from famgraph.services.graph import GraphService
from famgraph.services.render import RenderService
from famgraph.services.result import ServiceResult

if TYPE_CHECKING:
    from famgraph.commands._context import AppContext


@click.command(
    cls=FamCommand,
    examples="""\
  famgraph demo
  famgraph demo -o out/tree.png
  famgraph --json demo""",
)
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Image path (default: [render] output).",
)
@click.pass_obj
def demo(app: AppContext, output_file: str | None) -> None:
    """Render the family tree, then trace, sweep, and list roots and leaves.

    A render failure is fatal: nothing else runs and the exit status is 1.
    """
    family = app.family
    render_svc = RenderService(family, app.renderer, app.settings.render, app.settings.root)
    rendered = render_svc.render(Path(output_file) if output_file else None)
    if not rendered.ok:
        app.emit(rendered)
        return

    cfg = app.settings.demo
    graph = GraphService(family)
    steps = [
        rendered,
        graph.trace(cfg.trace_start),
        graph.sweep(cfg.sweep_start),
        graph.roots(),
        graph.leaves(),
    ]
    failed = next((s for s in steps if not s.ok), None)
    if failed is not None:
        app.emit(failed)
        return

    app.emit(
        ServiceResult(
            ok=True,
            op="demo",
            data={"steps": [s.model_dump() for s in steps]},
            warnings=rendered.warnings,
        )
    )
