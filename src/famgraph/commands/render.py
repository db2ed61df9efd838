"""Command: render the family graph to an image via Graphviz."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from famgraph.commands._base import FamCommand
from famgraph.services.render import RenderService

if TYPE_CHECKING:
    from famgraph.commands._context import AppContext


@click.command(
    cls=FamCommand,
    examples="""\
  famgraph render
  famgraph render -o tree.png
  famgraph render --describe
  famgraph render --describe | dot -Tsvg -o tree.svg""",
)
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Image path (default: [render] output).",
)
@click.option("--describe", is_flag=True, help="Print the DOT description instead of rendering.")
@click.pass_obj
def render(app: AppContext, output_file: str | None, describe: bool) -> None:
    """Render the family graph as an image."""
    svc = RenderService(app.family, app.renderer, app.settings.render, app.settings.root)
    if describe:
        app.emit(svc.describe())
        return
    app.emit(svc.render(Path(output_file) if output_file else None))
