"""Command: build the graph and report its structure."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from famgraph.commands._base import FamCommand
from famgraph.services.graph import GraphService

if TYPE_CHECKING:
    from famgraph.commands._context import AppContext


@click.command(
    cls=FamCommand,
    examples="""\
  famgraph build
  famgraph --data family.json build
  famgraph --json build""",
)
@click.pass_obj
def build(app: AppContext) -> None:
    """Build the family graph and show nodes, edges, and dropped links."""
    app.emit(GraphService(app.family).build())
