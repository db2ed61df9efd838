"""Command group: read-only family graph queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from famgraph.commands._base import FamGroup
from famgraph.services.graph import GraphService

if TYPE_CHECKING:
    from famgraph.commands._context import AppContext


@click.group(cls=FamGroup)
def query() -> None:
    """Traverse the family graph."""


@query.command(
    examples="""\
  famgraph query trace 2
  famgraph query trace 2 --stop-at 6
  famgraph --json query trace 2"""
)
@click.argument("start_id")
@click.option("--stop-at", default=None, help="Stop once this ID has been visited.")
@click.pass_obj
def trace(app: AppContext, start_id: str, stop_at: str | None) -> None:
    """Trace all descendants depth-first."""
    app.emit(GraphService(app.family).trace(start_id, stop_at=stop_at))


@query.command(
    examples="""\
  famgraph query sweep 1
  famgraph query sweep 2 --by-generation
  famgraph -q query sweep 2"""
)
@click.argument("start_id")
@click.option("--stop-at", default=None, help="Stop once this ID has been visited.")
@click.option("--by-generation", is_flag=True, help="Group results by generation.")
@click.pass_obj
def sweep(app: AppContext, start_id: str, stop_at: str | None, by_generation: bool) -> None:
    """Explore the family breadth-first, generation by generation."""
    app.emit(
        GraphService(app.family).sweep(start_id, stop_at=stop_at, by_generation=by_generation)
    )


@query.command(
    examples="""\
  famgraph query roots
  famgraph --json query roots"""
)
@click.pass_obj
def roots(app: AppContext) -> None:
    """List the original ancestors (no parent in the dataset)."""
    app.emit(GraphService(app.family).roots())


@query.command(
    examples="""\
  famgraph query leaves
  famgraph -q query leaves"""
)
@click.pass_obj
def leaves(app: AppContext) -> None:
    """List members with no children."""
    app.emit(GraphService(app.family).leaves())
