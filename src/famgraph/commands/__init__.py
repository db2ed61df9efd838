"""Subcommand modules for famgraph.

Provides register_commands() which uses deferred imports to keep
``famgraph --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the query group and standalone commands on the root CLI group."""
    from famgraph.commands.query import query

    cli.add_command(query)

    from famgraph.commands.build import build
    from famgraph.commands.demo import demo
    from famgraph.commands.render import render

    cli.add_command(build)
    cli.add_command(render)
    cli.add_command(demo)
