"""Root CLI group for famgraph with global flags and command registration."""

from __future__ import annotations

import click

from famgraph import __version__
from famgraph.commands import register_commands
from famgraph.commands._base import FamGroup
from famgraph.commands._context import AppContext
from famgraph.config.settings import FamSettings


@click.group(cls=FamGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="famgraph")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--data",
    "data_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Dataset file (.json or .toml) instead of the built-in sample.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    data_path: str | None,
) -> None:
    """famgraph — build, render, and query family graphs."""
    ctx.ensure_object(dict)
    settings = FamSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        data_path=data_path,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)