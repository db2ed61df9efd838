"""``--examples`` for famgraph commands.

Commands take their usage lines as ``examples=``. A group's
``--examples`` shows its own lines followed by those of every
subcommand, so ``famgraph --examples`` covers the whole CLI. The flag is
eager: it exits before settings are read or a dataset is loaded.
"""

from __future__ import annotations

from typing import Any

import click


def example_lines(cmd: click.Command) -> list[str]:
    """Usage lines for *cmd* and, for groups, all nested subcommands."""
    lines = [line.strip() for line in (getattr(cmd, "examples", None) or "").splitlines()]
    if isinstance(cmd, click.Group):
        for sub in cmd.commands.values():
            lines.extend(example_lines(sub))
    return list(dict.fromkeys(line for line in lines if line))


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    lines = example_lines(ctx.command)
    if not lines:
        click.echo(f"No examples for '{ctx.command_path}'.")
        ctx.exit(0)
    click.echo(f"Examples for '{ctx.command_path}':\n")
    for line in lines:
        click.echo(f"  {line}")
    ctx.exit(0)


def _examples_option() -> click.Option:
    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_show_examples,
        help="Show usage examples and exit.",
    )


class FamCommand(click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option())


class FamGroup(click.Group):
    """Group whose subcommands default to :class:`FamCommand`.

    ``--examples`` is always attached since subcommands registered later
    contribute their lines.
    """

    command_class = FamCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.params.append(_examples_option())
