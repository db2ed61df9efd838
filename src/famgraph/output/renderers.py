"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from famgraph.output.console import create_console, get_output
from famgraph.services.result import ServiceResult

if TYPE_CHECKING:
    from rich.console import Console


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    _render_into(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "describe":
        return str(result.data.get("content", "")).rstrip("\n")

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("id", "")) for item in items)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _render_into(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    console.print(Text.assemble(("OK", "fam.ok"), (f"  {result.op}", "fam.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="fam.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="fam.id")
    elif key.endswith("_file"):
        v = Text(str(value), style="fam.path")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _member_table(items: list[dict[str, Any]]) -> Table:
    """Build a Rich Table for a list of member items."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="fam.id", no_wrap=True)
    table.add_column("Name", style="fam.name")
    table.add_column("Parent")

    for item in items:
        table.add_row(
            str(item.get("id", "")),
            str(item.get("name", "")),
            str(item.get("parent_name", "")),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "fam.error"), (f"  {result.op}", "fam.op"), f" — {msg}"),
        soft_wrap=True,
    )
    if verbose and err and err.detail:
        for key, value in err.detail.items():
            _field(console, key, value)


# ── Graph renderers ───────────────────────────────────────────────────


def _render_build(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "node_count", d["node_count"])
    _field(console, "edge_count", d["edge_count"])
    if d.get("edges"):
        table = Table(show_header=True, pad_edge=False, expand=False)
        table.add_column("Parent", style="fam.id")
        table.add_column("Child", style="fam.id")
        for edge in d["edges"]:
            table.add_row(edge["parent_id"], edge["child_id"])
        console.print(table)
    for key in ("unresolved", "name_collisions", "duplicate_ids", "cycles"):
        if d.get(key):
            _field(console, key, len(d[key]))


def _render_trace(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "start_id", d["start_id"])
    _field(console, "count", d["count"])
    for item in d["items"]:
        console.print(Text.assemble(" -> ", (item["name"], "fam.name")), end="")
        if verbose:
            console.print(Text(f" ({item['id']})", style="fam.id"), end="")
        console.print()


def _render_sweep(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "start_id", d["start_id"])
    _field(console, "count", d["count"])
    generations = d.get("generations")
    if generations:
        names = {item["id"]: item["name"] for item in d["items"]}
        for depth, ids in enumerate(generations):
            console.print(Text(f"  generation {depth}: {', '.join(names[i] for i in ids)}"))
        return
    for item in d["items"]:
        console.print(Text.assemble(" - Found: ", (item["name"], "fam.name")), end="")
        if verbose:
            console.print(Text(f" (depth {item['depth']})", style="fam.key"), end="")
        console.print()


def _render_members(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "count", result.data["count"])
    if result.data["items"]:
        console.print(_member_table(result.data["items"]))


def _render_render(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    for key in ("output_file", "format", "node_count", "edge_count"):
        if key in d:
            _field(console, key, d[key])


def _render_describe(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    # Raw DOT so the output can be piped straight into Graphviz.
    console.out(str(result.data.get("content", "")), end="", highlight=False)


def _render_demo(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    for i, step in enumerate(result.data.get("steps", [])):
        if i:
            console.print()
        _render_into(ServiceResult.model_validate(step), console, verbose=verbose)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "build": _render_build,
    "trace": _render_trace,
    "sweep": _render_sweep,
    "roots": _render_members,
    "leaves": _render_members,
    "render": _render_render,
    "describe": _render_describe,
    "demo": _render_demo,
}
