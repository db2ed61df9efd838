"""Graphviz DOT description of a family graph.

IDs and labels are quoted differently. In a quoted ID, DOT only
unescapes ``\\"``, so a backslash is written as-is. Labels are escString
values where Graphviz also reads ``\\\\`` as one backslash, so both are
escaped there. An ID ending in a backslash cannot be written as a DOT
quoted string; it comes out unterminated.
"""

from __future__ import annotations

from famgraph.infrastructure.graph.engine import FamilyGraph


def _quote_id(value: str) -> str:
    return '"' + value.replace('"', '\\"') + '"'


def _quote_label(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def to_dot(
    family: FamilyGraph,
    *,
    rankdir: str = "TB",
    shape: str = "box",
    style: str = "rounded",
) -> str:
    """Generate a ``digraph G`` description: one labelled node per member,
    one directed edge per relation, in build order.
    """
    lines = [
        "digraph G {",
        f"  rankdir={rankdir};",
        f"  node [shape={shape}, style={style}];",
    ]
    for member in family.members:
        lines.append(f"  {_quote_id(member.id)} [label={_quote_label(member.name)}];")
    for edge in family.edges:
        lines.append(f"  {_quote_id(edge.parent_id)} -> {_quote_id(edge.child_id)};")
    lines.append("}")
    return "\n".join(lines) + "\n"
