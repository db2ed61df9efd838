"""FamilyGraph — an immutable NetworkX DiGraph built from Entity records.

Built once per invocation from the caller's entity list and frozen.
Parent references are resolved by name; references that match no name
are dropped and recorded in the :class:`BuildReport` instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

import networkx as nx

from famgraph.domain.entities import Entity, NameCollision, Relation, UnresolvedParent
from famgraph.domain.errors import NodeNotFound

logger = logging.getLogger(__name__)

_Graph: TypeAlias = nx.DiGraph


@dataclass(frozen=True)
class BuildReport:
    """Diagnostics collected while building the graph.

    None of these are errors. They record the lenient choices the
    builder made so callers can surface them.
    """

    unresolved: tuple[UnresolvedParent, ...] = ()
    name_collisions: tuple[NameCollision, ...] = ()
    duplicate_ids: tuple[str, ...] = ()
    cycles: tuple[tuple[str, ...], ...] = ()

    def warnings(self) -> list[str]:
        """Human-readable warning lines, one per recorded issue."""
        lines: list[str] = []
        for ref in self.unresolved:
            lines.append(f"Parent '{ref.parent_name}' of '{ref.child_id}' not found; edge dropped")
        for col in self.name_collisions:
            lines.append(
                f"Name '{col.name}' is shared by '{col.overwritten_id}' and "
                f"'{col.winning_id}'; parent lookups resolve to '{col.winning_id}'"
            )
        for dup in self.duplicate_ids:
            lines.append(f"Duplicate id '{dup}' ignored; first occurrence kept")
        for cycle in self.cycles:
            lines.append(f"Cycle detected: {' -> '.join((*cycle, cycle[0]))}")
        return lines


class FamilyGraph:
    """Read-only view over a built family graph.

    Attributes:
        graph: Frozen DiGraph keyed by entity ID. Each node carries its
            :class:`Entity` under the ``entity`` attribute.
        members: Unique entities in input order.
        edges: Parent -> child relations in the order they were added.
        report: Build diagnostics.
    """

    def __init__(
        self,
        graph: _Graph,
        members: tuple[Entity, ...],
        edges: tuple[Relation, ...],
        report: BuildReport,
    ) -> None:
        self.graph = graph
        self.members = members
        self.edges = edges
        self.report = report

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.graph

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    def entity(self, node_id: str) -> Entity:
        """Return the entity stored at *node_id*, or raise NodeNotFound."""
        if node_id not in self.graph:
            raise NodeNotFound(node_id)
        entity: Entity = self.graph.nodes[node_id]["entity"]
        return entity


def build_family_graph(entities: Iterable[Entity]) -> FamilyGraph:
    """Build a frozen family graph from *entities*.

    Pass 1 registers every entity as a node and maps name -> id. A later
    entity with the same name overwrites the mapping. A repeated id is
    ignored. Pass 2 adds a parent -> child edge for each entity whose
    ``parent_name`` resolves; unresolved names are recorded and skipped.
    """
    g: _Graph = nx.DiGraph()
    name_to_id: dict[str, str] = {}
    members: list[Entity] = []
    collisions: list[NameCollision] = []
    duplicates: list[str] = []

    for entity in entities:
        if entity.id in g:
            duplicates.append(entity.id)
            continue
        g.add_node(entity.id, entity=entity, name=entity.name)
        members.append(entity)
        previous = name_to_id.get(entity.name)
        if previous is not None:
            collisions.append(
                NameCollision(name=entity.name, overwritten_id=previous, winning_id=entity.id)
            )
        name_to_id[entity.name] = entity.id

    edges: list[Relation] = []
    unresolved: list[UnresolvedParent] = []
    for entity in members:
        if not entity.parent_name:
            continue
        parent_id = name_to_id.get(entity.parent_name)
        if parent_id is None:
            unresolved.append(UnresolvedParent(child_id=entity.id, parent_name=entity.parent_name))
            continue
        g.add_edge(parent_id, entity.id)
        edges.append(Relation(parent_id=parent_id, child_id=entity.id))

    cycles = tuple(tuple(c) for c in nx.simple_cycles(g))
    report = BuildReport(
        unresolved=tuple(unresolved),
        name_collisions=tuple(collisions),
        duplicate_ids=tuple(duplicates),
        cycles=cycles,
    )
    logger.debug(
        "Built family graph: %d nodes, %d edges, %d unresolved",
        g.number_of_nodes(),
        g.number_of_edges(),
        len(unresolved),
    )
    return FamilyGraph(nx.freeze(g), tuple(members), tuple(edges), report)
