"""Descendant trace (DFS), generation sweep (BFS), roots, and leaves.

Traversals validate the start node eagerly and then return a lazy
iterator. NetworkX keeps a visited set, so cyclic input terminates and
no node is yielded twice. Successors are walked in edge-insertion order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeAlias

import networkx as nx

from famgraph.domain.entities import Entity
from famgraph.infrastructure.graph.engine import FamilyGraph

# Return True to stop the traversal after the current entity.
Visitor: TypeAlias = Callable[[Entity], bool]


def descendant_trace(
    family: FamilyGraph, start_id: str, visit: Visitor | None = None
) -> Iterator[Entity]:
    """Depth-first, pre-order walk of everything reachable from *start_id*.

    Raises:
        NodeNotFound: *start_id* is not in the graph.
    """
    family.entity(start_id)
    return _walk(family, nx.dfs_preorder_nodes(family.graph, start_id), visit)


def generation_sweep(
    family: FamilyGraph, start_id: str, visit: Visitor | None = None
) -> Iterator[Entity]:
    """Breadth-first walk from *start_id*, nearest generation first.

    Raises:
        NodeNotFound: *start_id* is not in the graph.
    """
    family.entity(start_id)
    return _walk(family, _bfs_nodes(family.graph, start_id), visit)


def generations(family: FamilyGraph, start_id: str) -> list[list[Entity]]:
    """Group the generation sweep by distance from *start_id*."""
    family.entity(start_id)
    return [
        [family.graph.nodes[n]["entity"] for n in layer]
        for layer in nx.bfs_layers(family.graph, start_id)
    ]


def find_roots(family: FamilyGraph) -> list[Entity]:
    """Entities with no incoming edge, in input order."""
    g = family.graph
    return [m for m in family.members if g.in_degree(m.id) == 0]


def find_leaves(family: FamilyGraph) -> list[Entity]:
    """Entities with no outgoing edge, in input order."""
    g = family.graph
    return [m for m in family.members if g.out_degree(m.id) == 0]


def _bfs_nodes(g: nx.DiGraph, source: str) -> Iterator[str]:
    yield source
    for _parent, child in nx.bfs_edges(g, source):
        yield child


def _walk(family: FamilyGraph, node_ids: Iterator[str], visit: Visitor | None) -> Iterator[Entity]:
    for node_id in node_ids:
        entity: Entity = family.graph.nodes[node_id]["entity"]
        stop = visit(entity) if visit is not None else False
        yield entity
        if stop:
            return
