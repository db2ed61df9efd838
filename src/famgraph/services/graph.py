"""GraphService — build summary and the four read-only family queries.

Wraps the traversal functions in ServiceResult envelopes. Unknown start
nodes become ``NOT_FOUND`` errors; build diagnostics become warnings.
"""

from __future__ import annotations

from typing import Any

from famgraph.domain.entities import Entity
from famgraph.domain.errors import NodeNotFound
from famgraph.infrastructure.graph import traversal
from famgraph.services.base import BaseService
from famgraph.services.result import ServiceResult


def _stop_at(node_id: str | None) -> traversal.Visitor | None:
    if node_id is None:
        return None
    return lambda entity: entity.id == node_id


class GraphService(BaseService):
    """Handles graph construction summaries and queries."""

    def build(self) -> ServiceResult:
        """Summarize the built graph: counts, edges, and diagnostics."""
        family = self._family
        report = family.report
        return ServiceResult(
            ok=True,
            op="build",
            data={
                "node_count": len(family),
                "edge_count": len(family.edges),
                "edges": [
                    {"parent_id": e.parent_id, "child_id": e.child_id} for e in family.edges
                ],
                "unresolved": [r.model_dump() for r in report.unresolved],
                "name_collisions": [c.model_dump() for c in report.name_collisions],
                "duplicate_ids": list(report.duplicate_ids),
                "cycles": [list(c) for c in report.cycles],
            },
            warnings=report.warnings(),
        )

    def trace(self, start_id: str, *, stop_at: str | None = None) -> ServiceResult:
        """Trace all descendants of *start_id* depth-first.

        Args:
            start_id: Node to start from (included in the result).
            stop_at: End the traversal once this node has been visited.
        """
        try:
            visited = list(traversal.descendant_trace(self._family, start_id, _stop_at(stop_at)))
        except NodeNotFound as exc:
            return self._not_found("trace", exc)
        return ServiceResult(ok=True, op="trace", data=self._walk_data(start_id, visited))

    def sweep(
        self,
        start_id: str,
        *,
        stop_at: str | None = None,
        by_generation: bool = False,
    ) -> ServiceResult:
        """Explore the family of *start_id* generation by generation.

        Each item carries its ``depth`` (distance from *start_id*). With
        *by_generation*, a ``generations`` list groups item IDs by depth.
        """
        try:
            layers = traversal.generations(self._family, start_id)
            visited = list(traversal.generation_sweep(self._family, start_id, _stop_at(stop_at)))
        except NodeNotFound as exc:
            return self._not_found("sweep", exc)

        depth_of = {e.id: depth for depth, layer in enumerate(layers) for e in layer}
        data = self._walk_data(start_id, visited)
        for item in data["items"]:
            item["depth"] = depth_of[item["id"]]
        if by_generation:
            seen = {e.id for e in visited}
            data["generations"] = [
                ids for layer in layers if (ids := [e.id for e in layer if e.id in seen])
            ]
        return ServiceResult(ok=True, op="sweep", data=data)

    def roots(self) -> ServiceResult:
        """Find members with no parent in the graph."""
        return self._list_result("roots", traversal.find_roots(self._family))

    def leaves(self) -> ServiceResult:
        """Find members with no children in the graph."""
        return self._list_result("leaves", traversal.find_leaves(self._family))

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _walk_data(self, start_id: str, visited: list[Entity]) -> dict[str, Any]:
        items: list[dict[str, Any]] = [self._item(e) for e in visited]
        return {
            "start_id": start_id,
            "count": len(items),
            "descendants": max(len(items) - 1, 0),
            "items": items,
        }

    def _list_result(self, op: str, members: list[Entity]) -> ServiceResult:
        items = [self._item(e) for e in members]
        return ServiceResult(ok=True, op=op, data={"count": len(items), "items": items})
