"""BaseService — shared foundation for famgraph services.

Every service receives a built :class:`FamilyGraph` at construction
time and only reads from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from famgraph.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from famgraph.domain.entities import Entity
    from famgraph.domain.errors import NodeNotFound
    from famgraph.infrastructure.graph import FamilyGraph


class BaseService:
    """Base for service classes operating on one family graph."""

    def __init__(self, family: FamilyGraph) -> None:
        self._family = family

    @staticmethod
    def _item(entity: Entity) -> dict[str, Any]:
        return {"id": entity.id, "name": entity.name, "parent_name": entity.parent_name}

    @staticmethod
    def _not_found(op: str, exc: NodeNotFound) -> ServiceResult:
        return ServiceResult.failure(op, ErrorCode.NOT_FOUND, str(exc), id=exc.node_id)
