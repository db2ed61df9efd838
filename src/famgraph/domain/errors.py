"""Exception taxonomy raised by the graph core and renderer.

The service layer converts these into ``ServiceResult`` errors; nothing
below the service layer catches them.
"""

from __future__ import annotations


class FamGraphError(Exception):
    """Base class for all famgraph errors."""


class NodeNotFound(FamGraphError):
    """A query referenced an ID that is not in the graph."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node '{node_id}' not found in graph")
        self.node_id = node_id


class RenderUnavailable(FamGraphError):
    """The external rendering tool is missing or exited with failure."""

    def __init__(self, command: str, cause: BaseException, *, stderr: str = "") -> None:
        msg = f"failed to generate graph image with '{command}'. Is Graphviz installed?: {cause}"
        if stderr:
            msg = f"{msg} ({stderr})"
        super().__init__(msg)
        self.command = command
        self.cause = cause
        self.stderr = stderr


class DatasetError(FamGraphError):
    """An entity dataset file could not be read or validated."""
