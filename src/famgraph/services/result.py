"""Envelopes returned by every famgraph service call.

Commands never see domain exceptions: services catch them and return a
``ServiceResult`` with ``ok=False`` and one of the :class:`ErrorCode`
values, which the CLI prints (or serializes with ``--json``) before
exiting 1.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    NOT_FOUND = "NOT_FOUND"
    RENDER_UNAVAILABLE = "RENDER_UNAVAILABLE"
    INVALID_DATASET = "INVALID_DATASET"


class ServiceError(BaseModel):
    """Why an operation failed. ``detail`` holds the offending id or path."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation (``op``) on the family graph.

    ``data`` is only meaningful when ``ok``; ``warnings`` carries build
    diagnostics such as dropped parent references.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
