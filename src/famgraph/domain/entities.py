"""Entity and Relation records that a family graph is built from."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator


class Entity(BaseModel):
    """A person in the dataset, keyed by a unique ``id``.

    ``parent_name`` references the parent by *name*, not by ID.
    An empty string means the entity has no known parent.
    """

    model_config = {"frozen": True}

    id: str
    name: str
    parent_name: str = Field(
        default="",
        validation_alias=AliasChoices("parent_name", "parent", "parentName"),
    )

    @field_validator("parent_name", mode="before")
    @classmethod
    def coerce_null_parent(cls, value: Any) -> Any:
        return "" if value is None else value


class Relation(BaseModel):
    """A directed parent -> child edge."""

    model_config = {"frozen": True}

    parent_id: str
    child_id: str


class UnresolvedParent(BaseModel):
    """A parent reference that matched no entity name."""

    model_config = {"frozen": True}

    child_id: str
    parent_name: str


class NameCollision(BaseModel):
    """Two entities share a name; the later one won the name lookup."""

    model_config = {"frozen": True}

    name: str
    overwritten_id: str
    winning_id: str
