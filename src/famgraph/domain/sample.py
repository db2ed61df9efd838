"""Built-in sample dataset used when no dataset file is configured."""

from __future__ import annotations

from famgraph.domain.entities import Entity

SAMPLE_FAMILY: tuple[Entity, ...] = (
    Entity(id="1", name="Jordon D"),
    Entity(id="2", name="Robert Smith"),
    Entity(id="3", name="Danis Jordan", parent_name="Jordon D"),
    Entity(id="4", name="John Smith", parent_name="Robert Smith"),
    Entity(id="5", name="Maria Smith", parent_name="Robert Smith"),
    Entity(id="6", name="Leo Smith", parent_name="John Smith"),
)
