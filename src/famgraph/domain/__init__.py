"""Domain types: entities, relations, and error taxonomy."""
