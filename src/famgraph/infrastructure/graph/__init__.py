"""NetworkX-backed family graph and its read-only queries."""

from famgraph.infrastructure.graph.engine import BuildReport, FamilyGraph, build_family_graph

__all__ = ["BuildReport", "FamilyGraph", "build_family_graph"]
