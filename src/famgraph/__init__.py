"""famgraph — build, render, and query family graphs."""

__version__ = "0.1.0"
