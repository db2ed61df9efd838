"""Infrastructure: graph construction, traversal, rendering, dataset I/O."""
