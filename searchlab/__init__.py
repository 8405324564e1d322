"""Classic search, graph, puzzle and sorting algorithms with command-line drivers."""

__version__ = "0.1.0"

__all__ = ["graphs", "mst", "puzzle", "gridpath", "queens", "sorting", "expert"]