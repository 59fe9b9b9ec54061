"""Weighted undirected graphs, search and spanning-tree algorithms, and their helper structures."""

__version__ = "0.1.0"

__all__ = ["graph", "boundedqueue", "minheap", "unionfind", "algorithms", "cli"]