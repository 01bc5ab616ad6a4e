"""Graph, tree and maze traversal utilities, plus a workspace reset helper."""

__version__ = "0.1.0"
__all__ = ["graph", "maze", "trees", "workspace"]