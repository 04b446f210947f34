"""Binary tree nodes, traversals, measurements and ASCII rendering."""

__version__ = "0.1.0"
__all__ = ["node", "traversal", "measure", "render"]