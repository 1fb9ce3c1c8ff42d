"""A generic quadtree for axis-aligned rectangles: rect, node and tree modules."""

__version__ = "0.1.0"
__all__ = ["node", "rect", "tree"]