"""Classic data structures and algorithms: binary trees, AVL maps, heaps, graphs,
disjoint sets and dynamic programming."""

__version__ = "0.1.0"