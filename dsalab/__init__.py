"""Heaps, search trees, AVL dictionary, graphs, optimal BST and record files."""

__version__ = "0.1.0"