"""Ordered tree exercise."""
from .ordered_tree import OrderedTree, TreeNode, RemovalCase

__all__ = [
    "OrderedTree",
    "TreeNode",
    "RemovalCase",
]
