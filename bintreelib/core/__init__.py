"""Core components of BinTreeLib.

This module contains the binary tree node, the iterative cursors that walk
it, and the visitor strategies used by its recursive traversals.
"""

from .node import BinaryTree
from .cursor import (
    TraversalCursor,
    InOrderCursor,
    PreOrderCursor,
    PostOrderCursor,
    LevelOrderCursor,
    create_cursor,
)
from .visitor import (
    STOP,
    NodeVisitor,
    PrintVisitor,
    ValueCollector,
    NodeCollector,
    CallbackVisitor,
)

__all__ = [
    "BinaryTree",
    "TraversalCursor",
    "InOrderCursor",
    "PreOrderCursor",
    "PostOrderCursor",
    "LevelOrderCursor",
    "create_cursor",
    "STOP",
    "NodeVisitor",
    "PrintVisitor",
    "ValueCollector",
    "NodeCollector",
    "CallbackVisitor",
]
