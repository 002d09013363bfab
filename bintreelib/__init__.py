"""BinTreeLib - Binary Tree Traversal Library.

BinTreeLib provides a small binary tree whose nodes can be walked in
in-order, pre-order, post-order and level-order, either recursively in one
call or one node at a time through resumable cursors.

Quick start:
━━━━━━━━━━━━
    from bintreelib import BinaryTree

    root = BinaryTree(8)
    root.insert_left(3).insert_right(6)
    root.visit_in_order()              # prints " 3 6 8"

    while (node := root.next_level_order()) is not None:
        ...
━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core components
from .core.node import BinaryTree
from .core.cursor import (
    TraversalCursor,
    InOrderCursor,
    PreOrderCursor,
    PostOrderCursor,
    LevelOrderCursor,
    create_cursor,
)
from .core.visitor import (
    STOP,
    NodeVisitor,
    PrintVisitor,
    ValueCollector,
    NodeCollector,
    CallbackVisitor,
)

# Configuration
from .config import (
    TraversalOrder,
    OutputConfig,
    ConfigurationError,
    RECURSIVE_ORDERS,
    parse_order,
)

# High-level API
from .api import (
    traverse,
    collect_values,
    visit_tree,
    format_traversal,
    print_traversal,
    traverse_with_depth,
    count_nodes,
    tree_height,
    get_leaf_nodes,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'BinaryTree',
    'TraversalCursor',
    'InOrderCursor',
    'PreOrderCursor',
    'PostOrderCursor',
    'LevelOrderCursor',
    'create_cursor',
    'STOP',
    'NodeVisitor',
    'PrintVisitor',
    'ValueCollector',
    'NodeCollector',
    'CallbackVisitor',
    # Config
    'TraversalOrder',
    'OutputConfig',
    'ConfigurationError',
    'RECURSIVE_ORDERS',
    'parse_order',
    # API
    'traverse',
    'collect_values',
    'visit_tree',
    'format_traversal',
    'print_traversal',
    'traverse_with_depth',
    'count_nodes',
    'tree_height',
    'get_leaf_nodes',
    'get_tree_stats',
]
