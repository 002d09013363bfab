"""Test fixtures for BinTreeLib consumers.

These helpers build well-known trees and drain node-level cursors so that
test suites can check traversal results without repeating the setup.
"""

import random
from typing import Any, Callable, Dict, List, Optional

from ..config import TraversalOrder
from ..core.node import BinaryTree


# Expected values for each order on the tree built by build_reference_tree()
REFERENCE_SEQUENCES: Dict[TraversalOrder, List[int]] = {
    TraversalOrder.IN_ORDER: [1, 3, 4, 6, 7, 8, 10, 13, 14],
    TraversalOrder.PRE_ORDER: [8, 3, 1, 6, 4, 7, 10, 14, 13],
    TraversalOrder.POST_ORDER: [1, 4, 7, 6, 3, 13, 14, 10, 8],
    TraversalOrder.LEVEL_ORDER: [8, 3, 10, 1, 6, 14, 4, 7, 13],
}


def build_reference_tree(tree_class: Callable[[Any], BinaryTree] = BinaryTree) -> BinaryTree:
    """Build the classic eight-rooted example tree.

    Structure::

                 8
                / \\
               3   10
              / \\    \\
             1   6    14
                / \\   /
               4   7 13

    Args:
        tree_class: Node class to use for the root (children follow it)

    Returns:
        The root node
    """
    root = tree_class(8)

    # Left branch
    left = root.insert_left(3)
    left.insert_left(1)
    six = left.insert_right(6)
    six.insert_left(4)
    six.insert_right(7)

    # Right branch
    root.insert_right(10).insert_right(14).insert_left(13)

    return root


def build_single_node(value: Any = 42) -> BinaryTree:
    """Build a tree made of one childless node."""
    return BinaryTree(value)


def build_random_tree(size: int, seed: Optional[int] = None) -> BinaryTree:
    """Build a tree of ``size`` nodes with a random shape.

    Values are 0..size-1 in insertion order. Insertions land on random
    sides of random existing nodes, so occupied sides exercise the
    push-down behavior of ``insert_left`` / ``insert_right``.

    Args:
        size: Number of nodes (at least 1)
        seed: Seed for reproducible shapes
    """
    rng = random.Random(seed)
    root = BinaryTree(0)
    nodes = [root]

    for value in range(1, size):
        parent = rng.choice(nodes)
        if rng.random() < 0.5:
            nodes.append(parent.insert_left(value))
        else:
            nodes.append(parent.insert_right(value))

    return root


def drain(next_fn: Callable[[], Optional[BinaryTree]]) -> List[Any]:
    """Call a node-level ``next_*`` method until it returns None.

    Args:
        next_fn: Bound cursor method, e.g. ``tree.next_in_order``

    Returns:
        Values of the nodes returned during the pass
    """
    values = []
    while True:
        node = next_fn()
        if node is None:
            return values
        values.append(node.value)
