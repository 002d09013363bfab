"""High-level API for BinTreeLib.

This module provides simple, functional interfaces for common traversal
operations. These functions wrap the node and cursor classes for ease of
use in simple cases.
"""

from collections import deque
from typing import Any, Deque, Dict, Iterator, List, Optional, Tuple, Union

from .config import OutputConfig, TraversalOrder, RECURSIVE_ORDERS, parse_order
from .core.node import BinaryTree, VisitFn
from .core.visitor import PrintVisitor


def traverse(
    tree: BinaryTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
) -> Iterator[BinaryTree]:
    """Iterate over the nodes of a tree in the given order.

    A fresh cursor is used, so this never disturbs the tree's own
    ``next_*`` cursors or any other traversal in progress.

    Args:
        tree: Root of the tree
        order: Traversal order (in, pre, post, level)

    Yields:
        BinaryTree nodes

    Example:
        >>> for node in traverse(tree, "level"):
        ...     print(node.value)
    """
    yield from tree.cursor(order)


def collect_values(
    tree: BinaryTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
) -> List[Any]:
    """Return the node values of one complete pass as a list."""
    return [node.value for node in traverse(tree, order)]


def visit_tree(
    tree: BinaryTree,
    order: Union[TraversalOrder, str],
    visit_fn: Optional[VisitFn] = None,
) -> Any:
    """Run the recursive visitor for an order.

    Args:
        tree: Root of the tree
        order: in, pre or post; level order has no recursive form
        visit_fn: Called for each node (defaults to the tree's ``visit``)

    Returns:
        STOP if a visit aborted the traversal, None otherwise

    Raises:
        ValueError: If the order has no recursive visitor
    """
    order = parse_order(order)
    if order not in RECURSIVE_ORDERS:
        raise ValueError(f"No recursive visitor for {order.name}")

    visitors = {
        TraversalOrder.IN_ORDER: tree.visit_in_order,
        TraversalOrder.PRE_ORDER: tree.visit_pre_order,
        TraversalOrder.POST_ORDER: tree.visit_post_order,
    }
    return visitors[order](visit_fn)


def format_traversal(
    tree: BinaryTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
    separator: str = " ",
) -> str:
    """Render one pass as a string, e.g. ``"1 3 4 6 7 8 10 13 14"``."""
    return separator.join(str(value) for value in collect_values(tree, order))


def print_traversal(
    tree: BinaryTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
    config: Optional[OutputConfig] = None,
) -> int:
    """Write one pass to a stream through a PrintVisitor.

    Args:
        tree: Root of the tree
        order: Traversal order
        config: Output configuration (stdout, space-prefixed by default)

    Returns:
        Number of values written

    Raises:
        ConfigurationError: If the output configuration is invalid
    """
    printer = PrintVisitor(config)
    count = 0
    for node in traverse(tree, order):
        printer.visit(node)
        count += 1
    return count


def traverse_with_depth(tree: BinaryTree) -> Iterator[Tuple[BinaryTree, int]]:
    """Walk the tree breadth-first, yielding ``(node, depth)`` pairs.

    Depth is relative to ``tree`` (the root is at depth 0).
    """
    queue: Deque[Tuple[BinaryTree, int]] = deque([(tree, 0)])

    while queue:
        node, depth = queue.popleft()
        yield (node, depth)
        for child in node.get_children():
            queue.append((child, depth + 1))


def count_nodes(tree: BinaryTree) -> int:
    """Count the nodes in a tree."""
    count = 0
    for _ in traverse(tree, TraversalOrder.PRE_ORDER):
        count += 1
    return count


def tree_height(tree: BinaryTree) -> int:
    """Return the number of edges on the longest root-to-leaf path.

    A single node has height 0.
    """
    return max(depth for _, depth in traverse_with_depth(tree))


def get_leaf_nodes(
    tree: BinaryTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
) -> Iterator[BinaryTree]:
    """Yield the leaf nodes of a tree in the given order."""
    for node in traverse(tree, order):
        if node.is_leaf():
            yield node


def get_tree_stats(tree: BinaryTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total/leaf/internal node counts, height and the
        number of nodes at each depth

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Total nodes: {stats['total_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': 0,
        'depths': {}
    }

    for node, depth in traverse_with_depth(tree):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']

    return stats
