"""Configuration system for BinTreeLib.

This module defines the traversal orders the library understands and how
visited values are written out when the default visit behavior is used.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO, List, Union


class ConfigurationError(ValueError):
    """Raised when an output configuration fails validation."""
    pass


class TraversalOrder(Enum):
    """Order in which a traversal visits the nodes of a binary tree."""
    IN_ORDER = "in"          # Left, node, right
    PRE_ORDER = "pre"        # Node, left, right
    POST_ORDER = "post"      # Left, right, node
    LEVEL_ORDER = "level"    # Breadth-first, left to right


# Orders that have a recursive visitor on BinaryTree
RECURSIVE_ORDERS = frozenset({
    TraversalOrder.IN_ORDER,
    TraversalOrder.PRE_ORDER,
    TraversalOrder.POST_ORDER,
})


_ORDER_ALIASES = {
    'in': TraversalOrder.IN_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'pre': TraversalOrder.PRE_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
    'level': TraversalOrder.LEVEL_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'bfs': TraversalOrder.LEVEL_ORDER,
    'breadth_first': TraversalOrder.LEVEL_ORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from an enum member or a string alias.

    Args:
        order: Order as enum or string (e.g. "in", "pre_order", "bfs")

    Returns:
        TraversalOrder enum value

    Raises:
        ValueError: If the name is not a known order
    """
    if isinstance(order, TraversalOrder):
        return order

    order_lower = order.lower().replace('-', '_') if isinstance(order, str) else str(order)
    if order_lower in _ORDER_ALIASES:
        return _ORDER_ALIASES[order_lower]

    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
    )


@dataclass
class OutputConfig:
    """Where and how visited values are written.

    The default mirrors the classic console driver: every value is preceded
    by a single space, so a traversal prints as `` 1 3 4 6``.
    """

    stream: Optional[TextIO] = None     # None = sys.stdout at write time
    separator: str = " "
    prefix_separator: bool = True       # Separator before every value, not between

    def resolve_stream(self) -> TextIO:
        """Return the stream to write to.

        ``sys.stdout`` is looked up on every call so that redirection
        (including pytest's capture) is honoured.
        """
        return self.stream if self.stream is not None else sys.stdout

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.separator, str):
            errors.append("separator must be a string")

        if self.stream is not None and not callable(getattr(self.stream, 'write', None)):
            errors.append("stream must provide a write() method")

        return errors
