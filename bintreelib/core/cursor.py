"""Iterative traversal cursors for BinTreeLib.

A cursor walks a binary tree one node per call. Each cursor owns its own
frontier (a stack or a queue) and only references the tree it walks, so any
number of cursors, of any order, can be active over the same tree at once.

Every cursor follows the same pass protocol:

- the first ``next_node()`` call initializes the frontier from the root,
- each call returns the next node, or ``None`` once the pass is exhausted,
- the call after an exhaustion starts a fresh pass,
- ``reset()`` abandons the current pass at any time.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Union, TYPE_CHECKING

from ..config import TraversalOrder, parse_order

if TYPE_CHECKING:
    from .node import BinaryTree


class TraversalCursor(ABC):
    """Abstract base class for resumable traversal cursors.

    Subclasses implement ``_begin`` (build the initial frontier) and
    ``_advance`` (produce the next node or None). The base class handles
    lazy initialization and re-arming after exhaustion.
    """

    order: TraversalOrder

    def __init__(self, root: 'BinaryTree'):
        """Initialize a cursor over the tree rooted at ``root``.

        Args:
            root: Traversal root; the cursor never modifies it
        """
        self.root = root
        self._started = False

    @property
    def started(self) -> bool:
        """True while a pass is in progress."""
        return self._started

    def reset(self) -> None:
        """Abandon the current pass; the next call starts from the root."""
        self._clear()
        self._started = False

    def next_node(self) -> Optional['BinaryTree']:
        """Return the next node of the pass, or None when it is exhausted."""
        if not self._started:
            self._clear()
            self._begin()
            self._started = True

        node = self._advance()
        if node is None:
            self._started = False
        return node

    def __iter__(self) -> Iterator['BinaryTree']:
        """Restart and yield every node of one complete pass."""
        self.reset()
        while True:
            node = self.next_node()
            if node is None:
                return
            yield node

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self.root!r}, started={self._started})"

    @abstractmethod
    def _clear(self) -> None:
        """Drop all frontier state."""
        pass

    @abstractmethod
    def _begin(self) -> None:
        """Seed the frontier for a new pass."""
        pass

    @abstractmethod
    def _advance(self) -> Optional['BinaryTree']:
        """Produce the next node, or None when the frontier is exhausted."""
        pass


class InOrderCursor(TraversalCursor):
    """In-order cursor (left, node, right).

    Replaces the recursive call stack with an explicit stack plus a pointer
    to the subtree still to be descended.
    """

    order = TraversalOrder.IN_ORDER

    def __init__(self, root: 'BinaryTree'):
        super().__init__(root)
        self._stack: List['BinaryTree'] = []
        self._descend: Optional['BinaryTree'] = None

    def _clear(self) -> None:
        self._stack = []
        self._descend = None

    def _begin(self) -> None:
        self._descend = self.root

    def _advance(self) -> Optional['BinaryTree']:
        if not self._stack and self._descend is None:
            return None

        while self._descend is not None:
            self._stack.append(self._descend)
            self._descend = self._descend.left

        node = self._stack.pop()
        self._descend = node.right
        return node


class PreOrderCursor(TraversalCursor):
    """Pre-order cursor (node, left, right)."""

    order = TraversalOrder.PRE_ORDER

    def __init__(self, root: 'BinaryTree'):
        super().__init__(root)
        self._stack: List['BinaryTree'] = []

    def _clear(self) -> None:
        self._stack = []

    def _begin(self) -> None:
        self._stack.append(self.root)

    def _advance(self) -> Optional['BinaryTree']:
        if not self._stack:
            return None

        node = self._stack.pop()
        # Right first so the left child is popped next
        if node.right is not None:
            self._stack.append(node.right)
        if node.left is not None:
            self._stack.append(node.left)
        return node


class PostOrderCursor(TraversalCursor):
    """Post-order cursor (left, right, node).

    The whole pass is materialized when it begins: a scratch stack drains
    the tree into a result stack that ends up in reverse post-order, and
    each call then pops one node. The cost of a pass is paid on its first
    call, and changes made to the tree during a pass are not seen by it.
    """

    order = TraversalOrder.POST_ORDER

    def __init__(self, root: 'BinaryTree'):
        super().__init__(root)
        self._stack: List['BinaryTree'] = []

    def _clear(self) -> None:
        self._stack = []

    def _begin(self) -> None:
        scratch = [self.root]
        while scratch:
            node = scratch.pop()
            self._stack.append(node)
            if node.left is not None:
                scratch.append(node.left)
            if node.right is not None:
                scratch.append(node.right)

    def _advance(self) -> Optional['BinaryTree']:
        if not self._stack:
            return None
        return self._stack.pop()


class LevelOrderCursor(TraversalCursor):
    """Level-order (breadth-first) cursor.

    The queue front is always the node to return next; ``_current`` tracks
    it so its children can be enqueued before it is dequeued.
    """

    order = TraversalOrder.LEVEL_ORDER

    def __init__(self, root: 'BinaryTree'):
        super().__init__(root)
        self._queue: Deque['BinaryTree'] = deque()
        self._current: Optional['BinaryTree'] = None

    def _clear(self) -> None:
        self._queue = deque()
        self._current = None

    def _begin(self) -> None:
        self._queue.append(self.root)
        self._current = self.root

    def _advance(self) -> Optional['BinaryTree']:
        if not self._queue or self._current is None:
            return None

        node = self._current
        if node.left is not None:
            self._queue.append(node.left)
        if node.right is not None:
            self._queue.append(node.right)
        if len(self._queue) > 1:
            self._current = self._queue[1]
        self._queue.popleft()
        return node


_CURSORS = {
    TraversalOrder.IN_ORDER: InOrderCursor,
    TraversalOrder.PRE_ORDER: PreOrderCursor,
    TraversalOrder.POST_ORDER: PostOrderCursor,
    TraversalOrder.LEVEL_ORDER: LevelOrderCursor,
}


# Factory function for creating cursors by order
def create_cursor(order: Union[TraversalOrder, str], root: 'BinaryTree') -> TraversalCursor:
    """Create a cursor instance for a traversal order.

    Args:
        order: TraversalOrder or name (in, pre, post, level, bfs, ...)
        root: Root of the tree to walk

    Returns:
        TraversalCursor instance

    Raises:
        ValueError: If the order name is not recognized
    """
    return _CURSORS[parse_order(order)](root)
