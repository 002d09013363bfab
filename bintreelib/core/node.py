"""BinaryTree node for BinTreeLib.

A BinaryTree is at the same time a tree and the root of every subtree
below it. Each node owns at most two children and has no link back to its
parent, so a tree can only be walked from the top down.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from ..config import OutputConfig, ConfigurationError, TraversalOrder
from .cursor import TraversalCursor, create_cursor
from .visitor import STOP, PrintVisitor


VisitFn = Callable[['BinaryTree'], Any]


class BinaryTree:
    """A binary tree node holding a single value.

    Nodes are built top-down with ``insert_left`` / ``insert_right`` and can
    be walked recursively (``visit_*``) or one node at a time (``next_*``).
    """

    def __init__(self, value: Any = None, output: Optional[OutputConfig] = None):
        """Create a node, optionally holding ``value``.

        Args:
            value: Value stored in the node (None for an empty node)
            output: Where the default ``visit`` writes values (stdout if None)

        Raises:
            ConfigurationError: If ``output`` is invalid
        """
        if output is not None:
            config_errors = output.validate()
            if config_errors:
                raise ConfigurationError(
                    f"Invalid output configuration: {'; '.join(config_errors)}"
                )

        self.value = value
        self.output = output
        self._printer: Optional[PrintVisitor] = None
        self._left: Optional['BinaryTree'] = None
        self._right: Optional['BinaryTree'] = None
        self._cursors: Dict[TraversalOrder, TraversalCursor] = {}

    @property
    def left(self) -> Optional['BinaryTree']:
        """The left subtree, or None."""
        return self._left

    @property
    def right(self) -> Optional['BinaryTree']:
        """The right subtree, or None."""
        return self._right

    def _new_node(self, value: Any) -> 'BinaryTree':
        node = self.__class__(value)
        node.output = self.output
        return node

    # **Attachment**
    #
    # Inserting on a side that is already occupied pushes the old subtree
    # down one level: it becomes the new node's child on the same side.

    def insert_left(self, value: Any) -> 'BinaryTree':
        """Insert a new node holding ``value`` as the left child.

        The previous left subtree becomes the left subtree of the new node.

        Returns:
            The newly created node, so insertions can be chained
        """
        node = self._new_node(value)
        node._left = self._left
        self._left = node
        return node

    def insert_right(self, value: Any) -> 'BinaryTree':
        """Insert a new node holding ``value`` as the right child.

        The previous right subtree becomes the right subtree of the new node.

        Returns:
            The newly created node, so insertions can be chained
        """
        node = self._new_node(value)
        node._right = self._right
        self._right = node
        return node

    def is_leaf(self) -> bool:
        """Is this node a leaf?  A node is a leaf if it has no children."""
        return self._left is None and self._right is None

    def get_children(self) -> List['BinaryTree']:
        """Get children as a list, left child first."""
        return [child for child in (self._left, self._right) if child is not None]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"

    # **Recursive traversal**

    def visit(self, node: 'BinaryTree') -> Any:
        """Default visit hook: write the node value to the output stream.

        Values are written by a PrintVisitor over ``output`` (space-prefixed
        on stdout by default). Subclasses can override this to implement
        other forms of visit.
        """
        if self._printer is None:
            self._printer = PrintVisitor(self.output)
        self._printer.visit(node)

    def _hook(self, visit_fn: Optional[VisitFn]) -> VisitFn:
        if visit_fn is not None:
            return visit_fn
        # One printer per traversal, so separators restart with each visit_*
        self._printer = PrintVisitor(self.output)
        return self.visit

    def visit_in_order(self, visit_fn: Optional[VisitFn] = None) -> Any:
        """Visit the tree in-order: left subtree, node, right subtree.

        Args:
            visit_fn: Called with each node; defaults to ``self.visit``.
                Returning STOP aborts the traversal.

        Returns:
            STOP if the traversal was aborted, None otherwise
        """
        return _visit_in_order(self, self._hook(visit_fn))

    def visit_pre_order(self, visit_fn: Optional[VisitFn] = None) -> Any:
        """Visit the tree pre-order: node, left subtree, right subtree."""
        return _visit_pre_order(self, self._hook(visit_fn))

    def visit_post_order(self, visit_fn: Optional[VisitFn] = None) -> Any:
        """Visit the tree post-order: left subtree, right subtree, node."""
        return _visit_post_order(self, self._hook(visit_fn))

    # **Iterative traversal**
    #
    # The node keeps one cursor per order for the next_* methods. Orders do
    # not share state, so they may be interleaved freely.

    def cursor(self, order: Union[TraversalOrder, str]) -> TraversalCursor:
        """Create a new, independent cursor over this tree."""
        return create_cursor(order, self)

    def traverse(self, order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> Iterator['BinaryTree']:
        """Yield every node of one complete pass in the given order."""
        return iter(self.cursor(order))

    def _own_cursor(self, order: TraversalOrder) -> TraversalCursor:
        cursor = self._cursors.get(order)
        if cursor is None:
            cursor = self._cursors[order] = create_cursor(order, self)
        return cursor

    def reset(self) -> None:
        """Restart all of this node's cursors from the beginning.

        Can be called after a complete pass or at any point in the middle
        of one.
        """
        for cursor in self._cursors.values():
            cursor.reset()

    def next_in_order(self) -> Optional['BinaryTree']:
        """Return the next node in-order, or None when the pass is over."""
        return self._own_cursor(TraversalOrder.IN_ORDER).next_node()

    def next_pre_order(self) -> Optional['BinaryTree']:
        """Return the next node pre-order, or None when the pass is over."""
        return self._own_cursor(TraversalOrder.PRE_ORDER).next_node()

    def next_post_order(self) -> Optional['BinaryTree']:
        """Return the next node post-order, or None when the pass is over."""
        return self._own_cursor(TraversalOrder.POST_ORDER).next_node()

    def next_level_order(self) -> Optional['BinaryTree']:
        """Return the next node level by level, or None when the pass is over."""
        return self._own_cursor(TraversalOrder.LEVEL_ORDER).next_node()


def _visit_in_order(node: Optional[BinaryTree], visit: VisitFn) -> Any:
    if node is None:
        return None
    if _visit_in_order(node.left, visit) is STOP:
        return STOP
    if visit(node) is STOP:
        return STOP
    return _visit_in_order(node.right, visit)


def _visit_pre_order(node: Optional[BinaryTree], visit: VisitFn) -> Any:
    if node is None:
        return None
    if visit(node) is STOP:
        return STOP
    if _visit_pre_order(node.left, visit) is STOP:
        return STOP
    return _visit_pre_order(node.right, visit)


def _visit_post_order(node: Optional[BinaryTree], visit: VisitFn) -> Any:
    if node is None:
        return None
    if _visit_post_order(node.left, visit) is STOP:
        return STOP
    if _visit_post_order(node.right, visit) is STOP:
        return STOP
    if visit(node) is STOP:
        return STOP
    return None
