"""Visit strategies for BinTreeLib.

A visitor decides what happens to each node reached by a recursive
traversal. The same traversal can print values, collect them, or run any
user callback, depending on which visitor it is given.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, TYPE_CHECKING

from ..config import OutputConfig, ConfigurationError

if TYPE_CHECKING:
    from .node import BinaryTree


class _Stop:
    """Sentinel type for STOP; compared by identity."""

    def __repr__(self) -> str:
        return "STOP"


# Return this from a visit to abort the traversal.
STOP = _Stop()


class NodeVisitor(ABC):
    """Abstract base class for visit strategies.

    Visitors are callable, so an instance can be passed anywhere a plain
    ``visit_fn(node)`` callable is accepted.
    """

    @abstractmethod
    def visit(self, node: 'BinaryTree') -> Any:
        """Process one node.

        Args:
            node: The node being visited

        Returns:
            STOP to abort the traversal, anything else to continue
        """
        pass

    def __call__(self, node: 'BinaryTree') -> Any:
        return self.visit(node)


class PrintVisitor(NodeVisitor):
    """Writes node values to a text stream.

    This is the default visit behavior of BinaryTree. With
    ``prefix_separator`` every value is preceded by the separator;
    otherwise the separator goes between values, and ``reset()`` starts a
    new line of output for the next traversal.
    """

    def __init__(self, config: Optional[OutputConfig] = None):
        """Initialize with an output configuration.

        Args:
            config: Where and how to write values (defaults to stdout)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config or OutputConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid output configuration: {'; '.join(config_errors)}"
            )

        self._written = 0

    def reset(self) -> None:
        """Forget previously written values so the next one gets no separator."""
        self._written = 0

    def visit(self, node: 'BinaryTree') -> None:
        stream = self.config.resolve_stream()
        if self.config.prefix_separator or self._written:
            stream.write(self.config.separator)
        stream.write(str(node.value))
        self._written += 1


class ValueCollector(NodeVisitor):
    """Collects the values of visited nodes in visit order."""

    def __init__(self):
        self.values: List[Any] = []

    def visit(self, node: 'BinaryTree') -> None:
        self.values.append(node.value)


class NodeCollector(NodeVisitor):
    """Collects the visited nodes themselves."""

    def __init__(self):
        self.nodes: List['BinaryTree'] = []

    def visit(self, node: 'BinaryTree') -> None:
        self.nodes.append(node)


class CallbackVisitor(NodeVisitor):
    """Adapts a plain callable to the visitor interface."""

    def __init__(self, fn: Callable[['BinaryTree'], Any]):
        self.fn = fn

    def visit(self, node: 'BinaryTree') -> Any:
        return self.fn(node)
