"""Testing utilities for BinTreeLib consumers."""

from .fixtures import (
    build_reference_tree,
    build_single_node,
    build_random_tree,
    drain,
    REFERENCE_SEQUENCES,
)

__all__ = [
    'build_reference_tree',
    'build_single_node',
    'build_random_tree',
    'drain',
    'REFERENCE_SEQUENCES',
]
