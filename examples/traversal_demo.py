#!/usr/bin/env python3
"""
Walk the classic example tree in every supported order.

Builds this tree::

             8
            / \\
           3   10
          / \\    \\
         1   6    14
            / \\   /
           4   7 13

and prints each recursive and iterative traversal on its own line.
"""

import sys
from pathlib import Path
from typing import Optional, TextIO

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import BinaryTree, OutputConfig


def build_tree(stream: Optional[TextIO] = None) -> BinaryTree:
    """Build the example tree, writing default visits to ``stream``."""
    root = BinaryTree(8, output=OutputConfig(stream=stream))

    # Left branch
    left = root.insert_left(3)
    left.insert_left(1)
    six = left.insert_right(6)
    six.insert_left(4)
    six.insert_right(7)

    # Right branch
    root.insert_right(10).insert_right(14).insert_left(13)

    return root


def print_iterative(next_fn, out: TextIO) -> None:
    node = next_fn()
    while node is not None:
        out.write(f" {node.value}")
        node = next_fn()


def main(stream: Optional[TextIO] = None) -> int:
    out = stream if stream is not None else sys.stdout
    tree = build_tree(stream)

    out.write("RECURSIVE IN-ORDER\n")
    tree.visit_in_order()
    out.write("\nITERATIVE IN-ORDER\n")
    print_iterative(tree.next_in_order, out)

    out.write("\nRECURSIVE PRE-ORDER\n")
    tree.visit_pre_order()
    out.write("\nITERATIVE PRE-ORDER\n")
    print_iterative(tree.next_pre_order, out)

    out.write("\nRECURSIVE POST-ORDER\n")
    tree.visit_post_order()
    out.write("\nITERATIVE POST-ORDER\n")
    print_iterative(tree.next_post_order, out)

    out.write("\nITERATIVE LEVEL-ORDER\n")
    print_iterative(tree.next_level_order, out)
    out.write("\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
