"""Tests for the high-level API and configuration helpers."""

import io
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from bintreelib import (
    BinaryTree,
    OutputConfig,
    ConfigurationError,
    TraversalOrder,
    RECURSIVE_ORDERS,
    STOP,
    parse_order,
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
from bintreelib.testing import build_reference_tree, build_single_node, REFERENCE_SEQUENCES


@pytest.fixture
def tree():
    return build_reference_tree()


@pytest.mark.parametrize("order", list(TraversalOrder))
def test_collect_values(tree, order):
    assert collect_values(tree, order) == REFERENCE_SEQUENCES[order]


def test_collect_values_defaults_to_in_order(tree):
    assert collect_values(tree) == [1, 3, 4, 6, 7, 8, 10, 13, 14]


def test_traverse_yields_nodes(tree):
    nodes = list(traverse(tree, "pre"))
    assert nodes[0] is tree
    assert all(isinstance(n, BinaryTree) for n in nodes)


def test_format_traversal(tree):
    assert format_traversal(tree, "in") == "1 3 4 6 7 8 10 13 14"
    assert format_traversal(tree, "pre") == "8 3 1 6 4 7 10 14 13"
    assert format_traversal(tree, "post") == "1 4 7 6 3 13 14 10 8"
    assert format_traversal(tree, "level") == "8 3 10 1 6 14 4 7 13"
    assert format_traversal(tree, "level", separator=",") == "8,3,10,1,6,14,4,7,13"


def test_print_traversal(tree):
    stream = io.StringIO()
    written = print_traversal(tree, "level", OutputConfig(stream=stream))
    assert written == 9
    assert stream.getvalue() == " 8 3 10 1 6 14 4 7 13"


def test_print_traversal_to_stdout(tree, capsys):
    print_traversal(tree, TraversalOrder.POST_ORDER)
    assert capsys.readouterr().out == " 1 4 7 6 3 13 14 10 8"


def test_print_traversal_rejects_bad_config(tree):
    with pytest.raises(ConfigurationError, match="Invalid output configuration"):
        print_traversal(tree, "in", OutputConfig(separator=None))


@pytest.mark.parametrize("order", sorted(RECURSIVE_ORDERS, key=lambda o: o.value))
def test_visit_tree(tree, order):
    seen = []
    assert visit_tree(tree, order, lambda n: seen.append(n.value)) is None
    assert seen == REFERENCE_SEQUENCES[order]


def test_visit_tree_propagates_stop(tree):
    assert visit_tree(tree, "pre", lambda n: STOP) == STOP


def test_visit_tree_has_no_level_order(tree):
    with pytest.raises(ValueError, match="No recursive visitor"):
        visit_tree(tree, "level")


def test_count_nodes(tree):
    assert count_nodes(tree) == 9
    assert count_nodes(build_single_node()) == 1


def test_tree_height(tree):
    assert tree_height(tree) == 3
    assert tree_height(tree.left) == 2
    assert tree_height(build_single_node()) == 0


def test_traverse_with_depth(tree):
    pairs = [(node.value, depth) for node, depth in traverse_with_depth(tree)]
    assert pairs == [
        (8, 0), (3, 1), (10, 1), (1, 2), (6, 2), (14, 2), (4, 3), (7, 3), (13, 3),
    ]


def test_get_leaf_nodes(tree):
    assert [n.value for n in get_leaf_nodes(tree)] == [1, 4, 7, 13]
    assert [n.value for n in get_leaf_nodes(tree, "level")] == [1, 4, 7, 13]


def test_get_tree_stats(tree):
    stats = get_tree_stats(tree)
    assert stats['total_nodes'] == 9
    assert stats['leaf_nodes'] == 4
    assert stats['internal_nodes'] == 5
    assert stats['height'] == 3
    assert stats['depths'] == {0: 1, 1: 2, 2: 3, 3: 3}


def test_api_does_not_disturb_node_cursors(tree):
    assert tree.next_level_order().value == 8
    collect_values(tree, "level")
    count_nodes(tree)
    assert tree.next_level_order().value == 3


class TestParseOrder:

    def test_enum_passes_through(self):
        assert parse_order(TraversalOrder.PRE_ORDER) is TraversalOrder.PRE_ORDER

    @pytest.mark.parametrize("name,expected", [
        ("in", TraversalOrder.IN_ORDER),
        ("In_Order", TraversalOrder.IN_ORDER),
        ("preorder", TraversalOrder.PRE_ORDER),
        ("post-order", TraversalOrder.POST_ORDER),
        ("breadth_first", TraversalOrder.LEVEL_ORDER),
    ])
    def test_aliases(self, name, expected):
        assert parse_order(name) is expected

    def test_unknown(self):
        with pytest.raises(ValueError):
            parse_order("sideways")


class TestOutputConfig:

    def test_defaults_are_valid(self):
        config = OutputConfig()
        assert config.validate() == []
        assert config.separator == " "
        assert config.prefix_separator

    def test_resolves_stdout_lazily(self, capsys):
        config = OutputConfig()
        assert config.resolve_stream() is sys.stdout

    def test_explicit_stream(self):
        stream = io.StringIO()
        assert OutputConfig(stream=stream).resolve_stream() is stream

    def test_validation_errors(self):
        errors = OutputConfig(stream=42, separator=1).validate()
        assert len(errors) == 2
