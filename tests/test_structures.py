import pytest

from algonotes.structures import (
    ListNode,
    TreeNode,
    build_list,
    build_tree,
    list_values,
    tree_values,
)


@pytest.mark.parametrize("values", [[1], [1, 2, 3], [5, 5, -1, 0], list(range(50))])
def test_list_round_trip(values):
    assert list_values(build_list(values)) == values


def test_empty_list_is_none():
    assert build_list([]) is None
    assert list_values(None) == []


def test_list_links_in_order():
    values = [7, 8]
    head = build_list(values)
    assert head.val == values[0]
    assert head.next.val == values[1]
    assert head.next.next is None


def test_list_node_iterates():
    node = ListNode(1, ListNode(2))
    assert list(node) == [1, 2]


@pytest.mark.parametrize(
    "values",
    [[1], [4, 2, 7, 1, 3, 6, 9], [1, None, 2, 3], [5, 3, 6, 2, 4, None, 7]],
)
def test_tree_round_trip(values):
    assert tree_values(build_tree(values)) == values


def test_empty_tree():
    assert build_tree([]) is None
    assert build_tree([None]) is None
    assert tree_values(None) == []


def test_tree_level_order_placement():
    values = [10, 20, 30]
    root = build_tree(values)
    assert root.val == values[0]
    assert root.left.val == values[1]
    assert root.right.val == values[2]


def test_trailing_gaps_trimmed():
    assert tree_values(build_tree([1, 2, None])) == [1, 2]


def test_tree_values_from_nodes():
    root = TreeNode(1, TreeNode(2), None)
    assert tree_values(root) == [1, 2]