import pytest

from dsalgos.binarytree import (
    TreeNode,
    build_from_preorder,
    inorder,
    levelorder,
    postorder,
    preorder,
)

LISTING = [4, 2, 1, -1, -1, 3, -1, -1, 6, 5, -1, -1, 7, -1, -1]


def test_empty_tree():
    root = build_from_preorder([-1])
    assert root is None
    assert preorder(root) == []
    assert inorder(root) == []
    assert postorder(root) == []
    assert levelorder(root) == []


def test_single_node():
    root = build_from_preorder([9, -1, -1])
    assert root == TreeNode(9)
    assert preorder(root) == [9]
    assert levelorder(root) == [9]


def test_preorder_round_trips_listing():
    root = build_from_preorder(LISTING)
    assert preorder(root) == [v for v in LISTING if v != -1]


def test_inorder_of_search_tree_is_sorted():
    root = build_from_preorder(LISTING)
    values = [v for v in LISTING if v != -1]
    assert inorder(root) == sorted(values)


def test_postorder_ends_with_root_and_covers_all():
    root = build_from_preorder(LISTING)
    result = postorder(root)
    assert result[-1] == root.data
    assert sorted(result) == sorted(v for v in LISTING if v != -1)


def test_levelorder_starts_at_root_then_children():
    root = build_from_preorder(LISTING)
    result = levelorder(root)
    assert result[:3] == [root.data, root.left.data, root.right.data]
    assert len(result) == len(preorder(root))


def test_left_leaning_chain():
    root = build_from_preorder([3, 2, 1, -1, -1, -1, -1])
    assert levelorder(root) == [3, 2, 1]
    assert postorder(root) == [1, 2, 3]
    assert inorder(root) == [1, 2, 3]


def test_truncated_listing_raises():
    with pytest.raises(ValueError):
        build_from_preorder([1, 2, -1])


def test_extra_values_are_ignored():
    root = build_from_preorder([1, -1, -1, 5, 6])
    assert preorder(root) == [1]


def test_structure_of_built_nodes():
    root = build_from_preorder([1, -1, 2, -1, -1])
    assert root.left is None
    assert root.right == TreeNode(2)