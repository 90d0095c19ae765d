import pytest

from algokit.binary_tree import (
    Node,
    bst_insert,
    build_level_order,
    build_preorder,
    diameter,
    height,
    inorder,
    largest_bst,
    level_order,
    morris_inorder,
    postorder,
    preorder,
)

BST_VALUES = [50, 30, 20, 40, 70, 60, 80]


def _bst(values):
    root = None
    for value in values:
        root = bst_insert(root, value)
    return root


def test_inorder_of_bst_is_sorted():
    assert inorder(_bst(BST_VALUES)) == sorted(BST_VALUES)


def test_bst_ignores_duplicates():
    assert inorder(_bst([5, 3, 5, 3, 8])) == [3, 5, 8]


def test_preorder_and_postorder_invariants():
    root = _bst(BST_VALUES)
    pre = preorder(root)
    post = postorder(root)
    assert pre[0] == 50
    assert post[-1] == 50
    assert sorted(pre) == sorted(BST_VALUES)
    assert sorted(post) == sorted(BST_VALUES)


def test_preorder_insertion_rebuilds_same_tree():
    root = _bst(BST_VALUES)
    rebuilt = _bst(preorder(root))
    assert preorder(rebuilt) == preorder(root)
    assert postorder(rebuilt) == postorder(root)


def test_empty_tree_traversals():
    assert inorder(None) == []
    assert preorder(None) == []
    assert postorder(None) == []
    assert level_order(None) == []
    assert morris_inorder(None) == []
    assert height(None) == 0
    assert diameter(None) == 0


def test_level_order_round_trip():
    values = [1, 2, 3, 4, 5, -1, -1, -1, -1, -1, -1]
    root = build_level_order(values)
    assert level_order(root) == [v for v in values if v != -1]


def test_build_level_order_too_short():
    with pytest.raises(ValueError):
        build_level_order([1, 2, 3])


def test_diameter_source_example():
    root = build_level_order([100, 200, 300, 400, 500, 600, 700] + [-1] * 8)
    assert diameter(root) == 4


def test_height_of_chain_equals_count():
    values = list(range(10))
    assert height(_bst(values)) == len(values)


def test_single_node():
    root = Node(7)
    assert height(root) == 1
    assert diameter(root) == 0


def test_morris_matches_inorder_and_restores_tree():
    root = Node(2, Node(5, Node(4), Node(3)), Node(8))
    before_pre = preorder(root)
    before_in = inorder(root)
    assert morris_inorder(root) == before_in
    assert preorder(root) == before_pre
    assert inorder(root) == before_in


def test_build_preorder_round_trip():
    values = [50, 30, 5, None, None, 20, None, None, 60, None, None]
    root = build_preorder(values)
    assert preorder(root) == [v for v in values if v is not None]


def test_build_preorder_accepts_minus_one_marker():
    root = build_preorder([1, -1, 2, -1, -1])
    assert root.left is None
    assert preorder(root) == [1, 2]


def test_largest_bst_of_valid_bst_is_whole_tree():
    root = _bst(BST_VALUES)
    best, size = largest_bst(root)
    assert best is root
    assert size == len(BST_VALUES)


def test_largest_bst_inside_non_bst():
    values = [50, 30, 5, None, None, 20, None, None,
              60, 45, None, None, 70, 65, None, None, 80, None, None]
    root = build_preorder(values)
    best, size = largest_bst(root)
    assert best is root.right
    assert size == 5


def test_largest_bst_of_empty_tree():
    assert largest_bst(None) == (None, 0)