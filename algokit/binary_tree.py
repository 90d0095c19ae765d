"""Binary trees: search-tree insertion, traversals, height, diameter and the largest BST inside a tree."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable

END = -1


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    value: Any
    left: Node | None = None
    right: Node | None = None


def bst_insert(root: Node | None, value: Any) -> Node:
    """Insert ``value`` into the search tree at ``root`` and return the root.

    A value already present is not inserted again.
    """
    new = Node(value)
    if root is None:
        return new
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = new
                return root
            node = node.right
        else:
            return root


def inorder(root: Node | None) -> list[Any]:
    """Values in left, node, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.value, *inorder(root.right)]


def preorder(root: Node | None) -> list[Any]:
    """Values in node, left, right order."""
    if root is None:
        return []
    return [root.value, *preorder(root.left), *preorder(root.right)]


def postorder(root: Node | None) -> list[Any]:
    """Values in left, right, node order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.value]


def level_order(root: Node | None) -> list[Any]:
    """Values level by level from the root, left to right within a level."""
    order: list[Any] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        order.append(node.value)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return order


def morris_inorder(root: Node | None) -> list[Any]:
    """In-order values found without recursion or a stack.

    Temporary links to each node's in-order successor are made and then
    removed, so the tree is left as it was.
    """
    order: list[Any] = []
    current = root
    while current is not None:
        if current.left is None:
            order.append(current.value)
            current = current.right
            continue
        previous = current.left
        while previous.right is not None and previous.right is not current:
            previous = previous.right
        if previous.right is None:
            previous.right = current
            current = current.left
        else:
            previous.right = None
            order.append(current.value)
            current = current.right
    return order


def height(root: Node | None) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def _height_and_diameter(node: Node | None) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_height, left_diameter = _height_and_diameter(node.left)
    right_height, right_diameter = _height_and_diameter(node.right)
    return (
        max(left_height, right_height) + 1,
        max(left_diameter, right_diameter, left_height + right_height),
    )


def diameter(root: Node | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    return _height_and_diameter(root)[1]


def build_level_order(values: Iterable[Any]) -> Node | None:
    """Build a tree from values given level by level, -1 marking a missing child.

    After the root, each node in turn takes two values: its left and its
    right child. Returns None for an empty input or a leading -1, and raises
    ValueError when the values run out before every node has both children.
    """
    items = iter(values)
    first = next(items, END)
    if first == END:
        return None
    root = Node(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        children = []
        for _ in range(2):
            try:
                value = next(items)
            except StopIteration:
                raise ValueError("level-order description ends too early") from None
            child = None if value == END else Node(value)
            if child is not None:
                pending.append(child)
            children.append(child)
        node.left, node.right = children
    return root


def build_preorder(values: Iterable[Any]) -> Node | None:
    """Build a tree from preorder values, None or -1 marking a missing child.

    Running out of values counts as a missing child.
    """
    items = iter(values)

    def build() -> Node | None:
        value = next(items, None)
        if value is None or value == END:
            return None
        node = Node(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def _bst_info(node: Node | None) -> tuple[bool, float, float, Node | None, int]:
    """(is a BST, smallest value, largest value, root of largest BST, its size)."""
    if node is None:
        return True, math.inf, -math.inf, None, 0
    left_ok, left_min, left_max, left_root, left_size = _bst_info(node.left)
    right_ok, right_min, right_max, right_root, right_size = _bst_info(node.right)
    smallest = min(node.value, left_min, right_min)
    largest = max(node.value, left_max, right_max)
    if left_ok and right_ok and left_max < node.value < right_min:
        return True, smallest, largest, node, left_size + right_size + 1
    if left_size > right_size:
        return False, smallest, largest, left_root, left_size
    return False, smallest, largest, right_root, right_size


def largest_bst(root: Node | None) -> tuple[Node | None, int]:
    """Root and node count of the largest subtree that is a binary search tree."""
    _, _, _, best_root, size = _bst_info(root)
    return best_root, size