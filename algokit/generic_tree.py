"""N-ary trees built from a preorder list with -1 closing each node."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

END = -1


@dataclass
class TreeNode:
    """A node of an n-ary tree."""

    data: int
    children: list[TreeNode] = field(default_factory=list)


def build_tree(values: Iterable[int]) -> TreeNode | None:
    """Build a tree from preorder values where -1 closes the most recent open node.

    Returns None for an empty input.
    """
    root: TreeNode | None = None
    stack: list[TreeNode] = []
    for value in values:
        if value == END:
            if not stack:
                raise ValueError("unbalanced -1 in tree description")
            stack.pop()
            continue
        node = TreeNode(value)
        if stack:
            stack[-1].children.append(node)
        elif root is None:
            root = node
        else:
            raise ValueError("tree description holds more than one root")
        stack.append(node)
    return root


def describe(root: TreeNode) -> list[str]:
    """One line per node in preorder, such as ``"10->20, 30, ."``."""
    lines: list[str] = []
    pending = [root]
    while pending:
        node = pending.pop()
        children = "".join(f"{child.data}, " for child in node.children)
        lines.append(f"{node.data}->{children}.")
        pending.extend(reversed(node.children))
    return lines


def _height_and_diameter(node: TreeNode) -> tuple[int, int]:
    best = 0
    tallest = second = -1
    for child in node.children:
        child_height, child_best = _height_and_diameter(child)
        best = max(best, child_best)
        if child_height >= tallest:
            second, tallest = tallest, child_height
        elif child_height >= second:
            second = child_height
    best = max(best, tallest + second + 2)
    return tallest + 1, best


def diameter(root: TreeNode) -> int:
    """Number of edges on the longest path between any two nodes."""
    return _height_and_diameter(root)[1]


def node_to_root_path(root: TreeNode, key: int) -> list[int]:
    """Data from the first node holding ``key`` up to the root, or an empty list."""
    if root.data == key:
        return [root.data]
    for child in root.children:
        path = node_to_root_path(child, key)
        if path:
            path.append(root.data)
            return path
    return []


def distance_between(root: TreeNode, first: int, second: int) -> int:
    """Number of edges between the nodes holding ``first`` and ``second``."""
    path_one = node_to_root_path(root, first)
    path_two = node_to_root_path(root, second)
    if not path_one or not path_two:
        missing = first if not path_one else second
        raise ValueError(f"{missing} is not in the tree")
    i, j = len(path_one) - 1, len(path_two) - 1
    while i >= 0 and j >= 0 and path_one[i] == path_two[j]:
        i -= 1
        j -= 1
    return i + 1 + j + 1