"""A self-balancing AVL binary search tree of distinct keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _AVLNode:
    key: Any
    left: _AVLNode | None = None
    right: _AVLNode | None = None
    height: int = 1


def _height(node: _AVLNode | None) -> int:
    return node.height if node is not None else 0


def _update_height(node: _AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _AVLNode) -> _AVLNode:
    x = y.left
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: _AVLNode) -> _AVLNode:
    y = x.right
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def _insert(node: _AVLNode | None, key: Any) -> _AVLNode:
    if node is None:
        return _AVLNode(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node

    _update_height(node)
    balance = _balance(node)
    if balance > 1 and key < node.left.key:
        return _rotate_right(node)
    if balance < -1 and key > node.right.key:
        return _rotate_left(node)
    if balance > 1 and key > node.left.key:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and key < node.right.key:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _min_node(node: _AVLNode) -> _AVLNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: _AVLNode | None, key: Any) -> _AVLNode | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        node = node.left if node.left is not None else node.right
    else:
        successor = _min_node(node.right)
        node.key = successor.key
        node.right = _delete(node.right, successor.key)

    if node is None:
        return None

    _update_height(node)
    balance = _balance(node)
    if balance > 1 and _balance(node.left) >= 0:
        return _rotate_right(node)
    if balance > 1 and _balance(node.left) < 0:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and _balance(node.right) <= 0:
        return _rotate_left(node)
    if balance < -1 and _balance(node.right) > 0:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """A binary search tree kept height-balanced after every insert and delete.

    Inserting a key that is already present leaves the tree unchanged.
    """

    def __init__(self) -> None:
        self._root: _AVLNode | None = None

    def insert(self, key: Any) -> None:
        """Add ``key`` to the tree."""
        self._root = _insert(self._root, key)

    def delete(self, key: Any) -> None:
        """Remove ``key`` from the tree; nothing happens if it is absent."""
        self._root = _delete(self._root, key)

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if node.key == key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def preorder(self) -> list[Any]:
        """Keys in preorder: node, then left subtree, then right subtree."""
        order: list[Any] = []
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            order.append(node.key)
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)
        return order