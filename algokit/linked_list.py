"""A singly linked list with positional insert and delete, reversal, palindrome and middle checks."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: _Node | None = None) -> None:
        self.data = data
        self.next = next


class LinkedList:
    """A singly linked list keeping both ends for constant-time prepend and append."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0
        for value in values:
            self.append(value)

    def push_front(self, value: Any) -> None:
        """Put ``value`` at the front."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._length += 1

    def append(self, value: Any) -> None:
        """Put ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def insert(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it becomes element ``position`` (1-based)."""
        if not 1 <= position <= self._length + 1:
            raise IndexError(f"position {position} outside 1..{self._length + 1}")
        if position == 1:
            self.push_front(value)
        elif position == self._length + 1:
            self.append(value)
        else:
            previous = self._node_at(position - 1)
            previous.next = _Node(value, previous.next)
            self._length += 1

    def delete(self, position: int) -> Any:
        """Remove and return element ``position`` (1-based)."""
        if not 1 <= position <= self._length:
            raise IndexError(f"position {position} outside 1..{self._length}")
        if position == 1:
            removed = self._head
            self._head = removed.next
            if self._head is None:
                self._tail = None
        else:
            previous = self._node_at(position - 1)
            removed = previous.next
            previous.next = removed.next
            if removed is self._tail:
                self._tail = previous
        self._length -= 1
        return removed.data

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous = None
        current = self._head
        self._tail = current
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self._head = previous

    def _middle_node(self) -> _Node | None:
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow

    def is_palindrome(self) -> bool:
        """Whether the list reads the same forwards and backwards."""
        stack = []
        node = self._middle_node()
        while node is not None:
            stack.append(node.data)
            node = node.next
        front = self._head
        while stack:
            if front.data != stack.pop():
                return False
            front = front.next
        return True

    def middle(self) -> Any:
        """The middle element; the second of the two middles for an even length."""
        node = self._middle_node()
        if node is None:
            raise IndexError("middle of an empty list")
        return node.data

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._length


def segregate_even_odd(values: Iterable[Any]) -> LinkedList:
    """Keep the first value, then put each even value at the front and each odd one at the end."""
    result = LinkedList()
    items = iter(values)
    for first in items:
        result.append(first)
        break
    for value in items:
        if value % 2 == 0:
            result.push_front(value)
        else:
            result.append(value)
    return result