"""Stack-based utilities: a bounded stack, infix to postfix, redundant brackets, queue and string reversal."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable

DEFAULT_CAPACITY = 5
_OPERATORS = "+-*/"


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(IndexError):
    """Raised when reading from an empty stack."""


class BoundedStack:
    """A last-in first-out stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top; StackOverflow if the stack is full."""
        if self.is_full():
            raise StackOverflow(f"stack is full at {self.capacity} items")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; StackUnderflow if empty."""
        if self.is_empty():
            raise StackUnderflow("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """The top item without removing it; StackUnderflow if empty."""
        if self.is_empty():
            raise StackUnderflow("peek at an empty stack")
        return self._items[-1]

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


def precedence(symbol: str) -> int:
    """Binding strength of an operator; ``(`` is 0 and anything unknown is -1."""
    if symbol == "(":
        return 0
    if symbol in "+-":
        return 1
    if symbol in "*/":
        return 2
    if symbol == "^":
        return 3
    return -1


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Letters and digits are operands; every other character except brackets
    is handled as an operator, and equal precedence pops left to right.
    """
    stack: list[str] = []
    output: list[str] = []
    for symbol in expression:
        if _is_operand(symbol):
            output.append(symbol)
        elif symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced ')' in expression")
            stack.pop()
        else:
            while stack and precedence(symbol) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(symbol)
    output.extend(reversed(stack))
    return "".join(output)


def has_redundant_parentheses(expression: str) -> bool:
    """Whether some pair of brackets encloses no operator of its own."""
    stack: list[str] = []
    redundant = False
    for symbol in expression:
        if symbol in _OPERATORS or symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            if not stack:
                raise ValueError("unbalanced ')' in expression")
            if stack[-1] == "(":
                redundant = True
            while stack and stack[-1] in _OPERATORS:
                stack.pop()
            if not stack:
                raise ValueError("unbalanced ')' in expression")
            stack.pop()
    return redundant


def reverse_queue(queue: Iterable[Any]) -> deque:
    """A new queue holding the items of ``queue`` in reverse order."""
    stack = list(queue)
    reversed_queue: deque = deque()
    while stack:
        reversed_queue.append(stack.pop())
    return reversed_queue


def reverse_queue_recursive(queue: deque) -> None:
    """Reverse ``queue`` in place by recursion."""
    if not queue:
        return
    front = queue.popleft()
    reverse_queue_recursive(queue)
    queue.append(front)


def reverse_string(text: str) -> str:
    """``text`` with its characters in reverse order."""
    return text[::-1]


def sort_strings(strings: Iterable[str]) -> list[str]:
    """Longer strings first; strings of equal length in lexicographic order."""
    return sorted(strings, key=lambda s: (-len(s), s))