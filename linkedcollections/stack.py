"""A LIFO stack built on a singly linked chain of nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


class StackEmptyError(IndexError):
    """Raised when reading or removing from an empty stack."""

    def __init__(self, message: str = "stack is empty") -> None:
        super().__init__(message)


class StackPositionError(IndexError):
    """Raised when an insertion position lies outside the stack."""

    def __init__(self, position: int) -> None:
        super().__init__(f"invalid position: {position}")
        self.position = position


@dataclass
class _Node:
    value: int
    next: Optional["_Node"] = None


class LinkedStack:
    """Stack of values kept as linked nodes, top first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._top: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        """Place ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError()
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> int:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackEmptyError()
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def insert_at(self, value: int, position: int) -> None:
        """Insert ``value`` so that it ends up at ``position`` counted from the top.

        Position 0 is the top; the largest valid position is the current size.
        """
        if position < 0:
            raise StackPositionError(position)
        if position == 0:
            self.push(value)
            return
        previous = self._node_at(position - 1)
        if previous is None:
            raise StackPositionError(position)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def clear(self) -> None:
        """Remove every value."""
        self._top = None
        self._size = 0

    def _node_at(self, index: int) -> Optional[_Node]:
        node = self._top
        for _ in range(index):
            if node is None:
                break
            node = node.next
        return node

    def _nodes(self) -> Iterator[_Node]:
        node = self._top
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._top is not None

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(top_first={list(self)!r})"