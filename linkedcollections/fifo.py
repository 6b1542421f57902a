"""A FIFO queue built on a singly linked chain with front and back references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


class QueueEmptyError(IndexError):
    """Raised when reading or removing from an empty queue."""

    def __init__(self, message: str = "queue is empty") -> None:
        super().__init__(message)


class QueuePositionError(IndexError):
    """Raised when a position lies outside the queue."""

    def __init__(self, position: int) -> None:
        super().__init__(f"invalid position: {position}")
        self.position = position


@dataclass
class _Node:
    value: int
    next: Optional["_Node"] = None


class LinkedQueue:
    """Queue of values kept as linked nodes, front first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._front: Optional[_Node] = None
        self._back: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.enqueue(value)

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the back of the queue."""
        node = _Node(value)
        if self._back is None:
            self._front = self._back = node
        else:
            self._back.next = node
            self._back = node
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if self._front is None:
            raise QueueEmptyError()
        node = self._front
        self._front = node.next
        if self._front is None:
            self._back = None
        self._size -= 1
        return node.value

    def front(self) -> int:
        """Return the value at the front without removing it."""
        if self._front is None:
            raise QueueEmptyError()
        return self._front.value

    def back(self) -> int:
        """Return the value at the back without removing it."""
        if self._back is None:
            raise QueueEmptyError()
        return self._back.value

    def is_empty(self) -> bool:
        return self._front is None

    def insert_at(self, value: int, position: int) -> None:
        """Insert ``value`` so that it ends up at ``position`` counted from the front.

        Position 0 is the front; the largest valid position is the current size.
        """
        if position < 0:
            raise QueuePositionError(position)
        if position == 0:
            node = _Node(value, self._front)
            self._front = node
            if self._back is None:
                self._back = node
            self._size += 1
            return
        previous = self._node_at(position - 1)
        if previous is None:
            raise QueuePositionError(position)
        node = _Node(value, previous.next)
        previous.next = node
        if node.next is None:
            self._back = node
        self._size += 1

    def remove_at(self, position: int) -> int:
        """Remove and return the value at ``position`` counted from the front."""
        if self._front is None:
            raise QueueEmptyError()
        if position < 0:
            raise QueuePositionError(position)
        if position == 0:
            return self.dequeue()
        previous = self._node_at(position - 1)
        if previous is None or previous.next is None:
            raise QueuePositionError(position)
        removed = previous.next
        previous.next = removed.next
        if previous.next is None:
            self._back = previous
        self._size -= 1
        return removed.value

    def clear(self) -> None:
        """Remove every value."""
        self._front = self._back = None
        self._size = 0

    def _node_at(self, index: int) -> Optional[_Node]:
        node = self._front
        for _ in range(index):
            if node is None:
                break
            node = node.next
        return node

    def _nodes(self) -> Iterator[_Node]:
        node = self._front
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._front is not None

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"