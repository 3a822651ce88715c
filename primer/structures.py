"""Linked and array-backed containers: a doubly linked list, a stack and a ring queue."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _DoubleNode(Generic[T]):
    value: T
    prev: Optional[_DoubleNode[T]] = field(default=None, repr=False)
    next: Optional[_DoubleNode[T]] = field(default=None, repr=False)


@dataclass(eq=False)
class _SingleNode(Generic[T]):
    value: T
    next: Optional[_SingleNode[T]] = field(default=None, repr=False)


class DoublyLinkedList(Generic[T]):
    """A list of nodes linked in both directions, grown at the front."""

    def __init__(self) -> None:
        self._head: Optional[_DoubleNode[T]] = None
        self._tail: Optional[_DoubleNode[T]] = None
        self._size = 0

    def push_front(self, value: T) -> None:
        """Insert ``value`` before the current first element."""
        node = _DoubleNode(value, next=self._head)
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node
        self._size += 1

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


class LinkedStack(Generic[T]):
    """A last-in, first-out stack of linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_SingleNode[T]] = None
        self._size = 0

    def push(self, value: T) -> None:
        """Place ``value`` on top of the stack."""
        self._top = _SingleNode(value, self._top)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top value; raises IndexError when empty."""
        if self._top is None:
            raise IndexError("pop from empty stack")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def __len__(self) -> int:
        return self._size


class QueueFullError(Exception):
    """Raised when pushing onto a queue that is at capacity."""


class CircularQueue(Generic[T]):
    """A first-in, first-out queue over a fixed-size ring buffer."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._slots: list[Optional[T]] = [None] * capacity
        self._head = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def push(self, value: T) -> None:
        """Append ``value``; raises QueueFullError when the queue is full."""
        if self._size == self.capacity:
            raise QueueFullError("queue is full")
        tail = (self._head + self._size) % self.capacity
        self._slots[tail] = value
        self._size += 1

    def pop(self) -> T:
        """Remove and return the oldest value; raises IndexError when empty."""
        if self._size == 0:
            raise IndexError("pop from empty queue")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return value  # type: ignore[return-value]

    def drain(self) -> Iterator[T]:
        """Pop and yield values until the queue is empty."""
        while self._size:
            yield self.pop()

    def __len__(self) -> int:
        return self._size