"""First-in first-out queues: fixed-slot, linked, and circular linked."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


class QueueFullError(Exception):
    """Raised when enqueueing onto a queue with no free slot."""


class QueueEmptyError(IndexError):
    """Raised when dequeueing or peeking an empty queue."""


class BoundedQueue:
    """Queue over ``capacity`` slots that are not reused until it empties.

    Each enqueue takes the next slot; dequeued slots stay used, so the queue
    reports full once every slot has been taken, even if some were since
    dequeued. Draining the queue completely frees all slots again.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear; raise QueueFullError when no slot is free."""
        if len(self._slots) >= self.capacity:
            raise QueueFullError("queue overflow")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self._front >= len(self._slots):
            raise QueueEmptyError("queue underflow")
        value = self._slots[self._front]
        self._front += 1
        if self._front >= len(self._slots):
            self._slots = []
            self._front = 0
        return value

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self._front >= len(self._slots):
            raise QueueEmptyError("queue is empty")
        return self._slots[self._front]

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        yield from self._slots[self._front:]

    def __repr__(self) -> str:
        return f"BoundedQueue(capacity={self.capacity}, items={list(self)!r})"


class LinkedQueue:
    """Unbounded queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        yield from self._items

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"


@dataclass
class _Node:
    value: Any
    next: Optional[_Node] = None


class CircularQueue:
    """Unbounded queue on a ring of nodes whose rear links back to the front."""

    def __init__(self) -> None:
        self._rear: Optional[_Node] = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            node.next = node
        else:
            node.next = self._rear.next
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self._rear is None:
            raise QueueEmptyError("queue is empty")
        front = self._rear.next
        assert front is not None
        if front is self._rear:
            self._rear = None
        else:
            self._rear.next = front.next
        self._size -= 1
        return front.value

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self._rear is None:
            raise QueueEmptyError("queue is empty")
        assert self._rear.next is not None
        return self._rear.next.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate once round the ring, from front to rear."""
        if self._rear is None:
            return
        node = self._rear.next
        while node is not None:
            yield node.value
            if node is self._rear:
                break
            node = node.next

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r})"