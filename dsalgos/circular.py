"""Singly linked ring whose last node links back to the first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional[_Node] = None


class CircularLinkedList:
    """A ring of forward-linked nodes; the tail links to the head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[_Node]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            assert node is not None
            yield node
            node = node.next

    def push_front(self, value: Any) -> None:
        """Insert ``value`` and make it the new head."""
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the tail, just before the head."""
        self.push_front(value)
        assert self._tail is not None
        self._tail = self._tail.next

    def pop_front(self) -> Any:
        """Remove and return the head value."""
        if self._tail is None:
            raise IndexError("underflow: list is empty")
        head = self._tail.next
        assert head is not None
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def pop_back(self) -> Any:
        """Remove and return the tail value."""
        if self._tail is None:
            raise IndexError("underflow: list is empty")
        if self._size == 1:
            return self.pop_front()
        previous = self._tail.next
        assert previous is not None
        while previous.next is not self._tail:
            assert previous.next is not None
            previous = previous.next
        value = self._tail.value
        previous.next = self._tail.next
        self._tail = previous
        self._size -= 1
        return value

    def delete_after(self, key: Any) -> Any:
        """Remove and return the value following the first node holding ``key``.

        The ring wraps, so the node after the tail is the head.
        """
        for node in self._nodes():
            if node.value == key:
                break
        else:
            raise ValueError(f"{key!r} not found")
        doomed = node.next
        assert doomed is not None
        if doomed is node:
            self._tail = None
        else:
            node.next = doomed.next
            if doomed is self._tail:
                self._tail = node
        self._size -= 1
        return doomed.value

    def clear(self) -> None:
        """Remove every node."""
        while self._tail is not None:
            self.pop_back()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate once round the ring, starting at the head."""
        for node in self._nodes():
            yield node.value

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"