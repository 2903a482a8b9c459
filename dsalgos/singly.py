"""Singly linked list with insertion and deletion by position and by value."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional[_Node] = None


class _LinkedBase:
    """Bookkeeping shared by the linked lists: head, tail where kept, and size."""

    _head: Any
    _tail: Any
    _size: int

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._reset()
        for value in values:
            self.push_back(value)  # type: ignore[attr-defined]

    def _reset(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    def _nodes(self) -> Iterator[Any]:
        node = self._head
        for _ in range(self._size):
            yield node
            node = node.next

    def _values(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def _find(self, key: Any) -> Any:
        for node in self._nodes():
            if node.value == key:
                return node
        raise ValueError(f"{key!r} not found")

    def _require_items(self) -> None:
        if not self._size:
            raise IndexError("pop from empty list")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._values())!r})"


class SinglyLinkedList(_LinkedBase):
    """A chain of nodes each linking forward to the next one."""

    def _link_after(self, node: _Node, value: Any) -> None:
        new = _Node(value, node.next)
        node.next = new
        if node is self._tail:
            self._tail = new
        self._size += 1

    def _unlink_after(self, node: _Node) -> Any:
        doomed = node.next
        assert doomed is not None
        node.next = doomed.next
        if doomed is self._tail:
            self._tail = node
        self._size -= 1
        return doomed.value

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the head."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the tail."""
        if self._tail is None:
            self.push_front(value)
        else:
            self._link_after(self._tail, value)

    def insert_after_position(self, position: int, value: Any) -> None:
        """Insert ``value`` after the node at 1-based ``position``."""
        if not 1 <= position <= self._size:
            raise IndexError(f"invalid position {position}")
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                self._link_after(node, value)
                return

    def insert_after_value(self, key: Any, value: Any) -> None:
        """Insert ``value`` after the first node holding ``key``."""
        self._link_after(self._find(key), value)

    def pop_front(self) -> Any:
        """Remove and return the head value."""
        self._require_items()
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the tail value."""
        self._require_items()
        if self._size == 1:
            return self.pop_front()
        previous = next(node for node in self._nodes() if node.next is self._tail)
        return self._unlink_after(previous)

    def delete_value(self, value: Any) -> None:
        """Remove the first node holding ``value``; raise ValueError if absent."""
        if self._head is not None and self._head.value == value:
            self.pop_front()
            return
        for node in self._nodes():
            if node.next is not None and node.next.value == value:
                self._unlink_after(node)
                return
        raise ValueError(f"{value!r} not found")

    def delete_after(self, key: Any) -> Any:
        """Remove and return the value following the first node holding ``key``."""
        node = self._find(key)
        if node.next is None:
            raise ValueError(f"no node after {key!r}")
        return self._unlink_after(node)

    def clear(self) -> None:
        """Remove every node."""
        self._reset()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self._values()