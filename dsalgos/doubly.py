"""Doubly linked lists: a linear one and a circular one."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

from dsalgos.singly import _LinkedBase


@dataclass(eq=False)
class _DNode:
    value: Any
    prev: Optional[_DNode] = None
    next: Optional[_DNode] = None


class DoublyLinkedList(_LinkedBase):
    """A chain of nodes linked both forward and backward."""

    def _link_after(self, node: _DNode, value: Any) -> None:
        new = _DNode(value, node, node.next)
        if node.next is None:
            self._tail = new
        else:
            node.next.prev = new
        node.next = new
        self._size += 1

    def _unlink(self, node: _DNode) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the head."""
        new = _DNode(value, None, self._head)
        if self._head is None:
            self._tail = new
        else:
            self._head.prev = new
        self._head = new
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the tail."""
        if self._tail is None:
            self.push_front(value)
        else:
            self._link_after(self._tail, value)

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at 0-based index ``position``."""
        if not 0 <= position <= self._size:
            raise IndexError(f"invalid position {position}")
        if position == 0:
            self.push_front(value)
            return
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                self._link_after(node, value)
                return

    def insert_before(self, key: Any, value: Any) -> None:
        """Insert ``value`` before the first node holding ``key``."""
        node = self._find(key)
        if node.prev is None:
            self.push_front(value)
        else:
            self._link_after(node.prev, value)

    def insert_after(self, key: Any, value: Any) -> None:
        """Insert ``value`` after the first node holding ``key``."""
        self._link_after(self._find(key), value)

    def pop_front(self) -> Any:
        """Remove and return the head value."""
        self._require_items()
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        """Remove and return the tail value."""
        self._require_items()
        return self._unlink(self._tail)

    def delete_after(self, key: Any) -> Any:
        """Remove and return the value following the first node holding ``key``."""
        node = self._find(key)
        if node.next is None:
            raise ValueError(f"no node after {key!r}")
        return self._unlink(node.next)

    def delete_before(self, key: Any) -> Any:
        """Remove and return the value preceding the first node holding ``key``."""
        node = self._find(key)
        if node.prev is None:
            raise ValueError(f"no node before {key!r}")
        return self._unlink(node.prev)

    def clear(self) -> None:
        """Remove every node."""
        self._reset()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev


class CircularDoublyLinkedList(_LinkedBase):
    """Doubly linked ring: the tail links forward to the head and back again."""

    def _unlink(self, node: _DNode) -> Any:
        if self._size == 1:
            self._head = None
        else:
            assert node.prev is not None and node.next is not None
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next
        self._size -= 1
        return node.value

    def push_back(self, value: Any) -> None:
        """Append ``value`` just before the head."""
        node = _DNode(value)
        if self._head is None:
            node.prev = node.next = node
            self._head = node
        else:
            last = self._head.prev
            node.prev, node.next = last, self._head
            last.next = node
            self._head.prev = node
        self._size += 1

    def push_front(self, value: Any) -> None:
        """Insert ``value`` and make it the new head."""
        self.push_back(value)
        self._head = self._head.prev

    def pop_front(self) -> Any:
        """Remove and return the head value."""
        self._require_items()
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        """Remove and return the value just before the head."""
        self._require_items()
        return self._unlink(self._head.prev)

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``; raise ValueError if absent."""
        self._unlink(self._find(value))

    def clear(self) -> None:
        """Remove every node."""
        self._reset()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self._values()