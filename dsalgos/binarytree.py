"""Binary trees built from a preorder listing, and their traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

NULL_MARKER = -1
"""Value in a preorder listing that marks an absent child."""


@dataclass
class TreeNode:
    """A node holding a value and optional left and right children."""

    data: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_from_preorder(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from a preorder listing in which ``-1`` marks a missing child.

    Values left over once the tree is complete are ignored; running out
    before it is complete raises ValueError.
    """
    stream: Iterator[Any] = iter(values)

    def build() -> Optional[TreeNode]:
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError("preorder listing ended before the tree was complete") from None
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Values in node, left, right order."""
    if root is None:
        return []
    return [root.data, *preorder(root.left), *preorder(root.right)]


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Values in left, node, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Values in left, right, node order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]


def levelorder(root: Optional[TreeNode]) -> list[Any]:
    """Values level by level from the root, left to right within a level."""
    if root is None:
        return []
    result: list[Any] = []
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        result.append(node.data)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return result