"""Bidirectional iterators over the nodes of a binary search tree.

Leaves and the past-the-end position are sentinel nodes flagged ``nil``.
The tree's root hangs below a sentinel whose ``parent`` points back at the
largest node, so stepping back from the end lands on the last element.
"""

from __future__ import annotations

from typing import Any, Optional

from .iterator_traits import BidirectionalIteratorTag

__all__ = [
    "TreeNode",
    "MapIterator",
    "ConstMapIterator",
    "minimum",
    "maximum",
    "successor",
    "predecessor",
]


class TreeNode:
    """A node of a binary search tree; sentinel nodes carry ``nil=True``."""

    __slots__ = ("data", "parent", "left", "right", "nil")

    def __init__(
        self,
        data: Any = None,
        parent: Optional[TreeNode] = None,
        left: Optional[TreeNode] = None,
        right: Optional[TreeNode] = None,
        nil: bool = False,
    ) -> None:
        self.data = data
        self.parent = parent
        self.left = left
        self.right = right
        self.nil = nil

    @classmethod
    def sentinel(cls) -> TreeNode:
        """Return a fresh nil node holding no data."""
        return cls(None, nil=True)

    def __repr__(self) -> str:
        if self.nil:
            return "TreeNode(nil)"
        return f"TreeNode({self.data!r})"


def _is_nil(node: Optional[TreeNode]) -> bool:
    return node is None or node.nil


def minimum(node: TreeNode) -> TreeNode:
    """Return the leftmost real node of the subtree rooted at ``node``."""
    while not _is_nil(node.left):
        node = node.left
    return node


def maximum(node: TreeNode) -> TreeNode:
    """Return the rightmost real node of the subtree rooted at ``node``."""
    while not _is_nil(node.right):
        node = node.right
    return node


def successor(node: TreeNode) -> TreeNode:
    """Return the in-order next node; a nil node stays where it is."""
    if node.nil:
        return node
    if not _is_nil(node.right):
        return minimum(node.right)
    parent = node.parent
    while not _is_nil(parent) and node is parent.right:
        node = parent
        parent = parent.parent
    return parent


def predecessor(node: TreeNode) -> TreeNode:
    """Return the in-order previous node.

    From a nil node this is the node's parent. From the smallest node,
    which has no predecessor, the topmost ancestor reached is returned.
    """
    if node.nil:
        return node.parent
    if not _is_nil(node.left):
        return maximum(node.left)
    parent = node.parent
    while not _is_nil(parent) and node is parent.left:
        node = parent
        parent = parent.parent
    if not _is_nil(parent):
        return parent
    return node


class MapIterator:
    """A position among the nodes of a tree, moved in key order."""

    iterator_category = BidirectionalIteratorTag
    __slots__ = ("_node",)

    def __init__(self, node: Optional[TreeNode] = None) -> None:
        self._node = node

    def base(self) -> Optional[TreeNode]:
        """Return the node this iterator refers to."""
        return self._node

    def get(self) -> Any:
        """Return the data stored at the current node."""
        if _is_nil(self._node):
            raise IndexError("iterator does not refer to an element")
        return self._node.data

    def increment(self) -> MapIterator:
        """Move to the next node in place and return self."""
        self._node = successor(self._node)
        return self

    def decrement(self) -> MapIterator:
        """Move to the previous node in place and return self."""
        self._node = predecessor(self._node)
        return self

    def copy(self) -> MapIterator:
        """Return an independent iterator at the same node."""
        return type(self)(self._node)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapIterator):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return hash(id(self._node))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._node!r})"


class ConstMapIterator(MapIterator):
    """A map iterator meant for read-only traversal."""

    __slots__ = ()

    @classmethod
    def from_iterator(cls, iterator: MapIterator) -> ConstMapIterator:
        """Return a constant iterator at the same node as ``iterator``."""
        return cls(iterator.base())