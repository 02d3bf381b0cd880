"""An unbalanced binary search tree of unique items."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from itertools import islice
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]


class _Node(Generic[T]):
    __slots__ = ("item", "left", "right")

    def __init__(self, item: T) -> None:
        self.item = item
        self.left: Optional[_Node[T]] = None
        self.right: Optional[_Node[T]] = None


def _height(node: Optional[_Node]) -> int:
    if node is None:
        return -1
    return 1 + max(_height(node.left), _height(node.right))


def _pop_min(node: _Node) -> tuple[Optional[_Node], Any]:
    """Detach the smallest node of a subtree; return the new subtree and its item."""
    if node.left is None:
        return node.right, node.item
    node.left, item = _pop_min(node.left)
    return node, item


def _detach(node: _Node) -> Optional[_Node]:
    """Return the subtree that replaces ``node`` once it is removed."""
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    node.right, node.item = _pop_min(node.right)
    return node


class BSTree(Generic[T]):
    """A binary search tree; items comparing equal are not stored twice."""

    def __init__(self, compare: Comparator, render: Callable[[T], str] = str) -> None:
        self._compare = compare
        self._render = render
        self._root: Optional[_Node[T]] = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.item
            node = node.right

    def __contains__(self, item: Any) -> bool:
        node = self._root
        while node is not None:
            result = self._compare(item, node.item)
            if result == 0:
                return True
            node = node.right if result > 0 else node.left
        return False

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Height of the tree: -1 when empty, 0 for a single node."""
        return _height(self._root)

    def min(self) -> T:
        """The smallest item."""
        node = self._root
        if node is None:
            raise ValueError("empty tree has no minimum")
        while node.left is not None:
            node = node.left
        return node.item

    def max(self) -> T:
        """The largest item."""
        node = self._root
        if node is None:
            raise ValueError("empty tree has no maximum")
        while node.right is not None:
            node = node.right
        return node.item

    def traverse_in_order(self, function: Callable[[T], Any]) -> None:
        """Call ``function`` on each item in increasing order."""
        for item in self:
            function(item)

    def add(self, item: T) -> bool:
        """Add ``item``; return False if an equal item is already stored."""
        parent: Optional[_Node[T]] = None
        node = self._root
        result = 0
        while node is not None:
            result = self._compare(item, node.item)
            if result == 0:
                return False
            parent = node
            node = node.left if result < 0 else node.right
        new = _Node(item)
        if parent is None:
            self._root = new
        elif result > 0:
            parent.right = new
        else:
            parent.left = new
        self._count += 1
        return True

    def _remove(self, node: Optional[_Node[T]], item: Any) -> tuple[Optional[_Node[T]], bool]:
        if node is None:
            return None, False
        result = self._compare(item, node.item)
        if result < 0:
            node.left, removed = self._remove(node.left, item)
            return node, removed
        if result > 0:
            node.right, removed = self._remove(node.right, item)
            return node, removed
        return _detach(node), True

    def remove(self, item: Any) -> bool:
        """Remove the item comparing equal to ``item``; return False if absent."""
        self._root, removed = self._remove(self._root, item)
        if removed:
            self._count -= 1
        return removed

    def kth_item(self, k: int) -> T:
        """The item at in-order index ``k`` (0 is the smallest)."""
        if not 0 <= k < self._count:
            raise IndexError(f"index out of range: {k}")
        return next(islice(iter(self), k, None))

    def remove_kth_item(self, k: int) -> T:
        """Remove and return the item at in-order index ``k``."""
        item = self.kth_item(k)
        self.remove(item)
        return item

    def view(self) -> str:
        """Draw the tree sideways, one node per line, followed by its size."""
        lines: list[str] = []

        def walk(node: Optional[_Node[T]], level: int, edge: str) -> None:
            pad = edge.rjust(4 * level)
            if node is None:
                lines.append(pad + "#")
                return
            walk(node.left, level + 1, "/")
            lines.append(pad + self._render(node.item))
            walk(node.right, level + 1, "\\")

        walk(self._root, 0, ":")
        lines.append(f"numNodes: {self._count}")
        return "\n".join(lines) + "\n"