"""A binary search tree of integer keys; equal keys go to the right."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

from dsakit.binary_tree import TreeNode, in_order, tree_height


def _remove(node: TreeNode | None, key: int) -> TreeNode | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _remove(node.left, key)
    elif key > node.key:
        node.right = _remove(node.right, key)
    elif node.left is None:
        return node.right
    elif node.right is None:
        return node.left
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.right = _remove(node.right, successor.key)
    return node


def _count_less(node: TreeNode | None, key: int) -> int:
    if node is None:
        return 0
    if node.key < key:
        return 1 + _count_less(node.left, key) + _count_less(node.right, key)
    return _count_less(node.left, key)


def _count_greater(node: TreeNode | None, key: int) -> int:
    if node is None:
        return 0
    if node.key > key:
        return 1 + _count_greater(node.left, key) + _count_greater(node.right, key)
    return _count_greater(node.right, key)


class BinarySearchTree:
    """An unbalanced binary search tree; duplicates are kept in the right subtree."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self.root: TreeNode | None = None
        for key in keys:
            self.insert(key)

    def __iter__(self) -> Iterator[int]:
        return iter(in_order(self.root))

    def __len__(self) -> int:
        return len(in_order(self.root))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def insert(self, key: int) -> None:
        """Add key; a key equal to a node's goes to its right."""
        if self.root is None:
            self.root = TreeNode(key)
            return
        node = self.root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = TreeNode(key)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(key)
                    return
                node = node.right

    def search(self, key: int) -> TreeNode | None:
        """Return the first node on the search path holding key, or None."""
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def remove(self, key: int) -> bool:
        """Remove one node holding key; return whether one was found."""
        if self.search(key) is None:
            return False
        self.root = _remove(self.root, key)
        return True

    def clear(self) -> None:
        """Remove every node."""
        self.root = None

    def height(self) -> int:
        """Return the height in edges, -1 when empty."""
        return tree_height(self.root)

    def count_less(self, key: int) -> int:
        """Return how many keys are smaller than key."""
        return _count_less(self.root, key)

    def count_greater(self, key: int) -> int:
        """Return how many keys are larger than key."""
        return _count_greater(self.root, key)


def is_bst(root: TreeNode | None) -> bool:
    """Return True if every left key is smaller and every right key not smaller."""

    def check(node: TreeNode | None, low: float, high: float) -> bool:
        if node is None:
            return True
        if node.key < low or node.key >= high:
            return False
        return check(node.left, low, node.key) and check(node.right, node.key, high)

    return check(root, -math.inf, math.inf)


def is_full(root: TreeNode | None) -> bool:
    """Return True if every node has either no children or two."""
    if root is None:
        return True
    if (root.left is None) != (root.right is None):
        return False
    return is_full(root.left) and is_full(root.right)