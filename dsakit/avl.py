"""A self-balancing AVL tree of distinct integer keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class AVLNode:
    """An AVL tree node; height counts nodes, a leaf has height 1."""

    key: int
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def _height(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _update(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: AVLNode | None) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _rotate_right(top: AVLNode) -> AVLNode:
    pivot = top.left
    assert pivot is not None
    top.left = pivot.right
    pivot.right = top
    _update(top)
    _update(pivot)
    return pivot


def _rotate_left(top: AVLNode) -> AVLNode:
    pivot = top.right
    assert pivot is not None
    top.right = pivot.left
    pivot.left = top
    _update(top)
    _update(pivot)
    return pivot


def _rebalance(node: AVLNode) -> AVLNode:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
        return _rotate_left(node)
    return node


def _insert(node: AVLNode | None, key: int) -> AVLNode:
    if node is None:
        return AVLNode(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node
    return _rebalance(node)


def _remove(node: AVLNode | None, key: int) -> AVLNode | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _remove(node.left, key)
    elif key > node.key:
        node.right = _remove(node.right, key)
    elif node.left is None or node.right is None:
        return node.left if node.left is not None else node.right
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.right = _remove(node.right, successor.key)
    return _rebalance(node)


def _keys(node: AVLNode | None) -> Iterator[int]:
    if node is not None:
        yield from _keys(node.left)
        yield node.key
        yield from _keys(node.right)


class AVLTree:
    """A height-balanced binary search tree; inserting a present key does nothing."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self.root: AVLNode | None = None
        for key in keys:
            self.insert(key)

    def __iter__(self) -> Iterator[int]:
        return _keys(self.root)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, key: object) -> bool:
        node = self.root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False

    @property
    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path, 0 when empty."""
        return _height(self.root)

    def insert(self, key: int) -> bool:
        """Add key and rebalance; return False if it was already present."""
        if key in self:
            return False
        self.root = _insert(self.root, key)
        return True

    def remove(self, key: int) -> bool:
        """Remove key and rebalance; return whether it was present."""
        if key not in self:
            return False
        self.root = _remove(self.root, key)
        return True

    def is_balanced(self) -> bool:
        """Return True if every node satisfies the AVL balance condition."""
        return is_avl(self.root)


def is_avl(root: Any) -> bool:
    """Return True if no node's subtree heights differ by more than one."""

    def measure(node: Any) -> int | None:
        if node is None:
            return 0
        left = measure(node.left)
        if left is None:
            return None
        right = measure(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return 1 + max(left, right)

    return measure(root) is not None