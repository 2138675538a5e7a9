"""Binary tree nodes and the usual traversals and measurements."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer key."""

    key: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _in(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _in(node.left)
        yield node.key
        yield from _in(node.right)


def _pre(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield node.key
        yield from _pre(node.left)
        yield from _pre(node.right)


def _post(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _post(node.left)
        yield from _post(node.right)
        yield node.key


def in_order(root: TreeNode | None) -> list[int]:
    """Return the keys left, node, right."""
    return list(_in(root))


def pre_order(root: TreeNode | None) -> list[int]:
    """Return the keys node, left, right."""
    return list(_pre(root))


def post_order(root: TreeNode | None) -> list[int]:
    """Return the keys left, right, node."""
    return list(_post(root))


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the keys level by level, each level left to right."""
    levels: list[list[int]] = []
    if root is None:
        return levels
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.key)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        levels.append(level)
    return levels


def count_nodes(root: TreeNode | None) -> int:
    """Return the number of nodes."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def sum_nodes(root: TreeNode | None) -> int:
    """Return the sum of all keys."""
    if root is None:
        return 0
    return root.key + sum_nodes(root.left) + sum_nodes(root.right)


def tree_height(root: TreeNode | None) -> int:
    """Return the height in edges; a single node has height 0, an empty tree -1."""
    if root is None:
        return -1
    return 1 + max(tree_height(root.left), tree_height(root.right))


def _find(root: TreeNode | None, value: int) -> TreeNode | None:
    if root is None or root.key == value:
        return root
    found = _find(root.left, value)
    return found if found is not None else _find(root.right, value)


def node_height(root: TreeNode | None, value: int) -> int | None:
    """Return the height of the first node (pre-order) holding value, or None."""
    node = _find(root, value)
    return None if node is None else tree_height(node)


def node_level(root: TreeNode | None, node: TreeNode) -> int | None:
    """Return the depth of this very node below root (root is 0), or None."""

    def search(current: TreeNode | None, depth: int) -> int | None:
        if current is None:
            return None
        if current is node:
            return depth
        found = search(current.left, depth + 1)
        return found if found is not None else search(current.right, depth + 1)

    return search(root, 0)


def count_leaves(root: TreeNode | None) -> int:
    """Return the number of nodes without children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)