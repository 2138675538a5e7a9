"""A doubly linked list of integer keys with head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

EMPTY_TEXT = "Danh sach rong"


@dataclass(eq=False)
class DNode:
    """One link of a doubly linked list."""

    key: int
    next: DNode | None = field(default=None, repr=False)
    prev: DNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list that keeps references to its first and last nodes."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self.head: DNode | None = None
        self.tail: DNode | None = None
        for key in keys:
            self.add_tail(key)

    def _nodes(self) -> Iterator[DNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.key for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        node = self.tail
        while node is not None:
            yield node.key
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DoublyLinkedList):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def __str__(self) -> str:
        if self.head is None:
            return EMPTY_TEXT
        return " ".join(str(key) for key in self)

    def _unlink(self, node: DNode) -> int:
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        return node.key

    def _link_after(self, anchor: DNode, key: int) -> None:
        node = DNode(key, next=anchor.next, prev=anchor)
        if anchor.next is None:
            self.tail = node
        else:
            anchor.next.prev = node
        anchor.next = node

    def _link_before(self, anchor: DNode, key: int) -> None:
        node = DNode(key, next=anchor, prev=anchor.prev)
        if anchor.prev is None:
            self.head = node
        else:
            anchor.prev.next = node
        anchor.prev = node

    def _node_at(self, pos: int) -> DNode:
        node = self.head
        for _ in range(pos):
            node = node.next  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def add_head(self, key: int) -> None:
        """Insert key at the front."""
        if self.head is None:
            self.head = self.tail = DNode(key)
        else:
            self._link_before(self.head, key)

    def add_tail(self, key: int) -> None:
        """Append key at the back."""
        if self.tail is None:
            self.head = self.tail = DNode(key)
        else:
            self._link_after(self.tail, key)

    def remove_head(self) -> int:
        """Remove and return the first key; raise IndexError if the list is empty."""
        if self.head is None:
            raise IndexError("remove_head from an empty list")
        return self._unlink(self.head)

    def remove_tail(self) -> int:
        """Remove and return the last key; raise IndexError if the list is empty."""
        if self.tail is None:
            raise IndexError("remove_tail from an empty list")
        return self._unlink(self.tail)

    def remove_key(self, key: int) -> bool:
        """Remove the first node holding key; return whether one was removed."""
        node = self.search(key)
        if node is None:
            return False
        self._unlink(node)
        return True

    def search(self, key: int) -> DNode | None:
        """Return the first node holding key, or None."""
        return next((node for node in self._nodes() if node.key == key), None)

    def clear(self) -> None:
        """Remove every node."""
        self.head = None
        self.tail = None

    def remove_before(self, value: int) -> bool:
        """Remove the node just before the first node holding value; return whether one was removed."""
        node = self.search(value)
        if node is None or node.prev is None:
            return False
        self._unlink(node.prev)
        return True

    def remove_after(self, value: int) -> bool:
        """Remove the node just after the first node holding value; return whether one was removed."""
        node = self.search(value)
        if node is None or node.next is None:
            return False
        self._unlink(node.next)
        return True

    def insert_at(self, key: int, pos: int) -> None:
        """Insert key so that it ends up at index pos; raise IndexError if pos is out of range."""
        if pos < 0:
            raise IndexError(f"position {pos} is negative")
        if pos == 0:
            self.add_head(key)
            return
        size = len(self)
        if pos > size:
            raise IndexError(f"position {pos} is past the end of a list of {size}")
        self._link_after(self._node_at(pos - 1), key)

    def remove_at(self, pos: int) -> int:
        """Remove and return the key at index pos; raise IndexError if pos is out of range."""
        size = len(self)
        if not 0 <= pos < size:
            raise IndexError(f"position {pos} is out of range for a list of {size}")
        return self._unlink(self._node_at(pos))

    def add_before(self, key: int, value: int) -> None:
        """Insert key before the first node holding value; raise ValueError if there is none."""
        node = self.search(value)
        if node is None:
            raise ValueError(f"{value} is not in the list")
        self._link_before(node, key)

    def add_after(self, key: int, value: int) -> None:
        """Insert key after the first node holding value; raise ValueError if there is none."""
        node = self.search(value)
        if node is None:
            raise ValueError(f"{value} is not in the list")
        self._link_after(node, key)

    def remove_duplicates(self) -> None:
        """Keep only the first occurrence of each key."""
        seen: set[int] = set()
        for node in list(self._nodes()):
            if node.key in seen:
                self._unlink(node)
            else:
                seen.add(node.key)

    def remove_all(self, key: int) -> int:
        """Remove every node holding key; return how many were removed."""
        doomed = [node for node in self._nodes() if node.key == key]
        for node in doomed:
            self._unlink(node)
        return len(doomed)

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        for node in list(self._nodes()):
            node.prev, node.next = node.next, node.prev
        self.head, self.tail = self.tail, self.head