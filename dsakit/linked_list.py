"""A singly linked list of integer keys with head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

EMPTY_TEXT = "Danh sach rong"


@dataclass(eq=False)
class Node:
    """One link of a singly linked list."""

    key: int
    next: Node | None = None


class SinglyLinkedList:
    """A singly linked list that keeps references to its first and last nodes."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        for key in keys:
            self.add_tail(key)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.key for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SinglyLinkedList):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"

    def __str__(self) -> str:
        if self.head is None:
            return EMPTY_TEXT
        return " ".join(str(key) for key in self)

    def add_head(self, key: int) -> None:
        """Insert key at the front."""
        node = Node(key, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node

    def add_tail(self, key: int) -> None:
        """Append key at the back."""
        node = Node(key)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

    def remove_head(self) -> int:
        """Remove and return the first key; raise IndexError if the list is empty."""
        if self.head is None:
            raise IndexError("remove_head from an empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        return node.key

    def remove_tail(self) -> int:
        """Remove and return the last key; raise IndexError if the list is empty."""
        if self.head is None or self.tail is None:
            raise IndexError("remove_tail from an empty list")
        key = self.tail.key
        if self.head is self.tail:
            self.clear()
            return key
        previous = self.head
        while previous.next is not self.tail:
            previous = previous.next  # type: ignore[assignment]
        previous.next = None
        self.tail = previous
        return key

    def clear(self) -> None:
        """Remove every node."""
        self.head = None
        self.tail = None

    def remove_before(self, value: int) -> bool:
        """Remove the node just before the first node holding value; return whether one was removed."""
        if self.head is None or self.head.next is None or self.head.key == value:
            return False
        previous: Node | None = None
        current = self.head
        while current.next is not None and current.next.key != value:
            previous = current
            current = current.next
        if current.next is None:
            return False
        if previous is None:
            self.head = current.next
        else:
            previous.next = current.next
        return True

    def remove_after(self, value: int) -> bool:
        """Remove the node just after the first node holding value; return whether one was removed."""
        for node in self._nodes():
            if node.key == value and node.next is not None:
                doomed = node.next
                node.next = doomed.next
                if doomed is self.tail:
                    self.tail = node
                return True
        return False

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
        if pos == size:
            self.add_tail(key)
            return
        previous = self.head
        for _ in range(pos - 1):
            previous = previous.next  # type: ignore[union-attr]
        previous.next = Node(key, previous.next)  # type: ignore[union-attr]

    def remove_at(self, pos: int) -> int:
        """Remove and return the key at index pos; raise IndexError if pos is out of range."""
        size = len(self)
        if size == 0 or pos < 0 or pos >= size:
            raise IndexError(f"position {pos} is out of range for a list of {size}")
        if pos == 0:
            return self.remove_head()
        if pos == size - 1:
            return self.remove_tail()
        previous = self.head
        for _ in range(pos - 1):
            previous = previous.next  # type: ignore[union-attr]
        doomed = previous.next  # type: ignore[union-attr]
        previous.next = doomed.next  # type: ignore[union-attr]
        return doomed.key  # type: ignore[union-attr]

    def add_before(self, key: int, value: int) -> None:
        """Insert key before the first node holding value; raise ValueError if there is none."""
        if self.head is None:
            raise ValueError(f"{value} is not in the list")
        if self.head.key == value:
            self.add_head(key)
            return
        previous = self.head
        current = self.head.next
        while current is not None and current.key != value:
            previous = current
            current = current.next
        if current is None:
            raise ValueError(f"{value} is not in the list")
        previous.next = Node(key, current)

    def add_after(self, key: int, value: int) -> None:
        """Insert key after the first node holding value; raise ValueError if there is none."""
        for node in self._nodes():
            if node.key == value:
                node.next = Node(key, node.next)
                if node is self.tail:
                    self.tail = node.next
                return
        raise ValueError(f"{value} is not in the list")

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Node | None = None
        current = self.head
        self.tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def remove_duplicates(self) -> None:
        """Keep only the first occurrence of each key."""
        seen: set[int] = set()
        previous: Node | None = None
        for node in list(self._nodes()):
            if node.key in seen:
                previous.next = node.next  # type: ignore[union-attr]
            else:
                seen.add(node.key)
                previous = node
        self.tail = previous

    def remove_value(self, key: int) -> bool:
        """Remove every node holding key; return whether any was removed."""
        removed = False
        previous: Node | None = None
        for node in list(self._nodes()):
            if node.key == key:
                removed = True
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
            else:
                previous = node
        self.tail = previous
        return removed