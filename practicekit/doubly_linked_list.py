"""A doubly linked list with index-based insertion and removal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("val", "prev", "next")

    def __init__(self, val: T) -> None:
        self.val = val
        self.prev: _Node[T] | None = None
        self.next: _Node[T] | None = None


class DoublyLinkedList(Generic[T]):
    """A list whose nodes link to both neighbours, tracked from head and tail."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._length = 0
        for item in items:
            self.insert_at_tail(item)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.val
            node = node.next

    def __str__(self) -> str:
        return ", ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def _node_at(self, index: int) -> _Node[T] | None:
        node = self._head
        for _ in range(index):
            if node is None:
                return None
            node = node.next
        return node

    def _unlink(self, node: _Node[T]) -> T:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._length -= 1
        return node.val

    def insert_at_head(self, obj: T) -> None:
        """Add obj before the current head."""
        node = _Node(obj)
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._length += 1

    def insert_at_tail(self, obj: T) -> None:
        """Add obj after the current tail."""
        node = _Node(obj)
        node.prev = self._tail
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def insert_at_ith(self, index: int, obj: T) -> None:
        """Insert obj so that it ends up at position index.

        Raises IndexError if index is negative or greater than the length.
        """
        if index < 0 or index > self._length:
            raise IndexError("Index out of bounds")
        if index == 0 or self._head is None:
            self.insert_at_head(obj)
            return
        if index == self._length:
            self.insert_at_tail(obj)
            return
        current = self._node_at(index)
        if current is None or current.prev is None:
            raise IndexError("Index out of bounds")
        node = _Node(obj)
        node.prev = current.prev
        node.next = current
        current.prev.next = node
        current.prev = node
        self._length += 1

    def delete_head(self) -> T | None:
        """Remove and return the head's value, or None if the list is empty."""
        if self._head is None:
            return None
        return self._unlink(self._head)

    def delete_tail(self) -> T | None:
        """Remove and return the tail's value, or None if the list is empty."""
        if self._tail is None:
            return None
        return self._unlink(self._tail)

    def delete_ith(self, index: int) -> T | None:
        """Remove the value at index and return it.

        An index equal to the length removes the tail. Raises IndexError if
        index is negative or greater than the length.
        """
        if index < 0 or index > self._length:
            raise IndexError("Index out of bounds")
        if index == 0 or self._head is None:
            return self.delete_head()
        if index == self._length:
            return self.delete_tail()
        node = self._node_at(index)
        if node is None:
            raise IndexError("Index out of bounds")
        return self._unlink(node)

    def get(self, index: int) -> T | None:
        """Return the value at index, or None if there is no such node."""
        if index < 0:
            return None
        node = self._node_at(index)
        return None if node is None else node.val