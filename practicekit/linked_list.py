"""A singly linked list with index-based insertion and removal."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "next")

    def __init__(self, data: T, next_node: _Node[T] | None = None) -> None:
        self.data = data
        self.next = next_node


class LinkedList(Generic[T]):
    """A singly linked list that owns its nodes from the head onwards."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        self._length = 0
        for item in items:
            self.push_back(item)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, index: int) -> _Node[T] | None:
        node = self._head
        for _ in range(index):
            if node is None:
                return None
            node = node.next
        return node

    def push_front(self, data: T) -> None:
        """Add data before the current head."""
        self._head = _Node(data, self._head)
        self._length += 1

    def pop_front(self) -> T | None:
        """Remove and return the head's data, or None if the list is empty."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        self._length -= 1
        return node.data

    def push_back(self, data: T) -> None:
        """Add data after the last node."""
        if self._head is None:
            self._head = _Node(data)
        else:
            node = self._head
            while node.next is not None:
                node = node.next
            node.next = _Node(data)
        self._length += 1

    def pop_back(self) -> T | None:
        """Remove and return the last node's data, or None if the list is empty."""
        head = self._head
        if head is None:
            return None
        if head.next is None:
            return self.pop_front()
        node = head
        while node.next is not None and node.next.next is not None:
            node = node.next
        last = node.next
        node.next = None
        self._length -= 1
        return last.data

    def insert_at_ith(self, index: int, data: T) -> None:
        """Insert data so that it ends up at position index.

        Raises IndexError if index is beyond the end of the list.
        """
        if index < 0:
            raise IndexError("index out of bounds")
        if index == 0:
            self.push_front(data)
            return
        previous = self._node_at(index - 1)
        if previous is None:
            raise IndexError("index out of bounds")
        previous.next = _Node(data, previous.next)
        self._length += 1

    def delete_at_ith(self, index: int) -> T | None:
        """Remove the node at index and return its data.

        Index 0 on an empty list removes nothing and returns None; any other
        index without a node raises IndexError.
        """
        if index < 0:
            raise IndexError("index out of bounds")
        if index == 0:
            return self.pop_front()
        previous = self._node_at(index - 1)
        if previous is None or previous.next is None:
            raise IndexError("index out of bounds")
        removed = previous.next
        previous.next = removed.next
        self._length -= 1
        return removed.data

    def get(self, index: int) -> T | None:
        """Return the data at index, or None if there is no such node."""
        if index < 0:
            return None
        node = self._node_at(index)
        return None if node is None else node.data

    def display(self) -> str:
        """Print the list as 'a -> b -> None' and return that line."""
        parts = [f"{item!r} -> " for item in self]
        parts.append("None")
        line = "".join(parts)
        print(line)
        return line


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise the list with a fixed sequence of operations."""
    items: LinkedList[int] = LinkedList()

    items.push_front(3)
    items.push_front(2)
    items.push_front(1)
    items.display()

    for _ in range(3):
        print(f"Popped: {items.pop_front()}")
    items.display()

    items.push_back(4)
    items.insert_at_ith(1, 5)
    items.push_front(6)
    items.push_back(7)
    items.display()

    print(f"Popped: {items.pop_front()}")
    print(f"Popped: {items.pop_back()}")
    items.pop_back()
    items.display()

    print(f"Element at index 1: {items.get(2)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())