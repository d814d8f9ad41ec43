"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One link: a value and the node after it."""

    value: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list with constant-time insertion at the front."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.push_back(item)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def push_front(self, value: Any) -> Node:
        """Insert ``value`` before the first element and return its node."""
        self.head = Node(value, self.head)
        return self.head

    def push_back(self, value: Any) -> Node:
        """Append ``value`` after the last element and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The last node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, release: Callable[[Any], object] | None = None) -> None:
        """Empty the list, passing each value to ``release`` first if given."""
        if release is not None:
            for value in self:
                release(value)
        self.head = None

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call ``func`` on every value in order."""
        for value in self:
            func(value)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """A new list holding ``func(value)`` for every value, in order."""
        return LinkedList(func(value) for value in self)