"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One list cell holding a value and a link to the following cell."""

    content: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, value: Any) -> Node:
        """Insert ``value`` at the front and return its node."""
        node = Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, value: Any) -> Node:
        """Append ``value`` at the back and return its node."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """The last node, or ``None`` for an empty list."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def clear(self, release: Callable[[Any], Any]) -> None:
        """Pass every value, front to back, to ``release`` and empty the list."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            release(node.content)
            node = following

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every value, front to back."""
        for value in self:
            func(value)

    def map(self, func: Callable[[Any], Any], release: Callable[[Any], Any]) -> LinkedList:
        """Return a new list of ``func(value)`` for each value.

        If ``func`` raises, the values already produced are handed to
        ``release`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for value in self:
                result.push_back(func(value))
        except Exception:
            result.clear(release)
            raise
        return result