"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass
class Node:
    """One link of a list: a value and the following node."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with front insertion, back insertion and mapping."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    def push_front(self, value: Any) -> Node:
        """Insert ``value`` at the front and return its node."""
        node = Node(value, self.head)
        self.head = node
        return node

    def push_back(self, value: Any) -> Node:
        """Append ``value`` at the end and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first node, pass its value to ``delete`` and return the value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, passing each value to ``delete`` in order."""
        while self.head is not None:
            self.pop_front(delete)

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every value in order."""
        for value in self:
            func(value)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """A new list of ``func`` applied to each value.

        If ``func`` raises, the values already produced are passed to
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for value in self:
                result.push_back(func(value))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"