"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass
class Node:
    """One cell of a linked list."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, contents=()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.push_back(content)

    def push_front(self, content: Any) -> Node:
        """Insert content at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the end of the list and return its node."""
        node = Node(content)
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

    def clear(self, deleter: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list, handing each content to deleter first when given."""
        node = self.head
        while node is not None:
            following = node.next
            if deleter is not None:
                deleter(node.content)
            node.next = None
            self.head = following
            node = following

    def iterate(self, func: Callable[[Any], None]) -> None:
        """Call func on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        deleter: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """A new list holding func applied to every content.

        If func fails part way, the contents already produced are handed to
        deleter and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(deleter)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"