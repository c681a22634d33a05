"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps its contents in insertion order."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    @property
    def head(self) -> Optional[Node]:
        """The first node, or ``None`` for an empty list."""
        return self._head

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Put a new node holding ``content`` at the front; return it."""
        node = Node(content, self._head)
        self._head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Put a new node holding ``content`` at the back; return it."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self._head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node, passing each content to ``delete`` first."""
        node = self._head
        while node is not None:
            if delete is not None:
                delete(node.content)
            node = node.next
        self._head = None

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every content, front to back."""
        for node in self._nodes():
            func(node.content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """Return a new list of ``func(content)`` for every content.

        If ``func`` raises, the contents made so far are passed to
        ``delete`` and the error propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(func(content))
                if tail is None:
                    result._head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"