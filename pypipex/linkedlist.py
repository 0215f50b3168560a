"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """Singly linked list with constant-time insertion at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def last(self) -> Optional[Node]:
        """The final node, or None when the list is empty."""
        return self._tail

    def clear(self, release: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, handing each content to ``release`` first if given."""
        if release is not None:
            for content in self:
                release(content)
        self._head = None
        self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        release: Optional[Callable[[Any], Any]] = None,
    ) -> LinkedList:
        """Return a new list of ``func(content)`` for each content.

        If ``func`` raises, the contents built so far are handed to
        ``release`` before the error propagates.
        """
        mapped = LinkedList()
        try:
            for content in self:
                mapped.push_back(func(content))
        except BaseException:
            mapped.clear(release)
            raise
        return mapped