"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """Singly linked list with O(1) insertion at either end."""

    def __init__(self) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """The final node, or None for an empty list."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def clear(self, delete: Callable[[Any], object] | None = None) -> None:
        """Empty the list, passing each content to ``delete`` from last to first."""
        if delete is not None:
            for content in reversed(list(self)):
                delete(content)
        self.head = None
        self._tail = None
        self._size = 0

    def iterate(self, func: Callable[[Any], object]) -> None:
        """Call ``func`` on each content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], object] | None = None,
    ) -> LinkedList:
        """Return a new list of ``func`` applied to each content.

        If ``func`` raises, the contents already produced are passed to
        ``delete`` (last to first) before the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result