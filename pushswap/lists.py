"""A singly linked list of arbitrary contents."""

from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["LinkedList", "Node"]


@dataclass
class Node:
    """One link of a list: its content and the next node."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list, iterated from front to back over its contents."""

    def __init__(self, items=()):
        self.head = None
        for item in items:
            self.add_back(item)

    def __repr__(self):
        return f"LinkedList({list(self)!r})"

    def _nodes(self):
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content):
        """Insert ``content`` at the front; returns its node."""
        self.head = Node(content, self.head)
        return self.head

    def add_back(self, content):
        """Append ``content`` at the back; returns its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def __len__(self):
        return sum(1 for _ in self._nodes())

    def __iter__(self):
        for node in self._nodes():
            yield node.content

    def last(self):
        """The last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete=None):
        """Empty the list, handing each content to ``delete`` first when given."""
        for node in list(self._nodes()):
            if delete is not None:
                delete(node.content)
            node.next = None
        self.head = None

    def each(self, func):
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(self, func, delete=None):
        """A new list of ``func(content)`` for each content.

        If ``func`` raises, the contents mapped so far are handed to
        ``delete`` and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result