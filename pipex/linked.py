"""A singly linked list of arbitrary contents."""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass
class Node:
    """One element of a LinkedList."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that holds its elements in Node objects."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Insert content at the front and return its node."""
        self.head = Node(content, self.head)
        return self.head

    def add_back(self, content: Any) -> Node:
        """Append content at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Deleter) -> None:
        """Pass every non-None content to delete and empty the list.

        Without a delete function the list is left untouched.
        """
        if self.head is None or delete is None:
            return
        for node in list(self._nodes()):
            if node.content is not None:
                delete(node.content)
        self.head = None

    def iterate(self, f: Optional[Callable[[Any], None]]) -> None:
        """Call f on every content in order."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(
        self, f: Optional[Callable[[Any], Any]], delete: Deleter
    ) -> Optional["LinkedList"]:
        """Return a new list of f(content) for every content.

        Returns None when f or delete is missing, or when the list is empty.
        If f raises, contents already produced are passed to delete and the
        error propagates.
        """
        if self.head is None or f is None or delete is None:
            return None
        result = LinkedList()
        try:
            for content in self:
                result.add_back(f(content))
        except Exception:
            result.clear(delete)
            raise
        return result