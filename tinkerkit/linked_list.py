"""A singly linked list whose nodes share their tail."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class Node:
    """A list node; every node reached from a head is part of that same list."""

    __slots__ = ("value", "_next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self._next: Optional[Node] = None

    def push(self, value: Any) -> None:
        """Append ``value`` after the last node of the list."""
        node = self
        while node._next is not None:
            node = node._next
        node._next = Node(value)

    def get(self) -> Any:
        return self.value

    def next(self) -> Optional[Node]:
        """Return the following node, or None at the end."""
        return self._next

    def __iter__(self) -> Iterator[Any]:
        node: Optional[Node] = self
        while node is not None:
            yield node.value
            node = node._next

    def __repr__(self) -> str:
        return f"Node({self.value!r})"