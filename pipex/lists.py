"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the link that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list whose links are :class:`Node` objects."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.push_back(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> Node:
        """Insert a new link holding ``content`` at the front and return it."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append a new link holding ``content`` at the end and return it."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final link, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list of ``func`` applied to every content.

        If ``func`` returns ``None`` for any content, ``delete`` is called
        on each content already produced and :class:`ValueError` is raised.
        """
        result = LinkedList()
        for content in self:
            mapped = func(content)
            if mapped is None:
                result.clear(delete)
                raise ValueError(f"mapping produced no value for {content!r}")
            result.push_back(mapped)
        return result

    def remove(self, node: Node, delete: Deleter = None) -> None:
        """Unlink ``node`` and pass its content to ``delete``.

        Raises :class:`ValueError` if ``node`` is not part of this list.
        """
        previous: Optional[Node] = None
        for current in self._nodes():
            if current is node:
                if previous is None:
                    self.head = current.next
                else:
                    previous.next = current.next
                current.next = None
                if delete is not None:
                    delete(current.content)
                return
            previous = current
        raise ValueError("node is not in this list")

    def clear(self, delete: Deleter = None) -> None:
        """Pass every content to ``delete`` in order and empty the list."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            node.next = None
            if delete is not None:
                delete(node.content)
            node = following