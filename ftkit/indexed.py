"""A doubly linked list of integers whose nodes record their position."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


@dataclass(eq=False)
class IndexedNode:
    """One link holding an integer value and its recorded position."""

    value: int
    index: int = 0
    prev: Optional["IndexedNode"] = field(default=None, repr=False)
    next: Optional["IndexedNode"] = field(default=None, repr=False)


class IndexedList:
    """Doubly linked list of integers; iteration yields the nodes front to back.

    Each node's ``index`` is set when it is added. Adding at the back gives
    the new node the current length; adding at the front renumbers the whole
    list. ``reindex`` renumbers on demand after nodes are changed by hand.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[IndexedNode] = None
        self._tail: Optional[IndexedNode] = None
        self._size = 0
        for value in values:
            self.add_back(value)

    def add_back(self, value: int) -> IndexedNode:
        """Append ``value``; its node's index is the length before appending."""
        node = IndexedNode(value, index=self._size)
        if self._tail is None:
            self.head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def add_front(self, value: int) -> IndexedNode:
        """Insert ``value`` at the front and renumber every node."""
        node = IndexedNode(value, next=self.head)
        if self.head is None:
            self._tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1
        self.reindex()
        return node

    def clear(self) -> None:
        """Remove every node."""
        node = self.head
        self.head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            node.prev = None
            node.next = None
            node = following

    def last(self) -> Optional[IndexedNode]:
        """The final node, or ``None`` when the list is empty."""
        return self._tail

    def reindex(self) -> None:
        """Number the nodes 0, 1, 2, ... from the front."""
        for position, node in enumerate(self):
            node.index = position

    def _extreme_index(self, better) -> int:
        if self.head is None:
            raise ValueError("an empty list has no extreme element")
        result = 0
        best = self.head
        node = self.head.next
        while node is not None:
            if better(node.value, best.value):
                result = node.index
                best = node
            node = node.next
        return result

    def min_index(self) -> int:
        """Recorded index of the first smallest value.

        When the head holds the smallest value the result is 0, whatever the
        head's recorded index. An empty list raises ``ValueError``.
        """
        return self._extreme_index(lambda candidate, best: candidate < best)

    def max_index(self) -> int:
        """Recorded index of the first largest value; 0 when the head holds it.

        An empty list raises ``ValueError``.
        """
        return self._extreme_index(lambda candidate, best: candidate > best)

    def min_value(self) -> int:
        """Smallest value; ``INT_MAX`` for an empty list."""
        return min((node.value for node in self), default=INT_MAX)

    def max_value(self) -> int:
        """Largest value; ``INT_MIN`` for an empty list."""
        return max((node.value for node in self), default=INT_MIN)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[IndexedNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next