"""
Singly Linked List

A minimal queue-style container: items are appended at the tail and
kept in insertion order. Bundled alongside the hashing core but
independent of it.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class Node:
    """A single list node."""
    data: Any
    next: Optional['Node'] = None


class LinkedList:
    """
    Singly linked list with tail insertion.

    Example:
        >>> items = LinkedList()
        >>> items.enqueue("tx1")
        True
        >>> items.is_empty()
        False
    """

    def __init__(self):
        """Create an empty list."""
        self.first: Optional[Node] = None
        self.size = 0

    def initialize(self) -> None:
        """Reset the list to empty, dropping every node."""
        self.first = None
        self.size = 0

    def is_empty(self) -> bool:
        """Return True when the list holds no items."""
        return self.size == 0

    def enqueue(self, data: Any) -> bool:
        """
        Append an item at the tail of the list.

        Args:
            data: Item to store (any object, including None)

        Returns:
            True on success, False if the node could not be allocated
        """
        try:
            new_node = Node(data)
        except MemoryError:
            return False

        if self.is_empty():
            self.first = new_node
        else:
            last = self.first
            while last.next is not None:
                last = last.next
            last.next = new_node

        self.size += 1
        return True

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        node = self.first
        while node is not None:
            yield node.data
            node = node.next
