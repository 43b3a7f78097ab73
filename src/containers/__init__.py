# Containers Module
"""
General-purpose containers bundled with the hashing core:
- Singly linked list with tail insertion (queue semantics)

The containers have no dependency on the hashing core, and vice versa.
"""

from .linked_list import LinkedList, Node

__all__ = [
    'LinkedList',
    'Node',
]
