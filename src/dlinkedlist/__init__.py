"""dlinkedlist - Generic doubly linked list with O(1) operations at both ends."""

from dlinkedlist.errors import LinkedListError, OutOfBoundsError
from dlinkedlist.interface import LinkedListInterface
from dlinkedlist.linkedlist import DoublyLinkedList, Node
from dlinkedlist.types import Position

__version__ = "0.0.1"

__all__ = [
    "DoublyLinkedList",
    "Node",
    "LinkedListInterface",
    "LinkedListError",
    "OutOfBoundsError",
    "Position",
]
