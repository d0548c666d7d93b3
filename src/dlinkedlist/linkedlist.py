"""Doubly-linked list with owning forward links and weak back-links."""

import logging
import weakref
from typing import Generic, Iterable, Iterator

from dlinkedlist.errors import OutOfBoundsError
from dlinkedlist.interface import LinkedListInterface
from dlinkedlist.types import Position, T

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    """
    A node in the doubly-linked list.

    ``next`` is a strong reference and owns the rest of the chain. ``prev`` is
    held through a weak reference, so the chain never forms a cycle and
    dropping the front node releases every node behind it.
    """

    __slots__ = ("value", "next", "_prev", "__weakref__")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: Node[T] | None = None
        self._prev: weakref.ref[Node[T]] | None = None

    @property
    def prev(self) -> "Node[T] | None":
        """The previous node, or None at the front or once it has been dropped."""
        return self._prev() if self._prev is not None else None

    @prev.setter
    def prev(self, node: "Node[T] | None") -> None:
        self._prev = weakref.ref(node) if node is not None else None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class DoublyLinkedList(LinkedListInterface[T]):
    """
    Doubly-linked list with O(1) operations at both ends.

    Positional operations (``at``, ``insert_at``, ``remove_at``) always walk
    from the front, one link at a time. Not safe for concurrent use; callers
    sharing an instance across threads must serialize access themselves.
    """

    def __init__(self, values: Iterable[T] | None = None) -> None:
        """
        Initialize the list.

        Args:
            values: Optional iterable whose values are appended in order.
        """
        self._front: Node[T] | None = None
        self._back: Node[T] | None = None
        self._length = 0
        if values is not None:
            for value in values:
                self.append(value)

    @property
    def head(self) -> Node[T] | None:
        """The front node, or None if the list is empty."""
        return self._front

    @property
    def tail(self) -> Node[T] | None:
        """The back node, or None if the list is empty."""
        return self._back

    @property
    def size(self) -> int:
        """Number of values in the list."""
        return self._length

    def is_empty(self) -> bool:
        """Return True if the list is empty."""
        return self._front is None

    def at(self, index: int) -> T | None:
        """
        Get the value at a 0-based index. O(n).

        Returns:
            The stored value, or None if index is outside [0, length).
        """
        if index < 0 or index >= self._length:
            return None
        return self._node_at(index).value

    def prepend(self, value: T) -> None:
        """Insert a value at the front of the list. O(1)."""
        node = Node(value)
        if self._front is None:
            self._back = node
        else:
            node.next = self._front
            self._front.prev = node
        self._front = node
        self._length += 1

    def shift(self) -> T:
        """
        Remove and return the front value. O(1).

        Raises:
            OutOfBoundsError: If the list is empty
        """
        node = self._front
        if node is None:
            raise self._out_of_bounds("shift from empty list")

        if node is self._back:
            self._front = None
            self._back = None
        else:
            self._front = node.next
            if self._front is not None:
                self._front.prev = None
        node.next = None
        self._length -= 1
        return node.value

    def append(self, value: T) -> None:
        """Insert a value at the back of the list. O(1)."""
        node = Node(value)
        if self._back is None:
            self._front = node
        else:
            node.prev = self._back
            self._back.next = node
        self._back = node
        self._length += 1

    def pop(self) -> T:
        """
        Remove and return the back value. O(1).

        Raises:
            OutOfBoundsError: If the list is empty
        """
        node = self._back
        if node is None:
            raise self._out_of_bounds("pop from empty list")

        if node is self._front:
            self._front = None
            self._back = None
        else:
            prev_node = node.prev
            if prev_node is not None:
                prev_node.next = None
            self._back = prev_node
        node.prev = None
        self._length -= 1
        return node.value

    def insert_at(self, index: int, value: T) -> None:
        """
        Insert a value so that it occupies the given index. O(n).

        Args:
            index: Target position, 0 <= index <= length
            value: Value to insert

        Raises:
            OutOfBoundsError: If index is outside [0, length]
        """
        if index < 0 or index > self._length:
            raise self._out_of_bounds(
                f"insert_at index {index} out of range for length {self._length}"
            )

        if index == 0:
            self.prepend(value)
            return
        if index == self._length:
            self.append(value)
            return

        prev_node = self._node_at(index - 1)
        next_node = prev_node.next
        node = Node(value)
        node.prev = prev_node
        node.next = next_node
        if next_node is not None:
            next_node.prev = node
        prev_node.next = node
        self._length += 1

    def remove_at(self, index: int) -> T:
        """
        Remove and return the value at the given index. O(n).

        Raises:
            OutOfBoundsError: If index is outside [0, length)
        """
        if index < 0 or index >= self._length:
            raise self._out_of_bounds(
                f"remove_at index {index} out of range for length {self._length}"
            )

        if index == 0:
            return self.shift()
        if index == self._length - 1:
            return self.pop()

        node = self._node_at(index)
        prev_node = node.prev
        next_node = node.next
        if prev_node is not None:
            prev_node.next = next_node
        if next_node is not None:
            next_node.prev = prev_node
        node.prev = None
        node.next = None
        self._length -= 1
        return node.value

    def reverse(self) -> "DoublyLinkedList[T] | None":
        """
        Reverse the list in place. O(n).

        Returns:
            This list, or None if it was empty.
        """
        if self._front is None:
            return None

        current: Node[T] | None = self._front
        previous: Node[T] | None = None
        while current is not None:
            following = current.next
            current.next = current.prev
            current.prev = following
            previous = current
            current = following

        self._front, self._back = previous, self._front
        logger.debug("Reversed list of length %d", self._length)
        return self

    def clear(self) -> None:
        """Drop every node."""
        dropped = self._length
        self._front = None
        self._back = None
        self._length = 0
        logger.debug("Cleared %d nodes", dropped)

    def to_list(self) -> list[T]:
        """Return the values from front to back."""
        return list(self)

    def find(self, value: T) -> Position:
        """
        Find the first value equal to ``value``.

        Returns:
            The 1-based position of the match (the front is 1), or None.
        """
        position = 0
        current = self._front
        while current is not None:
            position += 1
            if current.value == value:
                return position
            current = current.next
        return None

    def contains(self, value: T) -> bool:
        """Return True if any value in the list equals ``value``."""
        return self.find(value) is not None

    def _node_at(self, index: int) -> Node[T]:
        """Walk from the front to the node at index (caller checks bounds)."""
        current = self._front
        for _ in range(index):
            if current is None:
                break
            current = current.next
        if current is None:
            raise RuntimeError(f"Chain ended before index {index} (length {self._length})")
        return current

    def _out_of_bounds(self, message: str) -> OutOfBoundsError:
        logger.debug("Out of bounds: %s", message)
        return OutOfBoundsError(message)

    def __iter__(self) -> Iterator[T]:
        """Yield values from front to back."""
        current = self._front
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        """Return the number of values in the list."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._length > 0

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"
