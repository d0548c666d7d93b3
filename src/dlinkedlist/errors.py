"""Exception classes for dlinkedlist."""


class LinkedListError(Exception):
    """Base exception for all dlinkedlist errors."""


class OutOfBoundsError(LinkedListError, IndexError):
    """Raised when an index is outside the valid range or a required element is missing."""
