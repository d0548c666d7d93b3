"""Capability set shared by linked list implementations."""

from abc import ABC, abstractmethod
from typing import Generic

from dlinkedlist.types import T


class LinkedListInterface(ABC, Generic[T]):
    """
    Common operations every linked list variant provides.

    Write callers against this class rather than a concrete list so that
    another linkage strategy can be swapped in later.
    """

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if the list holds no values."""

    @abstractmethod
    def at(self, index: int) -> T | None:
        """Return the value at a 0-based index, or None when out of range."""

    @abstractmethod
    def prepend(self, value: T) -> None:
        """Insert a value at the front."""

    @abstractmethod
    def shift(self) -> T:
        """Remove and return the front value."""

    @abstractmethod
    def append(self, value: T) -> None:
        """Insert a value at the back."""

    @abstractmethod
    def pop(self) -> T:
        """Remove and return the back value."""

    @abstractmethod
    def insert_at(self, index: int, value: T) -> None:
        """Insert a value so that it ends up at the given index."""

    @abstractmethod
    def remove_at(self, index: int) -> T:
        """Remove and return the value at the given index."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every value."""

    @abstractmethod
    def to_list(self) -> list[T]:
        """Return the values from front to back."""
