"""Type definitions for dlinkedlist."""

from typing import TypeAlias, TypeVar

# Generic type variable for stored values
T = TypeVar("T")

# 1-based position reported by find(), None when there is no match
Position: TypeAlias = int | None
