"""Basic usage example for dlinkedlist."""

import random

from dlinkedlist import DoublyLinkedList, OutOfBoundsError


def main() -> None:
    """Demonstrate basic list operations."""
    lst = DoublyLinkedList[int | str]()

    for _ in range(5):
        lst.append(random.randint(0, 100))
    lst.append("Last")
    lst.prepend("First")

    print("=== Original list ===")
    for position, value in enumerate(lst, start=1):
        print(f"  {position}: {value}")
    print()

    print(f"First node: {lst.head.value if lst.head else None}")
    print(f"Last node: {lst.tail.value if lst.tail else None}")
    print(f'Position of "First": {lst.find("First")}')
    print(f'Contains "First": {lst.contains("First")}\n')

    print(f"Popped: {lst.pop()}")
    lst.insert_at(2, 42)
    print(f"After inserting 42 at index 2: {lst.to_list()}")
    print(f"Reversed: {lst.reverse()}\n")

    lst.clear()
    try:
        lst.shift()
    except OutOfBoundsError as e:
        print(f"Shift on empty list failed: {e}")


if __name__ == "__main__":
    main()
