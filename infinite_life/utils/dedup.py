"""Duplicate removal for candidate coordinate lists."""

from typing import Hashable, List, Set, TypeVar

T = TypeVar("T", bound=Hashable)


def unique_in_place(items: List[T]) -> List[T]:
    """Drop later duplicates from ``items`` in place.

    The first occurrence of every value is kept and survivors retain their
    relative order. Equality is value equality, so two distinct ``Vector2``
    instances with the same components count as duplicates.

    Args:
        items (List[T]): List to compact. Mutated in place.

    Returns:
        List[T]: The same list object, for call chaining.
    """
    seen: Set[T] = set()
    write = 0
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        items[write] = item
        write += 1
    del items[write:]
    return items
