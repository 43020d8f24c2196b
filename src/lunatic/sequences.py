"""
List helpers.

Everything except `clear` returns a new value and leaves its input alone.
"""

import random
from typing import Any, Callable, Iterable, List, Optional, Sequence


def peek_front(items: Sequence[Any]) -> Optional[Any]:
    """First element, or None for an empty sequence."""
    return items[0] if items else None


def peek_last(items: Sequence[Any]) -> Optional[Any]:
    """Last element, or None for an empty sequence."""
    return items[-1] if items else None


def occurrences(item: Any, items: Iterable[Any]) -> int:
    """Number of elements equal to item."""
    return sum(1 for element in items if element == item)


def keymap(pairs: Iterable[Sequence[Any]]) -> Callable[[Any], Any]:
    """
    Build a lookup function from [key, value] pairs.

    Unknown keys return None. Later pairs override earlier ones.
    """
    table = dict(pairs)
    return table.get


def intersect(first: Sequence[Any], second: Sequence[Any]) -> List[Any]:
    """Elements of first that also appear in second, in first's order."""
    return [element for element in first if element in second]


def clear(items: List[Any]) -> None:
    """Empty items in place."""
    del items[:]


def index_of_type(example: Any, items: Sequence[Any]) -> int:
    """
    Index of the first element whose class has the same name as example's.

    Returns -1 if no element matches.
    """
    wanted = type(example).__name__
    for index, element in enumerate(items):
        if type(element).__name__ == wanted:
            return index
    return -1


def flatten(items: Iterable[Any]) -> List[Any]:
    """Flatten one level; elements that are not lists or tuples are kept as they are."""
    result: List[Any] = []
    for element in items:
        if isinstance(element, (list, tuple)):
            result.extend(element)
        else:
            result.append(element)
    return result


def range_of(start: int, end: int) -> List[int]:
    """Integers from start up to, but not including, end."""
    return list(range(start, end))


def take(amount: int, items: Sequence[Any]) -> List[Any]:
    """First amount elements."""
    return list(items[:amount])


def drop(amount: int, items: Sequence[Any]) -> List[Any]:
    """Last amount elements.

    drop(0, items) returns every element, since items[-0:] is items[0:].
    """
    return list(items[-amount:])


def array_equals(first: Sequence[Any], second: Sequence[Any]) -> bool:
    return len(first) == len(second) and all(a == b for a, b in zip(first, second))


def pick(items: Sequence[Any], index: Optional[int] = 0) -> Any:
    """Element at index, or a random element when index is None."""
    if index is None:
        return random.choice(items)
    return items[index]
