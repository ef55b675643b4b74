"""List helpers.

Unless a function says otherwise it returns a new list and leaves its
input alone. ``pull``, ``pull_at_index``, ``pull_at_value`` and ``remove``
mutate the list they are given, in place.

Membership tests (``difference``, ``intersection``, ...) use hashing, so
elements must be hashable.
"""

import random
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, TypeVar

import toolz

from fnkit.domain.errors import InvalidArgumentError

T = TypeVar("T")


# === Extremes ===


def array_max(arr: Iterable[T]) -> T:
    return max(arr)


def array_min(arr: Iterable[T]) -> T:
    return min(arr)


# === Slicing ===


def chunk(arr: Sequence[T], size: int) -> list[list[T]]:
    """
    Split into consecutive lists of ``size`` items; the last may be shorter.

    Example:
        >>> chunk([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
    """
    if size < 1:
        raise InvalidArgumentError(f"chunk size must be positive, got {size}")
    return [list(part) for part in toolz.partition_all(size, arr)]


def head(arr: Sequence[T]) -> T | None:
    return arr[0] if arr else None


def last(arr: Sequence[T]) -> T | None:
    return arr[-1] if arr else None


def initial(arr: Sequence[T]) -> list[T]:
    """Everything but the last item."""
    return list(arr[:-1])


def tail(arr: Sequence[T]) -> list[T]:
    """Everything but the first item; a single-item list is returned whole."""
    return list(arr[1:]) if len(arr) > 1 else list(arr)


def take(arr: Sequence[T], n: int = 1) -> list[T]:
    return list(toolz.take(max(n, 0), arr))


def take_right(arr: Sequence[T], n: int = 1) -> list[T]:
    if n <= 0:
        return []
    return list(arr[-n:])


def drop_right(arr: Sequence[T], n: int = 1) -> list[T]:
    return list(arr[: len(arr) - n]) if n < len(arr) else []


def drop_elements(arr: Sequence[T], predicate: Callable[[T], bool]) -> list[T]:
    """
    Drop items from the front until ``predicate`` holds.

    Example:
        >>> drop_elements([1, 2, 3, 4], lambda n: n >= 3)
        [3, 4]
    """
    for index, item in enumerate(arr):
        if predicate(item):
            return list(arr[index:])
    return []


def every_nth(arr: Sequence[T], nth: int) -> list[T]:
    """Items at positions 0, nth, 2*nth, ..."""
    if nth < 1:
        raise InvalidArgumentError(f"nth must be positive, got {nth}")
    return list(toolz.take_nth(nth, arr))


def nth_element(arr: Sequence[T], n: int = 0) -> T | None:
    """Item at ``n`` (negative counts from the end), or None if out of range."""
    if -len(arr) <= n < len(arr):
        return arr[n]
    return None


# === Flattening ===


def flatten(arr: Iterable[Any]) -> list[Any]:
    """Flatten one level; non-list items are kept as they are."""
    return flatten_depth(arr, 1)


def flatten_depth(arr: Iterable[Any], depth: int = 1) -> list[Any]:
    """
    Flatten nested lists up to ``depth`` levels.

    Example:
        >>> flatten_depth([1, [2], [[[3], 4], 5]], 2)
        [1, 2, [3], 4, 5]
    """
    result: list[Any] = []
    for item in arr:
        if isinstance(item, list) and depth > 0:
            result.extend(flatten_depth(item, depth - 1))
        else:
            result.append(item)
    return result


def deep_flatten(arr: Iterable[Any]) -> list[Any]:
    """Flatten nested lists completely."""
    result: list[Any] = []
    stack = [iter(arr)]
    while stack:
        for item in stack[-1]:
            if isinstance(item, list):
                stack.append(iter(item))
                break
            result.append(item)
        else:
            stack.pop()
    return result


# === Set-like operations ===


def compact(arr: Iterable[T]) -> list[T]:
    """Drop falsy values."""
    return [item for item in arr if item]


def count_occurrences(arr: Iterable[T], value: T) -> int:
    return sum(1 for item in arr if item == value)


def difference(a: Iterable[T], b: Iterable[Hashable]) -> list[T]:
    """Items of ``a`` not present in ``b``."""
    excluded = set(b)
    return [item for item in a if item not in excluded]


def difference_with(
    arr: Iterable[T],
    values: Sequence[Any],
    comparator: Callable[[T, Any], bool],
) -> list[T]:
    """Items of ``arr`` for which ``comparator`` matches nothing in ``values``."""
    return [item for item in arr if not any(comparator(item, v) for v in values)]


def distinct_values_of_array(arr: Iterable[T]) -> list[T]:
    """Unique values in first-seen order."""
    return list(toolz.unique(arr))


def filter_non_unique(arr: Iterable[T]) -> list[T]:
    """Keep only values that occur exactly once."""
    items = list(arr)
    counts = toolz.frequencies(items)
    return [item for item in items if counts[item] == 1]


def intersection(a: Iterable[T], b: Iterable[Hashable]) -> list[T]:
    """Items of ``a`` also present in ``b``."""
    included = set(b)
    return [item for item in a if item in included]


def similarity(arr: Iterable[T], values: Iterable[Any]) -> list[T]:
    """Items of ``arr`` that appear in ``values`` (equality, not hashing)."""
    pool = list(values)
    return [item for item in arr if item in pool]


def symmetric_difference(a: Iterable[T], b: Iterable[T]) -> list[T]:
    a_items, b_items = list(a), list(b)
    a_set, b_set = set(a_items), set(b_items)
    return [x for x in a_items if x not in b_set] + [x for x in b_items if x not in a_set]


def union(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """Unique values of ``a`` then ``b``, in first-seen order."""
    return list(toolz.unique(toolz.concat([a, b])))


def without(arr: Iterable[T], *values: Any) -> list[T]:
    return [item for item in arr if item not in values]


# === Grouping and mapping ===


def group_by(arr: Iterable[T], key: Callable[[T], Any] | str) -> dict[Any, list[T]]:
    """
    Group items by a key function, or by an attribute / mapping key name.

    Example:
        >>> group_by([6.1, 4.2, 6.3], math.floor)
        {6: [6.1, 6.3], 4: [4.2]}
        >>> group_by(["one", "two", "three"], len)
        {3: ['one', 'two'], 5: ['three']}
    """
    if callable(key):
        return toolz.groupby(key, arr)

    def lookup(item: Any) -> Any:
        if isinstance(item, dict):
            return item[key]
        return getattr(item, key)

    return toolz.groupby(lookup, arr)


def map_object(arr: Iterable[T], fn: Callable[[T], Any]) -> dict[T, Any]:
    """Map each item to ``fn(item)`` in a dict keyed by the item."""
    return {item: fn(item) for item in arr}


def pick(obj: dict[Any, Any], keys: Iterable[Any]) -> dict[Any, Any]:
    """Sub-dict with only the given keys that exist in ``obj``."""
    return {key: obj[key] for key in keys if key in obj}


def zip_longest_lists(*arrays: Sequence[Any]) -> list[list[Any]]:
    """
    Group items by position, padding shorter lists with None.

    Example:
        >>> zip_longest_lists(["a"], [1, 2], [True, False])
        [['a', 1, True], [None, 2, False]]
    """
    if not arrays:
        return []
    width = max(len(array) for array in arrays)
    return [
        [array[i] if i < len(array) else None for array in arrays]
        for i in range(width)
    ]


# === Construction ===


def initialize_array_with_range(end: int, start: int = 0) -> list[int]:
    """Integers from ``start`` to ``end`` inclusive."""
    return list(range(start, end + 1))


def initialize_array_with_values(n: int, value: Any = 0) -> list[Any]:
    return [value] * n


# === In-place removal ===


def pull(arr: list[T], *values: Any) -> None:
    """
    Remove every occurrence of ``values`` from ``arr`` in place.

    A single list argument is taken as the list of values to remove.

    Example:
        >>> items = ["a", "b", "c", "a", "b", "c"]
        >>> pull(items, "a", "c")
        >>> items
        ['b', 'b']
    """
    if len(values) == 1 and isinstance(values[0], list):
        values = tuple(values[0])
    arr[:] = [item for item in arr if item not in values]


def pull_at_index(arr: list[T], indexes: Iterable[int]) -> list[T]:
    """Remove the items at ``indexes`` in place and return them."""
    wanted = set(indexes)
    removed = [item for i, item in enumerate(arr) if i in wanted]
    arr[:] = [item for i, item in enumerate(arr) if i not in wanted]
    return removed


def pull_at_value(arr: list[T], values: Iterable[Any]) -> list[T]:
    """Remove the items equal to any of ``values`` in place and return them."""
    pool = list(values)
    removed = [item for item in arr if item in pool]
    arr[:] = [item for item in arr if item not in pool]
    return removed


def remove(arr: list[T], predicate: Callable[[T], bool]) -> list[T]:
    """Remove the items matching ``predicate`` in place and return them."""
    removed = [item for item in arr if predicate(item)]
    arr[:] = [item for item in arr if not predicate(item)]
    return removed


# === Randomness ===


def sample(arr: Sequence[T]) -> T | None:
    """A random item, or None for an empty sequence."""
    return random.choice(arr) if arr else None  # noqa: S311


def shuffle(arr: Iterable[T]) -> list[T]:
    """A shuffled copy; the input is left untouched."""
    items = list(arr)
    random.shuffle(items)
    return items
