"""List helpers that return a modified copy instead of mutating in place."""

from __future__ import annotations

from typing import List, Optional, Sequence, TypeVar

from utilbox.core.errors import ArrayIndexError

T = TypeVar("T")


def array_move(arr: Sequence[T], old_index: int, new_index: int) -> List[T]:
    """Return a copy of ``arr`` with the item at ``old_index`` moved to ``new_index``.

    Raises :class:`ArrayIndexError` when either index is not below ``len(arr)``.

    >>> array_move(["a", "b", "c", "d"], 0, 2)
    ['b', 'c', 'a', 'd']
    """

    n = len(arr)
    if n <= old_index or n <= new_index:
        raise ArrayIndexError(
            "array_move: index out of range, "
            f"asked to move {old_index} to {new_index} but the array length is {n}."
        )

    result = list(arr)
    item = result.pop(old_index)
    result.insert(new_index, item)
    return result


def _normalize_start(start: int, n: int) -> int:
    if start < 0:
        return max(n + start, 0)
    return min(start, n)


def array_splice(
    arr: Sequence[T],
    start: int,
    delete_count: Optional[int] = None,
    *items: T,
) -> List[T]:
    """Splice a copy of ``arr``.

    Removes ``delete_count`` items starting at ``start`` (everything to the end
    when omitted) and inserts ``items`` in their place. A negative ``start``
    counts from the end; out-of-range values are clamped.

    >>> array_splice([1, 2, 3, 4], 1, 2, "x")
    [1, 'x', 4]
    >>> array_splice([1, 2, 3], -1)
    [1, 2]
    """

    result = list(arr)
    begin = _normalize_start(start, len(result))
    if delete_count is None:
        end = len(result)
    else:
        end = begin + max(delete_count, 0)
    result[begin:end] = items
    return result


def array_set(arr: Sequence[T], index: int, value: T) -> List[T]:
    result = list(arr)
    result[index] = value
    return result
