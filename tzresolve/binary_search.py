from typing import Callable


def binary_search(start: int, end: int, cmp: Callable[[int], int]) -> int | None:
    """
    Search the half-open index range [start, end) for the index where `cmp`
    returns 0.

    `cmp(i)` must return a positive number when the element at `i` lies after
    the target, a negative number when it lies before, and 0 on a match. All
    positive results have to come after all negative ones.
    """
    if start >= end:
        return None
    mid = start + (end - start) // 2
    order = cmp(mid)
    if order > 0:
        return binary_search(start, mid, cmp)
    if order < 0:
        return binary_search(mid + 1, end, cmp)
    return mid
