"""
Merge Sort
==========
Bottom-up deterministic merge sort, available as a non-mode sort backend.

Stable, comparison-based, O(n log n) worst case.  The counted variant also
reports how many element comparisons were made, which lets the analysis
layer put the non-mode sort cost next to the O(n^2) mode scan.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


def merge_sort(
    seq: Sequence[T],
    *,
    key: Optional[Callable[[T], Any]] = None,
) -> List[T]:
    """
    Return a new list containing items from *seq* in ascending order.

    Parameters
    ----------
    seq : sequence
        Input items (list, tuple, range, ...).
    key : callable, optional
        Same semantics as ``sorted(..., key=...)``.

    Returns
    -------
    list
        A fresh sorted list.  The original *seq* is never mutated.
    """
    result, _ = merge_sort_counted(seq, key=key)
    return result


def merge_sort_counted(
    seq: Sequence[T],
    *,
    key: Optional[Callable[[T], Any]] = None,
) -> Tuple[List[T], int]:
    """Sort like :func:`merge_sort` and also return the comparison count."""
    items: List[T] = list(seq)
    n = len(items)
    if n <= 1:
        return items, 0

    keys = items if key is None else [key(item) for item in items]
    order = list(range(n))
    buffer = [0] * n
    comparisons = 0

    width = 1
    while width < n:
        for lo in range(0, n, 2 * width):
            mid = min(lo + width, n)
            hi = min(lo + 2 * width, n)
            comparisons += _merge_runs(order, buffer, keys, lo, mid, hi)
        order, buffer = buffer, order
        width *= 2

    return [items[i] for i in order], comparisons


def _merge_runs(
    src: List[int],
    dst: List[int],
    keys: Sequence[Any],
    lo: int,
    mid: int,
    hi: int,
) -> int:
    """Merge src[lo:mid] and src[mid:hi] into dst[lo:hi]; return comparisons."""
    i, j, k = lo, mid, lo
    comparisons = 0

    while i < mid and j < hi:
        comparisons += 1
        if keys[src[j]] < keys[src[i]]:
            dst[k] = src[j]
            j += 1
        else:           # ties take the left run first
            dst[k] = src[i]
            i += 1
        k += 1

    while i < mid:
        dst[k] = src[i]
        i += 1
        k += 1
    while j < hi:
        dst[k] = src[j]
        j += 1
        k += 1

    return comparisons
