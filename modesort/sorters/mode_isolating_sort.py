"""
Mode-Isolating Sort
===================
Sorts an integer sequence by leaving every occurrence of its mode (most
frequent value) where it already is and sorting only the remaining values
into the other positions.

Research note: this does not improve on O(n log n).  The brute-force mode
scan is O(n^2) and dominates the runtime for large inputs; the point is to
measure what isolating a repeated value saves, not to be fast.

Mode tie-break: the first candidate (left to right) whose count strictly
exceeds the best count seen so far wins, so an earlier value beats a later
value with the same count.
"""

from __future__ import annotations

from typing import List, MutableSequence, Optional, Sequence, Tuple

from modesort.sorters.backends import sort_values_counted
from modesort.sorters.parallel_mode import find_mode_parallel
from modesort.sorters.sort_errors import (
    EmptySequenceError,
    debug_enabled_from_env,
    resolve_workers,
)

DEBUG_MODE = debug_enabled_from_env()


def count_occurrences(values: Sequence[int], target: int) -> int:
    """Number of elements in *values* equal to *target* (full linear scan)."""
    count = 0
    for num in values:
        if num == target:
            count += 1
    return count


def find_mode(values: Sequence[int]) -> int:
    """
    Return the most frequent value of *values* using a brute-force double scan.

    O(n^2) time, O(1) extra space.  With all counts equal this is the first
    element.

    Raises
    ------
    EmptySequenceError
        If *values* is empty.
    """
    if len(values) == 0:
        raise EmptySequenceError()

    mode = values[0]
    max_count = 0
    for candidate in values:
        count = count_occurrences(values, candidate)
        if count > max_count:
            max_count = count
            mode = candidate
    return mode


def mode_isolating_sort(
    values: Sequence[int],
    *,
    backend: Optional[str] = None,
    workers: Optional[int] = None,
) -> List[int]:
    """
    Return a new list holding *values* sorted around their mode.

    Every position of the input that holds the mode keeps it; the other
    positions receive the non-mode values in ascending order.  The input
    is never mutated.

    Parameters
    ----------
    values : sequence of int
    backend : str, optional
        Non-mode sort backend ("builtin", "merge", "numpy"); defaults to
        env MODESORT_BACKEND, then "builtin".
    workers : int, optional
        Worker count for mode finding; more than one uses the parallel
        finder.  Defaults to env MODESORT_WORKERS, then 1.
    """
    result = list(values)
    mode_isolating_sort_in_place(result, backend=backend, workers=workers)
    return result


def mode_isolating_sort_in_place(
    values: MutableSequence[int],
    *,
    backend: Optional[str] = None,
    workers: Optional[int] = None,
) -> None:
    """Sort *values* around their mode, writing the result back in place."""
    if len(values) <= 1:
        return

    mode, worker_count = locate_mode(values, workers)
    non_mode, _ = sort_non_mode(values, mode, backend)
    trace(values, mode, non_mode, worker_count)
    rebuild(values, mode, non_mode)


# Phases, shared with modesort.sort_analysis so measurements time this code.

def locate_mode(values: Sequence[int], workers: Optional[int] = None) -> Tuple[int, int]:
    """Return (mode, worker_count); more than one worker uses the parallel finder."""
    worker_count = resolve_workers(workers)
    if worker_count > 1:
        return find_mode_parallel(values, workers=worker_count), worker_count
    return find_mode(values), worker_count


def sort_non_mode(
    values: Sequence[int], mode: int, backend: Optional[str] = None
) -> Tuple[List[int], Optional[int]]:
    """Sorted non-mode subsequence and the backend's comparison count (or None)."""
    return sort_values_counted([x for x in values if x != mode], backend)


def rebuild(values: MutableSequence[int], mode: int, non_mode: Sequence[int]) -> None:
    """Write *non_mode* in order into every position of *values* not holding *mode*."""
    cursor = 0
    for i in range(len(values)):
        if values[i] != mode:
            values[i] = non_mode[cursor]
            cursor += 1


def trace(values: Sequence[int], mode: int, non_mode: Sequence[int], worker_count: int) -> None:
    if not DEBUG_MODE:
        return
    n = len(values)
    print(f"[MODESORT DEBUG] n={n} mode={mode}")
    print(f"  mode_count: {n - len(non_mode)}")
    print(f"  non_mode_count: {len(non_mode)}")
    print(f"  mode_finder: {'parallel x' + str(worker_count) if worker_count > 1 else 'sequential'}")
