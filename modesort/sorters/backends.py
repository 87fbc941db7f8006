"""
Non-mode sort backends.

Any ascending comparison sort over plain integers is valid for the
non-mode subsequence; these are the ones the package ships.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from modesort.sorters.merge_sort import merge_sort_counted
from modesort.sorters.sort_errors import resolve_backend

CountedSort = Callable[[Sequence[int]], Tuple[List[int], Optional[int]]]


def _builtin_sort(values: Sequence[int]) -> Tuple[List[int], Optional[int]]:
    return sorted(values), None


def _merge_sort(values: Sequence[int]) -> Tuple[List[int], Optional[int]]:
    return merge_sort_counted(values)


_INT64 = np.iinfo(np.int64)


def _numpy_sort(values: Sequence[int]) -> Tuple[List[int], Optional[int]]:
    if len(values) == 0:
        return [], None
    # Python ints outside int64 are sorted as objects
    if _INT64.min <= min(values) and max(values) <= _INT64.max:
        arr = np.asarray(values, dtype=np.int64)
    else:
        arr = np.asarray(values, dtype=object)
    return np.sort(arr, kind="stable").tolist(), None


_BACKENDS: Dict[str, CountedSort] = {
    "builtin": _builtin_sort,
    "merge": _merge_sort,
    "numpy": _numpy_sort,
}


def sort_values_counted(
    values: Sequence[int], backend: Optional[str] = None
) -> Tuple[List[int], Optional[int]]:
    """
    Sort *values* ascending with the resolved backend.

    Returns (sorted_values, comparisons); comparisons is None when the
    backend cannot report it.
    """
    name = resolve_backend(backend)
    return _BACKENDS[name](values)


def sort_values(values: Sequence[int], backend: Optional[str] = None) -> List[int]:
    """Sort *values* ascending with the resolved backend."""
    result, _ = sort_values_counted(values, backend)
    return result
