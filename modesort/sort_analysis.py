"""
Sort Analysis
=============
Phase-by-phase measurement of the mode-isolating sort.

Calls the sorter's three phases (mode scan, non-mode sort, reconstruction)
one at a time with wall-clock timing around each, so the O(n^2) mode
overhead can be compared against what skipping the mode saves.

All numbers are real measurements of a single run; nothing is estimated.
"""

import time
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Sequence, Tuple

from modesort.sorters import mode_isolating_sort as mis
from modesort.sorters.mode_isolating_sort import find_mode
from modesort.sorters.sort_errors import resolve_backend, resolve_workers


@dataclass
class SortMetrics:
    """Measurements for one mode-isolating sort run."""
    length: int
    mode: Optional[int]               # None for empty input
    mode_count: int
    non_mode_count: int
    mode_scan_comparisons: int        # n * n for n >= 2
    sort_comparisons: Optional[int]   # only the merge backend reports this
    backend: str
    mode_time_ms: float
    sort_time_ms: float
    rebuild_time_ms: float
    workers: int = 1                  # mode finder workers; > 1 is the parallel scan

    @property
    def total_time_ms(self) -> float:
        return self.mode_time_ms + self.sort_time_ms + self.rebuild_time_ms

    @property
    def mode_share(self) -> float:
        """Fraction of the total time spent finding the mode."""
        total = self.total_time_ms
        return self.mode_time_ms / total if total > 0 else 0.0

    def to_dict(self) -> Dict[str, Any]:
        row = asdict(self)
        row["total_time_ms"] = self.total_time_ms
        row["mode_share"] = self.mode_share
        return row


def analyze_sort(
    values: Sequence[int], *, backend: Optional[str] = None, workers: Optional[int] = None
) -> Tuple[List[int], SortMetrics]:
    """
    Sort *values* around their mode and measure each phase.

    Returns the sorted list (identical to ``mode_isolating_sort``) and
    its SortMetrics.  Each phase is the sorter's own code, timed between
    calls, so *workers* > 1 measures the parallel mode finder.
    """
    name = resolve_backend(backend)
    result = list(values)
    n = len(result)

    if n <= 1:
        metrics = SortMetrics(
            length=n,
            mode=result[0] if n else None,
            mode_count=n,
            non_mode_count=0,
            mode_scan_comparisons=0,
            sort_comparisons=None,
            backend=name,
            mode_time_ms=0.0,
            sort_time_ms=0.0,
            rebuild_time_ms=0.0,
            workers=resolve_workers(workers),
        )
        return result, metrics

    t0 = time.perf_counter()
    mode, worker_count = mis.locate_mode(result, workers)
    t1 = time.perf_counter()
    non_mode, comparisons = mis.sort_non_mode(result, mode, name)
    t2 = time.perf_counter()
    mis.rebuild(result, mode, non_mode)
    t3 = time.perf_counter()

    metrics = SortMetrics(
        length=n,
        mode=mode,
        mode_count=n - len(non_mode),
        non_mode_count=len(non_mode),
        mode_scan_comparisons=n * n,
        sort_comparisons=comparisons,
        backend=name,
        mode_time_ms=(t1 - t0) * 1000.0,
        sort_time_ms=(t2 - t1) * 1000.0,
        rebuild_time_ms=(t3 - t2) * 1000.0,
        workers=worker_count,
    )
    mis.trace(result, mode, non_mode, worker_count)
    return result, metrics


def check_invariants(original: Sequence[int], result: Sequence[int]) -> List[str]:
    """
    Return one message per violated invariant of *result* against *original*.

    Checked: equal length, same multiset of values, every mode position
    still holds the mode, and the non-mode positions are non-decreasing.
    """
    violations: List[str] = []

    if len(original) != len(result):
        violations.append(f"length changed: {len(original)} -> {len(result)}")
        return violations

    if sorted(original) != sorted(result):
        violations.append("output is not a permutation of the input")

    if len(original) <= 1:
        if list(original) != list(result):
            violations.append("trivial input was modified")
        return violations

    mode = find_mode(original)
    moved = [i for i, x in enumerate(original) if x == mode and result[i] != mode]
    if moved:
        violations.append(f"mode {mode} not kept at positions {moved}")

    rest = [result[i] for i, x in enumerate(original) if x != mode]
    for i in range(len(rest) - 1):
        if rest[i] > rest[i + 1]:
            violations.append(f"non-mode values out of order: {rest[i]} > {rest[i + 1]}")
            break

    return violations
