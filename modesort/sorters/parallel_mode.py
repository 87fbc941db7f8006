"""
Parallel Mode Finder
====================
Splits the candidate positions of the O(n^2) mode scan across workers.

Each worker scans a contiguous block of candidate positions against the
whole sequence and reports (best_count, best_index) using the same strict
"count > best" rule.  Blocks are merged by highest count, ties going to
the lowest index, which is exactly the position the sequential scan
settles on: the first one reaching the global maximum count.
"""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple

from modesort.sorters.sort_errors import EmptySequenceError, resolve_workers

ChunkResult = Tuple[int, int]  # (best_count, best_index)


def _scan_chunk(values: Sequence[int], start: int, stop: int) -> ChunkResult:
    best_count = 0
    best_index = start
    for i in range(start, stop):
        count = values.count(values[i])
        if count > best_count:
            best_count = count
            best_index = i
    return best_count, best_index


def _chunk_bounds(n: int, workers: int) -> List[Tuple[int, int]]:
    """Contiguous [start, stop) blocks covering range(n), sizes differing by at most one."""
    size, extra = divmod(n, workers)
    bounds = []
    start = 0
    for w in range(workers):
        stop = start + size + (1 if w < extra else 0)
        if stop > start:
            bounds.append((start, stop))
        start = stop
    return bounds


def merge_chunk_results(results: Sequence[ChunkResult]) -> ChunkResult:
    """Pick the highest count; on equal counts the lowest index wins."""
    best_count, best_index = results[0]
    for count, index in results[1:]:
        if count > best_count or (count == best_count and index < best_index):
            best_count, best_index = count, index
    return best_count, best_index


def find_mode_parallel(
    values: Sequence[int],
    *,
    workers: Optional[int] = None,
    use_processes: bool = False,
) -> int:
    """
    Return the same mode as the sequential brute-force scan, computed in chunks.

    Threads are used by default; ``use_processes=True`` switches to a
    process pool (each worker receives a copy of *values*).
    """
    n = len(values)
    if n == 0:
        raise EmptySequenceError()

    worker_count = min(resolve_workers(workers), n)
    if worker_count <= 1:
        _, index = _scan_chunk(values, 0, n)
        return values[index]

    data = list(values)
    bounds = _chunk_bounds(n, worker_count)
    pool_cls = ProcessPoolExecutor if use_processes else ThreadPoolExecutor

    with pool_cls(max_workers=worker_count) as pool:
        futures = [pool.submit(_scan_chunk, data, start, stop) for start, stop in bounds]
        results = [f.result() for f in futures]

    _, index = merge_chunk_results(results)
    return data[index]
