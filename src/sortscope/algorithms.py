# src/sortscope/algorithms.py
from __future__ import annotations

import functools
import threading
from typing import Callable, Dict, List, Optional, Sequence

from .parallel import fork_join
from .selector import Algorithm

# Subproblems at least this large are sorted as two concurrent tasks.
PARALLEL_THRESHOLD = 2048

# Largest histogram counting sort will allocate (max - min + 1 buckets).
COUNTING_MAX_BUCKETS = 1 << 26


class RangeTooLargeError(MemoryError):
    """Counting sort refused a value range it cannot hold in memory."""

    def __init__(self, span: int, limit: int):
        super().__init__(f"value range of {span} buckets exceeds the counting sort limit of {limit}")
        self.span = span
        self.limit = limit


# ============================================================================
# O(n^2) SORTS
# ============================================================================

def selection_sort(arr: Sequence[int]) -> List[int]:
    arr = list(arr)
    n = len(arr)
    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            if arr[j] < arr[min_idx]:
                min_idx = j
        if min_idx != i:
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
    return arr


def bubble_sort(arr: Sequence[int]) -> List[int]:
    arr = list(arr)
    for end in range(len(arr) - 1, 0, -1):
        for j in range(end):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
    return arr


def insertion_sort(arr: Sequence[int]) -> List[int]:
    arr = list(arr)
    for i in range(1, len(arr)):
        key = arr[i]
        j = i
        while j > 0 and arr[j - 1] > key:
            arr[j] = arr[j - 1]
            j -= 1
        arr[j] = key
    return arr


# ============================================================================
# QUICK SORT
# ============================================================================

def _lomuto_partition(arr: List[int], low: int, high: int) -> int:
    pivot = arr[high]
    i = low - 1
    for j in range(low, high):
        if arr[j] < pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    return i + 1


def quick_sort(arr: Sequence[int]) -> List[int]:
    """
    Lomuto quicksort with the last element as pivot.

    The pivot is not randomized, so sorted or reverse-sorted input degrades to
    O(n^2). Pending ranges live on an explicit stack (larger range pushed
    first), which keeps the stack at O(log n) entries on any input.
    """
    arr = list(arr)
    stack = [(0, len(arr) - 1)]
    while stack:
        low, high = stack.pop()
        if low >= high:
            continue
        p = _lomuto_partition(arr, low, high)
        left, right = (low, p - 1), (p + 1, high)
        if left[1] - left[0] > right[1] - right[0]:
            stack.append(left)
            stack.append(right)
        else:
            stack.append(right)
            stack.append(left)
    return arr


# ============================================================================
# COUNTING SORT
# ============================================================================

def counting_sort(arr: Sequence[int], max_buckets: int = COUNTING_MAX_BUCKETS) -> List[int]:
    """
    Stable counting sort over the [min, max] value range, so negative values
    are fine. Memory is O(max - min), not O(n): a span above ``max_buckets``
    raises RangeTooLargeError instead of attempting the allocation.
    """
    arr = list(arr)
    if len(arr) < 2:
        return arr

    lo, hi = min(arr), max(arr)
    span = hi - lo + 1
    if span > max_buckets:
        raise RangeTooLargeError(span, max_buckets)
    try:
        counts = [0] * span
    except MemoryError as e:
        raise RangeTooLargeError(span, max_buckets) from e

    for v in arr:
        counts[v - lo] += 1
    for i in range(1, span):
        counts[i] += counts[i - 1]

    out = [0] * len(arr)
    # right to left keeps equal values in input order
    for v in reversed(arr):
        counts[v - lo] -= 1
        out[counts[v - lo]] = v
    return out


# ============================================================================
# MERGE SORT (sequential + fork-join)
# ============================================================================

def merge(left: List[int], right: List[int]) -> List[int]:
    """Merge two sorted lists; on ties the left element goes first."""
    if not left:
        return right
    if not right:
        return left
    result = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    # at most one of these is non-empty
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def _sort_small(arr: List[int]) -> List[int]:
    if len(arr) == 2 and arr[0] > arr[1]:
        arr[0], arr[1] = arr[1], arr[0]
    return arr


def _merge_sort(arr: List[int]) -> List[int]:
    if len(arr) <= 2:
        return _sort_small(arr)
    mid = len(arr) // 2
    return merge(_merge_sort(arr[:mid]), _merge_sort(arr[mid:]))


def merge_sort(arr: Sequence[int]) -> List[int]:
    return _merge_sort(list(arr))


def _merge_sort_parallel(arr: List[int], threshold: int, slots: Optional[threading.BoundedSemaphore]) -> List[int]:
    if len(arr) <= 2:
        return _sort_small(arr)
    if len(arr) < threshold:
        return _merge_sort(arr)

    mid = len(arr) // 2
    # slices are independent copies, so the two tasks share no buffer
    left_half, right_half = arr[:mid], arr[mid:]
    if slots is not None and not slots.acquire(blocking=False):
        # every worker slot is busy: sort both halves in this thread
        return merge(
            _merge_sort_parallel(left_half, threshold, slots),
            _merge_sort_parallel(right_half, threshold, slots),
        )
    try:
        left, right = fork_join(
            lambda: _merge_sort_parallel(left_half, threshold, slots),
            lambda: _merge_sort_parallel(right_half, threshold, slots),
        )
    finally:
        if slots is not None:
            slots.release()
    return merge(left, right)


def merge_sort_parallel(
    arr: Sequence[int],
    threshold: int = PARALLEL_THRESHOLD,
    max_threads: Optional[int] = None,
) -> List[int]:
    """
    Merge sort whose halves are sorted as concurrent tasks while the
    subproblem has at least ``threshold`` elements; smaller subproblems fall
    back to the sequential path. Merging always happens after both halves
    have completed. Produces exactly the same output as merge_sort.

    Every fork starts one worker thread. ``max_threads`` caps how many forks
    are in flight at once; a split that finds no free slot sorts its halves
    in the current thread. Without a cap the live thread count grows with
    ``len(arr) / threshold``.
    """
    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 2:
        raise ValueError(f"threshold must be an integer >= 2, got {threshold!r}")
    slots = None
    if max_threads is not None:
        if isinstance(max_threads, bool) or not isinstance(max_threads, int) or max_threads < 1:
            raise ValueError(f"max_threads must be a positive integer, got {max_threads!r}")
        slots = threading.BoundedSemaphore(max_threads)
    return _merge_sort_parallel(list(arr), threshold, slots)


# ============================================================================
# HEAP SORT
# ============================================================================

def _sift_down(arr: List[int], root: int, length: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = 2 * root + 2
        if left < length and arr[left] > arr[largest]:
            largest = left
        if right < length and arr[right] > arr[largest]:
            largest = right
        if largest == root:
            return
        arr[root], arr[largest] = arr[largest], arr[root]
        root = largest


def heap_sort(arr: Sequence[int]) -> List[int]:
    arr = list(arr)
    n = len(arr)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(arr, i, n)
    for end in range(n - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        _sift_down(arr, 0, end)
    return arr


# ============================================================================
# BASELINE
# ============================================================================

def baseline_sort(arr: Sequence[int]) -> List[int]:
    """Python's built-in Timsort, the reference every custom sort is compared to."""
    arr = list(arr)
    arr.sort()
    return arr


SORTERS: Dict[Algorithm, Callable[[Sequence[int]], List[int]]] = {
    Algorithm.SELECTION: selection_sort,
    Algorithm.BUBBLE: bubble_sort,
    Algorithm.INSERTION: insertion_sort,
    Algorithm.QUICK: quick_sort,
    Algorithm.COUNTING: counting_sort,
    Algorithm.MERGE: merge_sort,
    Algorithm.MERGE_PARALLEL: merge_sort_parallel,
    Algorithm.HEAP: heap_sort,
    Algorithm.BASELINE: baseline_sort,
}


def get_sorter(
    algorithm: Algorithm,
    threshold: int = PARALLEL_THRESHOLD,
    max_threads: Optional[int] = None,
) -> Callable[[Sequence[int]], List[int]]:
    if algorithm is Algorithm.MERGE_PARALLEL and (threshold != PARALLEL_THRESHOLD or max_threads is not None):
        return functools.partial(merge_sort_parallel, threshold=threshold, max_threads=max_threads)
    return SORTERS[algorithm]
