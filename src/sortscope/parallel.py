# src/sortscope/parallel.py
from __future__ import annotations

import concurrent.futures
from typing import Callable, Tuple, TypeVar

L = TypeVar("L")
R = TypeVar("R")


def fork_join(left: Callable[[], L], right: Callable[[], R]) -> Tuple[L, R]:
    """
    Run two independent computations concurrently and return both results.

    ``right`` runs on a freshly spawned worker thread while ``left`` runs in
    the calling thread. Neither result is returned before both computations
    have finished; if either raised, the exception is re-raised only after
    the other one has also completed. There is no cancellation.

    Each call starts one thread and nothing limits how many calls are in
    flight. When the host refuses another thread, ``RuntimeError: can't
    start new thread`` propagates to the caller; merge_sort_parallel's
    ``max_threads`` keeps deep recursions under such a limit.
    """
    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
        right_future = executor.submit(right)
        try:
            left_result = left()
        except BaseException:
            concurrent.futures.wait([right_future])
            raise
        concurrent.futures.wait([right_future])
        return left_result, right_future.result()
