# src/sortscope/utils.py
from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np


def human_time(seconds: Optional[float]) -> str:
    if seconds is None or not (isinstance(seconds, (int, float)) and math.isfinite(seconds)):
        return "—"
    if seconds < 1e-6:
        return f"{seconds*1e9:.2f} ns"
    if seconds < 1e-3:
        return f"{seconds*1e6:.2f} µs"
    if seconds < 1.0:
        return f"{seconds*1e3:.2f} ms"
    return f"{seconds:.3f} s"


def format_size(n: int) -> str:
    return f"{n:,}"


# ----------------------
# Result verification
# ----------------------
def is_sorted(values: Sequence[int]) -> bool:
    arr = np.asarray(values)
    if arr.size < 2:
        return True
    return bool(np.all(arr[:-1] <= arr[1:]))


def verify_sorted_permutation(result: Sequence[int], reference: np.ndarray) -> Optional[str]:
    """
    Check ``result`` against ``reference`` (the sorted input).
    Returns None when the result is a sorted permutation, otherwise a short
    description of what is wrong.
    """
    if result is None:
        return "returned no result"
    if len(result) != len(reference):
        return f"length {len(result)} != input length {len(reference)}"
    if not is_sorted(result):
        return "not sorted"
    if not np.array_equal(np.asarray(result, dtype=reference.dtype), reference):
        return "not a permutation of the input"
    return None
