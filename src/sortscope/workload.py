# src/sortscope/workload.py
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

RANDOM_BOUND = 99999


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Build the random source for workload generation. Without a seed the
    generator is seeded from the wall clock, so values differ between runs.
    """
    if seed is None:
        seed = time.time_ns()
    return np.random.default_rng(seed)


@dataclass(frozen=True)
class Workload:
    size: int
    values: np.ndarray  # read-only int64

    def clone(self) -> List[int]:
        """Independent copy handed to exactly one algorithm run."""
        return self.values.tolist()

    def reference(self) -> np.ndarray:
        return np.sort(self.values, kind="stable")


def generate_workload(size: int, rng: Optional[np.random.Generator] = None) -> Workload:
    """
    Generate ``size`` signed integers, each the difference of two independent
    draws from [0, RANDOM_BOUND). The result is roughly triangular around zero,
    so duplicates and both signs are common.
    """
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise ValueError(f"workload size must be an integer, got {size!r}")
    if size < 0:
        raise ValueError(f"workload size must be non-negative, got {size}")
    if rng is None:
        rng = make_rng()

    a = rng.integers(0, RANDOM_BOUND, size=int(size), dtype=np.int64)
    b = rng.integers(0, RANDOM_BOUND, size=int(size), dtype=np.int64)
    values = a - b
    values.flags.writeable = False
    return Workload(size=int(size), values=values)
