# src/sortscope/selector.py
from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Iterable, List


class Algorithm(Enum):
    # declaration order is execution and report order
    SELECTION = "select"
    BUBBLE = "bubble"
    INSERTION = "insert"
    QUICK = "quick"
    COUNTING = "count"
    MERGE = "merge"
    MERGE_PARALLEL = "merge p"
    HEAP = "heap"
    BASELINE = "sorted"

    @property
    def label(self) -> str:
        return self.value


AlgorithmSet = FrozenSet[Algorithm]

_ALL: AlgorithmSet = frozenset(Algorithm)
_NO_QUADRATIC: AlgorithmSet = _ALL - {Algorithm.SELECTION, Algorithm.BUBBLE, Algorithm.INSERTION}
_LARGE: AlgorithmSet = _NO_QUADRATIC - {Algorithm.QUICK}
_HUGE: AlgorithmSet = frozenset({Algorithm.COUNTING, Algorithm.MERGE_PARALLEL})

SIZE_POLICY: Dict[int, AlgorithmSet] = {
    1000: _ALL,
    2000: _ALL,
    4000: _ALL,
    16000: _ALL,
    256000: _NO_QUADRATIC,
    1000000: _NO_QUADRATIC,
    10000000: _LARGE,
    100000000: _HUGE,
}

DEFAULT_SIZES: List[int] = list(SIZE_POLICY)


def select_algorithms(size: int) -> AlgorithmSet:
    """Algorithms benchmarked for a workload of exactly ``size`` elements (empty if unlisted)."""
    return SIZE_POLICY.get(size, frozenset())


def ordered(algorithms: Iterable[Algorithm]) -> List[Algorithm]:
    chosen = set(algorithms)
    return [a for a in Algorithm if a in chosen]
