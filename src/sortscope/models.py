# src/sortscope/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .algorithms import PARALLEL_THRESHOLD
from .selector import Algorithm


class Status(Enum):
    RAN = "ran"
    SKIPPED = "skipped"   # not selected for this workload size
    FAILED = "failed"     # raised before producing a result


@dataclass
class Measurement:
    algorithm: Algorithm
    status: Status
    duration: Optional[float] = None   # seconds; None unless status is RAN
    verified: Optional[bool] = None    # None unless status is RAN
    error: Optional[str] = None

    @classmethod
    def skipped(cls, algorithm: Algorithm) -> "Measurement":
        return cls(algorithm=algorithm, status=Status.SKIPPED)

    @property
    def ran(self) -> bool:
        return self.status is Status.RAN


@dataclass
class WorkloadResult:
    size: int
    measurements: Dict[Algorithm, Measurement] = field(default_factory=dict)

    def fastest(self) -> Optional[Algorithm]:
        timed = [m for m in self.measurements.values() if m.ran and m.duration is not None]
        if not timed:
            return None
        return min(timed, key=lambda m: m.duration).algorithm


@dataclass
class BenchmarkRun:
    title: str
    sizes: List[int]
    algorithms: List[Algorithm]
    results: List[WorkloadResult]
    errors: List[str] = field(default_factory=list)
    threshold: int = PARALLEL_THRESHOLD
    seed: Optional[int] = None
    html_path: Optional[str] = None

    def matrix(self) -> List[Tuple[Algorithm, List[Measurement]]]:
        """One row per algorithm, one cell per benchmarked size, in column order."""
        return [
            (algo, [r.measurements[algo] for r in self.results])
            for algo in self.algorithms
        ]

    def fastest_by_size(self) -> List[Tuple[int, Optional[Algorithm]]]:
        return [(r.size, r.fastest()) for r in self.results]

    def _repr_html_(self) -> str:  # Jupyter-friendly
        from .report import build_report_html
        return build_report_html(self)
