# src/sortscope/io.py
from __future__ import annotations
import json
from typing import TYPE_CHECKING, Any
from pathlib import Path
from .utils import human_time

if TYPE_CHECKING:
    from .models import BenchmarkRun


def export_results_json(run: BenchmarkRun, out_path: str | Path) -> None:
    """
    Write a JSON file with the size-vs-algorithm matrix, one entry per
    workload size, for use by external frontends or later comparison.
    """
    out_path = Path(out_path)
    data: dict[str, Any] = {
        "title": run.title,
        "html_path": run.html_path,
        "seed": run.seed,
        "threshold": run.threshold,
        "sizes": run.sizes,
        "algorithms": [a.label for a in run.algorithms],
        "workloads": [],
        "errors": run.errors,
    }

    for result in run.results:
        fastest = result.fastest()
        data["workloads"].append({
            "size": result.size,
            "fastest": fastest.label if fastest is not None else None,
            "measurements": {
                m.algorithm.label: {
                    "status": m.status.value,
                    "duration": m.duration,
                    "duration_human": human_time(m.duration) if m.duration is not None else None,
                    "verified": m.verified,
                    "error": m.error,
                }
                for m in result.measurements.values()
            },
        })

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
