from .algorithms import (
    COUNTING_MAX_BUCKETS,
    PARALLEL_THRESHOLD,
    SORTERS,
    RangeTooLargeError,
    baseline_sort,
    bubble_sort,
    counting_sort,
    get_sorter,
    heap_sort,
    insertion_sort,
    merge_sort,
    merge_sort_parallel,
    quick_sort,
    selection_sort,
)
from .analyze import benchmark_algorithm, benchmark_workload, run_benchmark
from .io import export_results_json
from .models import BenchmarkRun, Measurement, Status, WorkloadResult
from .parallel import fork_join
from .report import build_report_html, build_table, render_table
from .selector import DEFAULT_SIZES, SIZE_POLICY, Algorithm, select_algorithms
from .workload import RANDOM_BOUND, Workload, generate_workload, make_rng

__all__ = [
    "Algorithm",
    "BenchmarkRun",
    "COUNTING_MAX_BUCKETS",
    "DEFAULT_SIZES",
    "Measurement",
    "PARALLEL_THRESHOLD",
    "RANDOM_BOUND",
    "RangeTooLargeError",
    "SIZE_POLICY",
    "SORTERS",
    "Status",
    "Workload",
    "WorkloadResult",
    "baseline_sort",
    "benchmark_algorithm",
    "benchmark_workload",
    "bubble_sort",
    "build_report_html",
    "build_table",
    "counting_sort",
    "export_results_json",
    "fork_join",
    "generate_workload",
    "get_sorter",
    "heap_sort",
    "insertion_sort",
    "make_rng",
    "merge_sort",
    "merge_sort_parallel",
    "quick_sort",
    "render_table",
    "run_benchmark",
    "select_algorithms",
    "selection_sort",
]
