# src/sortscope/analyze.py
from __future__ import annotations

import gc
import os
import time
from typing import Callable, Iterable, List, Optional

import numpy as np

from .algorithms import PARALLEL_THRESHOLD, get_sorter
from .io import export_results_json
from .models import BenchmarkRun, Measurement, Status, WorkloadResult
from .report import build_report_html
from .selector import DEFAULT_SIZES, Algorithm, AlgorithmSet, ordered, select_algorithms
from .utils import format_size, human_time, verify_sorted_permutation
from .workload import Workload, generate_workload, make_rng


def _failure(algorithm: Algorithm, e: BaseException) -> Measurement:
    if isinstance(e, MemoryError):
        return Measurement(algorithm, Status.FAILED, error=f"out of memory: {e}")
    if isinstance(e, RecursionError):
        return Measurement(algorithm, Status.FAILED, error=f"recursion limit: {e}")
    return Measurement(algorithm, Status.FAILED, error=f"exception during run: {e!r}")


def benchmark_algorithm(
    algorithm: Algorithm,
    workload: Workload,
    reference: Optional[np.ndarray] = None,
    threshold: int = PARALLEL_THRESHOLD,
    max_threads: Optional[int] = None,
) -> Measurement:
    """
    Time one algorithm on a private copy of the workload, then verify the
    output. A wrong result keeps its duration; an exception while copying or
    sorting yields FAILED. Only the sorter call is timed.
    """
    sorter = get_sorter(algorithm, threshold=threshold, max_threads=max_threads)

    try:
        arr = workload.clone()
        gc.collect()
        gc.enable()
        t0 = time.perf_counter()
        result = sorter(arr)
        duration = time.perf_counter() - t0
    except Exception as e:
        return _failure(algorithm, e)

    try:
        if reference is None:
            reference = workload.reference()
        problem = verify_sorted_permutation(result, reference)
    except Exception as e:
        problem = f"verification failed: {e!r}"
    if problem is not None:
        return Measurement(algorithm, Status.RAN, duration=duration, verified=False, error=problem)
    return Measurement(algorithm, Status.RAN, duration=duration, verified=True)


def benchmark_workload(
    workload: Workload,
    selected: AlgorithmSet,
    universe: Optional[Iterable[Algorithm]] = None,
    threshold: int = PARALLEL_THRESHOLD,
    on_measurement: Optional[Callable[[Measurement], None]] = None,
    max_threads: Optional[int] = None,
) -> WorkloadResult:
    """
    Run every selected algorithm on ``workload``, one after another in
    declaration order. Algorithms of ``universe`` that were not selected are
    recorded as SKIPPED so every result has the same keys.
    """
    universe = ordered(universe if universe is not None else Algorithm)
    result = WorkloadResult(size=workload.size)
    try:
        reference = workload.reference()
    except MemoryError:
        # each algorithm retries while verifying its own output
        reference = None

    for algo in ordered(set(universe) | set(selected)):
        if algo in selected:
            m = benchmark_algorithm(
                algo, workload, reference=reference, threshold=threshold, max_threads=max_threads
            )
            if on_measurement is not None:
                on_measurement(m)
        else:
            m = Measurement.skipped(algo)
        result.measurements[algo] = m
    return result


def _describe(size: int, m: Measurement) -> str:
    if m.status is Status.FAILED:
        return f"{m.algorithm.label} failed for n={format_size(size)}: {m.error}"
    return f"{m.algorithm.label} not sorted for n={format_size(size)}: {m.error}"


def run_benchmark(
    sizes: Optional[List[int]] = None,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    selector: Callable[[int], AlgorithmSet] = select_algorithms,
    threshold: int = PARALLEL_THRESHOLD,
    max_threads: Optional[int] = None,
    verbose: bool = True,
    html_out: Optional[str] = None,
    json_out: Optional[str] = None,
    title: str = "Sorting Benchmark",
) -> BenchmarkRun:
    """
    Benchmark every size in ``sizes`` against the algorithms ``selector``
    picks for it. Sizes with no algorithms are dropped. Workloads and
    algorithms run strictly one after another; only parallel merge sort fans
    out internally.
    """
    if sizes is None:
        sizes = list(DEFAULT_SIZES)
    if not isinstance(sizes, list) or not sizes:
        raise ValueError("sizes must be a non-empty list of integers.")
    for n in sizes:
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 0:
            raise ValueError("All values in sizes must be non-negative integers.")
    sizes = [int(n) for n in sizes]
    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 2:
        raise ValueError("threshold must be an integer >= 2.")
    if max_threads is not None and (
        isinstance(max_threads, bool) or not isinstance(max_threads, int) or max_threads < 1
    ):
        raise ValueError("max_threads must be a positive integer.")
    if rng is not None and seed is not None:
        raise ValueError("pass either seed or rng, not both.")

    if rng is None:
        if seed is None:
            seed = time.time_ns()
        rng = make_rng(seed)

    batches = [(n, selector(n)) for n in sizes]
    batches = [(n, algos) for n, algos in batches if algos]
    universe = ordered(set().union(*(algos for _, algos in batches)))

    if verbose:
        print(f"🔍 Benchmarking {len(universe)} algorithms over {len(batches)} workload sizes...")

    errors: List[str] = []
    results: List[WorkloadResult] = []
    for n, algos in batches:
        if verbose:
            print(f"  n={format_size(n)}: {', '.join(a.label for a in ordered(algos))}")
        workload = generate_workload(n, rng)

        def report_progress(m: Measurement, n=n) -> None:
            if m.error:
                errors.append(_describe(n, m))
                if verbose:
                    print(f"  ⚠️ {errors[-1]}")
            elif verbose:
                print(f"    {m.algorithm.label:<8} {human_time(m.duration)}")

        results.append(
            benchmark_workload(
                workload,
                algos,
                universe=universe,
                threshold=threshold,
                on_measurement=report_progress,
                max_threads=max_threads,
            )
        )
        del workload

    run = BenchmarkRun(
        title=title,
        sizes=[r.size for r in results],
        algorithms=universe,
        results=results,
        errors=errors,
        threshold=threshold,
        seed=seed,
    )

    if html_out:
        run.html_path = os.path.abspath(html_out)
        html = build_report_html(run)
        with open(html_out, "w", encoding="utf-8") as f:
            f.write(html)
    if json_out:
        export_results_json(run, json_out)

    if verbose:
        if html_out:
            print(f"✅ Benchmark complete. Report saved to: {run.html_path}")
        else:
            print("✅ Benchmark complete.")
    return run
