# src/sortscope/cli.py
from __future__ import annotations

import argparse
from typing import List, Optional

from .algorithms import PARALLEL_THRESHOLD
from .analyze import run_benchmark
from .report import render_table
from .selector import DEFAULT_SIZES, select_algorithms


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortscope",
        description="Benchmark sorting algorithms on random integer workloads of growing size.",
    )
    parser.add_argument('--sizes', type=int, nargs='+', default=None,
                        help='Workload sizes to benchmark (default: every size in the policy table)')
    parser.add_argument('--max-size', type=int, default=None,
                        help='Skip workload sizes above this bound')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for workload generation (default: wall clock)')
    parser.add_argument('--threshold', type=int, default=PARALLEL_THRESHOLD,
                        help='Smallest subproblem parallel merge sort splits into concurrent tasks')
    parser.add_argument('--max-threads', type=int, default=None,
                        help='Cap on concurrent forks in parallel merge sort (default: unbounded)')
    parser.add_argument('--html', default=None, help='Write an HTML report to this path')
    parser.add_argument('--json', default=None, help='Write the results as JSON to this path')
    parser.add_argument('--title', default="Sorting Benchmark", help='Report title')
    parser.add_argument('--quiet', action='store_true', help='Only print the final table')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    sizes = list(args.sizes) if args.sizes else list(DEFAULT_SIZES)
    if args.max_size is not None:
        sizes = [n for n in sizes if n <= args.max_size]
    if any(n < 0 for n in sizes):
        parser.error("workload sizes must be non-negative")
    # sizes the policy table runs nothing for are dropped by run_benchmark
    if not any(select_algorithms(n) for n in sizes):
        parser.error("no workload sizes left to benchmark")
    if args.threshold < 2:
        parser.error("--threshold must be at least 2")
    if args.max_threads is not None and args.max_threads < 1:
        parser.error("--max-threads must be at least 1")

    run = run_benchmark(
        sizes=sizes,
        seed=args.seed,
        threshold=args.threshold,
        max_threads=args.max_threads,
        verbose=not args.quiet,
        html_out=args.html,
        json_out=args.json,
        title=args.title,
    )
    render_table(run)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
