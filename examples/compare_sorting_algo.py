from __future__ import annotations

import os

from sortscope import run_benchmark, render_table


if __name__ == "__main__":
    os.makedirs("examples/reports", exist_ok=True)
    # the sizes up to one million finish in minutes; larger ones need many GB as Python lists
    results = run_benchmark(
        sizes=[1000, 2000, 4000, 16000, 256000, 1000000],
        seed=42,
        html_out="examples/reports/report.html",
        json_out="examples/reports/report.json",
        title="Sequential vs. Fork-Join Sorting",
    )
    render_table(results)
    print(f"Analysis complete. Report saved to {results.html_path}")
