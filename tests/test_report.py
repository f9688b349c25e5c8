from __future__ import annotations

import json

from rich.console import Console

from sortscope import (
    Algorithm,
    BenchmarkRun,
    Measurement,
    Status,
    WorkloadResult,
    build_report_html,
    build_table,
    export_results_json,
    render_table,
)
from sortscope.report import format_cell


def fake_run() -> BenchmarkRun:
    algos = [Algorithm.BUBBLE, Algorithm.MERGE, Algorithm.COUNTING]
    small = WorkloadResult(size=1000, measurements={
        Algorithm.BUBBLE: Measurement(Algorithm.BUBBLE, Status.RAN, duration=0.5, verified=True),
        Algorithm.MERGE: Measurement(Algorithm.MERGE, Status.RAN, duration=0.002, verified=True),
        Algorithm.COUNTING: Measurement(Algorithm.COUNTING, Status.RAN, duration=0.004, verified=False,
                                        error="not sorted"),
    })
    large = WorkloadResult(size=1000000, measurements={
        Algorithm.BUBBLE: Measurement.skipped(Algorithm.BUBBLE),
        Algorithm.MERGE: Measurement(Algorithm.MERGE, Status.RAN, duration=3.25, verified=True),
        Algorithm.COUNTING: Measurement(Algorithm.COUNTING, Status.FAILED, error="out of memory"),
    })
    return BenchmarkRun(
        title="Test Report",
        sizes=[1000, 1000000],
        algorithms=algos,
        results=[small, large],
        errors=["count not sorted for n=1,000: not sorted"],
        seed=3,
    )


def test_format_cell():
    assert format_cell(Measurement.skipped(Algorithm.HEAP)) == "-"
    assert format_cell(Measurement(Algorithm.HEAP, Status.FAILED, error="x")) == "failed"
    assert format_cell(Measurement(Algorithm.HEAP, Status.RAN, duration=0.002, verified=True)) == "2.00 ms"
    assert format_cell(Measurement(Algorithm.HEAP, Status.RAN, duration=0.0, verified=True)) == "0.00 ns"
    assert format_cell(Measurement(Algorithm.HEAP, Status.RAN, duration=2.0, verified=False)) == "2.000 s !"


def test_fastest_per_column():
    run = fake_run()
    assert run.fastest_by_size() == [(1000, Algorithm.MERGE), (1000000, Algorithm.MERGE)]


def test_console_table_marks_fastest():
    run = fake_run()
    table = build_table(run)
    assert [c.header for c in table.columns] == ["algo", "1,000", "1,000,000"]
    assert table.row_count == 3

    console = Console(record=True, width=120, color_system=None)
    render_table(run, console=console)
    text = console.export_text()
    assert "1,000,000" in text
    assert "2.00 ms" in text
    assert "failed" in text
    assert "4.00 ms !" in text
    assert "count not sorted" in text


def test_console_table_highlight_markup():
    run = fake_run()
    merge_cells = build_table(run).columns[1]._cells
    assert merge_cells[1] == "[bold green]2.00 ms[/]"
    assert merge_cells[0] == "500.00 ms"


def test_html_report(tmp_path):
    run = fake_run()
    html = build_report_html(run)
    assert "Runtime Matrix" in html
    assert "Runtime Benchmarks" in html
    assert "1,000,000" in html
    assert 'class="ran fastest"' in html
    assert 'class="skipped"' in html
    assert "count not sorted for n=1,000" in html


def test_html_report_without_figures():
    html = build_report_html(fake_run(), include_figures=False)
    assert "Runtime Benchmarks" not in html


def test_export_json(tmp_path):
    out = tmp_path / "nested" / "run.json"
    export_results_json(fake_run(), out)
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["sizes"] == [1000, 1000000]
    assert data["algorithms"] == ["bubble", "merge", "count"]
    small, large = data["workloads"]
    assert small["fastest"] == "merge"
    assert small["measurements"]["count"]["verified"] is False
    assert large["measurements"]["bubble"] == {
        "status": "skipped", "duration": None, "duration_human": None, "verified": None, "error": None,
    }
    assert large["measurements"]["count"]["status"] == "failed"
