# src/sortscope/report.py
from __future__ import annotations

import importlib.resources as pkg_resources
from typing import Any, Dict, List, Optional

import plotly.io as pio
from jinja2 import BaseLoader, Environment
from markupsafe import Markup
from rich import box
from rich.console import Console
from rich.table import Table

from .models import BenchmarkRun, Measurement, Status
from .selector import Algorithm
from .plotting import matrix_heatmap, runtime_figure
from .utils import format_size, human_time

FASTEST_STYLE = "bold green"


def load_template_text() -> str:
    tmpl = pkg_resources.files("sortscope").joinpath("templates/report.html.j2")
    return tmpl.read_text(encoding="utf-8")


def format_cell(m: Measurement) -> str:
    if m.status is Status.SKIPPED:
        return "-"
    if m.status is Status.FAILED:
        return "failed"
    text = human_time(m.duration)
    if m.verified is False:
        text += " !"
    return text


def _fastest_cells(run: BenchmarkRun) -> List[Optional[Algorithm]]:
    return [r.fastest() for r in run.results]


# ----------------------
# Console
# ----------------------
def build_table(run: BenchmarkRun, highlight: bool = True) -> Table:
    """
    Size-vs-algorithm matrix: one column per workload size, one row per
    algorithm. The fastest measured cell in each column is styled.
    """
    t = Table(title=run.title or None, box=box.SIMPLE, show_edge=False, pad_edge=True)
    t.add_column("algo", justify="left", style="bold")
    for n in run.sizes:
        t.add_column(format_size(n), justify="right")

    fastest = _fastest_cells(run)
    for algo, cells in run.matrix():
        row = []
        for col, m in enumerate(cells):
            text = format_cell(m)
            if highlight and fastest[col] is algo:
                text = f"[{FASTEST_STYLE}]{text}[/]"
            row.append(text)
        t.add_row(algo.label, *row)
    return t


def render_table(run: BenchmarkRun, console: Optional[Console] = None, highlight: bool = True) -> None:
    con = console or Console()
    con.print(build_table(run, highlight=highlight))
    if run.errors:
        con.print(f"[yellow]{len(run.errors)} diagnostic(s):[/]")
        for e in run.errors:
            con.print(f"  - {e}", markup=False)


# ----------------------
# HTML
# ----------------------
def _table_rows(run: BenchmarkRun) -> List[Dict[str, Any]]:
    fastest = _fastest_cells(run)
    rows = []
    for algo, cells in run.matrix():
        rows.append({
            "label": algo.label,
            "cells": [
                {
                    "text": format_cell(m),
                    "status": m.status.value,
                    "fastest": fastest[col] is algo,
                    "error": m.error or "",
                }
                for col, m in enumerate(cells)
            ],
        })
    return rows


def build_report_html(run: BenchmarkRun, include_figures: bool = True) -> str:
    """
    Render the HTML report: the matrix table with the fastest cell per size
    marked, the runtime chart, the heatmap, and any diagnostics.
    """
    env = Environment(loader=BaseLoader(), autoescape=True)
    env.filters["human_time"] = human_time
    env.filters["format_size"] = format_size

    tpl = env.from_string(load_template_text())

    runtime_div = ""
    heatmap_div = ""
    if include_figures and run.results:
        # template loads plotly.js from the CDN
        runtime_div = pio.to_html(runtime_figure(run), include_plotlyjs=False, full_html=False)
        heatmap_div = pio.to_html(matrix_heatmap(run), include_plotlyjs=False, full_html=False)

    return tpl.render(
        title=run.title,
        sizes=run.sizes,
        rows=_table_rows(run),
        fastest=[(r.size, a.label if a is not None else "N/A") for r, a in zip(run.results, _fastest_cells(run))],
        runtime_div=Markup(runtime_div),
        heatmap_div=Markup(heatmap_div),
        errors=run.errors,
        threshold=run.threshold,
        seed=run.seed,
        html_path=run.html_path,
    )
