# src/sortscope/plotting.py
from __future__ import annotations

from typing import List, Optional

import numpy as np
import plotly.graph_objects as go

from .models import BenchmarkRun, Measurement
from .utils import format_size, human_time

COLORS = [
    '#4285f4',  # Blue
    '#ea4335',  # Red
    '#34a853',  # Green
    '#fbbc04',  # Yellow
    '#9c27b0',  # Purple
    '#00bcd4',  # Cyan
    '#ff9800',  # Orange
    '#e91e63',  # Pink
    '#795548',  # Brown
]

_FONT = "Inter, sans-serif"


def _duration_or_nan(m: Measurement) -> float:
    if m.ran and m.duration is not None:
        return float(m.duration)
    return float("nan")


def duration_matrix(run: BenchmarkRun) -> np.ndarray:
    """Durations shaped (len(algorithms), len(sizes)); skipped or failed cells are NaN."""
    rows = [[_duration_or_nan(m) for m in cells] for _, cells in run.matrix()]
    return np.array(rows, dtype=float).reshape(len(run.algorithms), len(run.results))


def runtime_figure(run: BenchmarkRun, title: Optional[str] = None) -> go.Figure:
    x = run.sizes
    z = duration_matrix(run)
    fig = go.Figure()

    for i, algo in enumerate(run.algorithms):
        color = COLORS[i % len(COLORS)]
        y: List[Optional[float]] = [None if np.isnan(v) else v for v in z[i]]
        # parallel variants get a dashed line
        dash = "dash" if algo.label.endswith(" p") else "solid"
        fig.add_trace(go.Scatter(
            x=x, y=y, mode="lines+markers", name=algo.label,
            connectgaps=False,
            marker=dict(size=8, color=color, line=dict(width=2, color='white')),
            line=dict(width=3, dash=dash, color=color),
            hovertemplate=f"<b>{algo.label}</b><br>" +
                          "Input size: %{x:,}<br>" +
                          "Time: %{y:.6f}s<br>" +
                          "<extra></extra>"
        ))

    fig.update_layout(
        title=dict(
            text=(title or run.title) + " — Runtime",
            font=dict(size=24, color='#1e293b', family=_FONT),
            x=0.5,
        ),
        xaxis_title="Workload size (n)",
        yaxis_title="Time (seconds)",
        hovermode="x unified",
        template="plotly_white",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0.01,
                    font=dict(size=13, family=_FONT)),
        margin=dict(l=90, r=40, t=110, b=80),
        height=650,
        font=dict(family=_FONT, size=13, color='#374151'),
    )
    fig.update_xaxes(type="log", showgrid=True, gridcolor='rgba(66, 133, 244, 0.1)', showline=True, mirror=True)
    fig.update_yaxes(type="log", showgrid=True, gridcolor='rgba(66, 133, 244, 0.1)', showline=True, mirror=True,
                     tickformat=".1e")
    return fig


def matrix_heatmap(run: BenchmarkRun, log_color: bool = True) -> go.Figure:
    """
    Heatmap of the size-vs-algorithm matrix. Rows are algorithms, columns are
    workload sizes; cells that did not run stay blank.
    """
    z = duration_matrix(run)
    z_for_color = np.where((z <= 0) | ~np.isfinite(z), np.nan, z)
    if log_color:
        z_for_color = np.log10(z_for_color)

    x_labels = [format_size(n) for n in run.sizes]
    y_labels = [a.label for a in run.algorithms]
    text = [[human_time(v) if np.isfinite(v) else "-" for v in row] for row in z]

    heat = go.Heatmap(
        x=x_labels,
        y=y_labels,
        z=z_for_color,
        text=text,
        texttemplate="%{text}",
        colorscale="Viridis",
        colorbar=dict(title="log10(s)" if log_color else "Time (s)"),
        hovertemplate="n=%{x}<br>%{y}: %{text}<extra></extra>",
    )
    fig = go.Figure(data=[heat])
    fig.update_layout(
        title=dict(text=f"{run.title} — Size vs Algorithm", font=dict(size=20, color='#1e293b', family=_FONT), x=0.5),
        xaxis_title="Workload size (n)",
        yaxis_title="Algorithm",
        template="plotly_white",
        height=520,
        margin=dict(l=90, r=40, t=80, b=80),
        font=dict(family=_FONT, size=12, color='#374151'),
    )
    fig.update_yaxes(autorange="reversed")
    return fig
