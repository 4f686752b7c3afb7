"""Time-series plot with highlighted duplicate windows.

The whole series is drawn as a line keyed by index and value. Showing one
duplicate group is enough to illustrate the repeats, so only the first group
gets shaded: one rectangle per occurrence, from its start index to its end
index across the full value range of the series.
"""

from __future__ import annotations
import os
from typing import Any, Callable, Sequence, TypeVar

import plotly.graph_objects as go

from ..fingerprints import Occurrence
from ..fingerprints.projections import point_index, point_value

T = TypeVar("T")


def build_figure(
    series_name: str,
    data: Sequence[T],
    duplicates: Sequence[Sequence[Occurrence]],
    get_value: Callable[[T], float] = point_value,
    get_index: Callable[[T], Any] = point_index,
) -> go.Figure:
    if not data:
        raise ValueError(f"Cannot plot '{series_name}': series is empty")

    xs = [get_index(d) for d in data]
    ys = [get_value(d) for d in data]
    min_value, max_value = min(ys), max(ys)

    fig = go.Figure(go.Scatter(
        x=xs,
        y=ys,
        mode="lines",
        name=series_name,
        line=dict(color="blue"),
    ))

    if duplicates:
        for occurrence in duplicates[0]:
            fig.add_shape(
                type="rect",
                x0=occurrence.start_index,
                x1=occurrence.end_index,
                y0=min_value,
                y1=max_value,
                fillcolor="red",
                opacity=0.5,
                line_width=0,
                layer="above",
            )

    fig.update_layout(
        title=dict(text=series_name, font=dict(size=32)),
        width=1280,
        height=720,
        margin=dict(l=30, r=5, t=60, b=30),
        paper_bgcolor="white",
        plot_bgcolor="white",
        showlegend=True,
        legend=dict(bgcolor="rgba(255,255,255,0.8)", bordercolor="black", borderwidth=1),
        yaxis=dict(range=[min_value, max_value]),
    )
    fig.update_xaxes(showgrid=True, gridcolor="lightgray")
    fig.update_yaxes(showgrid=True, gridcolor="lightgray")
    return fig


def plot_timeseries(
    output_file: str,
    series_name: str,
    data: Sequence[T],
    duplicates: Sequence[Sequence[Occurrence]],
    get_value: Callable[[T], float] = point_value,
    get_index: Callable[[T], Any] = point_index,
) -> str:
    """Render the series to `output_file` (.html, or .svg/.png via kaleido)."""
    fig = build_figure(series_name, data, duplicates, get_value=get_value, get_index=get_index)
    os.makedirs(os.path.dirname(output_file) or ".", exist_ok=True)
    if output_file.lower().endswith(".html"):
        fig.write_html(output_file, include_plotlyjs=True)
    else:
        fig.write_image(output_file)
    return output_file
