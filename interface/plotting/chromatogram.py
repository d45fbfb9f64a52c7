# interface/plotting/chromatogram.py

from typing import Optional

import numpy as np
import plotly.graph_objects as go

from readset_pipeline.models.chromatogram import AbiTrace, DecodedChromatogram

COLOR_MAP = {
    "A": "green",
    "C": "blue",
    "G": "black",
    "T": "red",
}


def make_chromatogram_figure(trace: AbiTrace, decoded: Optional[DecodedChromatogram] = None) -> go.Figure:
    fig = go.Figure()
    scans = np.arange(trace.n_scans)

    for base, signal in trace.channels.items():
        fig.add_trace(go.Scatter(
            x=scans[:len(signal)], y=signal,
            mode="lines", name=base,
            line=dict(color=COLOR_MAP.get(base, "gray"), width=1),
            hoverinfo="skip",
        ))

    if decoded is not None and trace.n_calls:
        locs = trace.peak_locations
        start, finish = decoded.summary.trim_window
        if start > 0:
            fig.add_vrect(
                x0=locs[start - 1], x1=locs[finish - 1],
                fillcolor="lightgray", opacity=0.25, layer="below", line_width=0,
            )

        positions = [p for p in decoded.secondary_peak_positions if p <= len(locs)]
        if positions:
            y_top = max((float(np.max(s)) for s in trace.channels.values() if len(s)), default=0.0)
            fig.add_trace(go.Scatter(
                x=[locs[p - 1] for p in positions],
                y=[y_top * 1.05] * len(positions),
                mode="markers",
                name="Secondary peaks",
                marker=dict(color="orange", symbol="triangle-down", size=8),
                text=[f"{decoded.primary_seq[p - 1]}/{decoded.secondary_seq[p - 1]} at {p}" for p in positions],
                hovertemplate="%{text}<extra></extra>",
            ))

    fig.update_layout(
        title="Chromatogram",
        xaxis_title="Scan",
        yaxis_title="Signal",
        margin=dict(t=30, b=30),
        height=400,
        legend_title="Bases",
        dragmode="zoom",
    )
    return fig
