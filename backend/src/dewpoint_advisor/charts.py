"""Plotly rendering of the dew point chart."""

from __future__ import annotations

import plotly.graph_objects as go

from dewpoint_advisor.models import DewPointGrid


def dew_point_figure(grid: DewPointGrid) -> go.Figure:
    """Heatmap of dew point by air temperature (x) and relative humidity (y)."""
    fig = go.Figure(
        data=go.Heatmap(
            x=list(grid.temperatures),
            y=list(grid.humidities),
            z=[list(row) for row in grid.grid],
            text=[[f"{v:.1f}" for v in row] for row in grid.grid],
            texttemplate="%{text}",
            colorscale="Blues",
            colorbar=dict(title="Dew point (°C)"),
            hovertemplate="T %{x}°C, RH %{y}%<br>Dew point %{z}°C<extra></extra>",
        )
    )
    fig.update_layout(
        title="Dew point chart",
        xaxis_title="Air temperature (°C)",
        yaxis_title="Relative humidity (%)",
    )
    return fig
