"""
Exercise Charts
===============

Plotly figures for the dashboard: one line chart per exercise, one trace per
user, plotting the selected metric over time.
"""

from typing import Dict, List

import pandas as pd
import plotly.graph_objects as go

METRIC_LABELS = {
    'maxWeight': 'Max Weight',
    'maxOneRepMax': 'Estimated 1RM',
    'totalVolume': 'Total Volume',
}

# user -> exercise -> list of point dicts, as served by /api/data
StoreData = Dict[str, Dict[str, List[dict]]]


def list_exercises(data: StoreData) -> List[str]:
    """All exercise names present for any user, sorted."""
    names = set()
    for series in data.values():
        names.update(series.keys())
    return sorted(names)


def build_exercise_figure(data: StoreData, exercise: str, metric: str) -> go.Figure:
    """
    Build the line chart of one exercise.

    Args:
        data: JSON view of the store
        exercise: Exercise to plot
        metric: Point key to plot (maxWeight, maxOneRepMax or totalVolume)

    Returns:
        Figure with one trace per user that logged the exercise
    """
    if metric not in METRIC_LABELS:
        raise ValueError(f"Unknown metric: {metric}")

    fig = go.Figure()
    for user, series in sorted(data.items()):
        points = series.get(exercise)
        if not points:
            continue
        df = pd.DataFrame(points)
        fig.add_trace(go.Scatter(
            x=pd.to_datetime(df['timestamp']),
            y=df[metric],
            mode='lines+markers',
            name=user,
        ))

    fig.update_layout(
        title=dict(text=exercise, font=dict(size=22)),
        template='plotly_dark',
        xaxis=dict(type='date', title='Date'),
        yaxis=dict(title=METRIC_LABELS[metric]),
        showlegend=True,
        height=380,
        margin=dict(l=40, r=20, t=60, b=40),
    )

    if not fig.data:
        fig.add_annotation(
            text="No data logged for this exercise",
            xref="paper", yref="paper", x=0.5, y=0.5,
            showarrow=False,
        )

    return fig
