"""
analysis.py — Fish Detection Analytics Presentation
---------------------------------------------------

This module shapes aggregated detection data into what the analytics page shows:

✅ Summary cards (total detections, unique fish types, most common fish, most active time and user)
✅ Fish type distribution pie chart
✅ Detections-by-user and detections-by-time-of-day bar charts
✅ Flat raw-data table of every detection

Uses:
- core.aggregate for the frequency maps and summary figures
- Plotly for charts
- Pandas for the raw-data table

Callers check `result.has_data` before using anything here.

Project: Glaucus Fish Identification
"""

from datetime import datetime

import pandas as pd
import plotly.graph_objects as go

from config.settings import ANONYMOUS_SUBMITTER, UNKNOWN_LABEL
from core.dayparts import DayPart
from core.labels import extract_label


COLORS = [
    '#3b82f6', '#10b981', '#f59e0b', '#ef4444', '#8b5cf6',
    '#ec4899', '#14b8a6', '#f43f5e', '#a855f7', '#84cc16'
]
USER_BAR_COLOR = '#3b82f6'
TIME_BAR_COLOR = '#10b981'


def palette(n):
    return [COLORS[i % len(COLORS)] for i in range(n)]


def no_signal(result):
    """True when no record produced a usable species label."""
    return result.has_data and set(result.label_counts) == {UNKNOWN_LABEL}


def summary_cards(result):
    """
    Title, value, and icon for each summary card.
    """
    return [
        ("Total Detections", result.total, "📊"),
        ("Unique Fish Types", result.distinct_labels, "🐟"),
        ("Most Common Fish", result.top_label, "🏆"),
        ("Most Active Time", result.top_daypart.display_name, "⏰"),
        ("Most Active User", result.top_submitter, "👤"),
    ]


def _layout(fig, height):
    fig.update_layout(
        height=height,
        margin=dict(l=40, r=40, t=40, b=40),
        legend=dict(orientation="h", yanchor="top", y=-0.1),
        font=dict(color="#374151", size=14),
    )
    return fig


def type_chart(result):
    """Pie chart of detections per fish type."""
    labels = list(result.label_counts)
    fig = go.Figure(go.Pie(
        labels=labels,
        values=list(result.label_counts.values()),
        marker=dict(colors=palette(len(labels)), line=dict(color="#ffffff", width=2)),
        sort=False,
    ))
    return _layout(fig, 500)


def user_chart(result):
    """Horizontal bar chart of detections per submitter."""
    fig = go.Figure(go.Bar(
        x=list(result.submitter_counts.values()),
        y=list(result.submitter_counts),
        orientation="h",
        name="Detections by User",
        marker=dict(color=USER_BAR_COLOR, line=dict(color="#ffffff", width=1)),
    ))
    return _layout(fig, 350)


def time_chart(result):
    """Bar chart of detections per day-part, in canonical order."""
    parts = list(DayPart)
    fig = go.Figure(go.Bar(
        x=[part.display_name for part in parts],
        y=[result.daypart_counts[part] for part in parts],
        name="Detections by Time",
        marker=dict(color=TIME_BAR_COLOR, line=dict(color="#ffffff", width=1)),
    ))
    fig.update_yaxes(rangemode="tozero", tickformat=",d")
    return _layout(fig, 350)


def detection_table(records):
    """
    One row per detection: submitter, extracted fish type, local time.
    """
    rows = []
    for record in records:
        if record.captured_at is not None:
            when = datetime.fromtimestamp(record.captured_at).strftime("%Y-%m-%d %H:%M:%S")
        else:
            when = UNKNOWN_LABEL
        rows.append({
            "User": record.submitter_id or ANONYMOUS_SUBMITTER,
            "Fish Type": extract_label(record.result_text),
            "Time": when,
        })
    return pd.DataFrame(rows, columns=["User", "Fish Type", "Time"])
