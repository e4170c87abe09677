"""
ASE Monthly Charges Bar Charts (Functional Core)

Pure functions - no file I/O, no side effects.
Input: monthly summary DataFrame (see ``analysis.aggregation.monthly_summary``).
Output: ``plotly.graph_objects.Figure``.

Package Location: src/asereport/plotting/charges.py

Ordering:
    Bars are laid out by month ordinal.  The x-axis is categorical with an
    explicit ``categoryarray`` so plotly never re-sorts the month labels
    alphabetically.

Split Charts:
    ``plot_split_charges`` returns two independent figures (first part of
    the year, rest of the year).  Each has its own y-axis range.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import pandas as pd
import plotly.graph_objects as go

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_REQUIRED = ['month', 'label', 'total_charges']

_BAR_STYLE: Dict[str, str] = {
    'color': 'steelblue',
    'line_color': 'midnightblue',
}

_DEFAULT_TITLE = 'ASE Charges per Month'


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_monthly_charges(summary: pd.DataFrame, title: str = _DEFAULT_TITLE) -> go.Figure:
    """
    Build a bar chart of charges per month with value labels above each bar.

    Args:
        summary: Monthly summary with columns ``[month, label, total_charges]``.
        title: Figure title.

    Returns:
        ``plotly.graph_objects.Figure``.

    Raises:
        ValueError: If *summary* is missing required columns.
    """
    _validate_columns(summary, _REQUIRED)
    ordered = summary.sort_values('month')
    return _bar_figure(ordered, title)


def plot_split_charges(
    summary: pd.DataFrame,
    split_month: int = 6,
    title: str = _DEFAULT_TITLE,
) -> Tuple[go.Figure, go.Figure]:
    """
    Build two bar charts: months up to *split_month*, and the months after.

    The split is on calendar month (``6`` puts January-June in the first
    chart and July onwards in the second).  Either half may be empty when
    the window lies entirely on one side; its figure then has no bars.

    Args:
        summary: Monthly summary with columns ``[month, label, total_charges]``.
        split_month: Last calendar month of the first chart.
        title: Base title; each figure appends its month range.

    Returns:
        Tuple ``(first_half, second_half)`` of figures.
    """
    _validate_columns(summary, _REQUIRED)
    first, second = split_summary(summary, split_month)
    return (
        _bar_figure(first, _range_title(title, first)),
        _bar_figure(second, _range_title(title, second)),
    )


def split_summary(summary: pd.DataFrame, split_month: int = 6) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Split a monthly summary at calendar month *split_month*.

    Args:
        summary: Monthly summary.
        split_month: Last calendar month of the first part.

    Returns:
        ``(first, second)`` DataFrames, each in calendar order.
    """
    ordered = summary.sort_values('month')
    calendar = _calendar_months(ordered)
    mask = calendar <= split_month
    return ordered.loc[mask.to_numpy()], ordered.loc[~mask.to_numpy()]


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _validate_columns(df: pd.DataFrame, required: List[str]) -> None:
    """
    Raise ValueError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: List of column names that must be present.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"summary is missing required columns: {missing}")


def _bar_figure(ordered: pd.DataFrame, title: str) -> go.Figure:
    labels = ordered['label'].tolist()
    values = ordered['total_charges'].astype(int).tolist()

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=labels,
        y=values,
        text=[f'{v:,}' for v in values],
        textposition='outside',
        cliponaxis=False,
        marker=dict(
            color=_BAR_STYLE['color'],
            line=dict(color=_BAR_STYLE['line_color'], width=1),
        ),
        name='Charges',
        hovertemplate='<b>%{x}</b><br>Charges: %{y:,}<extra></extra>',
    ))

    # Headroom for the outside value labels.
    y_max = max(values) if values else 0
    fig.update_layout(
        title=dict(text=title, x=0.5),
        xaxis=dict(
            title='Month',
            type='category',
            categoryorder='array',
            categoryarray=labels,
        ),
        yaxis=dict(
            title='Number of Charges',
            range=[0, y_max * 1.15 if y_max else 1],
        ),
        showlegend=False,
        template='plotly_white',
    )
    return fig


def _calendar_months(ordered: pd.DataFrame) -> pd.Series:
    """Calendar month (1-12) of each summary row, from its month metadata."""
    months = ordered.attrs.get('months')
    if months:
        by_ordinal = {m.ordinal: m.month for m in months}
        return ordered['month'].map(by_ordinal)
    return pd.to_datetime(ordered['label'], format='%b %Y').dt.month


def _range_title(title: str, part: pd.DataFrame) -> str:
    if part.empty:
        return title
    first = part['label'].iloc[0]
    last = part['label'].iloc[-1]
    return f'{title} ({first} – {last})' if first != last else f'{title} ({first})'
