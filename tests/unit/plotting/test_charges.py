"""Unit tests for the monthly charge bar charts."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import pytest

from asereport.analysis.aggregation import monthly_summary
from asereport.analysis.months import month_window
from asereport.plotting.charges import (
    plot_monthly_charges,
    plot_split_charges,
    split_summary,
)

MONTHS = month_window(2023, 1, 11)


def _summary() -> pd.DataFrame:
    clean = pd.DataFrame({"site_code": ["A"], "location": ["a"]})
    for m in MONTHS:
        clean[m.ordinal] = [m.ordinal * 100]
    return monthly_summary(clean, MONTHS)


def test_monthly_chart_bars_are_in_calendar_order_with_labels() -> None:
    """x follows month ordinal and each bar carries its value as text."""
    fig = plot_monthly_charges(_summary())

    bar = fig.data[0]
    assert isinstance(fig, go.Figure)
    assert list(bar.x) == [m.label for m in MONTHS]
    assert list(bar.y) == [m.ordinal * 100 for m in MONTHS]
    assert bar.text[0] == "100"
    assert bar.text[-1] == "1,100"
    assert bar.textposition == "outside"
    assert list(fig.layout.xaxis.categoryarray) == [m.label for m in MONTHS]


def test_monthly_chart_reorders_shuffled_summary() -> None:
    """A summary passed out of order is still drawn in calendar order."""
    shuffled = _summary().iloc[::-1]

    fig = plot_monthly_charges(shuffled)

    assert fig.data[0].x[0] == "Jan 2023"


def test_split_charts_cover_jan_jun_and_jul_nov() -> None:
    """The two split charts partition the window at June."""
    first, second = plot_split_charges(_summary(), split_month=6)

    assert list(first.data[0].x) == ["Jan 2023", "Feb 2023", "Mar 2023", "Apr 2023", "May 2023", "Jun 2023"]
    assert list(second.data[0].x) == ["Jul 2023", "Aug 2023", "Sep 2023", "Oct 2023", "Nov 2023"]
    assert "Jan 2023" in first.layout.title.text
    assert "Nov 2023" in second.layout.title.text


def test_split_charts_are_scaled_independently() -> None:
    """Each half sets its own y-axis range from its own maximum."""
    first, second = plot_split_charges(_summary(), split_month=6)

    assert first.layout.yaxis.range[1] == pytest.approx(600 * 1.15)
    assert second.layout.yaxis.range[1] == pytest.approx(1100 * 1.15)


def test_split_summary_works_without_month_metadata() -> None:
    """Hand-built summaries split on the calendar month of their label."""
    summary = pd.DataFrame({
        "month": [1, 2],
        "label": ["Jun 2023", "Jul 2023"],
        "total_charges": [1, 2],
    })

    first, second = split_summary(summary, 6)

    assert first["label"].tolist() == ["Jun 2023"]
    assert second["label"].tolist() == ["Jul 2023"]


def test_chart_does_not_mutate_summary() -> None:
    summary = _summary()
    before = summary.copy()

    plot_monthly_charges(summary)
    plot_split_charges(summary)

    pd.testing.assert_frame_equal(summary, before)


def test_chart_rejects_summary_without_totals() -> None:
    with pytest.raises(ValueError, match="total_charges"):
        plot_monthly_charges(pd.DataFrame({"month": [1], "label": ["Jan 2023"]}))
