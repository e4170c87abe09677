"""Unit tests for the month window model."""

from __future__ import annotations

import pytest

from asereport.analysis.months import MonthColumn, labels, month_window, ordinals


def test_default_window_is_january_to_november() -> None:
    """The window has eleven months with ordinals 1..11."""
    months = month_window(2023)

    assert len(months) == 11
    assert [m.ordinal for m in months] == list(range(1, 12))
    assert months[0].label == "Jan 2023"
    assert months[-1].label == "Nov 2023"


def test_month_header_matches_normalized_date_format() -> None:
    """Month headers use the DD-MM-YYYY form of the first of the month."""
    months = month_window(2023, 3, 4)

    assert [m.header for m in months] == ["01-03-2023", "01-04-2023"]


def test_months_sort_by_ordinal_not_label() -> None:
    """Calendar order survives even where label order would differ."""
    jan = MonthColumn(ordinal=1, year=2023, month=1)
    apr = MonthColumn(ordinal=4, year=2023, month=4)

    assert sorted([apr, jan]) == [jan, apr]
    assert labels([apr, jan]) == ["Jan 2023", "Apr 2023"]
    assert ordinals([apr, jan]) == [1, 4]


def test_invalid_window_raises() -> None:
    """A window running backwards is rejected."""
    with pytest.raises(ValueError):
        month_window(2023, 6, 2)
