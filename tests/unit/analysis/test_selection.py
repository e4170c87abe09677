"""Unit tests for column selection and inactive-camera filtering."""

from __future__ import annotations

import pandas as pd
import pytest

from asereport.analysis.months import month_window
from asereport.analysis.selection import activity_mask, drop_inactive, select_columns
from asereport.errors import InputError

MONTHS = month_window(2023, 1, 3)


def _normalized_frame() -> pd.DataFrame:
    return pd.DataFrame({
        "Site Code": ["A", "B", "C"],
        "Location*": ["Main St", "King St", "Queen St"],
        "Ward": ["1", "2", "3"],
        "01-12-2022": ["4", "-", "-"],
        "01-03-2023": ["-", "7", "-"],
        "01-01-2023": ["3", "-", "-"],
        "01-02-2023": ["-", "-", "-"],
        "01-12-2023": ["-", "-", "9"],
    })


def test_select_columns_keeps_identifiers_and_window_in_calendar_order() -> None:
    """Other columns and out-of-window months are discarded."""
    selected = select_columns(_normalized_frame(), MONTHS)

    assert selected.columns.tolist() == ["site_code", "location", 1, 2, 3]
    assert selected[1].tolist() == ["3", "-", "-"]
    assert selected[3].tolist() == ["-", "7", "-"]


def test_select_columns_raises_for_missing_month() -> None:
    """A month of the window absent from the table is an input error."""
    frame = _normalized_frame().drop(columns=["01-02-2023"])

    with pytest.raises(InputError, match="01-02-2023"):
        select_columns(frame, MONTHS)


def test_select_columns_raises_for_missing_identifier() -> None:
    """The site code column is required."""
    frame = _normalized_frame().drop(columns=["Site Code"])

    with pytest.raises(InputError, match="Site Code"):
        select_columns(frame, MONTHS)


def test_drop_inactive_keeps_cameras_with_any_observed_month() -> None:
    """A camera active for a single month is kept; one never active is dropped."""
    selected = select_columns(_normalized_frame(), MONTHS)

    kept = drop_inactive(selected, MONTHS)

    assert kept["site_code"].tolist() == ["A", "B"]
    assert kept.index.tolist() == [0, 1]


def test_activity_mask_ignores_surrounding_whitespace() -> None:
    """A padded sentinel still counts as no data."""
    selected = pd.DataFrame({
        "site_code": ["A", "B"],
        "location": ["x", "y"],
        1: [" - ", "0"],
        2: ["-", "-"],
        3: ["-", "-"],
    })

    assert activity_mask(selected, MONTHS).tolist() == [False, True]


def test_activity_mask_honours_custom_sentinel() -> None:
    """The sentinel is configurable."""
    selected = pd.DataFrame({
        "site_code": ["A"],
        "location": ["x"],
        1: ["n/a"],
        2: ["n/a"],
        3: ["n/a"],
    })

    assert activity_mask(selected, MONTHS, sentinel="n/a").tolist() == [False]
