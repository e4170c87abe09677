"""
Column Selection & Row Filtering (Functional Core)

Pure functions only. No I/O, no side effects.
Input/output is DataFrames of raw string cells.

Package Location: src/asereport/analysis/selection.py

Column Rule:
    Only the two identifier columns and one column per month of the
    window survive.  Identifier columns are renamed to ``site_code`` and
    ``location``; month columns are renamed from their normalized date
    header (``'01-01-2023'``) to the month's integer ordinal, so nothing
    downstream can sort months by a display string.

Activity Rule:
    A camera is kept iff at least one month cell in the window holds a
    value other than the "no data" sentinel.  A camera active for a single
    month is retained; one that never reported inside the window is dropped.
"""

from __future__ import annotations

from typing import Dict, Sequence

import pandas as pd

from ..errors import InputError
from .months import MonthColumn, ordinals

SITE_CODE: str = 'site_code'
LOCATION: str = 'location'

DEFAULT_SENTINEL: str = '-'


def select_columns(
    df: pd.DataFrame,
    months: Sequence[MonthColumn],
    site_code_column: str = 'Site Code',
    location_column: str = 'Location*',
) -> pd.DataFrame:
    """
    Keep only the identifier columns and the month-of-interest columns.

    Args:
        df: Table with normalized date headers.
        months: Month window to retain.
        site_code_column: Raw header of the camera identifier column.
        location_column: Raw header of the free-text location column.

    Returns:
        DataFrame with columns ``[site_code, location, 1, 2, ..., n]``
        in calendar order.  Cell values are unchanged.

    Raises:
        InputError: If an identifier or month column is missing.
    """
    ordered = sorted(months)
    rename: Dict[str, object] = {
        site_code_column: SITE_CODE,
        location_column: LOCATION,
    }
    for m in ordered:
        rename[m.header] = m.ordinal

    missing = [col for col in rename if col not in df.columns]
    if missing:
        raise InputError(f"Input table is missing required columns: {missing}")

    result = df.loc[:, list(rename)].rename(columns=rename)
    return result.reset_index(drop=True)


def activity_mask(
    df: pd.DataFrame,
    months: Sequence[MonthColumn],
    sentinel: str = DEFAULT_SENTINEL,
) -> pd.Series:
    """
    Return a boolean Series: ``True`` where a row has any non-sentinel month.

    Args:
        df: Output of ``select_columns``.
        months: Month window.
        sentinel: "No data" marker.

    Returns:
        Boolean Series aligned with *df*'s index.
    """
    cols = ordinals(months)
    if df.empty:
        return pd.Series(False, index=df.index, dtype=bool)
    observed = df[cols].apply(lambda s: s.astype(str).str.strip() != sentinel)
    return observed.any(axis=1)


def drop_inactive(
    df: pd.DataFrame,
    months: Sequence[MonthColumn],
    sentinel: str = DEFAULT_SENTINEL,
) -> pd.DataFrame:
    """
    Drop cameras whose every month cell is the sentinel.

    Args:
        df: Output of ``select_columns``.
        months: Month window.
        sentinel: "No data" marker.

    Returns:
        Filtered copy of *df* with a fresh ``RangeIndex``.
    """
    mask = activity_mask(df, months, sentinel)
    return df.loc[mask].reset_index(drop=True)
