"""
Monthly Value Coercion (Functional Core)

Pure functions only. No I/O, no side effects.

Package Location: src/asereport/analysis/coercion.py

Value Model:
    A monthly cell is either *Observed* (a non-negative charge count) or
    *NotOperating* (the camera did not report that month, written as the
    ``"-"`` sentinel in the source table).  In a DataFrame this is a
    nullable ``Int64`` column: an integer for Observed, ``<NA>`` for
    NotOperating.

    ``parse_counts`` keeps that distinction so activity questions can
    still be answered.  ``fill_not_operating`` collapses NotOperating to 0
    and is only called at the aggregation boundary.  ``coerce_counts``
    does both and is idempotent.
"""

from __future__ import annotations

import re
from typing import Any, Sequence

import pandas as pd
from pandas.api.types import is_integer_dtype

from ..errors import ParseError
from .months import MonthColumn
from .selection import DEFAULT_SENTINEL, SITE_CODE

_COUNT_RE = re.compile(r'[0-9]+')

# Largest count an int64 month column can hold.
_MAX_COUNT = 2**63 - 1


def coerce_value(value: Any, sentinel: str = DEFAULT_SENTINEL) -> int:
    """
    Coerce a single monthly cell to a non-negative integer.

    The sentinel and missing values become 0; digit strings and
    non-negative integers are returned as ``int``.  Applying the function
    to its own output returns the same value.

    Args:
        value: Raw or already-coerced cell.
        sentinel: "No data" marker.

    Returns:
        Non-negative ``int``.

    Raises:
        ParseError: If *value* is neither the sentinel nor a non-negative
            integer that fits in int64.
    """
    if value is None or value is pd.NA:
        return 0
    if isinstance(value, bool):
        raise ParseError(f"Cannot parse {value!r} as a charge count")
    if isinstance(value, int):
        if value < 0:
            raise ParseError(f"Negative charge count {value!r}")
        return value
    text = str(value).strip()
    if text == sentinel:
        return 0
    if _COUNT_RE.fullmatch(text) is None:
        raise ParseError(f"Cannot parse {value!r} as a charge count")
    count = int(text)
    if count > _MAX_COUNT:
        raise ParseError(f"Charge count {value!r} is too large")
    return count


def parse_counts(
    df: pd.DataFrame,
    months: Sequence[MonthColumn],
    sentinel: str = DEFAULT_SENTINEL,
) -> pd.DataFrame:
    """
    Parse month columns into nullable ``Int64`` (sentinel -> ``<NA>``).

    Args:
        df: Selected, filtered table (identifier columns + month ordinals).
        months: Month window.
        sentinel: "No data" marker.

    Returns:
        Copy of *df* whose month columns are ``Int64``.

    Raises:
        ParseError: On the first non-sentinel cell that is not a
            non-negative integer.  The message names the site code, the
            month, and the offending value.
    """
    result = df.copy()
    for m in sorted(months):
        result[m.ordinal] = _parse_column(df, m, sentinel)
    return result


def fill_not_operating(df: pd.DataFrame, months: Sequence[MonthColumn]) -> pd.DataFrame:
    """
    Resolve NotOperating (``<NA>``) month cells to 0.

    Args:
        df: Output of ``parse_counts``.
        months: Month window.

    Returns:
        Copy of *df* whose month columns are ``int64``.
    """
    result = df.copy()
    for m in sorted(months):
        result[m.ordinal] = result[m.ordinal].fillna(0).astype('int64')
    return result


def coerce_counts(
    df: pd.DataFrame,
    months: Sequence[MonthColumn],
    sentinel: str = DEFAULT_SENTINEL,
) -> pd.DataFrame:
    """
    Parse month columns and resolve NotOperating to 0.

    Idempotent: coercing an already-coerced frame returns an equal frame.

    Args:
        df: Selected, filtered table.
        months: Month window.
        sentinel: "No data" marker.

    Returns:
        Copy of *df* whose month columns are non-negative ``int64``.

    Raises:
        ParseError: If a non-sentinel cell is not a non-negative integer.
    """
    return fill_not_operating(parse_counts(df, months, sentinel), months)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _parse_column(df: pd.DataFrame, month: MonthColumn, sentinel: str) -> pd.Series:
    col = df[month.ordinal]

    # Already numeric (e.g. re-coercing a coerced frame): validate only.
    if is_integer_dtype(col.dtype):
        values = col.astype('Int64')
        negative = values.fillna(0) < 0
        if negative.any():
            _raise_bad_cell(df, month, negative, col)
        return values

    text = col.astype(str).str.strip()
    not_operating = col.isna() | (text == sentinel)
    valid = text.str.fullmatch(_COUNT_RE.pattern)
    bad = ~not_operating & ~valid
    if bad.any():
        _raise_bad_cell(df, month, bad, col)

    observed = ~not_operating
    too_large = pd.Series(False, index=col.index)
    too_large[observed] = text[observed].map(int) > _MAX_COUNT
    if too_large.any():
        _raise_bad_cell(df, month, too_large, col)

    values = pd.Series(pd.NA, index=col.index, dtype='Int64')
    if observed.any():
        values[observed] = text[observed].astype('int64')
    return values


def _raise_bad_cell(
    df: pd.DataFrame,
    month: MonthColumn,
    bad: pd.Series,
    col: pd.Series,
) -> None:
    row = bad[bad].index[0]
    site = df.at[row, SITE_CODE] if SITE_CODE in df.columns else row
    raise ParseError(
        f"Row {row} (site {site}), column '{month.label}': "
        f"cannot parse {col.at[row]!r} as a charge count"
    )
