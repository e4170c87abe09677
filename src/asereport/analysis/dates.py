"""
Serial-Date Header Normalizer (Functional Core)

This module converts spreadsheet serial-date column headers into
calendar-date strings.  It follows the "Functional Core" pattern - pure
transformations with no I/O.

Package Location: src/asereport/analysis/dates.py

Day-Count Convention:
    The source table was exported from a spreadsheet, so each monthly
    column header is a day count from 30 December 1899 (``"44927"`` is
    1 January 2023).  Headers made only of ASCII digits are converted to
    ``DD-MM-YYYY``; every other header passes through unchanged, which
    makes normalization idempotent.

Range Guard:
    Day counts landing outside ``[MIN_DATE, MAX_DATE]`` are rejected with
    ``DateConversionError`` rather than converted into a nonsensical date.
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Dict

import pandas as pd

from ..errors import DateConversionError

EXCEL_EPOCH: date = date(1899, 12, 30)

MIN_DATE: date = date(1900, 1, 1)
MAX_DATE: date = date(2100, 12, 31)

HEADER_FORMAT: str = '%d-%m-%Y'

_SERIAL_RE = re.compile(r'[0-9]+')


def is_serial_header(header: object) -> bool:
    """Return ``True`` when *header* is a non-empty string of ASCII digits."""
    return isinstance(header, str) and _SERIAL_RE.fullmatch(header) is not None


def serial_to_date(days: int) -> date:
    """
    Convert a spreadsheet day count to a calendar date.

    Args:
        days: Day offset from ``EXCEL_EPOCH``.

    Returns:
        The corresponding ``datetime.date``.

    Raises:
        DateConversionError: If the date falls outside ``[MIN_DATE, MAX_DATE]``.
    """
    min_days = (MIN_DATE - EXCEL_EPOCH).days
    max_days = (MAX_DATE - EXCEL_EPOCH).days
    if not (min_days <= days <= max_days):
        raise DateConversionError(
            f"Day offset {days} is outside the supported range "
            f"{MIN_DATE.isoformat()}..{MAX_DATE.isoformat()}"
        )
    return EXCEL_EPOCH + timedelta(days=days)


def date_to_header(value: date) -> str:
    """Format a date as a normalized ``DD-MM-YYYY`` header."""
    return value.strftime(HEADER_FORMAT)


def normalize_header(header: str) -> str:
    """
    Rewrite a serial-date header as ``DD-MM-YYYY``; pass other headers through.

    Args:
        header: Raw column header.

    Returns:
        Normalized header string.

    Raises:
        DateConversionError: If a numeric header is outside the supported range.

    Example:
        >>> normalize_header('44927')
        '01-01-2023'
        >>> normalize_header('Site Code')
        'Site Code'
    """
    if not is_serial_header(header):
        return header
    try:
        return date_to_header(serial_to_date(int(header)))
    except DateConversionError as exc:
        raise DateConversionError(f"Column header '{header}': {exc}") from exc


def normalize_headers(df: pd.DataFrame) -> pd.DataFrame:
    """
    Return a copy of *df* with every serial-date header normalized.

    Cell values are untouched.

    Args:
        df: Raw wide-format table.

    Returns:
        DataFrame with renamed columns.

    Raises:
        DateConversionError: If a numeric header is out of range, or if two
            headers normalize to the same label.
    """
    mapping: Dict[str, str] = {}
    seen: Dict[str, str] = {}
    for col in df.columns:
        new = normalize_header(col)
        if new in seen:
            raise DateConversionError(
                f"Column headers '{seen[new]}' and '{col}' both normalize to '{new}'"
            )
        seen[new] = col
        mapping[col] = new

    return df.rename(columns=mapping)
