"""
ASE Charge Aggregations (Functional Core)

Pure functions only. No I/O, no SQL, no side effects.
Input/output is DataFrames and plain dataclasses.

Provides per-camera totals, per-month totals, the grand total, mean and
sample standard deviation across months, and the highest/lowest month
rankings.

Package Location: src/asereport/analysis/aggregation.py

Totals Rule:
    All sums are integer sums, so the grand total is identical whether it
    is computed from the per-month totals or from the per-camera totals,
    in any row or column order.  ``validate_totals`` checks exactly that.

Ranking Rule:
    Months are ranked by ``total_charges``; ties are broken by calendar
    order (earlier month first) in both the highest and lowest lists.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Sequence, Tuple

import numpy as np
import pandas as pd

from .months import MonthColumn, labels, ordinals
from .selection import LOCATION, SITE_CODE

TOTAL: str = 'total'

_SUMMARY_COLUMNS = ['month', 'label', 'total_charges']


@dataclass(frozen=True)
class AggregateStatistics:
    """
    Statistics derived from the monthly summary.

    Attributes:
        grand_total: Sum of all per-month totals.
        mean: ``grand_total / n_months``.
        std_dev: Sample standard deviation (n-1 divisor) of the per-month
            totals; ``nan`` when the window has a single month.
        n_months: Number of months in the window.
        highest: Months with the largest totals, best first.
        lowest: Months with the smallest totals, lowest first.
    """

    grand_total: int
    mean: float
    std_dev: float
    n_months: int
    highest: Tuple[MonthColumn, ...]
    lowest: Tuple[MonthColumn, ...]

    def as_dict(self) -> dict:
        return {
            'grand_total': self.grand_total,
            'mean': self.mean,
            'std_dev': self.std_dev,
            'n_months': self.n_months,
            'highest': [m.label for m in self.highest],
            'lowest': [m.label for m in self.lowest],
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def with_totals(clean: pd.DataFrame, months: Sequence[MonthColumn]) -> pd.DataFrame:
    """
    Return a copy of *clean* with ``total`` recomputed from the month columns.

    Any existing ``total`` column is discarded first.

    Args:
        clean: Coerced records (integer month columns).
        months: Month window.

    Returns:
        DataFrame with an ``int64`` ``total`` column appended.
    """
    cols = ordinals(months)
    result = clean.drop(columns=[TOTAL], errors='ignore').copy()
    if result.empty:
        result[TOTAL] = pd.Series(dtype='int64')
        return result
    result[TOTAL] = result[cols].sum(axis=1).astype('int64')
    return result


def monthly_summary(clean: pd.DataFrame, months: Sequence[MonthColumn]) -> pd.DataFrame:
    """
    Sum each month column across all cameras.

    Args:
        clean: Coerced records.
        months: Month window.

    Returns:
        DataFrame indexed by month ordinal with columns
        ``[month, label, total_charges]`` in calendar order.  Months with
        no cameras sum to 0.
    """
    ordered = sorted(months)
    totals = [int(clean[m.ordinal].sum()) if not clean.empty else 0 for m in ordered]

    summary = pd.DataFrame({
        'month': ordinals(ordered),
        'label': labels(ordered),
        'total_charges': np.asarray(totals, dtype='int64'),
    })
    summary.index = pd.Index(summary['month'].tolist(), name='ordinal')
    summary = summary[_SUMMARY_COLUMNS]
    summary.attrs['months'] = tuple(ordered)
    return summary


def grand_total(summary: pd.DataFrame) -> int:
    """Return the exact integer sum of ``total_charges``."""
    return int(sum(int(v) for v in summary['total_charges']))


def rank_months(summary: pd.DataFrame, n: int = 3, highest: bool = True) -> List[MonthColumn]:
    """
    Rank months by total charges with calendar-order tie-breaking.

    Args:
        summary: Output of ``monthly_summary``.
        n: Number of months to return (fewer if the window is shorter).
        highest: ``True`` for largest totals first, ``False`` for smallest.

    Returns:
        List of ``MonthColumn``.

    Example:
        Totals ``{Jan: 100, Feb: 100, Mar: 50}`` rank highest as
        ``[Jan, Feb, Mar]`` and lowest as ``[Mar, Jan, Feb]``.
    """
    ranked = summary.sort_values(
        ['total_charges', 'month'],
        ascending=[not highest, True],
        kind='mergesort',
    )
    by_ordinal = {m.ordinal: m for m in _summary_months(summary)}
    return [by_ordinal[int(o)] for o in ranked['month'].head(n)]


def aggregate_statistics(summary: pd.DataFrame, ranking_size: int = 3) -> AggregateStatistics:
    """
    Compute grand total, mean, sample standard deviation and rankings.

    Args:
        summary: Output of ``monthly_summary``.
        ranking_size: Length of the highest/lowest month lists.

    Returns:
        ``AggregateStatistics``.

    Raises:
        ValueError: If *summary* has no months.
    """
    n_months = len(summary)
    if n_months == 0:
        raise ValueError("Cannot compute statistics over an empty month window")

    total = grand_total(summary)
    values = summary['total_charges'].astype('float64')
    std_dev = float(values.std(ddof=1)) if n_months > 1 else float('nan')

    return AggregateStatistics(
        grand_total=total,
        mean=total / n_months,
        std_dev=std_dev,
        n_months=n_months,
        highest=tuple(rank_months(summary, ranking_size, highest=True)),
        lowest=tuple(rank_months(summary, ranking_size, highest=False)),
    )


def validate_totals(clean: pd.DataFrame, summary: pd.DataFrame) -> bool:
    """
    Check that the grand total agrees with the per-month and per-row sums.

    Args:
        clean: Records with a ``total`` column (see ``with_totals``).
        summary: Output of ``monthly_summary``.

    Returns:
        ``True`` when ``grand_total == sum(month totals) == sum(row totals)``.
    """
    by_month = grand_total(summary)
    by_row = int(sum(int(v) for v in clean[TOTAL])) if TOTAL in clean.columns else 0
    cols = ordinals(_summary_months(summary))
    by_cell = int(sum(int(clean[o].sum()) for o in cols)) if not clean.empty else 0
    return by_month == by_row == by_cell


def top_sites(clean: pd.DataFrame, n: int = 10) -> pd.DataFrame:
    """
    Return the *n* cameras with the most charges over the window.

    Ties are broken by ascending site code.

    Args:
        clean: Records with a ``total`` column.
        n: Number of cameras.

    Returns:
        DataFrame with columns ``[site_code, location, total]``.
    """
    cols = [SITE_CODE, LOCATION, TOTAL]
    if clean.empty:
        return pd.DataFrame(columns=cols)
    ranked = clean.sort_values([TOTAL, SITE_CODE], ascending=[False, True], kind='mergesort')
    return ranked.loc[:, cols].head(n).reset_index(drop=True)


def active_months(parsed: pd.DataFrame, months: Sequence[MonthColumn]) -> pd.Series:
    """
    Count the months each camera actually reported (Observed, not NotOperating).

    Args:
        parsed: Output of ``parse_counts`` (nullable month columns).
        months: Month window.

    Returns:
        Integer Series indexed like *parsed*.
    """
    cols = ordinals(months)
    if parsed.empty:
        return pd.Series(dtype='int64')
    return parsed[cols].notna().sum(axis=1).astype('int64')


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _summary_months(summary: pd.DataFrame) -> Tuple[MonthColumn, ...]:
    months = summary.attrs.get('months')
    if months is not None:
        return tuple(months)
    # Frames built by hand: rebuild from ordinal + label.
    result = []
    for ordinal, label in zip(summary['month'], summary['label']):
        first = datetime.strptime(label, '%b %Y')
        result.append(MonthColumn(ordinal=int(ordinal), year=first.year, month=first.month))
    return tuple(result)
