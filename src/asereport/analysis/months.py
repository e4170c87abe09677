"""
Monthly Window Model (Functional Core)

Pure definitions only.  No I/O.

A ``MonthColumn`` is one calendar month of the observed window.  Months
are ordered and compared by their integer ``ordinal`` (1, 2, 3 ...), never
by their display label: ``"Apr 2023"`` sorts before ``"Jan 2023"``
lexically, which is exactly the mistake the ordinal avoids.

Package Location: src/asereport/analysis/months.py
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Sequence

from .dates import date_to_header


@dataclass(frozen=True, order=True)
class MonthColumn:
    """
    One month of the reporting window.

    Attributes:
        ordinal: Position in the window, starting at 1.  The only field
            used for ordering.
        year: Calendar year.
        month: Calendar month (1-12).
    """

    ordinal: int
    year: int
    month: int

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def label(self) -> str:
        """Display label, e.g. ``'Jan 2023'``.  Render-time only."""
        return self.first_day.strftime('%b %Y')

    @property
    def header(self) -> str:
        """Normalized date header of the month's column, e.g. ``'01-01-2023'``."""
        return date_to_header(self.first_day)


def month_window(year: int, first_month: int = 1, last_month: int = 11) -> List[MonthColumn]:
    """
    Build the ordered month window ``first_month..last_month`` of *year*.

    Args:
        year: Target calendar year.
        first_month: First calendar month (inclusive).
        last_month: Last calendar month (inclusive).

    Returns:
        List of ``MonthColumn`` with ordinals 1..n in calendar order.

    Raises:
        ValueError: If the month bounds are not a valid range within 1-12.
    """
    if not (1 <= first_month <= last_month <= 12):
        raise ValueError(
            f"Invalid month window {first_month}..{last_month}; "
            "expected 1 <= first_month <= last_month <= 12"
        )
    return [
        MonthColumn(ordinal=idx + 1, year=year, month=m)
        for idx, m in enumerate(range(first_month, last_month + 1))
    ]


def ordinals(months: Sequence[MonthColumn]) -> List[int]:
    """Return the ordinals of *months* in calendar order."""
    return [m.ordinal for m in sorted(months)]


def labels(months: Sequence[MonthColumn]) -> List[str]:
    """Return the display labels of *months* in calendar order."""
    return [m.label for m in sorted(months)]
