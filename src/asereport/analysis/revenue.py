"""
Fine Revenue Range (Functional Core)

Pure closed-form calculation.  No I/O.

Package Location: src/asereport/analysis/revenue.py

Rate Schedule:
    Speeding fines are charged per km/h over the limit, in brackets:

        1 - 19 km/h over   $5.00 per km/h
        20 - 29 km/h over  $7.50 per km/h
        30 - 49 km/h over  $12.00 per km/h
        50+ km/h over      set by the court (no scheduled rate)

    The schedule is an external reference table, not derived from the
    charge data.  Bracket boundaries are taken as given.

Bounds:
    lower = lowest scheduled rate x lowest km/h over in its bracket x charges
    upper = highest scheduled rate x highest km/h over in its bracket x charges
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple


@dataclass(frozen=True)
class RateBracket:
    """
    One speed-over-limit bracket of the fine schedule.

    Attributes:
        min_over: Lowest km/h over the limit in the bracket (inclusive).
        max_over: Highest km/h over the limit (inclusive), ``None`` if open.
        rate: Dollars per km/h over, ``None`` when set by the court.
    """

    min_over: int
    max_over: Optional[int]
    rate: Optional[Decimal]

    @property
    def scheduled(self) -> bool:
        return self.rate is not None and self.max_over is not None


@dataclass(frozen=True)
class RevenueRange:
    """Lower and upper fine-revenue bounds for a charge count."""

    total_charges: int
    lower: Decimal
    upper: Decimal
    lower_bracket: RateBracket
    upper_bracket: RateBracket

    def as_dict(self) -> dict:
        return {
            'total_charges': self.total_charges,
            'lower': str(self.lower),
            'upper': str(self.upper),
        }


DEFAULT_SCHEDULE: Tuple[RateBracket, ...] = (
    RateBracket(min_over=1,  max_over=19,   rate=Decimal('5.00')),
    RateBracket(min_over=20, max_over=29,   rate=Decimal('7.50')),
    RateBracket(min_over=30, max_over=49,   rate=Decimal('12.00')),
    RateBracket(min_over=50, max_over=None, rate=None),
)


def revenue_range(
    total_charges: int,
    schedule: Tuple[RateBracket, ...] = DEFAULT_SCHEDULE,
) -> RevenueRange:
    """
    Compute the fine-revenue range for *total_charges* charges.

    Court-determined brackets carry no rate and are ignored.

    Args:
        total_charges: Number of charges laid.
        schedule: Rate brackets.

    Returns:
        ``RevenueRange`` with ``Decimal`` bounds.

    Raises:
        ValueError: If *total_charges* is negative or the schedule has no
            scheduled bracket.

    Example:
        >>> r = revenue_range(345908)
        >>> r.lower, r.upper
        (Decimal('1729540.00'), Decimal('203393904.00'))
    """
    if total_charges < 0:
        raise ValueError(f"total_charges must be non-negative, got {total_charges}")

    scheduled = [b for b in schedule if b.scheduled]
    if not scheduled:
        raise ValueError("Rate schedule has no bracket with a scheduled rate")

    low = min(scheduled, key=lambda b: (b.rate, b.min_over))
    high = max(scheduled, key=lambda b: (b.rate, b.max_over))

    return RevenueRange(
        total_charges=total_charges,
        lower=low.rate * low.min_over * total_charges,
        upper=high.rate * high.max_over * total_charges,
        lower_bracket=low,
        upper_bracket=high,
    )


def format_dollars(amount: Decimal) -> str:
    """Format *amount* as ``$1,234,567`` (cents shown only when non-zero)."""
    if amount == amount.to_integral_value():
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"
