"""
ASE Report Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept data structures (DataFrames, dataclasses, etc.) and
return transformed data.

Modules:
- months:      Month window model (ordinal-ordered MonthColumn)
- dates:       Serial-date header normalization
- selection:   Column selection and inactive-camera filtering
- coercion:    Sentinel-aware count parsing
- aggregation: Totals, statistics, rankings
- revenue:     Fine-revenue range from the rate schedule
"""

from .months import (
    MonthColumn,
    month_window,
)

from .dates import (
    EXCEL_EPOCH,
    normalize_header,
    normalize_headers,
    serial_to_date,
)

from .selection import (
    activity_mask,
    drop_inactive,
    select_columns,
)

from .coercion import (
    coerce_counts,
    coerce_value,
    fill_not_operating,
    parse_counts,
)

from .aggregation import (
    AggregateStatistics,
    active_months,
    aggregate_statistics,
    grand_total,
    monthly_summary,
    rank_months,
    top_sites,
    validate_totals,
    with_totals,
)

from .revenue import (
    DEFAULT_SCHEDULE,
    RateBracket,
    RevenueRange,
    revenue_range,
)

__all__ = [
    # Months
    'MonthColumn',
    'month_window',
    # Dates
    'EXCEL_EPOCH',
    'normalize_header',
    'normalize_headers',
    'serial_to_date',
    # Selection
    'activity_mask',
    'drop_inactive',
    'select_columns',
    # Coercion
    'coerce_counts',
    'coerce_value',
    'fill_not_operating',
    'parse_counts',
    # Aggregation
    'AggregateStatistics',
    'active_months',
    'aggregate_statistics',
    'grand_total',
    'monthly_summary',
    'rank_months',
    'top_sites',
    'validate_totals',
    'with_totals',
    # Revenue
    'DEFAULT_SCHEDULE',
    'RateBracket',
    'RevenueRange',
    'revenue_range',
]
