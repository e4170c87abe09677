"""
ASE Summary Table (Functional Core)

Pure function - builds the one-row "charges per month" table shown at the
top of the report.  No file I/O.

Package Location: src/asereport/plotting/tables.py
"""

from __future__ import annotations

import pandas as pd

from ..analysis.aggregation import grand_total

LABEL_COLUMN = ' '
TOTAL_COLUMN = 'Total'


def summary_table(summary: pd.DataFrame, label: str = 'NUMBER OF CHARGES') -> pd.DataFrame:
    """
    Build a one-row table: label, grand total, then one column per month.

    Args:
        summary: Monthly summary with columns ``[month, label, total_charges]``.
        label: Text placed in the leading ``" "`` column.

    Returns:
        Single-row DataFrame with columns
        ``[" ", "Total", "Jan 2023", ..., "Nov 2023"]`` in calendar order.

    Example:
        >>> summary_table(summary).columns.tolist()[:3]
        [' ', 'Total', 'Jan 2023']
    """
    ordered = summary.sort_values('month')
    row = {LABEL_COLUMN: label, TOTAL_COLUMN: grand_total(ordered)}
    for month_label, value in zip(ordered['label'], ordered['total_charges']):
        row[month_label] = int(value)

    table = pd.DataFrame([row])
    for col in table.columns[1:]:
        table[col] = table[col].astype('int64')
    return table
