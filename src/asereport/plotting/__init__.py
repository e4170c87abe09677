"""
ASE Report Plotting Package (Functional Core)

Pure figure and table builders only - no file I/O, no side effects.
Chart functions accept the monthly summary DataFrame and return a
``plotly.graph_objects.Figure``; the table builder returns a DataFrame.

Modules:
    charges: Monthly charges bar chart and the two split-year bar charts.
    tables:  One-row summary table (label, Total, one column per month).
"""

from .charges import plot_monthly_charges, plot_split_charges, split_summary
from .tables import summary_table

__all__ = [
    'plot_monthly_charges',
    'plot_split_charges',
    'split_summary',
    'summary_table',
]
