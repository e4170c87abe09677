"""Integration test: raw eleven-month table to written report."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Dict

import pandas as pd

from asereport.analysis.aggregation import validate_totals
from asereport.reports.generators import generate_report


def test_full_year_report(eleven_month_table: Path, tmp_path: Path, full_year_totals: Dict[int, int]) -> None:
    """Totals, statistics and artifacts agree end to end."""
    out_dir = tmp_path / "report"

    result = generate_report(eleven_month_table, out_dir)

    assert result.summary["total_charges"].tolist() == [full_year_totals[m] for m in range(1, 12)]
    assert result.statistics.grand_total == sum(full_year_totals.values()) == 345908
    assert int(result.clean["total"].sum()) == result.statistics.grand_total
    assert validate_totals(result.clean, result.summary)

    values = list(full_year_totals.values())
    mean = sum(values) / len(values)
    assert math.isclose(result.statistics.mean, mean)
    assert math.isclose(
        result.statistics.std_dev,
        math.sqrt(sum((v - mean) ** 2 for v in values) / (len(values) - 1)),
        rel_tol=1e-12,
    )

    table = pd.read_csv(out_dir / "summary_table.csv")
    assert table.columns.tolist()[2:] == [
        "Jan 2023", "Feb 2023", "Mar 2023", "Apr 2023", "May 2023", "Jun 2023",
        "Jul 2023", "Aug 2023", "Sep 2023", "Oct 2023", "Nov 2023",
    ]
    assert int(table.at[0, "Total"]) == 345908

    monthly = pd.read_csv(out_dir / "monthly_summary.csv")
    assert monthly["total_charges"].sum() == 345908

    html = (out_dir / "Monthly_Charges.html").read_text(encoding="utf-8")
    assert "plotly" in html.lower()
