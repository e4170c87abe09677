"""Unit tests for the charges engine orchestration."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from asereport.config import ReportConfig
from asereport.data.pipeline import ChargesEngine, run_pipeline
from asereport.errors import DateConversionError, InputError, ParseError, ReportError
from table_helpers import month_serials

JAN_APR = ReportConfig(year=2023, first_month=1, last_month=4)


def test_run_produces_monthly_summary_for_scenario(four_month_table: Path) -> None:
    """Camera A [10, 20, -, -] and camera B [-, -, -, 5] give 35 charges."""
    result = ChargesEngine(four_month_table, JAN_APR).run()

    totals = dict(zip(result.summary["label"], result.summary["total_charges"]))
    assert totals == {"Jan 2023": 10, "Feb 2023": 20, "Mar 2023": 0, "Apr 2023": 5}
    assert result.statistics.grand_total == 35
    assert result.clean["site_code"].tolist() == ["A01", "B02"]
    assert result.clean["total"].tolist() == [30, 5]
    assert result.dropped == 1


def test_run_keeps_not_operating_distinction_in_parsed(four_month_table: Path) -> None:
    """Parsed frame still knows which months a camera did not report."""
    result = run_pipeline(four_month_table, JAN_APR)

    assert result.parsed[3].isna().tolist() == [True, True]
    assert result.clean[3].tolist() == [0, 0]


def test_run_raises_parse_error_for_bad_cell(write_table: Callable[..., Path]) -> None:
    path = write_table(
        ["Site Code", "Location*"] + month_serials(2023, 1, 4),
        [["A01", "Main St", "10", "x7", "-", "-"]],
    )

    with pytest.raises(ParseError, match="A01"):
        ChargesEngine(path, JAN_APR).run()


def test_run_raises_input_error_for_missing_month(write_table: Callable[..., Path]) -> None:
    path = write_table(
        ["Site Code", "Location*"] + month_serials(2023, 1, 3),
        [["A01", "Main St", "10", "7", "-"]],
    )

    with pytest.raises(InputError, match="01-04-2023"):
        ChargesEngine(path, JAN_APR).run()


def test_run_raises_date_conversion_error(write_table: Callable[..., Path]) -> None:
    path = write_table(
        ["Site Code", "Location*", "1"] + month_serials(2023, 1, 4),
        [["A01", "Main St", "0", "10", "7", "-", "-"]],
    )

    with pytest.raises(DateConversionError):
        ChargesEngine(path, JAN_APR).run()


def test_run_with_only_inactive_cameras_yields_zero_totals(write_table: Callable[..., Path]) -> None:
    """No active camera is not an error; every month sums to 0."""
    path = write_table(
        ["Site Code", "Location*"] + month_serials(2023, 1, 4),
        [["A01", "Main St", "-", "-", "-", "-"]],
    )

    result = ChargesEngine(path, JAN_APR).run()

    assert result.clean.empty
    assert result.summary["total_charges"].tolist() == [0, 0, 0, 0]
    assert result.statistics.grand_total == 0
    assert result.statistics.std_dev == 0


def test_run_reports_oversized_count_as_report_error(write_table: Callable[..., Path]) -> None:
    path = write_table(
        ["Site Code", "Location*"] + month_serials(2023, 1, 2),
        [["A01", "Main St", "99999999999999999999", "4"]],
    )

    with pytest.raises(ReportError, match="A01"):
        run_pipeline(path, ReportConfig(last_month=2))
