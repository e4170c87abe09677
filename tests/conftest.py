"""Pytest configuration and shared fixtures for ASE Report tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Dict, Sequence

import pytest

from table_helpers import build_csv, month_serials, serial


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def write_table(tmp_path: Path) -> Callable[..., Path]:
    """Write a wide charge table to tmp_path and return its path."""

    def _write(headers: Sequence[str], rows: Sequence[Sequence[str]], name: str = "charges.csv") -> Path:
        path = tmp_path / name
        path.write_text(build_csv(headers, rows), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def four_month_table(write_table: Callable[..., Path]) -> Path:
    """Two active cameras over Jan-Apr 2023 plus one never active.

    Camera A: Jan 10, Feb 20, Mar not operating, Apr not operating.
    Camera B: active only in Apr with 5.
    Camera C: not operating in any month of the window (Dec 2022 only).
    """
    headers = ["Site Code", "Location*", serial(2022, 12)] + month_serials(2023, 1, 4) + [serial(2023, 12)]
    rows = [
        ["A01", "Main St near Oak Ave", "7", "10", "20", "-", "-", "3"],
        ["B02", "King St W", "-", "-", "-", "-", "5", "-"],
        ["C03", "Queen St E", "9", "-", "-", "-", "-", "11"],
    ]
    return write_table(headers, rows)


@pytest.fixture
def full_year_totals() -> Dict[int, int]:
    """Per-month totals used for the eleven-month window scenarios."""
    return {
        1: 20955, 2: 19752, 3: 31288, 4: 36045, 5: 39510, 6: 31643,
        7: 34128, 8: 36417, 9: 34011, 10: 36780, 11: 25379,
    }


@pytest.fixture
def eleven_month_table(write_table: Callable[..., Path], full_year_totals: Dict[int, int]) -> Path:
    """Three cameras whose month columns add up to ``full_year_totals``."""
    headers = ["Site Code", "Location*"] + month_serials(2023, 1, 12)
    first, second, third = [], [], []
    for month in range(1, 12):
        total = full_year_totals[month]
        a = total // 2
        b = total // 3
        c = total - a - b
        first.append(str(a))
        second.append(str(b))
        third.append(str(c))
    rows = [
        ["S001", "Lawrence Ave E", *first, "-"],
        ["S002", "Bathurst St", *second, "-"],
        ["S003", "Jane St", *third, "1200"],
        ["S004", "Installed in December", *(["-"] * 11), "800"],
    ]
    return write_table(headers, rows)
