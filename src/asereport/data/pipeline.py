"""
ASE Charges Engine (Imperative Shell)

Orchestrates one reporting run: loads the raw table, then delegates every
transformation to the Functional Core (``asereport.analysis``).

Package Location: src/asereport/data/pipeline.py

Stages (strictly forward, no stage reads downstream state):

    load -> normalize headers -> select columns -> drop inactive cameras
         -> parse counts -> fill NotOperating -> per-camera totals
         -> monthly summary -> statistics -> revenue range

Failure Rule:
    Any ``ReportError`` aborts the run.  There is no partial result: every
    aggregate depends on the whole upstream transform being correct.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from ..analysis.aggregation import (
    AggregateStatistics,
    aggregate_statistics,
    monthly_summary,
    top_sites,
    validate_totals,
    with_totals,
)
from ..analysis.coercion import fill_not_operating, parse_counts
from ..analysis.dates import normalize_headers
from ..analysis.months import MonthColumn
from ..analysis.revenue import RevenueRange, revenue_range
from ..analysis.selection import drop_inactive, select_columns
from ..config import ReportConfig
from ..errors import ReportError
from .loader import load_raw_table

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """
    Every intermediate and final product of one run.

    Attributes:
        months: Month window used.
        raw: Loaded table, verbatim strings.
        parsed: Selected active cameras, month cells as nullable ``Int64``
            (``<NA>`` = camera not operating).
        clean: Coerced records with a ``total`` column.
        summary: Monthly totals, one row per month.
        statistics: Grand total, mean, std dev, month rankings.
        top_sites: Highest-charge cameras.
        revenue: Fine-revenue range for the grand total.
        dropped: Number of cameras removed as inactive in the window.
    """

    months: List[MonthColumn]
    raw: pd.DataFrame
    parsed: pd.DataFrame
    clean: pd.DataFrame
    summary: pd.DataFrame
    statistics: AggregateStatistics
    top_sites: pd.DataFrame
    revenue: RevenueRange
    dropped: int


class ChargesEngine:
    """
    Runs the ASE charge pipeline for one input file.

    Example::

        engine = ChargesEngine(Path("ase_charges.csv"))
        result = engine.run()
        result.statistics.grand_total

    Args:
        input_path: Path to the raw delimited table.
        config: Report configuration.  Defaults to ``ReportConfig()``.
    """

    def __init__(
        self,
        input_path: Union[str, Path],
        config: Optional[ReportConfig] = None,
    ) -> None:
        self.input_path = Path(input_path)
        self.config = config or ReportConfig()

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def run(self) -> PipelineResult:
        """
        Execute every stage and return the results.

        Returns:
            ``PipelineResult``.

        Raises:
            InputError: Missing/unreadable/empty file or missing columns.
            DateConversionError: Out-of-range serial-date header.
            ParseError: Non-sentinel cell that is not a count.
        """
        raw = load_raw_table(
            self.input_path,
            delimiter=self.config.delimiter,
            encoding=self.config.encoding,
        )
        return self.process(raw)

    def process(self, raw: pd.DataFrame) -> PipelineResult:
        """
        Run every stage after loading on an already-loaded raw table.

        Args:
            raw: Raw table of string cells.

        Returns:
            ``PipelineResult``.
        """
        cfg = self.config
        months = cfg.months

        normalized = normalize_headers(raw)
        selected = select_columns(
            normalized,
            months,
            site_code_column=cfg.site_code_column,
            location_column=cfg.location_column,
        )
        active = drop_inactive(selected, months, sentinel=cfg.sentinel)
        dropped = len(selected) - len(active)
        log.info(
            f"Kept {len(active)} of {len(selected)} cameras active "
            f"{months[0].label} - {months[-1].label}",
            extra={"kept": len(active), "dropped": dropped},
        )

        parsed = parse_counts(active, months, sentinel=cfg.sentinel)
        clean = with_totals(fill_not_operating(parsed, months), months)

        summary = monthly_summary(clean, months)
        if not validate_totals(clean, summary):
            # Only reachable if a stage edits month columns after totals.
            raise ReportError("Grand total disagrees with per-camera totals")

        stats = aggregate_statistics(summary, ranking_size=cfg.ranking_size)
        revenue = revenue_range(stats.grand_total)

        log.info(
            f"Grand total {stats.grand_total} charges over {stats.n_months} months",
            extra={
                "grand_total": stats.grand_total,
                "mean": stats.mean,
                "std_dev": stats.std_dev,
            },
        )

        return PipelineResult(
            months=months,
            raw=raw,
            parsed=parsed,
            clean=clean,
            summary=summary,
            statistics=stats,
            top_sites=top_sites(clean, cfg.top_sites),
            revenue=revenue,
            dropped=dropped,
        )


# ---------------------------------------------------------------------------
# Convenience entry-point
# ---------------------------------------------------------------------------

def run_pipeline(
    input_path: Union[str, Path],
    config: Optional[ReportConfig] = None,
) -> PipelineResult:
    """
    Convenience function: create a ``ChargesEngine`` and run it.

    Args:
        input_path: Path to the raw delimited table.
        config: Optional report configuration.

    Returns:
        ``PipelineResult``.
    """
    return ChargesEngine(input_path, config).run()
