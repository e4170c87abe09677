"""
ASE Report Generator (Imperative Shell)

Thin orchestration layer: runs the charges pipeline, calls the pure table
and plotting builders, and writes the resulting artifacts.

No transformation logic lives here.  All analysis goes through
src/asereport/data/pipeline.py.

Package Location: src/asereport/reports/generators.py

Usage::

    from pathlib import Path
    from asereport.reports.generators import ReportGenerator

    gen = ReportGenerator(output_dir=Path("reports/2023"))
    gen.generate(Path("ase_charges.csv"))
    # Writes:
    #   reports/2023/summary_table.csv
    #   reports/2023/monthly_summary.csv
    #   reports/2023/clean_records.csv
    #   reports/2023/statistics.json
    #   reports/2023/Monthly_Charges.html
    #   reports/2023/Monthly_Charges_Jan-Jun.html
    #   reports/2023/Monthly_Charges_Jul-Nov.html

All-or-Nothing Rule:
    Every table and figure is built in memory before the output directory
    is touched, so a failing run leaves no artifacts behind.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..config import ReportConfig
from ..data.pipeline import PipelineResult, run_pipeline
from ..plotting.charges import plot_monthly_charges, plot_split_charges, split_summary
from ..plotting.tables import summary_table

log = logging.getLogger(__name__)

_CHART_TITLE = 'ASE Charges per Month'


@dataclass
class ReportArtifacts:
    """In-memory report products, keyed by output file name."""

    tables: Dict[str, pd.DataFrame]
    figures: Dict[str, go.Figure]
    statistics: Dict[str, Any]


class ReportGenerator:
    """
    Generates and saves the ASE charge report for one input table.

    Responsibilities
    ----------------
    - Delegate loading and analysis to ``run_pipeline``.
    - Call pure table/plot builders from the functional core.
    - Write CSV, JSON and plotly HTML files.

    Args:
        output_dir: Directory that receives the report files.  Created on
            first write.
        config: Report configuration.  Defaults to ``ReportConfig()``.
    """

    def __init__(self, output_dir: Union[str, Path], config: Optional[ReportConfig] = None) -> None:
        self.output_dir = Path(output_dir)
        self.config = config or ReportConfig()

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def generate(self, input_path: Union[str, Path]) -> PipelineResult:
        """
        Run the pipeline on *input_path* and write every artifact.

        Args:
            input_path: Path to the raw delimited table.

        Returns:
            The ``PipelineResult`` the report was built from.

        Raises:
            ReportError: Any pipeline failure; nothing is written.
        """
        result = run_pipeline(input_path, self.config)
        self.write(result)
        return result

    def build(self, result: PipelineResult) -> ReportArtifacts:
        """
        Build every table and figure without touching the disk.

        Args:
            result: Output of the charges pipeline.

        Returns:
            ``ReportArtifacts``.
        """
        cfg = self.config
        summary = result.summary

        tables = {
            'summary_table.csv': summary_table(summary, label=cfg.table_label),
            'monthly_summary.csv': summary.reset_index(drop=True),
            'clean_records.csv': _labelled_records(result),
        }

        figures: Dict[str, go.Figure] = {
            'Monthly_Charges.html': plot_monthly_charges(summary, title=_CHART_TITLE),
        }
        first, second = split_summary(summary, cfg.split_month)
        fig_first, fig_second = plot_split_charges(
            summary, split_month=cfg.split_month, title=_CHART_TITLE
        )
        for part, fig in ((first, fig_first), (second, fig_second)):
            if part.empty:
                continue
            figures[f'Monthly_Charges_{_range_slug(part)}.html'] = fig

        return ReportArtifacts(
            tables=tables,
            figures=figures,
            statistics=_statistics_payload(result),
        )

    def write(self, result: PipelineResult) -> List[Path]:
        """
        Build the artifacts, then write them to ``output_dir``.

        Args:
            result: Output of the charges pipeline.

        Returns:
            Paths of the written files, in write order.
        """
        artifacts = self.build(result)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        written: List[Path] = []

        for name, table in artifacts.tables.items():
            out_path = self.output_dir / name
            table.to_csv(out_path, index=False)
            written.append(out_path)

        stats_path = self.output_dir / 'statistics.json'
        with stats_path.open('w', encoding='utf-8') as fh:
            json.dump(artifacts.statistics, fh, indent=4)
        written.append(stats_path)

        for name, fig in artifacts.figures.items():
            out_path = self.output_dir / name
            fig.write_html(str(out_path))
            written.append(out_path)

        log.info(
            f"Report written to {self.output_dir} ({len(written)} files)",
            extra={"output_dir": str(self.output_dir), "files": len(written)},
        )
        return written


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------

def _labelled_records(result: PipelineResult) -> pd.DataFrame:
    """CleanRecords with month ordinals replaced by display labels."""
    rename = {m.ordinal: m.label for m in result.months}
    return result.clean.rename(columns=rename)


def _range_slug(part: pd.DataFrame) -> str:
    first = part['label'].iloc[0].split()[0]
    last = part['label'].iloc[-1].split()[0]
    return first if first == last else f'{first}-{last}'


def _json_float(value: float) -> Optional[float]:
    return None if math.isnan(value) else value


def _statistics_payload(result: PipelineResult) -> Dict[str, Any]:
    stats = result.statistics
    payload = stats.as_dict()
    payload['mean'] = _json_float(stats.mean)
    payload['std_dev'] = _json_float(stats.std_dev)
    payload['monthly_totals'] = {
        label: int(total)
        for label, total in zip(result.summary['label'], result.summary['total_charges'])
    }
    payload['cameras'] = {
        'active': int(len(result.clean)),
        'dropped_inactive': int(result.dropped),
    }
    payload['top_sites'] = [
        {
            'site_code': row.site_code,
            'location': row.location,
            'total': int(row.total),
        }
        for row in result.top_sites.itertuples(index=False)
    ]
    payload['revenue'] = result.revenue.as_dict()
    return payload


# ---------------------------------------------------------------------------
# Convenience entry-point
# ---------------------------------------------------------------------------

def generate_report(
    input_path: Union[str, Path],
    output_dir: Union[str, Path],
    config: Optional[ReportConfig] = None,
) -> PipelineResult:
    """
    Convenience function: create a ``ReportGenerator`` and run one input.

    Args:
        input_path: Path to the raw delimited table.
        output_dir: Directory for the report files.
        config: Optional report configuration.

    Example::

        from asereport.reports.generators import generate_report

        generate_report("ase_charges.csv", "reports/2023")
    """
    return ReportGenerator(output_dir=output_dir, config=config).generate(input_path)
