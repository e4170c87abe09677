"""
ASE Report Command-Line Interface

Exposes two subcommands:

    ase-report summary --input <file> [...]                 Print totals and statistics
    ase-report report  --input <file> --output <dir> [...]  Write the full report

The package must be installed (``pip install -e .``) for the ``ase-report``
entry point to be available.

Package Location: src/asereport/cli.py
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from .analysis.revenue import format_dollars
from .config import ReportConfig
from .errors import ReportError
from .utils.logging import configure_logging

if TYPE_CHECKING:
    from .data.pipeline import PipelineResult


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\n❌  Error: {message}", file=sys.stderr)
    sys.exit(1)


def _resolve_config(args: argparse.Namespace) -> ReportConfig:
    """Build the run configuration: defaults < ``--config`` file < CLI flags.

    Args:
        args: Parsed CLI arguments.

    Returns:
        Validated ``ReportConfig``.

    Raises:
        ReportError: If the config file or an override is invalid.
    """
    config = ReportConfig.from_json(args.config) if args.config else ReportConfig()
    return config.with_overrides(
        year=args.year,
        first_month=args.first_month,
        last_month=args.last_month,
        delimiter=args.delimiter,
    )


def _print_summary(result: PipelineResult) -> None:
    """Print the monthly totals and statistics of a finished run."""
    stats = result.statistics
    print("\n    Month        Charges")
    for label, total in zip(result.summary["label"], result.summary["total_charges"]):
        print(f"    {label:<10} {int(total):>9,}")
    print(f"    {'Total':<10} {stats.grand_total:>9,}")

    print(f"\n    Cameras:  {len(result.clean)} active, {result.dropped} dropped (inactive)")
    print(f"    Mean:     {stats.mean:,.1f} charges/month")
    print(f"    Std dev:  {stats.std_dev:,.1f} (sample)")
    print(f"    Highest:  {', '.join(m.label for m in stats.highest)}")
    print(f"    Lowest:   {', '.join(m.label for m in stats.lowest)}")
    print(
        f"    Revenue:  {format_dollars(result.revenue.lower)} – "
        f"{format_dollars(result.revenue.upper)}"
    )


def _setup_logging(args: argparse.Namespace) -> None:
    level = logging.INFO if args.verbose else logging.WARNING
    configure_logging(level=level, json_format=args.json_logs)


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_summary(args: argparse.Namespace) -> None:
    """Run the pipeline and print the results without writing files.

    Args:
        args: Parsed CLI arguments.
    """
    from asereport.data.pipeline import run_pipeline

    try:
        config = _resolve_config(args)
        print(f"\n🚦  Summarising {args.input}")
        result = run_pipeline(args.input, config)
    except ReportError as exc:
        if args.verbose:
            traceback.print_exc()
        _die(str(exc))

    _print_summary(result)
    print("\n✅  Done.")


def handle_report(args: argparse.Namespace) -> None:
    """Run the pipeline and write the report artifacts.

    Args:
        args: Parsed CLI arguments.
    """
    from asereport.reports.generators import ReportGenerator

    try:
        config = _resolve_config(args)
        print(f"\n📊  Generating report for {args.input}")
        print(f"    Output: {args.output}")
        gen = ReportGenerator(output_dir=args.output, config=config)
        result = gen.generate(args.input)
    except ReportError as exc:
        if args.verbose:
            traceback.print_exc()
        _die(str(exc))

    _print_summary(result)
    print(f"\n✅  Report written to {args.output}")


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--input",
        required=True,
        type=Path,
        metavar="FILE",
        help="Wide-format ASE charges table (delimited text).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="JSON",
        help="Optional JSON file of report settings.",
    )
    parser.add_argument("--year", type=int, default=None, help="Target year (default: 2023).")
    parser.add_argument(
        "--first-month", type=int, default=None, metavar="N",
        help="First calendar month of the window (default: 1).",
    )
    parser.add_argument(
        "--last-month", type=int, default=None, metavar="N",
        help="Last calendar month of the window (default: 11).",
    )
    parser.add_argument(
        "--delimiter", default=None, metavar="CHAR",
        help="Field separator of the input table (default: ',').",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Log progress and print full tracebacks on failure.",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``summary`` and ``report``
        subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="ase-report",
        description=(
            "ASE Report – Automated Speed Enforcement charges\n"
            "Monthly totals, statistics and charts from the wide charge table."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    p_sum = subs.add_parser(
        "summary",
        help="Print monthly totals and statistics.",
    )
    _add_common_arguments(p_sum)
    p_sum.set_defaults(func=handle_summary)

    p_rep = subs.add_parser(
        "report",
        help="Write the summary table, statistics and bar charts.",
        description=(
            "Run the full pipeline and write the report files:\n"
            "  summary_table.csv, monthly_summary.csv, clean_records.csv,\n"
            "  statistics.json and the plotly HTML bar charts."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _add_common_arguments(p_rep)
    p_rep.add_argument(
        "--output",
        required=True,
        type=Path,
        metavar="DIR",
        help="Directory that receives the report files.",
    )
    p_rep.set_defaults(func=handle_report)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``ase-report`` console script entry
    point in ``pyproject.toml``.
    """
    parser = _build_parser()
    args   = parser.parse_args(argv)
    _setup_logging(args)
    args.func(args)


if __name__ == "__main__":
    main()
