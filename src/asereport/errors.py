"""ASE Report exception hierarchy.

Every stage of the pipeline raises a specific error type so that a failed
run names the offending file, column, row, or value.  None of them are
recovered locally; the CLI reports them and exits.
"""

from __future__ import annotations


class ReportError(Exception):
    """Base exception for all ASE Report failures."""


class InputError(ReportError):
    """
    Raised when the input table cannot be used.

    Raised when:
    - The file is missing, a directory, or unreadable
    - The file parses to zero data rows
    - A required identifier or month column is absent
    """


class DateConversionError(ReportError):
    """Raised when a serial-date header maps outside the supported calendar range."""


class ParseError(ReportError):
    """Raised when a non-sentinel cell is not a non-negative integer."""


class ConfigError(ReportError):
    """Raised for invalid report configuration."""
