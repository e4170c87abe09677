"""Report configuration model for ASE Report.

This module owns the report settings and their validation.  Other modules
consume a typed ``ReportConfig`` instead of raw dicts.  Settings can be
loaded from a JSON file (the same role ``metadata.json`` plays for a run)
and overridden from the command line.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Union

from .analysis.months import MonthColumn, month_window
from .errors import ConfigError


@dataclass(frozen=True)
class ReportConfig:
    """Validated report configuration.

    Attributes:
        year: Target calendar year of the month window.
        first_month: First calendar month of the window (inclusive).
        last_month: Last calendar month of the window (inclusive).
        site_code_column: Raw header of the camera identifier column.
        location_column: Raw header of the camera location column.
        sentinel: Cell marker meaning "camera not operating".
        delimiter: Field separator of the input table.
        encoding: Text encoding of the input table.
        table_label: Row label of the one-row summary table.
        split_month: Last calendar month of the first split chart.
        ranking_size: Length of the highest/lowest month rankings.
        top_sites: Number of cameras listed in the top-sites ranking.
    """

    year: int = 2023
    first_month: int = 1
    last_month: int = 11
    site_code_column: str = 'Site Code'
    location_column: str = 'Location*'
    sentinel: str = '-'
    delimiter: str = ','
    encoding: str = 'utf-8'
    table_label: str = 'NUMBER OF CHARGES'
    split_month: int = 6
    ranking_size: int = 3
    top_sites: int = 10

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            expected = int if f.type in ('int', int) else str
            if isinstance(value, bool) or not isinstance(value, expected):
                raise ConfigError(
                    f"{f.name} must be {expected.__name__}, got {value!r}"
                )
        if not (1 <= self.first_month <= self.last_month <= 12):
            raise ConfigError(
                f"Invalid month window {self.first_month}..{self.last_month}: "
                "expected 1 <= first_month <= last_month <= 12"
            )
        if not (1 <= self.split_month <= 12):
            raise ConfigError(f"split_month must be 1-12, got {self.split_month}")
        if not (1 <= self.year <= 9999):
            raise ConfigError(f"year out of range: {self.year}")
        if self.ranking_size < 1:
            raise ConfigError(f"ranking_size must be >= 1, got {self.ranking_size}")
        if self.top_sites < 1:
            raise ConfigError(f"top_sites must be >= 1, got {self.top_sites}")
        if not self.sentinel.strip():
            raise ConfigError("sentinel must be a non-blank string")
        if not self.delimiter:
            raise ConfigError("delimiter must not be empty")

    @property
    def months(self) -> List[MonthColumn]:
        """The month window, in calendar order."""
        return month_window(self.year, self.first_month, self.last_month)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "ReportConfig":
        """Build config from a JSON object file.

        Args:
            path: Path to a JSON file whose keys are ``ReportConfig`` fields.

        Returns:
            A validated config object.

        Raises:
            ConfigError: If the file is missing, malformed, or has unknown
                keys or invalid values.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        try:
            with path.open(encoding='utf-8') as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError(f"{path.name} must contain a JSON object")
        return cls.from_dict(raw)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ReportConfig":
        """Build config from a plain dict, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {unknown}")
        try:
            return cls(**raw)
        except TypeError as exc:
            raise ConfigError(f"Invalid config values: {exc}") from exc

    def with_overrides(self, **overrides: Any) -> "ReportConfig":
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self
