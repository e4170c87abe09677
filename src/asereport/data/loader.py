"""
ASE Charge Table Loader (Imperative Shell)

Reads the raw wide-format charge table into a DataFrame.  Every cell is
kept as the verbatim string found in the file: no NA inference, no type
coercion, headers untouched.

Package Location: src/asereport/data/loader.py
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from ..errors import InputError

log = logging.getLogger(__name__)


def load_raw_table(
    path: Union[str, Path],
    delimiter: str = ',',
    encoding: str = 'utf-8',
) -> pd.DataFrame:
    """
    Load a delimited charge table with all cells as strings.

    The file is opened in a ``with`` block so the handle is closed on every
    exit path, including parse failures.

    Args:
        path: Path to the delimited file.
        delimiter: Field separator.
        encoding: Text encoding of the file.

    Returns:
        DataFrame of ``str`` cells, one row per camera.

    Raises:
        InputError: If the file is missing, a directory, undecodable,
            unparseable, or has no data rows.
    """
    path = Path(path)
    if not path.exists():
        raise InputError(f"Input file not found: {path}")
    if path.is_dir():
        raise InputError(f"Input path is a directory, not a file: {path}")

    try:
        with path.open('r', encoding=encoding, newline='') as fh:
            df = pd.read_csv(
                fh,
                sep=delimiter,
                dtype=str,
                keep_default_na=False,
                na_filter=False,
            )
    except pd.errors.EmptyDataError as exc:
        raise InputError(f"Input file is empty: {path}") from exc
    except pd.errors.ParserError as exc:
        raise InputError(f"Could not parse {path} as a delimited table: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise InputError(f"Could not decode {path} as {encoding}: {exc}") from exc
    except OSError as exc:
        raise InputError(f"Could not read {path}: {exc}") from exc

    if df.empty:
        raise InputError(f"Input file has no data rows: {path}")

    df.columns = [str(c) for c in df.columns]

    log.info(
        f"Loaded {len(df)} rows x {len(df.columns)} columns from {path.name}",
        extra={"path": str(path), "rows": len(df), "columns": len(df.columns)},
    )
    return df
