"""Table persistence helpers."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

LOGGER = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".parquet")


def save_table(df: pd.DataFrame, output_path: str | Path) -> Path:
    """Save a table to CSV or parquet, chosen by file suffix.

    Note: parquet requires a parquet engine (pyarrow or fastparquet).
    """
    out = Path(output_path)
    suffix = out.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported table format '{out.suffix}'. Use one of {list(SUPPORTED_SUFFIXES)}")

    out.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".parquet":
        df.to_parquet(out, index=False)
    else:
        df.to_csv(out, index=False)

    LOGGER.info("Saved %s: %d rows", out, len(df))
    return out
