"""Convenience helpers for grouping a pair file end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from .pipeline import GroupingConfig, GroupingResult, PairGrouper

_SUPPORTED_SUFFIXES = {".csv", ".xls", ".xlsx"}


def group_file(
    input_path: str | Path,
    output_path: str | Path,
    config: Optional[GroupingConfig] = None,
) -> GroupingResult | None:
    """Group the pairs listed in `input_path` and write the element assignments."""

    input_path = Path(input_path)
    output_path = Path(output_path)

    if input_path.suffix.lower() not in _SUPPORTED_SUFFIXES:
        print(f"ERROR: Unsupported file format for '{input_path}'. Please provide a CSV or Excel file.")
        return None

    try:
        dataframe = _load_dataframe(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        print(f"ERROR: Could not parse '{input_path}': {exc}")
        return None

    config = config or GroupingConfig()
    for column in (config.left_column, config.right_column):
        if column not in dataframe.columns:
            print(f"ERROR: Column '{column}' not found in '{input_path}'. Please check the pair column names.")
            return None

    grouper = PairGrouper(config)
    try:
        return grouper.group(dataframe, output_path)
    except (ValueError, IndexError) as exc:
        print(f"ERROR: {exc}")
        return None


def _load_dataframe(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path)
    if suffix in {".xls", ".xlsx"}:
        return pd.read_excel(path)
    raise ValueError("unsupported format")
