"""Validation helpers for dataframe schemas."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd


def require_columns(df: pd.DataFrame, required: set[str]) -> None:
    missing = required - set(df.columns)
    if missing:
        raise ValueError(f"Missing required columns: {sorted(missing)}")


def pick_column(df: pd.DataFrame, candidates: Iterable[str]) -> str | None:
    by_upper = {str(col).strip().upper(): col for col in df.columns}
    for candidate in candidates:
        if candidate.upper() in by_upper:
            return by_upper[candidate.upper()]
    return None
