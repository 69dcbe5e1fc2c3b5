"""Enumerate the calendar months covered by a date range."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date

import pandas as pd


def iter_months(start_date: date, end_date: date) -> Iterator[tuple[str, str]]:
    """Yield ``(year, month)`` string pairs from the start month to the end month, inclusive.

    ``date(2022, 11, 15)`` to ``date(2023, 2, 1)`` yields
    ``("2022", "11"), ("2022", "12"), ("2023", "01"), ("2023", "02")``.
    """
    start = pd.Period(start_date, freq="M")
    end = pd.Period(end_date, freq="M")
    for period in pd.period_range(start=start, end=end, freq="M"):
        yield f"{period.year:04d}", f"{period.month:02d}"
