"""Protocols for the capabilities the report cycle depends on."""

from __future__ import annotations

from typing import Protocol

from models.schemas import FundRecord


class DailyReportSource(Protocol):
    """Source of CVM daily report records for one calendar month."""

    def fetch(self, year: str, month: str, *, fund_id: str | None = None) -> list[FundRecord]:
        """Return every record published for ``year``/``month`` (two-digit month).

        An unpublished month returns an empty list. ``fund_id`` may be used to
        skip rows for other funds; callers still filter the result.
        """
