"""Schema for one fund's row of the CVM daily report."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class FundRecord:
    """One fund on one reporting day.

    Field order is the column order of the written report.
    """

    fund_id: str
    report_date: date
    fund_type: str
    subscriber_count: int
    net_asset_value: Decimal
    quota_value: float
    daily_inflow: Decimal
    daily_outflow: Decimal

    def __post_init__(self) -> None:
        if self.subscriber_count < 0:
            raise ValueError(f"subscriber_count must be >= 0, got {self.subscriber_count}")
