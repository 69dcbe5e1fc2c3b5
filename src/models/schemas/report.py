"""Schemas for a report request and its computed summary."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from models.errors import InvalidInputError
from models.schemas.fund_record import FundRecord
from transform.normalize.cnpj import is_valid_cnpj, normalize_cnpj


@dataclass(frozen=True, slots=True)
class ReportRequest:
    fund_id: str
    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        if not is_valid_cnpj(self.fund_id):
            raise InvalidInputError(f"Invalid CNPJ: {self.fund_id!r}")
        if self.start_date > self.end_date:
            raise InvalidInputError(f"start_date {self.start_date} is after end_date {self.end_date}")
        object.__setattr__(self, "fund_id", normalize_cnpj(self.fund_id))


@dataclass(frozen=True, slots=True)
class FundMetrics:
    return_pct: float
    total_inflow: Decimal
    total_outflow: Decimal
    net_flow: Decimal


@dataclass(frozen=True, slots=True)
class FundSummary:
    fund_id: str
    start_date: date
    end_date: date
    records: tuple[FundRecord, ...]
    metrics: FundMetrics
