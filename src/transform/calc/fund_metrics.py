"""Filter a fund's daily records and compute period metrics."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from models.errors import InvalidQuotaError, NoMatchingRecordsError
from models.schemas import FundMetrics, FundRecord, FundSummary
from transform.normalize.cnpj import normalize_cnpj


def filter_fund_records(
    records: Iterable[FundRecord],
    fund_id: str,
    start_date: date,
    end_date: date,
) -> list[FundRecord]:
    """Keep records of ``fund_id`` with at least one subscriber dated within the inclusive range.

    The result is sorted by report date; records sharing a date keep their input order.
    """
    wanted = normalize_cnpj(fund_id)
    kept = [
        record
        for record in records
        if record.subscriber_count >= 1
        and normalize_cnpj(record.fund_id) == wanted
        and start_date <= record.report_date <= end_date
    ]
    return sorted(kept, key=lambda record: record.report_date)


def compute_metrics(filtered: Sequence[FundRecord]) -> FundMetrics:
    if not filtered:
        raise ValueError("compute_metrics requires at least one record")

    first_quota = filtered[0].quota_value
    last_quota = filtered[-1].quota_value
    if first_quota == 0:
        raise InvalidQuotaError(f"Quota value is zero on {filtered[0].report_date}; return is undefined")

    total_inflow = sum((record.daily_inflow for record in filtered), Decimal("0"))
    total_outflow = sum((record.daily_outflow for record in filtered), Decimal("0"))
    return FundMetrics(
        return_pct=((last_quota / first_quota) - 1) * 100,
        total_inflow=total_inflow,
        total_outflow=total_outflow,
        net_flow=total_inflow - total_outflow,
    )


def summarize(
    records: Iterable[FundRecord],
    fund_id: str,
    start_date: date,
    end_date: date,
) -> FundSummary:
    filtered = filter_fund_records(records, fund_id, start_date, end_date)
    if not filtered:
        raise NoMatchingRecordsError(fund_id, start_date, end_date)
    return FundSummary(
        fund_id=normalize_cnpj(fund_id),
        start_date=start_date,
        end_date=end_date,
        records=tuple(filtered),
        metrics=compute_metrics(filtered),
    )
