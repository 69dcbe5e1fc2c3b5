"""Core service: one report request from download to written spreadsheet."""

from __future__ import annotations

from datetime import datetime
import logging
from pathlib import Path

from load.write_report import write_fund_report
from models.schemas import FundRecord, FundSummary, ReportRequest
from services.ports import DailyReportSource
from transform.calc.fund_metrics import summarize
from transform.calc.month_range import iter_months
from transform.normalize.cnpj import format_cnpj

logger = logging.getLogger(__name__)


def collect_records(source: DailyReportSource, request: ReportRequest) -> list[FundRecord]:
    records: list[FundRecord] = []
    for year, month in iter_months(request.start_date, request.end_date):
        records.extend(source.fetch(year, month, fund_id=request.fund_id))
    return records


def build_report(source: DailyReportSource, request: ReportRequest) -> FundSummary:
    """Fetch every month in the request range and summarize the fund's records.

    Raises ``DatasetFetchError`` if any month fails to load and
    ``NoMatchingRecordsError`` if the fund has no qualifying records.
    """
    records = collect_records(source, request)
    summary = summarize(records, request.fund_id, request.start_date, request.end_date)
    logger.info(
        "Summarized fund=%s records=%s return_pct=%.4f net_flow=%s",
        format_cnpj(summary.fund_id),
        len(summary.records),
        summary.metrics.return_pct,
        summary.metrics.net_flow,
    )
    return summary


def run_report(
    source: DailyReportSource,
    request: ReportRequest,
    output_dir: Path,
    now: datetime | None = None,
) -> Path:
    summary = build_report(source, request)
    return write_fund_report(summary, output_dir, now=now)
