"""Prefect flow to generate one fund report without interactive prompts."""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path
import sys

from prefect import flow, get_run_logger, task

REPO_ROOT = Path(__file__).resolve().parents[2]

# Allow running directly from repo root without package installation.
sys.path.insert(0, str(REPO_ROOT / "src"))

from config.settings import settings  # noqa: E402
from extract.cvm_daily_reader import CvmDailyReportFetcher  # noqa: E402
from models.errors import InvalidInputError  # noqa: E402
from models.schemas import FundRecord, FundSummary, ReportRequest  # noqa: E402
from load.write_report import write_fund_report  # noqa: E402
from transform.calc.fund_metrics import summarize  # noqa: E402
from transform.calc.month_range import iter_months  # noqa: E402
from transform.normalize.dates import parse_operator_date  # noqa: E402


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a CVM fund report via Prefect.")
    parser.add_argument("--cnpj", required=True, help="Fund CNPJ, with or without punctuation.")
    parser.add_argument("--start", required=True, help="Start date in ddMMyyyy format.")
    parser.add_argument("--end", required=True, help="End date in ddMMyyyy format.")
    parser.add_argument(
        "--output-dir",
        default=str(settings.report_output_dir),
        help="Directory for the generated .xlsx (default: REPORT_OUTPUT_DIR).",
    )
    return parser.parse_args()


def _to_date(value: str, label: str) -> date:
    parsed = parse_operator_date(value)
    if parsed is None:
        raise InvalidInputError(f"Invalid {label} date {value!r}; expected ddMMyyyy")
    return parsed


@task(name="fetch-month")
def fetch_month(year: str, month: str, fund_id: str) -> list[FundRecord]:
    logger = get_run_logger()
    with CvmDailyReportFetcher(settings.cvm_source) as fetcher:
        records = fetcher.fetch(year, month, fund_id=fund_id)
    logger.info("Fetched period=%s-%s records=%s", year, month, len(records))
    return records


@task(name="summarize-fund")
def summarize_fund(records: list[FundRecord], request: ReportRequest) -> FundSummary:
    return summarize(records, request.fund_id, request.start_date, request.end_date)


@task(name="write-report")
def write_report(summary: FundSummary, output_dir: str) -> str:
    return str(write_fund_report(summary, Path(output_dir)))


@flow(name="cvm-fund-report")
def fund_report_flow(cnpj: str, start: str, end: str, output_dir: str) -> str:
    logger = get_run_logger()
    request = ReportRequest(
        fund_id=cnpj,
        start_date=_to_date(start, "start"),
        end_date=_to_date(end, "end"),
    )

    records: list[FundRecord] = []
    for year, month in iter_months(request.start_date, request.end_date):
        records.extend(fetch_month(year, month, request.fund_id))

    summary = summarize_fund(records, request)
    path = write_report(summary, output_dir)
    logger.info(
        "Report written path=%s records=%s return_pct=%.2f",
        path,
        len(summary.records),
        summary.metrics.return_pct,
    )
    return path


if __name__ == "__main__":
    args = _parse_args()
    fund_report_flow(
        cnpj=args.cnpj,
        start=args.start,
        end=args.end,
        output_dir=args.output_dir,
    )
