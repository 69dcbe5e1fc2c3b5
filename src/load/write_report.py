"""Write a fund summary to an Excel report."""

from __future__ import annotations

from datetime import datetime
import logging
from pathlib import Path

import pandas as pd
from openpyxl.worksheet.worksheet import Worksheet

from models.enums import CvmColumn, SummaryLabel
from models.schemas import FundMetrics, FundRecord, FundSummary

logger = logging.getLogger(__name__)

SHEET_NAME = "Fundos"
FILE_NAME_TEMPLATE = "FundosFiltrados_{timestamp}.xlsx"
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

DATE_FORMAT = "dd-mm-yyyy"
AMOUNT_FORMAT = "#,##0.00"

REPORT_COLUMNS = [column.value for column in CvmColumn]
COLUMN_FORMATS = {
    "B": DATE_FORMAT,
    "E": AMOUNT_FORMAT,
    "G": AMOUNT_FORMAT,
    "H": AMOUNT_FORMAT,
}
SUMMARY_COLUMNS = ["I", "J", "K", "L"]


def report_path(output_dir: Path, now: datetime) -> Path:
    return output_dir / FILE_NAME_TEMPLATE.format(timestamp=now.strftime(TIMESTAMP_FORMAT))


def records_to_frame(records: tuple[FundRecord, ...] | list[FundRecord]) -> pd.DataFrame:
    rows = [
        {
            CvmColumn.FUND_ID.value: record.fund_id,
            CvmColumn.REPORT_DATE.value: record.report_date,
            CvmColumn.FUND_TYPE.value: record.fund_type,
            CvmColumn.SUBSCRIBER_COUNT.value: record.subscriber_count,
            CvmColumn.NET_ASSET_VALUE.value: float(record.net_asset_value),
            CvmColumn.QUOTA_VALUE.value: record.quota_value,
            CvmColumn.DAILY_INFLOW.value: float(record.daily_inflow),
            CvmColumn.DAILY_OUTFLOW.value: float(record.daily_outflow),
        }
        for record in records
    ]
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def _apply_number_formats(worksheet: Worksheet, row_count: int) -> None:
    for column_letter, number_format in COLUMN_FORMATS.items():
        for row in range(2, row_count + 2):
            worksheet[f"{column_letter}{row}"].number_format = number_format


def _write_summary(worksheet: Worksheet, metrics: FundMetrics) -> None:
    values = [
        (SummaryLabel.RETURN_PCT, round(metrics.return_pct, 2)),
        (SummaryLabel.TOTAL_INFLOW, float(metrics.total_inflow)),
        (SummaryLabel.TOTAL_OUTFLOW, float(metrics.total_outflow)),
        (SummaryLabel.NET_FLOW, float(metrics.net_flow)),
    ]
    for column_letter, (label, value) in zip(SUMMARY_COLUMNS, values):
        worksheet[f"{column_letter}1"] = label.value
        worksheet[f"{column_letter}2"] = value


def write_fund_report(summary: FundSummary, output_dir: Path, now: datetime | None = None) -> Path:
    """Write ``summary`` to ``FundosFiltrados_<timestamp>.xlsx`` under ``output_dir`` and return its path."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = report_path(output_dir, now or datetime.now())

    frame = records_to_frame(summary.records)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        frame.to_excel(writer, sheet_name=SHEET_NAME, index=False)
        worksheet = writer.sheets[SHEET_NAME]
        _apply_number_formats(worksheet, len(frame))
        _write_summary(worksheet, summary.metrics)

    logger.info("Wrote report path=%s rows=%s", path, len(frame))
    return path
