"""Download and parse CVM daily report (Informe Diario) archives."""

from __future__ import annotations

import io
import logging
import zipfile
import zlib
from decimal import Decimal, InvalidOperation

import pandas as pd
import requests

from config.settings import CvmSourceConfig, settings
from models.enums import CvmColumn
from models.errors import DatasetFetchError
from models.schemas import FundRecord
from transform.normalize.cnpj import normalize_cnpj
from transform.normalize.dates import parse_cvm_date
from utils.validation import pick_column, require_columns

logger = logging.getLogger(__name__)

FILE_PREFIX = "inf_diario_fi"
CSV_SEPARATOR = ";"

# Files published from 2024 on name some columns after the fund class.
COLUMN_ALIASES: dict[CvmColumn, list[str]] = {
    CvmColumn.FUND_ID: ["CNPJ_FUNDO", "CNPJ_FUNDO_CLASSE"],
    CvmColumn.FUND_TYPE: ["TP_FUNDO", "TP_FUNDO_CLASSE"],
}

RECORD_COLUMNS = [column.value for column in CvmColumn]


def build_archive_url(base_url: str, year: str, month: str) -> str:
    return f"{base_url.rstrip('/')}/{FILE_PREFIX}_{year}{int(month):02d}.zip"


def read_archive_frame(content: bytes, encoding: str) -> pd.DataFrame:
    """Read the first entry of a zip archive as a semicolon-separated table of strings."""
    with zipfile.ZipFile(io.BytesIO(content)) as archive:
        entries = [name for name in archive.namelist() if not name.endswith("/")]
        if not entries:
            raise ValueError("archive has no entries")
        with archive.open(entries[0]) as handle:
            return pd.read_csv(
                handle,
                sep=CSV_SEPARATOR,
                dtype=str,
                encoding=encoding,
                keep_default_na=False,
            )


def canonicalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    renames: dict[str, str] = {}
    for column, aliases in COLUMN_ALIASES.items():
        found = pick_column(df, aliases)
        if found is not None and found != column.value:
            renames[found] = column.value
    out = df.rename(columns=renames)
    require_columns(out, set(RECORD_COLUMNS))
    return out[RECORD_COLUMNS]


def _decimal(value: str) -> Decimal:
    parsed = Decimal(value.strip())
    if not parsed.is_finite():
        raise ValueError(f"non-finite amount {value!r}")
    return parsed


def _parse_row(row: tuple[str, ...]) -> FundRecord:
    fund_id, report_date, fund_type, subscribers, net_assets, quota, inflow, outflow = row
    return FundRecord(
        fund_id=fund_id.strip(),
        report_date=parse_cvm_date(report_date),
        fund_type=fund_type.strip(),
        subscriber_count=int(subscribers),
        net_asset_value=_decimal(net_assets),
        quota_value=float(quota),
        daily_inflow=_decimal(inflow),
        daily_outflow=_decimal(outflow),
    )


def frame_to_records(df: pd.DataFrame) -> list[FundRecord]:
    """Convert canonical rows to records; any bad row fails the whole frame."""
    records: list[FundRecord] = []
    for position, row in enumerate(df.itertuples(index=False, name=None)):
        try:
            records.append(_parse_row(row))
        except (ValueError, InvalidOperation) as exc:
            # +2: header line and 1-based numbering
            raise ValueError(f"invalid row at line {position + 2}: {row!r}") from exc
    return records


class CvmDailyReportFetcher:
    """Fetch one month of CVM daily reports as ``FundRecord`` values.

    A non-2xx response means the month was not published and yields an empty
    list. Transport, archive, and parse failures raise ``DatasetFetchError``.
    """

    def __init__(self, config: CvmSourceConfig | None = None, session: requests.Session | None = None) -> None:
        self.config = config or settings.cvm_source
        self._session = session if session is not None else requests.Session()
        self._owns_session = session is None

    def __enter__(self) -> CvmDailyReportFetcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def fetch(self, year: str, month: str, *, fund_id: str | None = None) -> list[FundRecord]:
        period = f"{year}-{month}"
        url = build_archive_url(self.config.base_url, year, month)
        logger.info("Downloading daily report period=%s url=%s", period, url)

        try:
            response = self._session.get(url, timeout=self.config.timeout_seconds)
        except requests.RequestException as exc:
            logger.error("Download failed period=%s error=%s", period, exc)
            raise DatasetFetchError(period, str(exc)) from exc

        if not 200 <= response.status_code < 300:
            logger.info("No daily report published period=%s status=%s", period, response.status_code)
            return []

        try:
            df = canonicalize_columns(read_archive_frame(response.content, self.config.csv_encoding))
            total_rows = len(df)
            if fund_id is not None:
                wanted = normalize_cnpj(fund_id)
                df = df[df[CvmColumn.FUND_ID.value].str.replace(r"\D", "", regex=True) == wanted]
            records = frame_to_records(df)
        except (zipfile.BadZipFile, zlib.error, EOFError, OSError, ValueError) as exc:
            logger.error("Could not read daily report period=%s error=%s", period, exc)
            raise DatasetFetchError(period, str(exc)) from exc

        logger.info(
            "Loaded daily report period=%s rows(file)=%s rows(records)=%s",
            period,
            total_rows,
            len(records),
        )
        return records
