"""Error types raised by the fund report pipeline."""

from __future__ import annotations


class FundReportError(Exception):
    """Base class for errors the operator can recover from."""


class InvalidInputError(FundReportError, ValueError):
    pass


class DatasetFetchError(FundReportError):
    def __init__(self, period: str, reason: str) -> None:
        super().__init__(f"Failed to load CVM daily report for {period}: {reason}")
        self.period = period
        self.reason = reason


class NoMatchingRecordsError(FundReportError):
    def __init__(self, fund_id: str, start_date: object, end_date: object) -> None:
        super().__init__(f"No records with subscribers for CNPJ {fund_id} between {start_date} and {end_date}")
        self.fund_id = fund_id
        self.start_date = start_date
        self.end_date = end_date


class InvalidQuotaError(FundReportError):
    pass
