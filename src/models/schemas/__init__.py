"""Schema objects for core entities."""

from .fund_record import FundRecord
from .report import FundMetrics, FundSummary, ReportRequest

__all__ = ["FundRecord", "FundMetrics", "FundSummary", "ReportRequest"]
