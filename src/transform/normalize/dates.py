"""Parse dates typed by the operator and read from CVM files."""

from __future__ import annotations

from datetime import date, datetime

OPERATOR_DATE_FORMAT = "%d%m%Y"
CVM_DATE_FORMAT = "%Y-%m-%d"


def parse_operator_date(value: str) -> date | None:
    """Parse a ``ddMMyyyy`` string such as ``01072023``; None when invalid."""
    cleaned = (value or "").strip()
    if len(cleaned) != 8 or not cleaned.isdigit():
        return None
    try:
        return datetime.strptime(cleaned, OPERATOR_DATE_FORMAT).date()
    except ValueError:
        return None


def parse_cvm_date(value: str) -> date:
    return datetime.strptime(value.strip(), CVM_DATE_FORMAT).date()
