"""Common enums used across extraction, aggregation, and report writing."""

from enum import Enum


class CvmColumn(str, Enum):
    """Header names of the CVM daily report (Informe Diario) CSV."""

    FUND_ID = "CNPJ_FUNDO"
    REPORT_DATE = "DT_COMPTC"
    FUND_TYPE = "TP_FUNDO"
    SUBSCRIBER_COUNT = "NR_COTST"
    NET_ASSET_VALUE = "VL_PATRIM_LIQ"
    QUOTA_VALUE = "VL_QUOTA"
    DAILY_INFLOW = "CAPTC_DIA"
    DAILY_OUTFLOW = "RESG_DIA"


class SummaryLabel(str, Enum):
    RETURN_PCT = "Rentabilidade no Período:"
    TOTAL_INFLOW = "Captação no Período:"
    TOTAL_OUTFLOW = "Resgates no Período:"
    NET_FLOW = "Captação Líquida:"
