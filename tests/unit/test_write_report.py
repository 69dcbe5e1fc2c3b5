from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
import sys
import tempfile
import unittest

from openpyxl import load_workbook

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "src"))

from load.write_report import write_fund_report
from models.schemas import FundMetrics, FundRecord, FundSummary


def _summary() -> FundSummary:
    records = (
        FundRecord(
            fund_id="00.017.024/0001-53",
            report_date=date(2023, 7, 3),
            fund_type="FI",
            subscriber_count=120,
            net_asset_value=Decimal("1500000.50"),
            quota_value=1.0,
            daily_inflow=Decimal("100.25"),
            daily_outflow=Decimal("0.00"),
        ),
        FundRecord(
            fund_id="00.017.024/0001-53",
            report_date=date(2023, 7, 4),
            fund_type="FI",
            subscriber_count=121,
            net_asset_value=Decimal("1510000.75"),
            quota_value=1.0523,
            daily_inflow=Decimal("0.00"),
            daily_outflow=Decimal("50.10"),
        ),
    )
    return FundSummary(
        fund_id="00017024000153",
        start_date=date(2023, 7, 1),
        end_date=date(2023, 7, 31),
        records=records,
        metrics=FundMetrics(
            return_pct=5.2300000001,
            total_inflow=Decimal("100.25"),
            total_outflow=Decimal("50.10"),
            net_flow=Decimal("50.15"),
        ),
    )


class TestWriteFundReport(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.output_dir = Path(self.tmp.name) / "reports"

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def _write(self):
        path = write_fund_report(_summary(), self.output_dir, now=datetime(2023, 8, 1, 14, 5, 9))
        workbook = load_workbook(path)
        self.addCleanup(workbook.close)
        return path, workbook["Fundos"]

    def test_file_name_uses_timestamp_and_creates_directory(self) -> None:
        path, _ = self._write()

        self.assertEqual(path.parent, self.output_dir)
        self.assertEqual(path.name, "FundosFiltrados_20230801140509.xlsx")

    def test_header_and_rows_follow_record_field_order(self) -> None:
        _, sheet = self._write()

        headers = [sheet.cell(row=1, column=col).value for col in range(1, 9)]
        self.assertEqual(
            headers,
            ["CNPJ_FUNDO", "DT_COMPTC", "TP_FUNDO", "NR_COTST", "VL_PATRIM_LIQ", "VL_QUOTA", "CAPTC_DIA", "RESG_DIA"],
        )
        self.assertEqual(sheet["A2"].value, "00.017.024/0001-53")
        self.assertEqual(sheet["B2"].value.date(), date(2023, 7, 3))
        self.assertEqual(sheet["C2"].value, "FI")
        self.assertEqual(sheet["D3"].value, 121)
        self.assertAlmostEqual(sheet["E3"].value, 1510000.75)
        self.assertAlmostEqual(sheet["F3"].value, 1.0523)
        self.assertAlmostEqual(sheet["G2"].value, 100.25)
        self.assertAlmostEqual(sheet["H3"].value, 50.10)
        self.assertIsNone(sheet["A4"].value)

    def test_column_number_formats(self) -> None:
        _, sheet = self._write()

        for row in (2, 3):
            self.assertEqual(sheet[f"B{row}"].number_format, "dd-mm-yyyy")
            self.assertEqual(sheet[f"E{row}"].number_format, "#,##0.00")
            self.assertEqual(sheet[f"G{row}"].number_format, "#,##0.00")
            self.assertEqual(sheet[f"H{row}"].number_format, "#,##0.00")

    def test_summary_cells(self) -> None:
        _, sheet = self._write()

        self.assertEqual(sheet["I1"].value, "Rentabilidade no Período:")
        self.assertAlmostEqual(sheet["I2"].value, 5.23)
        self.assertEqual(sheet["J1"].value, "Captação no Período:")
        self.assertAlmostEqual(sheet["J2"].value, 100.25)
        self.assertEqual(sheet["K1"].value, "Resgates no Período:")
        self.assertAlmostEqual(sheet["K2"].value, 50.10)
        self.assertEqual(sheet["L1"].value, "Captação Líquida:")
        self.assertAlmostEqual(sheet["L2"].value, 50.15)


if __name__ == "__main__":
    unittest.main()
