from __future__ import annotations

from datetime import date
import importlib.util
from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

HAS_PREFECT = importlib.util.find_spec("prefect") is not None


@unittest.skipUnless(HAS_PREFECT, "prefect is an optional extra (pip install -e .[orchestration])")
class TestRunReportFlow(unittest.TestCase):
    def setUp(self) -> None:
        from pipelines.prefect import run_report_flow

        self.module = run_report_flow

    def test_flow_is_registered_without_print_capture(self) -> None:
        flow = self.module.fund_report_flow

        self.assertEqual(flow.name, "cvm-fund-report")
        self.assertFalse(flow.log_prints)

    def test_operator_dates_are_parsed(self) -> None:
        self.assertEqual(self.module._to_date("31072023", "end"), date(2023, 7, 31))

    def test_invalid_date_is_rejected(self) -> None:
        from models.errors import InvalidInputError

        with self.assertRaises(InvalidInputError):
            self.module._to_date("31022023", "start")


if __name__ == "__main__":
    unittest.main()
