"""Pipeline entrypoint: interactive CVM fund report generator.

Asks for a fund CNPJ and a date range, downloads the CVM daily reports for
every month in the range, and writes an Excel summary. Repeats until the
operator answers anything other than ``S``.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
import logging
from pathlib import Path
import sys

# Allow running directly from repo root without package installation.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from config.settings import settings  # noqa: E402
from extract.cvm_daily_reader import CvmDailyReportFetcher  # noqa: E402
from models.errors import FundReportError  # noqa: E402
from models.schemas import ReportRequest  # noqa: E402
from services.ports import DailyReportSource  # noqa: E402
from services.report_service import run_report  # noqa: E402
from transform.normalize.cnpj import is_valid_cnpj  # noqa: E402
from transform.normalize.dates import parse_operator_date  # noqa: E402
from utils.logging_setup import configure_logging  # noqa: E402

logger = logging.getLogger("run_fund_report")

Reader = Callable[[str], str]
Writer = Callable[[str], None]

CNPJ_PROMPT = "Digite o CNPJ do fundo (ex: 00.017.024/0001-53): "
START_PROMPT = "Digite a data inicial (ex: 01072023): "
END_PROMPT = "Digite a data final (ex: 31072023): "
AGAIN_PROMPT = "Deseja gerar nova solicitação? (S/N): "

INVALID_CNPJ = "CNPJ inválido, verifique o formato e insira novamente."
INVALID_DATE = "Data inválida, verifique o formato e insira novamente."
INVERTED_RANGE = "A data final deve ser igual ou posterior à data inicial."


def _ask_cnpj(read: Reader, write: Writer) -> str:
    while True:
        value = read(CNPJ_PROMPT).strip()
        if is_valid_cnpj(value):
            return value
        write(INVALID_CNPJ)


def _ask_date(prompt: str, read: Reader, write: Writer, not_before: date | None = None) -> date:
    while True:
        parsed = parse_operator_date(read(prompt))
        if parsed is None:
            write(INVALID_DATE)
        elif not_before is not None and parsed < not_before:
            write(INVERTED_RANGE)
        else:
            return parsed


def _ask_request(read: Reader, write: Writer) -> ReportRequest:
    cnpj = _ask_cnpj(read, write)
    start_date = _ask_date(START_PROMPT, read, write)
    end_date = _ask_date(END_PROMPT, read, write, not_before=start_date)
    return ReportRequest(fund_id=cnpj, start_date=start_date, end_date=end_date)


def _wants_another(read: Reader) -> bool:
    try:
        answer = read(AGAIN_PROMPT)
    except EOFError:
        return False
    return answer.strip().upper() == "S"


def run_session(
    source: DailyReportSource,
    output_dir: Path,
    read: Reader = input,
    write: Writer = print,
) -> int:
    """Run request cycles until the operator declines; return the number of reports written."""
    written = 0
    while True:
        request = _ask_request(read, write)
        try:
            path = run_report(source, request, output_dir)
        except FundReportError as exc:
            write(f"Não foi possível gerar o relatório: {exc}")
        else:
            written += 1
            write(f"Arquivo gerado com sucesso: {path}")

        if not _wants_another(read):
            return written


def main() -> int:
    configure_logging(settings.log_level)
    output_dir = settings.report_output_dir

    try:
        with CvmDailyReportFetcher(settings.cvm_source) as fetcher:
            written = run_session(fetcher, output_dir)
    except (EOFError, KeyboardInterrupt):
        print()
        return 130
    except Exception as exc:
        logger.debug("run_fund_report failed", exc_info=True)
        print(f"run_fund_report failed: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    print("run_fund_report completed", f"reports={written}", f"output_dir={output_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
