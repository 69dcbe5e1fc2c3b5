"""Application settings loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CvmSourceConfig:
    base_url: str
    timeout_seconds: float
    csv_encoding: str


@dataclass(frozen=True)
class Settings:
    app_env: str
    log_level: str
    cvm_source: CvmSourceConfig
    report_output_dir: Path


def _cvm_source() -> CvmSourceConfig:
    return CvmSourceConfig(
        base_url=os.getenv(
            "CVM_INF_DIARIO_BASE_URL",
            "https://dados.cvm.gov.br/dados/FI/DOC/INF_DIARIO/DADOS",
        ).rstrip("/"),
        timeout_seconds=float(os.getenv("CVM_HTTP_TIMEOUT_SECONDS", "60")),
        csv_encoding=os.getenv("CVM_CSV_ENCODING", "latin-1"),
    )


def get_settings() -> Settings:
    return Settings(
        app_env=os.getenv("APP_ENV", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        cvm_source=_cvm_source(),
        report_output_dir=Path(os.getenv("REPORT_OUTPUT_DIR", str(Path.home() / "Downloads"))).expanduser(),
    )


settings = get_settings()
