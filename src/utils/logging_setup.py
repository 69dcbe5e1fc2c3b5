"""Logging configuration shared by the pipeline entrypoints."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(max(logging.getLogger().level, logging.INFO))
