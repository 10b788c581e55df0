# etoll_voucher/utilities/config_logging.py
from __future__ import annotations

import copy
import logging.config
from pathlib import Path
from typing import Optional

LOG_FILE = Path("logs") / "etoll_voucher.log"

# Package logger name; engine modules log under it.
PACKAGE_LOGGER = "etoll_voucher"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "console": {"format": "%(levelname)s: %(message)s"},
        "audit": {
            "format": "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "console",
        },
        # settlement dates, derived amounts and totals are logged at INFO
        "run_file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "INFO",
            "formatter": "audit",
            "filename": str(LOG_FILE),
            "maxBytes": 2_000_000,
            "backupCount": 10,
            "encoding": "utf-8",
        },
    },
    "loggers": {
        PACKAGE_LOGGER: {"level": "INFO"},
        # openpyxl warns about unsupported extensions in bank-exported workbooks
        "openpyxl": {"level": "ERROR"},
    },
    "root": {"level": "WARNING", "handlers": ["console", "run_file"]},
}


def configure_logging(level: Optional[str] = None) -> Path:
    """Apply ``LOGGING`` and return the log file path.

    The rotating file handler needs its folder to exist, so it is created first.
    ``level`` (e.g. ``"DEBUG"``) lowers or raises the package logger and both
    handlers together, so per-line voucher detail reaches the log file too.
    """
    LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    cfg = copy.deepcopy(LOGGING)
    if level:
        level = level.upper()
        cfg["loggers"][PACKAGE_LOGGER]["level"] = level
        for handler in cfg["handlers"].values():
            handler["level"] = level
    logging.config.dictConfig(cfg)
    return LOG_FILE
