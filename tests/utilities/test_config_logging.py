from __future__ import annotations

import logging

import pytest

from etoll_voucher.utilities import config_logging
from etoll_voucher.utilities.config_logging import LOGGING, PACKAGE_LOGGER, configure_logging


@pytest.fixture
def restore_logging(tmp_path, monkeypatch):
    """Run in tmp_path and put the root and package loggers back afterwards."""
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    pkg = logging.getLogger(PACKAGE_LOGGER)
    saved = root.handlers[:], root.level, pkg.level
    yield root
    for h in root.handlers:
        if h not in saved[0]:
            h.close()
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    pkg.setLevel(saved[2])


def _handler_levels(root):
    return {type(h).__name__: h.level for h in root.handlers}


def test_configure_logging_defaults_send_info_to_file(tmp_path, restore_logging):
    """Without a level, the package logs at INFO to both console and file,
    and third-party loggers below WARNING are filtered at the root.
    """
    # Act
    path = configure_logging()

    # Assert
    assert (tmp_path / path).parent.is_dir()
    assert _handler_levels(restore_logging) == {
        "StreamHandler": logging.INFO,
        "RotatingFileHandler": logging.INFO,
    }
    assert restore_logging.level == logging.WARNING
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO
    assert logging.getLogger("openpyxl").level == logging.ERROR


def test_configure_logging_level_override(restore_logging):
    configure_logging("debug")

    assert _handler_levels(restore_logging) == {
        "StreamHandler": logging.DEBUG,
        "RotatingFileHandler": logging.DEBUG,
    }
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
    # the shared dict is not mutated by an override
    assert LOGGING["handlers"]["console"]["level"] == "INFO"
    assert LOGGING["loggers"][PACKAGE_LOGGER]["level"] == "INFO"


def test_package_info_messages_reach_log_file(restore_logging):
    configure_logging()
    logging.getLogger("etoll_voucher.controllers.tally_emitter").info("Voucher totals -> Debit: 1")
    for h in restore_logging.handlers:
        h.flush()

    assert "Voucher totals -> Debit: 1" in config_logging.LOG_FILE.read_text(encoding="utf-8")


def test_logging_dict_shape():
    assert LOGGING["version"] == 1
    assert set(LOGGING["root"]["handlers"]) == {"console", "run_file"}
    assert LOGGING["handlers"]["run_file"]["filename"] == str(config_logging.LOG_FILE)
