# etoll_voucher/controllers/voucher_generator.py
from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from etoll_voucher.controllers.row_normalizer import load_report_rows
from etoll_voucher.controllers.settlement_date import make_stamp
from etoll_voucher.controllers.tally_emitter import emit
from etoll_voucher.controllers.voucher_builder import build_voucher
from etoll_voucher.data_model.run_result import RunResult
from etoll_voucher.utilities.settings import GeneratorSettings

log = logging.getLogger(__name__)


def generate(
    report_path: Path,
    *,
    settings: Optional[GeneratorSettings] = None,
    logger: Optional[logging.Logger] = None,
    today: Callable[[], date] = date.today,
) -> RunResult:
    """Generate the accounting voucher for one settlement report.

    Parameters
    ----------
    report_path : Path
        Settlement report workbook; only its first sheet is read.
    settings : GeneratorSettings, optional
        Run number and output root. Defaults to ``GeneratorSettings()``.
    logger : logging.Logger, optional
        Logger for this invocation; defaults to this module's logger.
    today : Callable[[], date]
        Clock used when the report carries no parseable settlement date.

    Returns
    -------
    RunResult
        Status, written path and totals. An unbalanced voucher is reported as
        ``EnumRunStatus.ERROR``, not raised.

    Raises
    ------
    FileNotFoundError
        If ``report_path`` does not exist; nothing is written.
    OSError
        If the output folder or workbook cannot be written.
    """
    lg = logger or log
    cfg = settings or GeneratorSettings()
    report_path = Path(report_path)
    if not report_path.is_file():
        raise FileNotFoundError(f"Settlement report not found: {report_path}")

    lg.info("Processing report: %s", report_path)
    rows = load_report_rows(report_path)
    lg.debug("Loaded %d data rows from %s", len(rows), report_path)

    stamp = make_stamp(rows, cfg.run_number, today=today, logger=lg)
    lines = build_voucher(rows, stamp, logger=lg)
    result = emit(lines, stamp, cfg.output_root, logger=lg)
    lg.info("Result: %s", result.to_dict())
    return result
