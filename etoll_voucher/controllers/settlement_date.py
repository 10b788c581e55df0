# etoll_voucher/controllers/settlement_date.py
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional, Sequence

from etoll_voucher.data_model.columns import COL_SETTLEMENT_DATE
from etoll_voucher.data_model.report_row import ReportRow
from etoll_voucher.data_model.settlement_stamp import SettlementStamp
from etoll_voucher.utilities.converters_scalar import to_date

log = logging.getLogger(__name__)

# Tried in order before the lenient fallback parser.
_SETTLEMENT_FORMATS = ("%Y-%m-%d", "%d-%m-%Y", "%d/%m/%Y")


def parse_settlement_value(text: str) -> Optional[date]:
    """Parse one Settlement Date cell, or return None if it is blank or unparsable."""
    s = (text or "").strip()
    if not s:
        return None
    for fmt in _SETTLEMENT_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    try:
        return to_date(s)
    except ValueError:
        return None


def resolve_settlement_date(
    rows: Sequence[ReportRow],
    today: Callable[[], date] = date.today,
    logger: Optional[logging.Logger] = None,
) -> date:
    """
    Return the first parseable Settlement Date in row order.

    Falls back to ``today()`` when no row carries a parseable date; pass a fixed
    clock for reproducible runs.
    """
    lg = logger or log
    for row in rows:
        parsed = parse_settlement_value(row.get(COL_SETTLEMENT_DATE))
        if parsed is not None:
            lg.info("Settlement date inside report = %s (row %d)", parsed, row.idx)
            return parsed
    fallback = today()
    lg.warning("No parseable %r found; using current date %s", COL_SETTLEMENT_DATE, fallback)
    return fallback


def make_stamp(
    rows: Sequence[ReportRow],
    run_number: int,
    today: Callable[[], date] = date.today,
    logger: Optional[logging.Logger] = None,
) -> SettlementStamp:
    return SettlementStamp(
        settlement_date=resolve_settlement_date(rows, today=today, logger=logger),
        run_number=run_number,
    )
