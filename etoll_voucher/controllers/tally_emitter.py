"""
Voucher tally and workbook output.

Totals the built voucher, decides whether it balances, and writes the two-sheet
workbook ("Voucher" detail + "Upload" posting form) into the date-partitioned
output folder. Both balanced and unbalanced vouchers are written; only the file
name and the reported status differ.
"""

# etoll_voucher/controllers/tally_emitter.py
from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from etoll_voucher.data_model.columns import UPLOAD_HEADERS, VOUCHER_HEADERS
from etoll_voucher.data_model.enum_run_status import EnumRunStatus
from etoll_voucher.data_model.run_result import UNBALANCED_MESSAGE, RunResult
from etoll_voucher.data_model.settlement_stamp import SettlementStamp
from etoll_voucher.data_model.voucher_line import VoucherLine
from etoll_voucher.utilities.converters_scalar import ZERO, round2

log = logging.getLogger(__name__)

VOUCHER_SHEET = "Voucher"
UPLOAD_SHEET = "Upload"
FILE_PREFIX = "ETOLL_ACQUIRING_VOUCHER"
ERROR_PREFIX = "ERROR_"

_MAX_COLUMN_WIDTH = 60


# --- Tally --------------------------------------------------------------------


def tally(lines: Sequence[VoucherLine]) -> Tuple[Decimal, Decimal]:
    """Return (debit total, credit total), rounding to 2 places after each addition."""
    debit_total = credit_total = ZERO
    for line in lines:
        if line.debit is not None:
            debit_total = round2(debit_total + line.debit)
        if line.credit is not None:
            credit_total = round2(credit_total + line.credit)
    return round2(debit_total), round2(credit_total)


# --- Sheet content ------------------------------------------------------------


def voucher_rows(lines: Sequence[VoucherLine]) -> List[list]:
    """Detail sheet body: one row per line, spacers included as blank rows."""
    return [
        [
            line.account_no,
            float(line.debit) if line.debit is not None else None,
            float(line.credit) if line.credit is not None else None,
            line.narration,
            line.description,
        ]
        for line in lines
    ]


def upload_rows(lines: Sequence[VoucherLine]) -> List[list]:
    """Posting form body: only lines carrying an amount, marked ``D`` or ``C``."""
    return [
        [line.account_no, line.side_code, float(line.amount), line.narration]
        for line in lines
        if line.amount is not None
    ]


# --- Paths --------------------------------------------------------------------


def output_folder(output_root: Path, settlement: date) -> Path:
    """``<root>/<yyyy>/<mm>/<dd>`` for the settlement date."""
    return (
        Path(output_root)
        / f"{settlement.year:04d}"
        / f"{settlement.month:02d}"
        / f"{settlement.day:02d}"
    )


def voucher_file_name(stamp: SettlementStamp, balanced: bool) -> str:
    name = f"{FILE_PREFIX}_{stamp.ddmmyy}_N{stamp.run_number}.xlsx"
    return name if balanced else ERROR_PREFIX + name


# --- Writing ------------------------------------------------------------------


def _autosize(ws) -> None:
    for col_cells in ws.iter_cols(min_row=1, max_row=ws.max_row):
        longest = max((len(str(c.value)) for c in col_cells if c.value is not None), default=0)
        ws.column_dimensions[col_cells[0].column_letter].width = min(
            max(longest + 2, 10), _MAX_COLUMN_WIDTH
        )


def write_voucher_workbook(path: Path, lines: Sequence[VoucherLine]) -> Path:
    """Write the "Voucher" and "Upload" sheets to ``path`` (created or overwritten)."""
    voucher_df = pd.DataFrame(voucher_rows(lines), columns=VOUCHER_HEADERS)
    upload_df = pd.DataFrame(upload_rows(lines), columns=UPLOAD_HEADERS)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        voucher_df.to_excel(writer, sheet_name=VOUCHER_SHEET, index=False)
        upload_df.to_excel(writer, sheet_name=UPLOAD_SHEET, index=False)
        for ws in writer.sheets.values():
            _autosize(ws)
    return path


def emit(
    lines: Sequence[VoucherLine],
    stamp: SettlementStamp,
    output_root: Path,
    logger: Optional[logging.Logger] = None,
) -> RunResult:
    """
    Tally ``lines`` and write the voucher workbook.

    Returns a `RunResult` whose status is OK only when both totals match to the
    cent. Folder creation and write failures propagate as ``OSError``.
    """
    lg = logger or log
    debit_total, credit_total = tally(lines)
    status = EnumRunStatus.from_totals(debit_total, credit_total)
    balanced = status is EnumRunStatus.OK
    lg.info("Voucher totals -> Debit: %s Credit: %s", debit_total, credit_total)

    folder = output_folder(output_root, stamp.settlement_date)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / voucher_file_name(stamp, balanced)
    write_voucher_workbook(path, lines)

    if balanced:
        lg.info("Voucher + Upload saved at: %s", path)
        return RunResult(status, path, debit_total, credit_total)
    lg.warning("%s (Debit %s vs Credit %s): %s", UNBALANCED_MESSAGE, debit_total, credit_total, path)
    return RunResult(status, path, debit_total, credit_total, message=UNBALANCED_MESSAGE)
