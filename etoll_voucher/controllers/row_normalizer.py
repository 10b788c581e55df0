"""
Settlement report → normalized rows.

This module turns the first sheet of a daily settlement report into an ordered
list of immutable `ReportRow` records that the aggregation rules can query.

Primary responsibilities:
• Read the raw sheet (header row included) with pandas, taking the formula
  text from openpyxl for formulas saved without a calculated value.
• Render every cell as a string the same way regardless of its Excel type.
• Forward-fill the grouping columns that reports print once per block.
• Derive the lower-cased cycle/type/channel lookup keys.
"""

# etoll_voucher/controllers/row_normalizer.py
from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from numbers import Number
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Sequence, Tuple

import openpyxl
import pandas as pd

from etoll_voucher.data_model.columns import (
    COL_CHANNEL,
    COL_TRANSACTION_CYCLE,
    COL_TRANSACTION_TYPE,
    FORWARD_FILL_COLUMNS,
)
from etoll_voucher.data_model.report_row import ReportRow
from etoll_voucher.utilities.core_util import is_null_or_whitespace, safe_lower

# --- Reading the sheet -------------------------------------------------------


def read_formula_sources(path: Path) -> Dict[Tuple[int, int], str]:
    """Formula text of the first sheet, keyed by 0-based (row, column).

    The leading ``=`` is dropped. Only formula cells appear in the mapping.
    """
    wb = openpyxl.load_workbook(path, data_only=False)
    try:
        ws = wb.worksheets[0]
        sources: Dict[Tuple[int, int], str] = {}
        rows = ws.iter_rows(
            min_row=1, min_col=1, max_row=ws.max_row, max_col=ws.max_column, values_only=True
        )
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                # array formulas come back as objects carrying the text
                text = getattr(value, "text", value)
                if isinstance(text, str) and text.startswith("="):
                    sources[(r, c)] = text[1:]
        return sources
    finally:
        wb.close()


def read_report_sheet(path: Path) -> List[List[Any]]:
    """Read the first sheet of ``path`` as raw rows, header row first.

    Parameters
    ----------
    path : Path
        Workbook to read. Only the first sheet is used.

    Returns
    -------
    List[List[Any]]
        Cell values as delivered by pandas/openpyxl (``dtype=object``), so
        dates stay dates and booleans stay booleans for `render_cell`.

    Notes
    -----
    Formula cells come back as their cached result. A formula that was never
    calculated has no cached result; its source text (without ``=``) is used
    instead.
    """
    df = pd.read_excel(path, sheet_name=0, header=None, dtype=object)
    raw = df.values.tolist()
    for (r, c), text in read_formula_sources(path).items():
        while len(raw) <= r:
            raw.append([])
        row = raw[r]
        if len(row) <= c:
            row.extend([None] * (c + 1 - len(row)))
        if _is_missing(row[c]):
            row[c] = text
    return raw


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def render_cell(value: Any) -> str:
    """Render one raw cell value as report text.

    - blank / NaN / NaT      → ``""``
    - bool                   → ``"true"`` / ``"false"``
    - datetime / date        → ISO date ``YYYY-MM-DD`` (time of day dropped)
    - int / float / Decimal  → plain decimal, trailing zeros stripped (``12.50`` → ``"12.5"``)
    - str                    → unchanged
    """
    if _is_missing(value):
        return ""
    if isinstance(value, str):
        return value
    if pd.api.types.is_bool(value):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, time):
        return value.isoformat()
    if pd.api.types.is_integer(value):
        return str(int(value))
    if isinstance(value, (Number, Decimal)):
        d = Decimal(str(value)).normalize()
        txt = format(d, "f")
        return "0" if txt in {"-0", "0"} else txt
    return str(value)


# --- Forward-fill -------------------------------------------------------------


def forward_fill(records: Sequence[Dict[str, str]], column: str) -> List[Dict[str, str]]:
    """Return copies of ``records`` with blank ``column`` cells filled from above.

    A blank (or whitespace-only) cell takes the nearest preceding non-blank value,
    trimmed. Blanks before the first non-blank value stay ``""``. Inputs are not
    modified.
    """
    out: List[Dict[str, str]] = []
    last = ""
    for rec in records:
        v = rec.get(column, "")
        if is_null_or_whitespace(v):
            out.append({**rec, column: last})
        else:
            last = v.strip()
            out.append(dict(rec))
    return out


# --- Normalization ------------------------------------------------------------


def _is_blank_row(raw: Sequence[Any]) -> bool:
    return all(_is_missing(v) for v in raw)


def normalize_rows(raw_rows: Sequence[Sequence[Any]]) -> List[ReportRow]:
    """Convert raw sheet rows into `ReportRow`s.

    The first row with any content is the header; empty rows above it are
    ignored. Every header column is present in every row; cells beyond a short
    row's end read as ``""``. Data rows with no cell content at all are skipped,
    so the row "above" another row is the nearest one with content. The
    grouping columns are forward-filled before the lookup keys are derived.
    """
    body = list(raw_rows)
    while body and _is_blank_row(body[0]):
        body.pop(0)
    if not body:
        return []

    headers = [render_cell(h).strip() for h in body[0]]
    records: List[Dict[str, str]] = []
    for raw in body[1:]:
        if _is_blank_row(raw):
            continue
        records.append(
            {h: render_cell(raw[i]) if i < len(raw) else "" for i, h in enumerate(headers)}
        )

    for column in FORWARD_FILL_COLUMNS:
        records = forward_fill(records, column)

    return [
        ReportRow(
            idx=i,
            values=MappingProxyType(rec),
            cycle_key=safe_lower(rec.get(COL_TRANSACTION_CYCLE)),
            type_key=safe_lower(rec.get(COL_TRANSACTION_TYPE)),
            channel_key=safe_lower(rec.get(COL_CHANNEL)),
        )
        for i, rec in enumerate(records)
    ]


def load_report_rows(path: Path) -> List[ReportRow]:
    """Read ``path`` and normalize its first sheet."""
    return normalize_rows(read_report_sheet(path))
