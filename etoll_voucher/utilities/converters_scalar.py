# etoll_voucher/utilities/converters_scalar.py
from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Final

ZERO: Final[Decimal] = Decimal("0")
CENT: Final[Decimal] = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    """
    Convert a report cell to Decimal, degrading to zero instead of raising.

    Accepts:
      • Decimal / int  → returned as Decimal
      • float          → via ``str`` to avoid binary artifacts; NaN → 0
      • str            → thousands separators (',') removed, then parsed

    Blank text, the placeholder ``"nan"`` (any case), non-numeric text and
    non-finite values (``"Infinity"``) all yield ``Decimal("0")``.

    Examples:
        to_decimal("1,234.50")  -> Decimal('1234.50')
        to_decimal("NaN")       -> Decimal('0')
        to_decimal("n/a")       -> Decimal('0')
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return ZERO
        return Decimal(str(value))

    s = str(value).replace(",", "").strip()
    if not s or s.lower() == "nan":
        return ZERO
    try:
        out = Decimal(s)
    except InvalidOperation:
        return ZERO
    return out if out.is_finite() else ZERO


def round2(value: Decimal | int | float | str) -> Decimal:
    """Round to 2 decimal places, half-up. Rounding an already-rounded value is a no-op."""
    if not isinstance(value, Decimal):
        value = to_decimal(value)
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def to_date(s: object, /) -> date:
    """
    Parse the date encodings found in settlement reports into a date.

    Supported examples:
      - 2024-12-31            (ISO)
      - 2024/12/31, 2024.12.31
      - 31.12.2024
      - 20241231              (ISO compact)
      - 31/12/2024, 12/31/2024 (D/M/Y when the first token > 12, else M/D/Y)
      - 2024-12-31T23:59:59Z  (ISO datetime; time/offset ignored)
      - 31-Dec-2024, 31 Dec 2024
      - 45567 or 45567.75     (Excel serial "General" date; fractional = time, ignored)

    Raises:
        ValueError: if the value is blank or no format matches.
    """
    if isinstance(s, datetime):
        return s.date()
    if isinstance(s, date):
        return s

    txt = "" if s is None else str(s).strip()
    if not txt:
        raise ValueError("Empty value cannot be converted to a date")

    # If it's a full ISO datetime, try Python's ISO parser (ignore time/offset).
    if "T" in txt or (" " in txt and txt[:4].isdigit()):
        iso_dt_clean = re.sub(r"Z$", "", txt)
        try:
            return datetime.fromisoformat(iso_dt_clean).date()
        except ValueError:
            pass  # fall through

    # Try a set of known string patterns (order matters).
    patterns = (
        "%Y-%m-%d",  # 2025-01-02
        "%Y/%m/%d",  # 2025/01/02
        "%Y.%m.%d",  # 2025.01.02
        "%d.%m.%Y",  # 02.01.2025
        "%Y%m%d",  # 20250102
        "%d-%b-%Y",  # 02-Jan-2025
        "%d %b %Y",  # 02 Jan 2025
        "%d-%b-%y",  # 02-Jan-25
    )
    for fmt in patterns:
        try:
            return datetime.strptime(txt, fmt).date()
        except ValueError:
            continue

    # Heuristic for D/M/Y vs M/D/Y ambiguity:
    m = _DATE_RE.match(txt)
    if m:
        a, sep, b, c = m.groups()
        first = int(a)
        second = int(b)
        year_fmt = "%Y" if len(c) == 4 else "%y"
        is_dmy = first > 12 and second <= 12
        fmt = ("%d{sep}%m{sep}" + year_fmt) if is_dmy else ("%m{sep}%d{sep}" + year_fmt)
        try:
            return datetime.strptime(txt, fmt.format(sep=sep)).date()
        except ValueError:
            pass

    # Only treat as Excel serial after failing all date-pattern attempts.
    if re.fullmatch(r"\d+(\.\d+)?", txt):
        d = _from_excel_serial(float(txt))
        if d is not None:
            return d

    raise ValueError(f"Unrecognized date format: {s!r}")


def _from_excel_serial(n: float) -> date | None:
    """Convert an Excel serial date (1900 system) to a date, or None if out of range.

    Excel serial 60 is the fictitious 1900-02-29, so serials >= 60 shift back a day.
    """
    days = int(n)
    if days <= 0 or days > _MAX_EXCEL_SERIAL:
        return None
    if days >= 60:
        days -= 1
    return date(1899, 12, 31) + timedelta(days=days)


_DATE_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*(\d{1,2})([/\-.])(\d{1,2})[/\-.](\d{2,4})\s*$"
)
# 9999-12-31
_MAX_EXCEL_SERIAL: Final[int] = 2958465
