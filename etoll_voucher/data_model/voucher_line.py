from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class VoucherLine:
    """
    One output line of the voucher. At most one of ``debit``/``credit`` is set;
    a zero amount is stored as ``None`` so the cell is left blank.
    """
    account_no: str
    debit: Optional[Decimal]
    credit: Optional[Decimal]
    narration: str
    description: str

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        if self.debit is not None and self.debit == 0:
            object.__setattr__(self, "debit", None)
        if self.credit is not None and self.credit == 0:
            object.__setattr__(self, "credit", None)
        if self.debit is not None and self.credit is not None:
            raise ValueError(
                f"Voucher line {self.description!r} has both debit {self.debit} and credit {self.credit}"
            )

    @classmethod
    def blank(cls) -> "VoucherLine":
        return cls("", None, None, "", "")

    @property
    def is_spacer(self) -> bool:
        return not self.account_no and not self.description

    @property
    def amount(self) -> Optional[Decimal]:
        return self.debit if self.debit is not None else self.credit

    @property
    def side_code(self) -> str:
        """``"D"``, ``"C"`` or ``""`` as used on the upload sheet."""
        if self.debit is not None:
            return "D"
        if self.credit is not None:
            return "C"
        return ""
