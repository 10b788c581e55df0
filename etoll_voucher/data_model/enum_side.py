from enum import Enum


class EnumSide(Enum):
    """
    Ledger side a voucher line posts to.
    VARIABLE lines post to whichever side carries a non-zero amount.
    """
    DEBIT = "debit"
    CREDIT = "credit"
    VARIABLE = "variable"
