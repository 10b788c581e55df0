from enum import Enum


class EnumSpecial(Enum):
    """
    Voucher lines whose amount is not a plain cycle-scoped column sum.
    """
    FINAL = "final"  # last non-blank Final Net Amt, scanning from the bottom
    INWARD_DEBIT = "inward_debit"  # Service Fee Amt Dr around the INWARD GST row
    INWARD_CREDIT = "inward_credit"  # Service Fee Amt Cr around the INWARD GST row
    GOODFAITH = "goodfaith"  # debit or credit sum, whichever is non-zero
