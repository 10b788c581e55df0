from enum import Enum


class EnumRunStatus(Enum):
    """
    Outcome of one generator run: OK when debit and credit totals tally.
    """
    OK = "ok"
    ERROR = "error"

    @classmethod
    def from_totals(cls, debit_total, credit_total) -> "EnumRunStatus":
        return cls.OK if debit_total == credit_total else cls.ERROR
