# etoll_voucher/data_model/aggregation_rule.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

from etoll_voucher.data_model.columns import COL_SETAMTCR, COL_SETAMTDR
from etoll_voucher.data_model.enum_side import EnumSide
from etoll_voucher.data_model.enum_special import EnumSpecial


@dataclass(frozen=True)
class AggregationRule:
    """
    How one voucher line's amount is derived from the report rows.

    A rule is either a column sum over the rows whose cycle key is in
    ``cycle_keys`` (``amount_column`` set), or a special case (``special`` set),
    never both. ``type_keys`` and ``require_channel`` narrow the matched rows
    further; ``gst_row`` selects the INWARD GST row itself rather than the
    income row above it for the inward specials.
    """
    cycle_keys: Optional[FrozenSet[str]] = None
    amount_column: Optional[str] = None
    side: Optional[EnumSide] = None
    special: Optional[EnumSpecial] = None
    type_keys: Optional[FrozenSet[str]] = None
    require_channel: bool = False
    gst_row: bool = False

    def __post_init__(self) -> None:
        if self.amount_column and self.special:
            raise ValueError(
                f"Rule cannot sum {self.amount_column!r} and be special {self.special.value!r}"
            )

    @classmethod
    def column_sum(
        cls, cycles: tuple[str, ...], column: str, side: EnumSide, **filters
    ) -> "AggregationRule":
        return cls(
            cycle_keys=frozenset(c.lower() for c in cycles),
            amount_column=column,
            side=side,
            **filters,
        )

    def matches(self, cycle_key: str, type_key: str, channel_key: str) -> bool:
        """True if a row with these lookup keys falls in this rule's scope."""
        if self.cycle_keys is None or cycle_key not in self.cycle_keys:
            return False
        if self.type_keys is not None and type_key not in self.type_keys:
            return False
        if self.require_channel and not channel_key:
            return False
        return True


ARBITRATION_VERDICT = "Arbitration Vedict"

RULES: Dict[str, AggregationRule] = {
    "NETC Settled Transaction": AggregationRule.column_sum(
        ("netc settled transaction",), COL_SETAMTCR, EnumSide.CREDIT
    ),
    "Debit Adjustment": AggregationRule.column_sum(
        ("debitadjustment", "debit adjustment"), COL_SETAMTCR, EnumSide.CREDIT
    ),
    "Good Faith Acceptance Credit": AggregationRule.column_sum(
        ("good faith acceptance",), COL_SETAMTCR, EnumSide.CREDIT
    ),
    "Credit Adjustment": AggregationRule.column_sum(
        ("credit adjustment",), COL_SETAMTDR, EnumSide.DEBIT
    ),
    "Chargeback Acceptance": AggregationRule.column_sum(
        ("chargeback acceptance",), COL_SETAMTDR, EnumSide.DEBIT
    ),
    "Good Faith Acceptance Debit": AggregationRule(
        cycle_keys=frozenset({"good faith acceptance"}),
        side=EnumSide.VARIABLE,
        special=EnumSpecial.GOODFAITH,
    ),
    "Pre-Arbitration Acceptance": AggregationRule.column_sum(
        ("pre-arbitration acceptance",), COL_SETAMTDR, EnumSide.DEBIT
    ),
    "Pre-Arbitration Deemed Acceptance": AggregationRule.column_sum(
        ("pre-arbitration deemed acceptance",), COL_SETAMTDR, EnumSide.DEBIT
    ),
    "Debit chargeback deemed Acceptance": AggregationRule.column_sum(
        ("debit chargeback deemed acceptance",), COL_SETAMTDR, EnumSide.DEBIT
    ),
    "Arbitration Acceptance": AggregationRule.column_sum(
        ("arbitration acceptance",), COL_SETAMTDR, EnumSide.DEBIT
    ),
    # only debit/non_fin rows that name a channel
    ARBITRATION_VERDICT: AggregationRule.column_sum(
        ("arbitration vedict",),
        COL_SETAMTDR,
        EnumSide.DEBIT,
        type_keys=frozenset({"debit", "non_fin"}),
        require_channel=True,
    ),
    "Income Debit": AggregationRule(side=EnumSide.DEBIT, special=EnumSpecial.INWARD_DEBIT),
    "GST Debit": AggregationRule(
        side=EnumSide.DEBIT, special=EnumSpecial.INWARD_DEBIT, gst_row=True
    ),
    "Income Credit": AggregationRule(side=EnumSide.CREDIT, special=EnumSpecial.INWARD_CREDIT),
    "GST Credit": AggregationRule(
        side=EnumSide.CREDIT, special=EnumSpecial.INWARD_CREDIT, gst_row=True
    ),
    "Final Net Amt": AggregationRule(side=EnumSide.DEBIT, special=EnumSpecial.FINAL),
}
