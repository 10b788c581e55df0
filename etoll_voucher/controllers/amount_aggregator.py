"""
Rule-driven amount aggregation over normalized report rows.

Each voucher description maps to an `AggregationRule` (see
`etoll_voucher.data_model.aggregation_rule.RULES`). This module evaluates a rule
against the rows of one report and returns the rounded amount on the correct
ledger side.

Rule kinds
    • Column sum: rows whose cycle key is in the rule's scope (optionally
      narrowed by transaction type and a non-blank channel), summing one column.
    • FINAL: the last non-blank Final Net Amt, scanning from the bottom.
    • INWARD_DEBIT / INWARD_CREDIT: service-fee amounts on the INWARD GST row
      (GST) and on the row just above it (Income).
    • GOODFAITH: debit and credit sums over the cycle scope; the debit wins
      when both are non-zero.

All amounts are rounded half-up to 2 places; a zero result is reported as an
absent amount (``None``), never as ``0.00``.
"""

# etoll_voucher/controllers/amount_aggregator.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from functools import cached_property
from typing import Optional, Sequence, Tuple

from etoll_voucher.data_model.aggregation_rule import AggregationRule
from etoll_voucher.data_model.columns import (
    COL_FINAL_NET_AMT,
    COL_INWARD_OUTWARD,
    COL_SERVICE_FEE_CR,
    COL_SERVICE_FEE_DR,
    COL_SETAMTCR,
    COL_SETAMTDR,
)
from etoll_voucher.data_model.enum_side import EnumSide
from etoll_voucher.data_model.enum_special import EnumSpecial
from etoll_voucher.data_model.report_row import ReportRow
from etoll_voucher.utilities.converters_scalar import ZERO, round2, to_decimal
from etoll_voucher.utilities.core_util import is_null_or_whitespace

log = logging.getLogger(__name__)

INWARD_GST_MARKER = "inward gst"


@dataclass(frozen=True)
class LineAmount:
    """Debit/credit pair for one voucher line; zero amounts are ``None``."""
    debit: Optional[Decimal] = None
    credit: Optional[Decimal] = None

    @classmethod
    def on_side(cls, amount: Decimal, side: Optional[EnumSide]) -> "LineAmount":
        if amount == 0:
            return cls()
        if side is EnumSide.CREDIT:
            return cls(credit=amount)
        return cls(debit=amount)


@dataclass(frozen=True)
class InwardGstAmounts:
    income_debit: Decimal = ZERO
    income_credit: Decimal = ZERO
    gst_debit: Decimal = ZERO
    gst_credit: Decimal = ZERO


# --- Building blocks ------------------------------------------------------------


def cycle_scoped_sum(rows: Sequence[ReportRow], rule: AggregationRule, column: str) -> Decimal:
    """Sum ``column`` over the rows in ``rule``'s scope, rounded to 2 places.

    Unparsable cells contribute zero. A rule without cycle keys matches nothing.
    """
    total = sum(
        (
            to_decimal(r.get(column))
            for r in rows
            if rule.matches(r.cycle_key, r.type_key, r.channel_key)
        ),
        ZERO,
    )
    return round2(total)


def final_net_amount(rows: Sequence[ReportRow]) -> Decimal:
    """Return the last non-blank Final Net Amt (scanning bottom-up), rounded.

    This is a single value, not a sum: reports print the running net on the
    closing line of the sheet.
    """
    for r in reversed(rows):
        v = r.get(COL_FINAL_NET_AMT)
        if not is_null_or_whitespace(v):
            return round2(to_decimal(v))
    return ZERO


def inward_gst_amounts(rows: Sequence[ReportRow]) -> InwardGstAmounts:
    """Service-fee amounts around the first ``INWARD GST`` row.

    The matched row supplies the GST debit/credit; the row immediately above it
    supplies the Income debit/credit. No matching row means all four are zero.
    """
    for i, r in enumerate(rows):
        if r.get(COL_INWARD_OUTWARD).strip().lower() != INWARD_GST_MARKER:
            continue
        income_debit = income_credit = ZERO
        if i > 0:
            above = rows[i - 1]
            income_debit = round2(to_decimal(above.get(COL_SERVICE_FEE_DR)))
            income_credit = round2(to_decimal(above.get(COL_SERVICE_FEE_CR)))
        return InwardGstAmounts(
            income_debit=income_debit,
            income_credit=income_credit,
            gst_debit=round2(to_decimal(r.get(COL_SERVICE_FEE_DR))),
            gst_credit=round2(to_decimal(r.get(COL_SERVICE_FEE_CR))),
        )
    return InwardGstAmounts()


def goodfaith_amounts(rows: Sequence[ReportRow], rule: AggregationRule) -> Tuple[Decimal, Decimal]:
    """(debit sum, credit sum) of SETAMTDR/SETAMTCR over the rule's cycle scope."""
    return (
        cycle_scoped_sum(rows, rule, COL_SETAMTDR),
        cycle_scoped_sum(rows, rule, COL_SETAMTCR),
    )


# --- Per-report aggregator -------------------------------------------------------


@dataclass
class AmountAggregator:
    """
    Evaluates aggregation rules against the rows of one report.

    The report-wide figures (final net amount, inward GST amounts) are computed
    once on first use and logged.
    """

    rows: Sequence[ReportRow]
    logger: logging.Logger = field(default=log)

    @cached_property
    def final_net(self) -> Decimal:
        amt = final_net_amount(self.rows)
        self.logger.info("Final Net Amt (last non-blank from the bottom) = %s", amt)
        return amt

    @cached_property
    def inward(self) -> InwardGstAmounts:
        amounts = inward_gst_amounts(self.rows)
        self.logger.info(
            "Derived INWARD values -> Income Debit: %s, GST Debit: %s, Income Credit: %s, GST Credit: %s",
            amounts.income_debit,
            amounts.gst_debit,
            amounts.income_credit,
            amounts.gst_credit,
        )
        return amounts

    def line_amount(self, description: str, rule: Optional[AggregationRule]) -> LineAmount:
        """Amount for the voucher line ``description`` under ``rule``.

        A description without a rule yields no amount.
        """
        if rule is None:
            self.logger.debug("No rule for %r; line left without amount", description)
            return LineAmount()

        if rule.special is EnumSpecial.FINAL:
            return LineAmount.on_side(self.final_net, EnumSide.DEBIT)

        if rule.special is EnumSpecial.INWARD_DEBIT:
            amt = self.inward.gst_debit if rule.gst_row else self.inward.income_debit
            return LineAmount.on_side(amt, EnumSide.DEBIT)

        if rule.special is EnumSpecial.INWARD_CREDIT:
            amt = self.inward.gst_credit if rule.gst_row else self.inward.income_credit
            return LineAmount.on_side(amt, EnumSide.CREDIT)

        if rule.special is EnumSpecial.GOODFAITH:
            dr, cr = goodfaith_amounts(self.rows, rule)
            if dr != 0:
                return LineAmount(debit=dr)
            return LineAmount.on_side(cr, EnumSide.CREDIT)

        if not rule.amount_column:
            return LineAmount()

        amt = cycle_scoped_sum(self.rows, rule, rule.amount_column)
        if rule.type_keys is not None or rule.require_channel:
            self.logger.info("%s: summed %s = %s", description, rule.amount_column, amt)
        return LineAmount.on_side(amt, rule.side)
