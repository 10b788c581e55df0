from __future__ import annotations

from decimal import Decimal

import pytest

import etoll_voucher.controllers.amount_aggregator as agg
from etoll_voucher.controllers.row_normalizer import normalize_rows
from etoll_voucher.data_model import ARBITRATION_VERDICT, RULES
from etoll_voucher.data_model.aggregation_rule import AggregationRule
from etoll_voucher.data_model.columns import (
    COL_CHANNEL,
    COL_FINAL_NET_AMT,
    COL_INWARD_OUTWARD,
    COL_SERVICE_FEE_CR,
    COL_SERVICE_FEE_DR,
    COL_SETAMTCR,
    COL_SETAMTDR,
    COL_SETTLEMENT_DATE,
    COL_TRANSACTION_CYCLE,
    COL_TRANSACTION_TYPE,
)
from etoll_voucher.data_model.enum_side import EnumSide

HEADERS = [
    COL_SETTLEMENT_DATE,
    COL_TRANSACTION_CYCLE,
    COL_TRANSACTION_TYPE,
    COL_CHANNEL,
    COL_SETAMTDR,
    COL_SETAMTCR,
    COL_SERVICE_FEE_DR,
    COL_SERVICE_FEE_CR,
    COL_FINAL_NET_AMT,
    COL_INWARD_OUTWARD,
]


def _rows(*records):
    """Build normalized rows from short dicts keyed by column name."""
    return normalize_rows([HEADERS] + [[r.get(h, "") for h in HEADERS] for r in records])


# --------------------------- cycle_scoped_sum ---------------------------------


def test_cycle_scoped_sum_matches_cycle_keys_and_rounds_half_up():
    """cycle_scoped_sum: sums only rows in the cycle scope (including forward-filled
    ones), strips thousands separators, treats nan/text as zero, rounds half-up.
    """
    rows = _rows(
        {COL_TRANSACTION_CYCLE: "NETC Settled Transaction", COL_SETAMTCR: "1,000.50"},
        {COL_SETAMTCR: "10.005"},  # forward-filled cycle
        {COL_SETAMTCR: "nan"},
        {COL_SETAMTCR: "pending"},
        {COL_TRANSACTION_CYCLE: "Chargeback Acceptance", COL_SETAMTCR: "999"},
    )
    rule = RULES["NETC Settled Transaction"]

    out = agg.cycle_scoped_sum(rows, rule, COL_SETAMTCR)

    assert out == Decimal("1010.51")


def test_cycle_scoped_sum_is_case_insensitive_and_ignores_channel():
    rows = _rows(
        {COL_TRANSACTION_CYCLE: "  CHARGEBACK acceptance ", COL_SETAMTDR: "5", COL_CHANNEL: ""},
        {COL_TRANSACTION_CYCLE: "Chargeback Acceptance", COL_SETAMTDR: "6", COL_CHANNEL: "ETC"},
    )
    assert agg.cycle_scoped_sum(rows, RULES["Chargeback Acceptance"], COL_SETAMTDR) == Decimal("11.00")


def test_rule_without_cycles_matches_nothing():
    rows = _rows({COL_TRANSACTION_CYCLE: "x", COL_SETAMTDR: "5"})
    assert agg.cycle_scoped_sum(rows, AggregationRule(), COL_SETAMTDR) == Decimal("0.00")


# --------------------------- final_net_amount ---------------------------------


def test_final_net_amount_takes_last_non_blank_not_a_sum():
    rows = _rows(
        {COL_FINAL_NET_AMT: "5"},
        {COL_FINAL_NET_AMT: "12.345"},
        {COL_FINAL_NET_AMT: "  "},
        {},
    )
    assert agg.final_net_amount(rows) == Decimal("12.35")


def test_final_net_amount_scans_past_trailing_blank_rows():
    """A value populated early, followed by many blank rows, is still found."""
    records = [{COL_CHANNEL: "X"} for _ in range(15)]
    records[3] = {COL_FINAL_NET_AMT: "99.99"}
    assert agg.final_net_amount(_rows(*records)) == Decimal("99.99")


def test_final_net_amount_absent_is_zero():
    assert agg.final_net_amount(_rows({COL_CHANNEL: "X"})) == Decimal("0")


# --------------------------- inward_gst_amounts -------------------------------


def test_inward_gst_amounts_from_marker_row_and_row_above():
    rows = _rows(
        {COL_SERVICE_FEE_DR: "1", COL_INWARD_OUTWARD: "OUTWARD"},
        {COL_SERVICE_FEE_DR: "50", COL_SERVICE_FEE_CR: "0"},
        {COL_INWARD_OUTWARD: " inward gst ", COL_SERVICE_FEE_DR: "5", COL_SERVICE_FEE_CR: "0.755"},
        {COL_INWARD_OUTWARD: "INWARD GST", COL_SERVICE_FEE_DR: "999"},
    )

    out = agg.inward_gst_amounts(rows)

    assert out == agg.InwardGstAmounts(
        income_debit=Decimal("50.00"),
        income_credit=Decimal("0.00"),
        gst_debit=Decimal("5.00"),
        gst_credit=Decimal("0.76"),
    )


def test_inward_gst_on_first_row_has_no_income():
    rows = _rows({COL_INWARD_OUTWARD: "INWARD GST", COL_SERVICE_FEE_DR: "2"})
    out = agg.inward_gst_amounts(rows)
    assert out.income_debit == 0 and out.income_credit == 0
    assert out.gst_debit == Decimal("2.00")


def test_inward_gst_missing_marker_gives_zeros():
    rows = _rows({COL_SERVICE_FEE_DR: "50"}, {COL_INWARD_OUTWARD: "OUTWARD GST"})
    assert agg.inward_gst_amounts(rows) == agg.InwardGstAmounts()


# --------------------------- AmountAggregator.line_amount ---------------------


def test_income_and_gst_lines_scenario():
    """INWARD GST row with Service Fee Amt Dr=5 below a row with Dr=50/Cr=0:
    Income Debit=50.00, GST Debit=5.00, and the zero credits stay absent.
    """
    rows = _rows(
        {COL_SERVICE_FEE_DR: "50", COL_SERVICE_FEE_CR: "0"},
        {COL_INWARD_OUTWARD: "INWARD GST", COL_SERVICE_FEE_DR: "5"},
    )
    a = agg.AmountAggregator(rows)

    assert a.line_amount("Income Debit", RULES["Income Debit"]) == agg.LineAmount(debit=Decimal("50.00"))
    assert a.line_amount("GST Debit", RULES["GST Debit"]) == agg.LineAmount(debit=Decimal("5.00"))
    assert a.line_amount("Income Credit", RULES["Income Credit"]) == agg.LineAmount()
    assert a.line_amount("GST Credit", RULES["GST Credit"]) == agg.LineAmount()


def test_inward_credit_goes_to_credit_side():
    rows = _rows(
        {COL_SERVICE_FEE_CR: "20"},
        {COL_INWARD_OUTWARD: "INWARD GST", COL_SERVICE_FEE_CR: "3.6"},
    )
    a = agg.AmountAggregator(rows)
    assert a.line_amount("Income Credit", RULES["Income Credit"]) == agg.LineAmount(credit=Decimal("20.00"))
    assert a.line_amount("GST Credit", RULES["GST Credit"]) == agg.LineAmount(credit=Decimal("3.60"))


def test_final_line_is_debit():
    a = agg.AmountAggregator(_rows({COL_FINAL_NET_AMT: "-12.5"}))
    assert a.line_amount("Final Net Amt", RULES["Final Net Amt"]) == agg.LineAmount(debit=Decimal("-12.50"))


@pytest.mark.parametrize(
    "dr,cr,expected",
    [
        ("10", "20", agg.LineAmount(debit=Decimal("10.00"))),
        ("", "20", agg.LineAmount(credit=Decimal("20.00"))),
        ("0", "nan", agg.LineAmount()),
    ],
)
def test_goodfaith_emits_non_zero_side_debit_first(dr, cr, expected):
    rows = _rows(
        {COL_TRANSACTION_CYCLE: "Good Faith Acceptance", COL_SETAMTDR: dr, COL_SETAMTCR: cr},
    )
    a = agg.AmountAggregator(rows)
    assert a.line_amount("Good Faith Acceptance Debit", RULES["Good Faith Acceptance Debit"]) == expected


def test_arbitration_verdict_requires_type_and_channel():
    """Only debit/non_fin rows with a non-blank channel count toward the verdict line."""
    rows = _rows(
        {COL_TRANSACTION_CYCLE: "Arbitration Vedict", COL_TRANSACTION_TYPE: "Debit",
         COL_CHANNEL: "ETC", COL_SETAMTDR: "100"},
        {COL_TRANSACTION_TYPE: "debit", COL_CHANNEL: "", COL_SETAMTDR: "40"},
        {COL_TRANSACTION_TYPE: "Credit", COL_CHANNEL: "X", COL_SETAMTDR: "7"},
        {COL_TRANSACTION_TYPE: "NON_FIN", COL_CHANNEL: "Y", COL_SETAMTDR: "3"},
    )
    a = agg.AmountAggregator(rows)
    assert a.line_amount(ARBITRATION_VERDICT, RULES[ARBITRATION_VERDICT]) == agg.LineAmount(
        debit=Decimal("103.00")
    )


def test_arbitration_verdict_blank_channel_contributes_nothing():
    rows = _rows(
        {COL_TRANSACTION_CYCLE: "Arbitration Vedict", COL_TRANSACTION_TYPE: "debit",
         COL_CHANNEL: "", COL_SETAMTDR: "40"},
    )
    a = agg.AmountAggregator(rows)
    assert a.line_amount(ARBITRATION_VERDICT, RULES[ARBITRATION_VERDICT]) == agg.LineAmount()


def test_credit_rule_goes_to_credit_side():
    rows = _rows({COL_TRANSACTION_CYCLE: "debitadjustment", COL_SETAMTCR: "4.5"})
    a = agg.AmountAggregator(rows)
    assert a.line_amount("Debit Adjustment", RULES["Debit Adjustment"]) == agg.LineAmount(
        credit=Decimal("4.50")
    )


def test_missing_rule_or_column_gives_no_amount():
    a = agg.AmountAggregator(_rows({COL_SETAMTDR: "5"}))
    assert a.line_amount("Unknown", None) == agg.LineAmount()
    assert a.line_amount("Odd", AggregationRule(cycle_keys=frozenset({""}))) == agg.LineAmount()


def test_line_amount_on_side_drops_zero():
    assert agg.LineAmount.on_side(Decimal("0.00"), EnumSide.CREDIT) == agg.LineAmount()
    assert agg.LineAmount.on_side(Decimal("1.00"), None) == agg.LineAmount(debit=Decimal("1.00"))


def test_inward_income_row_is_nearest_row_with_content():
    """Empty sheet rows between the income row and the INWARD GST marker are
    not rows, so the income amounts still come from the row with content.
    """
    rows = normalize_rows(
        [
            HEADERS,
            [{COL_SERVICE_FEE_DR: 40}.get(h) for h in HEADERS],
            [None] * len(HEADERS),
            [{COL_INWARD_OUTWARD: "INWARD GST", COL_SERVICE_FEE_DR: 7.2}.get(h) for h in HEADERS],
        ]
    )

    out = agg.inward_gst_amounts(rows)

    assert out.income_debit == Decimal("40.00")
    assert out.gst_debit == Decimal("7.20")
