# etoll_voucher/controllers/voucher_builder.py
from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence

from etoll_voucher.controllers.amount_aggregator import AmountAggregator
from etoll_voucher.controllers.template_engine import render_narration
from etoll_voucher.data_model.aggregation_rule import RULES, AggregationRule
from etoll_voucher.data_model.report_row import ReportRow
from etoll_voucher.data_model.settlement_stamp import SettlementStamp
from etoll_voucher.data_model.template_line import TEMPLATE, TemplateLine
from etoll_voucher.data_model.voucher_line import VoucherLine

log = logging.getLogger(__name__)


def build_voucher(
    rows: Sequence[ReportRow],
    stamp: SettlementStamp,
    *,
    template: Sequence[TemplateLine] = TEMPLATE,
    rules: Mapping[str, AggregationRule] = RULES,
    logger: Optional[logging.Logger] = None,
) -> List[VoucherLine]:
    """
    Build one voucher line per template line, in template order.

    Spacer lines come out blank. Every other line gets its narration rendered
    from ``stamp`` and its amount from the rule registered for its description.
    """
    lg = logger or log
    aggregator = AmountAggregator(rows, lg)
    voucher: List[VoucherLine] = []
    for line in template:
        narration = render_narration(line.narration_template, stamp)
        if line.is_spacer:
            voucher.append(VoucherLine.blank())
            continue
        amount = aggregator.line_amount(line.description, rules.get(line.description))
        voucher.append(
            VoucherLine(
                account_no=line.account_no,
                debit=amount.debit,
                credit=amount.credit,
                narration=narration,
                description=line.description,
            )
        )
        lg.debug(
            "%s [%s] D=%s C=%s",
            line.description,
            line.account_no,
            amount.debit,
            amount.credit,
        )
    return voucher
