# etoll_voucher/data_model/__init__.py
from .aggregation_rule import ARBITRATION_VERDICT, RULES, AggregationRule
from .enum_run_status import EnumRunStatus
from .enum_side import EnumSide
from .enum_special import EnumSpecial
from .report_row import ReportRow
from .run_result import UNBALANCED_MESSAGE, RunResult
from .settlement_stamp import SettlementStamp
from .template_line import SPACER, TEMPLATE, TemplateLine
from .voucher_line import VoucherLine

__all__ = [
    "AggregationRule",
    "ARBITRATION_VERDICT",
    "RULES",
    "EnumRunStatus",
    "EnumSide",
    "EnumSpecial",
    "ReportRow",
    "RunResult",
    "UNBALANCED_MESSAGE",
    "SettlementStamp",
    "SPACER",
    "TEMPLATE",
    "TemplateLine",
    "VoucherLine",
]
