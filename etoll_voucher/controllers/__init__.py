from .amount_aggregator import AmountAggregator, InwardGstAmounts, LineAmount
from .row_normalizer import load_report_rows, normalize_rows
from .settlement_date import make_stamp, resolve_settlement_date
from .tally_emitter import emit, tally
from .voucher_builder import build_voucher
from .voucher_generator import generate

__all__ = [
    "AmountAggregator",
    "InwardGstAmounts",
    "LineAmount",
    "load_report_rows",
    "normalize_rows",
    "make_stamp",
    "resolve_settlement_date",
    "emit",
    "tally",
    "build_voucher",
    "generate",
]
