# etoll_voucher/controllers/template_engine.py
from __future__ import annotations

from etoll_voucher.data_model.settlement_stamp import SettlementStamp


def render_narration(template: str, stamp: SettlementStamp) -> str:
    """Substitute ``{yyyymmdd}``, ``{ddmmyy}``, ``{dd_mm_yy}`` and ``{cycle}`` in ``template``.

    Plain replacement rather than ``str.format`` so stray braces in a template
    are left as written.
    """
    out = template
    for key, value in stamp.placeholders().items():
        out = out.replace("{" + key + "}", value)
    return out
