from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class TemplateLine:
    """One physical line of the voucher layout; spacers have no account and no description."""
    account_no: str
    narration_template: str
    description: str

    @property
    def is_spacer(self) -> bool:
        return not self.account_no and not self.description


SPACER = TemplateLine("", "", "")

# Order mirrors the printed voucher and must not be re-sorted.
TEMPLATE: Tuple[TemplateLine, ...] = (
    TemplateLine("0103SLRGTSRC", "NPCIR5{yyyymmdd} {ddmmyy}_{cycle} ETCAC", "Final Net Amt"),
    SPACER,
    TemplateLine("0103SLETCACQ", "Etoll acq {dd_mm_yy}_{cycle}", "NETC Settled Transaction"),
    TemplateLine("0103SLETCACQ", "Etoll acq {dd_mm_yy} Dr.Adj_{cycle}", "Debit Adjustment"),
    TemplateLine("0103SLETCACQ", "Etoll acq {dd_mm_yy} GF Accp_{cycle}", "Good Faith Acceptance Credit"),
    SPACER,
    TemplateLine("0103SLETCACQ", "Etoll acq {dd_mm_yy} Cr.Adj_{cycle}", "Credit Adjustment"),
    TemplateLine("0103SLETCACQ", "Etoll acq {dd_mm_yy} Chbk_{cycle}", "Chargeback Acceptance"),
    TemplateLine("0103SLETCACQ", "Etoll acq {dd_mm_yy} GF Accp_{cycle}", "Good Faith Acceptance Debit"),
    TemplateLine("0103SLETCACQ", "Etoll acq {dd_mm_yy} PrArbtAc_{cycle}", "Pre-Arbitration Acceptance"),
    TemplateLine("0103SLETCACQ", "Etoll acq {dd_mm_yy} DrPrAbAc_{cycle}", "Pre-Arbitration Deemed Acceptance"),
    TemplateLine("0103SLETCACQ", "Etoll acq {dd_mm_yy} DrChbAc_{cycle}", "Debit chargeback deemed Acceptance"),
    TemplateLine("0103SLETCACQ", "Etoll acq {dd_mm_yy} ArbtAc_{cycle}", "Arbitration Acceptance"),
    TemplateLine("0103SLETCACQ", "Etoll acq {dd_mm_yy} ArbtVer_{cycle}", "Arbitration Vedict"),
    SPACER,
    TemplateLine("0103CNETCACQ", "Etoll acq {dd_mm_yy}_{cycle}", "Income Debit"),
    TemplateLine("0103SLPPCIGT", "Etoll acq {dd_mm_yy}_{cycle}", "GST Debit"),
    TemplateLine("0103CNETCACQ", "Etoll acq {dd_mm_yy}_{cycle}", "Income Credit"),
    TemplateLine("0103SLPPCIGT", "Etoll acq {dd_mm_yy}_{cycle}", "GST Credit"),
)
